"""Tests for host-side utilities."""

import logging

import cv2
import pytest
import numpy as np
from circlens.types import Circle
from circlens.utils.io_handler import JSONWriter, VideoReader, prepare_frame
from circlens.utils.logger import create_session_log_file, setup_logger
from circlens.utils.visualization import draw_detection, draw_edges


class TestPrepareFrame:
    """Test conversion of camera frames to processing buffers."""

    def test_resizes_keeping_aspect(self):
        image = np.zeros((720, 1280, 3), dtype=np.uint8)
        frame = prepare_frame(image, 320)
        assert frame.shape == (180, 320, 4)
        assert frame.dtype == np.uint8

    def test_channel_order_is_rgba(self):
        image = np.zeros((480, 640, 3), dtype=np.uint8)
        image[..., 0] = 255  # blue in BGR
        frame = prepare_frame(image, 320)

        assert frame[10, 10].tolist() == [0, 0, 255, 255]


class TestVideoIO:
    """Test video reading and JSON output."""

    def test_video_round_trip(self, tmp_path):
        path = str(tmp_path / "clip.avi")
        writer = cv2.VideoWriter(path, cv2.VideoWriter_fourcc(*'MJPG'), 10, (64, 48))
        for _ in range(3):
            writer.write(np.full((48, 64, 3), 90, dtype=np.uint8))
        writer.release()

        with VideoReader(path) as reader:
            frames = list(reader)

        assert len(frames) == 3
        assert frames[0].shape == (48, 64, 3)

    def test_missing_video(self, tmp_path):
        with pytest.raises(ValueError):
            VideoReader(str(tmp_path / "missing.mp4"))

    def test_json_round_trip(self, tmp_path):
        path = str(tmp_path / "out" / "result.json")
        JSONWriter.save_results({'status': 'found', 'circle': {'x': 1}}, path)
        assert JSONWriter.load_results(path) == {'status': 'found', 'circle': {'x': 1}}


class TestVisualization:
    """Test debug overlays."""

    def test_draw_detection_scales_to_display(self):
        image = np.zeros((480, 640, 3), dtype=np.uint8)
        circle = Circle(x=160, y=120, r=50, score=0.8)
        output = draw_detection(image, circle, (320, 240))

        assert output.shape == image.shape
        assert output[240, 420].any()      # ring at 2x scale
        assert not image.any()

    def test_draw_detection_none(self):
        image = np.zeros((240, 320, 3), dtype=np.uint8)
        assert np.array_equal(draw_detection(image, None, (320, 240)), image)

    def test_draw_edges(self):
        image = np.zeros((480, 640, 3), dtype=np.uint8)
        edges = np.zeros((240, 320), dtype=np.uint8)
        edges[100:110, 100:110] = 200
        output = draw_edges(image, edges)

        assert output[210, 210, 1] > 0
        assert output[0, 0].sum() == 0


class TestLogger:
    """Test logging setup."""

    def test_setup_logger_does_not_stack_handlers(self, tmp_path):
        log_file = str(tmp_path / "logs" / "run.log")
        setup_logger('circlens.test', logging.DEBUG, log_file)
        logger = setup_logger('circlens.test', logging.DEBUG, log_file)

        assert len(logger.handlers) == 2
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in open(log_file).read()

    def test_session_log_file(self, tmp_path):
        path = create_session_log_file(str(tmp_path / "logs"))
        assert path.startswith(str(tmp_path / "logs"))
        assert path.endswith(".log")
