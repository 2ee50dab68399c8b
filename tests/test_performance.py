"""Performance tests."""

import pytest
import numpy as np
import time
from circlens.detection.circle_detector import CircleDetector
from circlens.detection.accumulator import AccumulatorPool
from circlens.types import DetectionParams
from circlens.utils.metrics import PerformanceMetrics


class TestPerformance:
    """Test performance benchmarks."""

    def test_detection_speed(self, disk_frame):
        """A 320x240 frame with the default 27 radius buckets."""
        detector = CircleDetector(AccumulatorPool())
        frame = disk_frame()
        detector.detect(frame, DetectionParams())

        start = time.time()
        detector.detect(frame, DetectionParams())
        duration = (time.time() - start) * 1000

        assert duration < 1000  # Should complete in under 1 second

    def test_performance_metrics(self):
        """Test performance metrics tracking."""
        metrics = PerformanceMetrics()

        metrics.start_timer('test_operation')
        time.sleep(0.1)
        duration = metrics.stop_timer('test_operation')

        assert 90 < duration < 250

        summary = metrics.get_summary()
        assert 'test_operation' in summary

    def test_stop_unknown_timer(self):
        assert PerformanceMetrics().stop_timer('never_started') == 0.0

    def test_detector_records_stage_times(self, disk_frame):
        metrics = PerformanceMetrics()
        CircleDetector().detect(disk_frame(), DetectionParams(), metrics)
        assert set(metrics.get_summary()) == {'grayscale', 'blur', 'edges', 'voting', 'peaks'}
