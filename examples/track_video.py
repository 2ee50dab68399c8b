"""
Headless video tracking - saves annotated output without GUI
Usage: python examples/track_video.py <path_to_video> [config.yaml]
"""

import sys
import time
from pathlib import Path

import cv2

from circlens.config import load_config
from circlens.core import CirclensProcessor
from circlens.utils.io_handler import JSONWriter, VideoReader, prepare_frame
from circlens.utils.logger import create_session_log_file, setup_logger
from circlens.utils.visualization import draw_detection, draw_edges


def main():
    """Track the circle through a video without a GUI."""
    if len(sys.argv) < 2:
        print("Usage: python examples/track_video.py <path_to_video> [config.yaml]")
        sys.exit(1)

    video_path = sys.argv[1]
    config = load_config(sys.argv[2] if len(sys.argv) > 2 else None)

    log_cfg = config["logging"]
    logger = setup_logger(log_level=log_cfg["level"],
                          log_file=create_session_log_file(log_cfg["log_dir"]))

    if not Path(video_path).exists():
        logger.error("Video not found at '%s'", video_path)
        sys.exit(1)

    processor = CirclensProcessor(config)
    proc_width = processor.params.proc_width

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "tracked.mp4"

    frame_results = []
    found = 0
    start_time = time.time()

    with VideoReader(video_path) as reader:
        logger.info("Input %s: %dx%d, %d frames at %.2f FPS",
                    video_path, reader.width, reader.height, reader.frame_count, reader.fps)

        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        writer = cv2.VideoWriter(str(output_path), fourcc, reader.fps or 25.0,
                                 (reader.width, reader.height))

        for frame_number, frame in enumerate(reader):
            rgba = prepare_frame(frame, proc_width)
            result = processor.process_frame(rgba)

            circle = processor.state.smooth_circle
            if circle is not None:
                found += 1

            output = draw_edges(frame, processor.last_edge_magnitude, alpha=0.3)
            output = draw_detection(output, circle, (rgba.shape[1], rgba.shape[0]))
            writer.write(output)

            frame_results.append({
                "frame": frame_number,
                "status": result["status"],
                "circle": result["circle"],
                "processing_time_ms": result["processing_metadata"]["processing_time_ms"]
            })
            logger.debug("Frame %5d | %-9s | %6.1fms", frame_number, result["status"],
                         result["processing_metadata"]["processing_time_ms"])

        writer.release()

    elapsed = time.time() - start_time
    processed = len(frame_results)

    json_path = output_dir / "tracked.json"
    JSONWriter.save_results({
        "input_video": str(video_path),
        "processing_stats": {
            "total_time_seconds": round(elapsed, 2),
            "frames_processed": processed,
            "detection_rate": found / processed * 100 if processed else 0.0,
            "processing_fps": processed / elapsed if elapsed > 0 else 0.0
        },
        "frame_by_frame": frame_results
    }, str(json_path))

    logger.info("Processed %d frames in %.1fs, circle found in %d", processed, elapsed, found)
    logger.info("Output video saved to %s", output_path)
    logger.info("Analysis JSON saved to %s", json_path)


if __name__ == "__main__":
    main()
