"""
Circlens Core Processor
Main entry point for per-frame circle detection and tracking
"""

import logging
import time
from datetime import datetime
from typing import Any, Dict, Optional

import numpy as np

from circlens.config import DEFAULT_CONFIG, params_from_config
from circlens.detection.accumulator import AccumulatorPool
from circlens.detection.circle_detector import CircleDetector
from circlens.tracking.temporal_tracker import TemporalTracker
from circlens.types import Circle, DetectionParams, RadiusRange, TrackerState
from circlens.utils.metrics import PerformanceMetrics

logger = logging.getLogger(__name__)


def detect(frame: np.ndarray, params: DetectionParams,
           state: TrackerState) -> Optional[Circle]:
    """
    Detect and track the circle in one frame.

    Args:
        frame: (H, W, 4) uint8 RGBA buffer already resized to params.proc_width
        params: Detection parameters for this frame
        state: Tracking state of the calling session, updated in place

    Returns:
        Smoothed circle, or None when nothing clears the threshold
    """
    raw = CircleDetector().detect(frame, params).circle
    return TemporalTracker().update(raw, state)


class CirclensProcessor:
    """Stateful per-session wrapper around the detection pipeline"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize Circlens processor

        Args:
            config: Configuration dictionary (optional)
        """
        self.config = config or DEFAULT_CONFIG
        self.version = "1.0.0"

        self.params = params_from_config(self.config)
        tracking = self.config.get("tracking", DEFAULT_CONFIG["tracking"])

        self.pool = AccumulatorPool()
        self.detector = CircleDetector(self.pool)
        self.tracker = TemporalTracker(alpha=tracking.get("alpha", 0.5))
        self.state = TrackerState()
        self.metrics = PerformanceMetrics()
        self.last_edge_magnitude: Optional[np.ndarray] = None

    def reset(self):
        """Forget the smoothed circle, e.g. when the video source changes."""
        self.state = TrackerState()
        self.last_edge_magnitude = None
        self.pool.release()

    def process_frame(self, frame: np.ndarray,
                      params: Optional[DetectionParams] = None) -> Dict[str, Any]:
        """
        Process a single frame

        Args:
            frame: (H, W, 4) uint8 RGBA processing buffer
            params: Parameters overriding the configured ones for this frame

        Returns:
            Dictionary containing the detection result
        """
        start_time = time.time()
        params = params or self.params
        self.metrics.reset()

        detection = self.detector.detect(frame, params, self.metrics)
        self.last_edge_magnitude = detection.edge_magnitude

        self.metrics.start_timer('tracking')
        circle = self.tracker.update(detection.circle, self.state)
        self.metrics.stop_timer('tracking')

        if circle is not None:
            logger.debug("Circle at (%.1f, %.1f) r=%.1f score=%.2f",
                         circle.x, circle.y, circle.r, circle.score)

        radius_range = RadiusRange.from_params(params)
        processing_time = (time.time() - start_time) * 1000

        return {
            "system": "Circlens",
            "version": self.version,
            "timestamp": datetime.now().isoformat(),
            "status": "found" if circle is not None else "searching",
            "circle": circle.to_dict() if circle is not None else None,
            "raw_circle": detection.circle.to_dict() if detection.circle is not None else None,
            "processing_metadata": {
                "processing_time_ms": round(processing_time, 2),
                "stage_times_ms": {k: round(v, 3) for k, v in self.metrics.get_summary().items()},
                "image_size": {
                    "width": frame.shape[1],
                    "height": frame.shape[0]
                },
                "radius_range": {
                    "r_min": radius_range.r_min,
                    "r_max": radius_range.r_max,
                    "r_step": radius_range.r_step,
                    "num_radii": radius_range.num_radii
                }
            }
        }
