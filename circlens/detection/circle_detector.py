"""Circle detection using a gradient Hough transform."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from circlens.detection.accumulator import AccumulatorPool, HoughAccumulator
from circlens.detection.edge_detector import EdgeDetector
from circlens.detection.peak_selector import PeakSelector
from circlens.preprocessing.enhancement import ImageEnhancer
from circlens.preprocessing.grayscale import to_grayscale
from circlens.types import Circle, DetectionParams, RadiusRange
from circlens.utils.metrics import PerformanceMetrics

logger = logging.getLogger(__name__)


@dataclass
class FrameDetection:
    """Raw single-frame result plus the edge magnitude debug channel."""
    circle: Optional[Circle]
    edge_magnitude: np.ndarray


def validate_frame(frame: np.ndarray):
    """Reject anything that is not an (H, W, 4) uint8 RGBA frame."""
    if not isinstance(frame, np.ndarray):
        raise ValueError(f"Frame must be a numpy array, got {type(frame).__name__}")
    if frame.ndim != 3 or frame.shape[2] != 4:
        raise ValueError(f"Frame must have shape (H, W, 4), got {frame.shape}")
    if frame.dtype != np.uint8:
        raise ValueError(f"Frame must be uint8, got {frame.dtype}")


class CircleDetector:
    """Detects the single most prominent circle in an RGBA frame."""

    def __init__(self, pool: Optional[AccumulatorPool] = None):
        self.enhancer = ImageEnhancer()
        self.edge_detector = EdgeDetector()
        self.accumulator = HoughAccumulator(pool)
        self.peak_selector = PeakSelector()

    def detect(self, frame: np.ndarray, params: DetectionParams,
               metrics: Optional[PerformanceMetrics] = None) -> FrameDetection:
        """
        Detect a circle in one frame.

        Args:
            frame: (H, W, 4) uint8 RGBA processing buffer
            params: Detection parameters
            metrics: Optional timer collecting per-stage durations

        Returns:
            FrameDetection with the raw circle (or None) and edge magnitude
        """
        validate_frame(frame)
        params = params.clamped()
        metrics = metrics or PerformanceMetrics()

        metrics.start_timer('grayscale')
        gray = to_grayscale(frame)
        metrics.stop_timer('grayscale')

        metrics.start_timer('blur')
        blurred = self.enhancer.enhance(gray)
        metrics.stop_timer('blur')

        metrics.start_timer('edges')
        edge_map = self.edge_detector.detect(blurred)
        metrics.stop_timer('edges')

        radius_range = RadiusRange.from_params(params)
        if radius_range.empty:
            logger.warning("Empty radius range for r_min=%s r_max=%s, skipping voting",
                           params.r_min, params.r_max)
            return FrameDetection(circle=None, edge_magnitude=edge_map.magnitude)

        metrics.start_timer('voting')
        acc = self.accumulator.accumulate(edge_map, params, radius_range)
        metrics.stop_timer('voting')

        metrics.start_timer('peaks')
        circle = self.peak_selector.select(acc, radius_range, params.acc_thresh)
        metrics.stop_timer('peaks')

        if circle is None:
            logger.debug("No accumulator peak above %s%%", params.acc_thresh)

        return FrameDetection(circle=circle, edge_magnitude=edge_map.magnitude)
