"""Gradient-directed Hough voting into a (radius, y, x) accumulator."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from circlens.types import DetectionParams, EdgeMap, RadiusRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgePoints:
    """Voting pixels and their unit gradient direction in image coordinates."""
    x: np.ndarray
    y: np.ndarray
    dx: np.ndarray
    dy: np.ndarray

    def __len__(self) -> int:
        return int(self.x.size)


class AccumulatorPool:
    """Keeps one accumulator buffer alive between frames of the same size."""

    def __init__(self):
        self._buffer: Optional[np.ndarray] = None

    def acquire(self, shape: Tuple[int, int, int]) -> np.ndarray:
        """Return a zeroed int32 buffer of the requested shape."""
        if self._buffer is None or self._buffer.shape != tuple(shape):
            self._buffer = np.zeros(shape, dtype=np.int32)
        else:
            self._buffer.fill(0)
        return self._buffer

    def release(self):
        """Drop the pooled buffer."""
        self._buffer = None


def edge_points(edge_map: EdgeMap, edge_thresh: int) -> EdgePoints:
    """
    Collect interior pixels whose magnitude reaches edge_thresh.

    The Sobel y component is positive for brighter-above, so it is negated
    to express the direction with y growing downwards like pixel rows.
    A zero-length gradient is divided by 1 and keeps a zero direction.
    """
    magnitude = edge_map.magnitude
    h, w = magnitude.shape
    if h < 3 or w < 3:
        empty = np.empty(0, dtype=np.float64)
        return EdgePoints(empty.astype(np.intp), empty.astype(np.intp), empty, empty)

    interior = np.zeros((h, w), dtype=bool)
    interior[1:-1, 1:-1] = True
    ys, xs = np.nonzero(interior & (magnitude >= edge_thresh))

    gx = edge_map.gx[ys, xs].astype(np.float64)
    gy = edge_map.gy[ys, xs].astype(np.float64)
    norm = np.hypot(gx, gy)
    norm[norm == 0] = 1.0

    return EdgePoints(x=xs, y=ys, dx=gx / norm, dy=-gy / norm)


class HoughAccumulator:
    """Casts two votes per edge point and radius along the gradient normal."""

    def __init__(self, pool: Optional[AccumulatorPool] = None):
        self.pool = pool

    def accumulate(self, edge_map: EdgeMap, params: DetectionParams,
                   radius_range: Optional[RadiusRange] = None) -> np.ndarray:
        """
        Build the vote accumulator for one frame.

        Args:
            edge_map: Output of the edge detector
            params: Detection parameters (edge_thresh and radius range are used)
            radius_range: Precomputed radius buckets (derived from params if omitted)

        Returns:
            (num_radii, H, W) int32 vote counts
        """
        radius_range = radius_range or RadiusRange.from_params(params)
        h, w = edge_map.shape
        shape = (radius_range.num_radii, h, w)
        acc = self.pool.acquire(shape) if self.pool is not None \
            else np.zeros(shape, dtype=np.int32)

        if radius_range.empty:
            return acc

        points = edge_points(edge_map, params.edge_thresh)
        logger.debug("%d edge points, %d radius buckets", len(points), radius_range.num_radii)
        if len(points) == 0:
            return acc

        px = points.x.astype(np.float64)
        py = points.y.astype(np.float64)
        for ri in range(radius_range.num_radii):
            r = radius_range.radius(ri)
            plane = acc[ri].reshape(-1)
            for sign in (-1, 1):
                cx = np.floor(px + sign * r * points.dx + 0.5).astype(np.intp)
                cy = np.floor(py + sign * r * points.dy + 0.5).astype(np.intp)
                inside = (cx >= 0) & (cx < w) & (cy >= 0) & (cy < h)
                flat = cy[inside] * w + cx[inside]
                plane += np.bincount(flat, minlength=h * w).astype(np.int32)

        return acc
