"""Value types shared by the detection pipeline."""

import math
from dataclasses import dataclass, replace
from typing import List, Optional

import numpy as np

# Number of radius buckets the configured range is split into
RADIUS_BUCKETS = 25


@dataclass(frozen=True)
class Circle:
    """A detected circle in processing-buffer pixel coordinates."""
    x: float
    y: float
    r: float
    score: float

    def to_dict(self) -> dict:
        return {
            'x': self.x,
            'y': self.y,
            'r': self.r,
            'score': round(self.score, 4),
        }


@dataclass(frozen=True)
class DetectionParams:
    """
    Per-frame detection parameters.

    Attributes:
        r_min: Smallest radius searched, in pixels
        r_max: Largest radius searched, in pixels
        edge_thresh: Minimum edge magnitude (0-255) for a pixel to vote
        acc_thresh: Percentage (0-100) of the circumference that must vote
        proc_width: Width of the processing buffer the host resizes frames to
    """
    r_min: int = 20
    r_max: int = 180
    edge_thresh: int = 45
    acc_thresh: float = 55
    proc_width: int = 320

    def clamped(self) -> 'DetectionParams':
        """Return a copy with thresholds and width forced into range."""
        return replace(
            self,
            edge_thresh=min(255, max(0, int(self.edge_thresh))),
            acc_thresh=min(100, max(0, self.acc_thresh)),
            proc_width=max(3, int(self.proc_width)),
        )


@dataclass(frozen=True)
class RadiusRange:
    """Evenly spaced radius buckets starting at r_min."""
    r_min: int
    r_max: int
    r_step: int
    num_radii: int

    @classmethod
    def from_params(cls, params: DetectionParams) -> 'RadiusRange':
        r_min, r_max = int(params.r_min), int(params.r_max)
        if r_min < 1 or r_max <= r_min:
            return cls(r_min, r_max, 1, 0)
        r_step = max(1, math.floor((r_max - r_min) / RADIUS_BUCKETS + 0.5))
        num_radii = (r_max - r_min) // r_step + 1
        return cls(r_min, r_max, r_step, num_radii)

    @property
    def empty(self) -> bool:
        return self.num_radii == 0

    def radius(self, index: int) -> int:
        return self.r_min + index * self.r_step

    def radii(self) -> List[int]:
        return [self.radius(i) for i in range(self.num_radii)]


@dataclass(frozen=True)
class EdgeMap:
    """Sobel output: saturated magnitude plus exact gradient components."""
    magnitude: np.ndarray
    gx: np.ndarray
    gy: np.ndarray

    @property
    def shape(self):
        return self.magnitude.shape


@dataclass
class TrackerState:
    """Smoothed circle carried from one frame to the next."""
    smooth_circle: Optional[Circle] = None


def frame_from_buffer(data, width: int, height: int) -> np.ndarray:
    """
    Wrap a flat row-major RGBA byte buffer as an (H, W, 4) frame.

    Args:
        data: bytes, bytearray, memoryview or uint8 array of length W*H*4
        width: Frame width in pixels
        height: Frame height in pixels

    Returns:
        uint8 view of shape (height, width, 4)
    """
    buffer = np.frombuffer(data, dtype=np.uint8) if not isinstance(data, np.ndarray) \
        else data.astype(np.uint8, copy=False).ravel()
    expected = width * height * 4
    if buffer.size != expected:
        raise ValueError(
            f"RGBA buffer has {buffer.size} bytes, expected {expected} for {width}x{height}"
        )
    return buffer.reshape(height, width, 4)
