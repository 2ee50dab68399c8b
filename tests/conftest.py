"""Shared synthetic frames for the test suite."""

import cv2
import numpy as np
import pytest


def make_disk_frame(width=320, height=240, center=(160, 120), radius=50,
                    fg=(255, 255, 255), bg=(0, 0, 0)) -> np.ndarray:
    """Solid disk on a contrasting background as an RGBA frame."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:] = bg
    cv2.circle(image, center, radius, fg, -1, cv2.LINE_AA)
    return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)


@pytest.fixture
def disk_frame():
    """Factory for disk frames."""
    return make_disk_frame


@pytest.fixture
def uniform_frame():
    frame = np.full((240, 320, 4), 128, dtype=np.uint8)
    frame[..., 3] = 255
    return frame


@pytest.fixture
def noise_frame():
    rng = np.random.default_rng(0)
    frame = rng.integers(0, 256, (240, 320, 4), dtype=np.uint8)
    frame[..., 3] = 255
    return frame
