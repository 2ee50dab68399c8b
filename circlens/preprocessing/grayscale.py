"""Grayscale reduction of RGBA frames."""

import numpy as np

# Fixed-point ITU luma weights, sum to 256
LUMA_WEIGHTS = (77, 150, 29)


def to_grayscale(frame: np.ndarray) -> np.ndarray:
    """
    Convert an RGBA frame to single-channel luminance.

    Args:
        frame: (H, W, 4) uint8 array in R, G, B, A order

    Returns:
        (H, W) uint8 luminance image
    """
    rgb = frame[..., :3].astype(np.uint32)
    wr, wg, wb = LUMA_WEIGHTS
    gray = (rgb[..., 0] * wr + rgb[..., 1] * wg + rgb[..., 2] * wb) >> 8
    return gray.astype(np.uint8)
