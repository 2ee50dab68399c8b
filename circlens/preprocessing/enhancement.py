"""Noise suppression ahead of edge detection."""

import numpy as np
from scipy import ndimage

GAUSS_KERNEL_3X3 = np.array([[1, 2, 1],
                             [2, 4, 2],
                             [1, 2, 1]], dtype=np.int32)
GAUSS_SHIFT = 4  # kernel sums to 16


class ImageEnhancer:
    """Spatial smoothing for grayscale processing buffers."""

    def __init__(self, kernel: np.ndarray = GAUSS_KERNEL_3X3, shift: int = GAUSS_SHIFT):
        """
        Initialize image enhancer.

        Args:
            kernel: 3x3 integer smoothing kernel
            shift: Right shift applied to the weighted sum (log2 of kernel sum)
        """
        self.kernel = np.asarray(kernel, dtype=np.int32)
        self.shift = shift

    def enhance(self, gray: np.ndarray) -> np.ndarray:
        """
        Apply full enhancement pipeline.

        Args:
            gray: (H, W) uint8 grayscale image

        Returns:
            Smoothed image of identical shape
        """
        return self.reduce_noise(gray)

    def reduce_noise(self, gray: np.ndarray) -> np.ndarray:
        """Integer 3x3 blur of interior pixels; the outer ring keeps its input values."""
        out = gray.copy()
        h, w = gray.shape
        if h < 3 or w < 3:
            return out

        summed = ndimage.correlate(gray.astype(np.int32), self.kernel, mode='constant')
        out[1:-1, 1:-1] = (summed[1:-1, 1:-1] >> self.shift).astype(np.uint8)
        return out


def gaussian_blur_3x3(gray: np.ndarray) -> np.ndarray:
    """Apply the fixed [[1,2,1],[2,4,2],[1,2,1]]/16 blur."""
    return ImageEnhancer().reduce_noise(gray)
