"""Edge detection using the Sobel operator."""

import numpy as np
from scipy import ndimage

from circlens.types import EdgeMap

SOBEL_X = np.array([[-1, 0, 1],
                    [-2, 0, 2],
                    [-1, 0, 1]], dtype=np.int32)

# Rows run top to bottom, so a positive response means brighter above
SOBEL_Y = np.array([[ 1,  2,  1],
                    [ 0,  0,  0],
                    [-1, -2, -1]], dtype=np.int32)


class EdgeDetector:
    """Computes gradient components and saturated magnitude of a grayscale image."""

    def detect(self, image: np.ndarray) -> EdgeMap:
        """
        Run the Sobel operator over interior pixels.

        Args:
            image: Smoothed (H, W) uint8 image

        Returns:
            EdgeMap whose border rows and columns are zero
        """
        h, w = image.shape
        gx = np.zeros((h, w), dtype=np.int32)
        gy = np.zeros((h, w), dtype=np.int32)
        magnitude = np.zeros((h, w), dtype=np.uint8)

        if h < 3 or w < 3:
            return EdgeMap(magnitude=magnitude, gx=gx, gy=gy)

        src = image.astype(np.int32)
        gx[1:-1, 1:-1] = ndimage.correlate(src, SOBEL_X, mode='constant')[1:-1, 1:-1]
        gy[1:-1, 1:-1] = ndimage.correlate(src, SOBEL_Y, mode='constant')[1:-1, 1:-1]

        norm = np.sqrt(gx.astype(np.float64) ** 2 + gy.astype(np.float64) ** 2)
        magnitude[:] = np.minimum(255, np.floor(norm + 0.5)).astype(np.uint8)

        return EdgeMap(magnitude=magnitude, gx=gx, gy=gy)


def sobel_edges(image: np.ndarray) -> EdgeMap:
    """Convenience wrapper around EdgeDetector.detect."""
    return EdgeDetector().detect(image)
