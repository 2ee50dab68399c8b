"""Visualization utilities for debugging and display."""

import cv2
import numpy as np
from typing import Optional, Tuple

from circlens.types import Circle

RING_COLOR = (136, 255, 0)  # BGR


def draw_detection(image: np.ndarray, circle: Optional[Circle],
                   proc_size: Tuple[int, int],
                   color: Tuple[int, int, int] = RING_COLOR,
                   thickness: int = 2) -> np.ndarray:
    """
    Draw a detected circle, centre cross and label on a display image.

    Args:
        image: BGR display image
        circle: Circle in processing-buffer coordinates (None draws nothing)
        proc_size: (width, height) of the processing buffer
        color: BGR ring colour
        thickness: Ring thickness in pixels

    Returns:
        Annotated copy of the image
    """
    output = image.copy()
    if circle is None:
        return output

    h, w = image.shape[:2]
    sx = w / proc_size[0]
    sy = h / proc_size[1]
    cx = int(round(circle.x * sx))
    cy = int(round(circle.y * sy))
    cr = int(round(circle.r * (sx + sy) / 2))

    cv2.circle(output, (cx, cy), cr, color, thickness, cv2.LINE_AA)

    cross = 10
    cv2.line(output, (cx - cross, cy), (cx + cross, cy), color, 1, cv2.LINE_AA)
    cv2.line(output, (cx, cy - cross), (cx, cy + cross), color, 1, cv2.LINE_AA)

    label = f"r={round(circle.r)}px  {round(circle.score * 100)}%"
    (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 0.45, 1)
    lx = cx - tw // 2
    ly = max(th + 2, cy - cr - 12)
    cv2.rectangle(output, (lx - 4, ly - th - 4), (lx + tw + 4, ly + 4), (0, 0, 0), -1)
    cv2.putText(output, label, (lx, ly), cv2.FONT_HERSHEY_SIMPLEX, 0.45, color, 1, cv2.LINE_AA)
    return output


def draw_edges(image: np.ndarray, edge_magnitude: np.ndarray,
               alpha: float = 0.6) -> np.ndarray:
    """Overlay non-zero edge magnitude in green, scaled to the display image."""
    h, w = image.shape[:2]
    edges = cv2.resize(edge_magnitude, (w, h), interpolation=cv2.INTER_NEAREST)
    overlay = image.copy()
    overlay[edges > 0] = [0, 200, 0]
    return cv2.addWeighted(image, 1 - alpha, overlay, alpha, 0)
