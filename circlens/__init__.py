"""
CIRCLENS - real-time single circle detection

Sobel edge detection + gradient Hough circle transform, smoothed across frames.
"""

from .core import detect, CirclensProcessor
from .types import Circle, DetectionParams, TrackerState

__all__ = ['detect', 'CirclensProcessor', 'Circle', 'DetectionParams', 'TrackerState']
__version__ = '1.0.0'
