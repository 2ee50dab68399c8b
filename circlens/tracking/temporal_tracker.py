"""Exponential smoothing of the detected circle across frames."""

from dataclasses import replace
from typing import Optional

from circlens.types import Circle, TrackerState

DEFAULT_ALPHA = 0.5


class TemporalTracker:
    """Damps frame-to-frame jitter of the detected circle."""

    def __init__(self, alpha: float = DEFAULT_ALPHA):
        """
        Initialize tracker.

        Args:
            alpha: Weight of the newest detection, in (0, 1]
        """
        if not 0 < alpha <= 1:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha

    def update(self, raw: Optional[Circle], state: TrackerState) -> Optional[Circle]:
        """
        Fold a raw detection into the session state.

        A missing detection resets smoothing completely; the next detection
        is then adopted unchanged. Only x, y and r are smoothed, the score
        always comes from the raw detection.
        """
        if raw is None:
            state.smooth_circle = None
            return None

        previous = state.smooth_circle
        if previous is None:
            state.smooth_circle = raw
            return raw

        keep = 1 - self.alpha
        state.smooth_circle = replace(
            raw,
            x=previous.x * keep + raw.x * self.alpha,
            y=previous.y * keep + raw.y * self.alpha,
            r=previous.r * keep + raw.r * self.alpha,
        )
        return state.smooth_circle
