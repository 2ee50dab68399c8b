"""Peak selection over a circle accumulator."""

import math
from typing import Optional

import numpy as np

from circlens.types import Circle, RadiusRange


def max_possible_votes(r: int) -> int:
    """Votes a fully voting circumference of radius r would cast."""
    return math.ceil(2 * math.pi * r)


class PeakSelector:
    """Picks the single best circle by circumference-normalised vote count."""

    def select(self, acc: np.ndarray, radius_range: RadiusRange,
               acc_thresh: float) -> Optional[Circle]:
        """
        Find the highest scoring accumulator cell above the threshold.

        Only cells at least r pixels away from every border are considered.
        Equal scores resolve to the first cell in (radius, y, x) order.

        Args:
            acc: (num_radii, H, W) vote counts
            radius_range: Radius buckets the accumulator was built with
            acc_thresh: Required score in percent

        Returns:
            Best circle with score clamped to 1.0, or None
        """
        _, h, w = acc.shape
        min_score = acc_thresh / 100
        best = None
        best_score = -1.0

        for ri in range(radius_range.num_radii):
            r = radius_range.radius(ri)
            if h - r <= r or w - r <= r:
                continue

            window = acc[ri, r:h - r, r:w - r]
            idx = int(np.argmax(window))
            votes = int(window.flat[idx])
            if votes <= 0:
                continue

            score = votes / max_possible_votes(r)
            if score >= min_score and score > best_score:
                iy, ix = divmod(idx, window.shape[1])
                best_score = score
                best = (r + ix, r + iy, r)

        if best is None:
            return None

        x, y, r = best
        return Circle(x=x, y=y, r=r, score=min(1.0, best_score))
