"""
Heatmap rotation for devcard.

Finds the starting hour that keeps a worker's activity block together
instead of splitting it across the midnight edge of the axis.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import List, Optional, Sequence, Tuple

from devcard.heatmap.distribution import HOURS_PER_DAY, Number

# An hour is quiet when its value is at or below this share of the peak
QUIET_RATIO = 0.1

# Quiet stretches shorter than this are not worth moving the axis for
MIN_QUIET_RUN = 3


@dataclass
class RotatedView:
    """A distribution re-ordered so data[i] is hour (i + start_hour) % 24."""
    data: List[Number] = field(default_factory=lambda: [0] * HOURS_PER_DAY)
    start_hour: int = 0

    def hour_at(self, index: int) -> int:
        """Absolute hour of day shown at a display position."""
        return (index + self.start_hour) % HOURS_PER_DAY


def _is_valid_distribution(dist: Sequence) -> bool:
    if not isinstance(dist, (list, tuple)) or len(dist) != HOURS_PER_DAY:
        return False
    for value in dist:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        try:
            if not math.isfinite(value) or value < 0:
                return False
        except OverflowError:
            return False
    return True


def find_longest_quiet_run(dist: Sequence[Number], threshold: float) -> Tuple[int, int]:
    """
    Find the longest run of hours at or below threshold, wrapping midnight.

    Scans a doubled 48-hour view so runs that cross 23 -> 0 are seen whole.
    Run length is capped at 24 so a fully quiet day is not counted twice.
    The earliest run wins among runs of equal length.

    Returns:
        (start, length) where start is an index into the doubled view;
        length is 0 when no hour is quiet
    """
    best_start = 0
    best_len = 0
    run_start = -1
    run_len = 0

    for i in range(HOURS_PER_DAY * 2):
        if dist[i % HOURS_PER_DAY] <= threshold:
            if run_start < 0:
                run_start = i
            run_len = min(run_len + 1, HOURS_PER_DAY)
            if run_len > best_len:
                best_len = run_len
                best_start = run_start
        else:
            run_start = -1
            run_len = 0

    return best_start, best_len


def rotate_heatmap(dist: Optional[Sequence[Number]]) -> RotatedView:
    """
    Rotate a 24-hour distribution so activity appears as one contiguous band.

    The new first hour is the midpoint of the longest quiet stretch (hours
    at or below 10% of the peak). Inputs that are malformed, empty, have
    no quiet stretch, or whose best rotation would be trivial are returned
    unchanged with start_hour 0.

    Args:
        dist: 24-element hour distribution

    Returns:
        RotatedView with the re-ordered data and its starting hour
    """
    if dist is None:
        return RotatedView()
    if not _is_valid_distribution(dist):
        return RotatedView(data=list(dist) if isinstance(dist, (list, tuple)) else [0] * HOURS_PER_DAY)

    values = list(dist)
    if sum(values) == 0:
        return RotatedView(data=values)

    threshold = max(values) * QUIET_RATIO
    run_start, run_len = find_longest_quiet_run(values, threshold)
    if run_len == 0:
        # Uniform activity, nothing quiet to anchor on
        return RotatedView(data=values)

    midpoint = (run_start + run_len // 2) % HOURS_PER_DAY
    if midpoint == 0 or run_len < MIN_QUIET_RUN:
        return RotatedView(data=values)

    rotated = [values[(i + midpoint) % HOURS_PER_DAY] for i in range(HOURS_PER_DAY)]
    return RotatedView(data=rotated, start_hour=midpoint)
