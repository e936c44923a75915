"""Axis labels for rotated heatmaps."""

from typing import List

from devcard.heatmap.distribution import HOURS_PER_DAY

# Display positions that carry a label, left to right
LABEL_POSITIONS = (0, 6, 12, 18, 23)


def heatmap_axis_labels(start_hour: int) -> List[str]:
    """Return the hour shown at each labelled position, e.g. ['0', '6', '12', '18', '23']."""
    return [str((pos + start_hour) % HOURS_PER_DAY) for pos in LABEL_POSITIONS]
