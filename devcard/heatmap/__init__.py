"""Heatmap package - hour distribution, rotation and axis labels."""

from .distribution import build_hour_distribution, coerce_number, HOURS_PER_DAY
from .rotation import rotate_heatmap, find_longest_quiet_run, RotatedView
from .axis import heatmap_axis_labels, LABEL_POSITIONS
from .intensity import prepare_heatmap, block_glyph, cell_opacity, HeatmapView

__all__ = [
    "build_hour_distribution",
    "coerce_number",
    "HOURS_PER_DAY",
    "rotate_heatmap",
    "find_longest_quiet_run",
    "RotatedView",
    "heatmap_axis_labels",
    "LABEL_POSITIONS",
    "prepare_heatmap",
    "block_glyph",
    "cell_opacity",
    "HeatmapView",
]
