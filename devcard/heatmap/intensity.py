"""
Shared heatmap view for the devcard renderers.

Every renderer gets its heatmap through prepare_heatmap() and maps values
with block_glyph() or cell_opacity(), so the terminal, SVG and HTML cards
always agree on rotation, labels and relative intensity.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from devcard.heatmap.axis import heatmap_axis_labels
from devcard.heatmap.distribution import Number, build_hour_distribution
from devcard.heatmap.rotation import rotate_heatmap

# Opacity for empty hours, keeps them visible against "no heatmap"
EMPTY_OPACITY = 0.06
MIN_ACTIVE_OPACITY = 0.15

# (upper ratio bound, glyph), checked in order
GLYPH_STEPS = (
    (0.25, '░'),
    (0.5, '▒'),
    (0.75, '▓'),
)
FULL_GLYPH = '█'


@dataclass
class HeatmapView:
    """Everything a renderer needs to draw the 24-hour strip."""
    data: List[Number]
    start_hour: int
    labels: List[str]

    @property
    def peak(self) -> Number:
        """Scale for ratios; never below 1 so all-zero strips stay empty."""
        return max(max(self.data, default=0), 1)

    def hour_at(self, index: int) -> int:
        return (index + self.start_hour) % len(self.data)


def prepare_heatmap(record: Mapping[str, Any]) -> Optional[HeatmapView]:
    """
    Run distribution -> rotation -> labels for a stats record.

    Returns None when the record carries no hour data; renderers then
    leave the heatmap block out entirely.
    """
    dist = build_hour_distribution(record)
    if dist is None:
        return None
    rotated = rotate_heatmap(dist)
    return HeatmapView(
        data=rotated.data,
        start_hour=rotated.start_hour,
        labels=heatmap_axis_labels(rotated.start_hour),
    )


def block_glyph(value: Number, peak: Number) -> str:
    """Terminal block character for a bucket; blank when empty."""
    if value == 0:
        return ' '
    ratio = value / peak
    for bound, glyph in GLYPH_STEPS:
        if ratio < bound:
            return glyph
    return FULL_GLYPH


def cell_opacity(value: Number, peak: Number) -> float:
    """Opacity for an SVG/HTML heatmap cell."""
    if value == 0:
        return EMPTY_OPACITY
    opacity = MIN_ACTIVE_OPACITY + (value / peak) * (1 - MIN_ACTIVE_OPACITY)
    return min(1.0, max(EMPTY_OPACITY, opacity))
