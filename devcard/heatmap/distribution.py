"""
Hour distribution extraction for devcard heatmaps.

Builds a 24-element activity distribution from either a flat
``hour_distribution`` list or a per-day ``heatmap`` matrix.
"""

import json
import logging
import math
from typing import Any, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24

Number = Union[int, float]


def coerce_number(value: Any) -> Number:
    """
    Coerce a raw value to a finite number.

    Anything that cannot be read as a finite number (None, free text,
    NaN, infinity, containers) becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if isinstance(value, int):
        return value
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


def _decode_row(row: Any) -> Optional[List[Any]]:
    """Decode one matrix row into a list, or None if it has no usable shape."""
    if isinstance(row, (list, tuple)):
        return list(row)
    if isinstance(row, str):
        try:
            decoded = json.loads(row)
        except (ValueError, RecursionError):
            return None
        if isinstance(decoded, list):
            return decoded
    return None


def build_hour_distribution(record: Mapping[str, Any]) -> Optional[List[Number]]:
    """
    Build a 24-element hour distribution from a stats record.

    A flat ``hour_distribution`` of exactly 24 elements wins. Otherwise a
    ``heatmap`` matrix is summed column-wise into 24 buckets; malformed rows
    count as all-zero rows.

    Args:
        record: The ``claude`` section of a decoded devcard

    Returns:
        24-element list, or None if no distribution data is present
    """
    if not isinstance(record, Mapping):
        return None

    flat = record.get('hour_distribution')
    if isinstance(flat, (list, tuple)) and len(flat) == HOURS_PER_DAY:
        return [coerce_number(v) for v in flat]

    matrix = record.get('heatmap')
    if not isinstance(matrix, (list, tuple)):
        return None

    dist: List[Number] = [0] * HOURS_PER_DAY
    for index, row in enumerate(matrix):
        nums = _decode_row(row)
        if nums is None:
            logger.debug("Skipping malformed heatmap row %d", index)
            continue
        for hour, value in enumerate(nums[:HOURS_PER_DAY]):
            dist[hour] += coerce_number(value)

    # Column sums can leave float range
    return [coerce_number(v) for v in dist]
