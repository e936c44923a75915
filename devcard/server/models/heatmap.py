"""Pydantic models for heatmap API."""

from typing import List

from pydantic import BaseModel


class HeatmapResponse(BaseModel):
    available: bool  # False when the card has no hour data
    data: List[float] = []
    start_hour: int = 0  # hour shown in the first cell
    labels: List[str] = []
    peak: float = 0
