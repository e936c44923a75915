"""Heatmap API endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from devcard.heatmap import prepare_heatmap
from devcard.server.dependencies import get_record
from devcard.server.models.heatmap import HeatmapResponse

router = APIRouter(prefix="/api", tags=["heatmap"])


@router.get("/heatmap", response_model=HeatmapResponse)
async def heatmap(record: Dict[str, Any] = Depends(get_record)):
    """Get the rotated 24-hour activity strip shown on the card."""
    claude = record.get("claude")
    view = prepare_heatmap(claude) if isinstance(claude, dict) else None
    if view is None:
        return HeatmapResponse(available=False)
    return HeatmapResponse(
        available=True,
        data=view.data,
        start_hour=view.start_hour,
        labels=view.labels,
        peak=view.peak,
    )
