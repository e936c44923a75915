"""Health check endpoint."""

import time

from fastapi import APIRouter, Request

from devcard import __version__

router = APIRouter(prefix="/api", tags=["health"])

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    """Health check: returns status, uptime and where the card comes from."""
    uptime = int(time.time() - _start_time)

    card_path = request.app.state.card_path
    card_status = "ok"
    if card_path is not None and not card_path.exists():
        card_status = "missing"

    return {
        "status": "ok",
        "uptime_seconds": uptime,
        "card": card_status,
        "version": __version__,
    }
