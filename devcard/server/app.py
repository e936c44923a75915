"""
FastAPI application factory for the devcard web page.

Creates the app with the card page, JSON endpoints and error handling.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from devcard import __version__
from devcard.config.loader import load_config
from devcard.loader import CardLoadError

logger = logging.getLogger("devcard.server")


def create_app(
    config: Optional[dict] = None,
    card_path: Optional[Union[str, Path]] = None,
    record: Optional[Dict[str, Any]] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Loaded configuration (defaults to load_config())
        card_path: Card file re-read on every request
        record: Already decoded card, used when there is no card_path
    """
    app = FastAPI(
        title="devcard",
        description="Local devcard page",
        version=__version__,
    )

    app.state.config = config if config is not None else load_config()
    app.state.card_path = Path(card_path).expanduser() if card_path is not None else None
    app.state.record = record

    @app.exception_handler(CardLoadError)
    async def card_load_error_handler(request: Request, exc: CardLoadError):
        logger.error("Could not load card for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Could not load card", "detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    from devcard.server.routes.health import router as health_router
    from devcard.server.routes.heatmap import router as heatmap_router
    from devcard.server.routes.card import router as card_router

    app.include_router(health_router)
    app.include_router(heatmap_router)
    app.include_router(card_router)

    return app
