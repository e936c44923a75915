"""Card page and card data endpoints."""

import secrets
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from devcard.loader import safe_card_data
from devcard.render import generate_html
from devcard.server.dependencies import get_record

router = APIRouter(tags=["card"])


def build_security_headers(nonce: str) -> Dict[str, str]:
    """
    Response headers for the card page.

    Scripts are locked to the per-request nonce. Styles allow inline
    attributes, which carry heatmap cell opacity and axis label columns.
    """
    return {
        "Cache-Control": "no-cache",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": (
            f"default-src 'self'; script-src 'nonce-{nonce}'; "
            "style-src 'unsafe-inline'; connect-src 'self'"
        ),
    }


@router.get("/", response_class=HTMLResponse)
async def card_page(record: Dict[str, Any] = Depends(get_record)):
    """Render the card as an HTML page."""
    nonce = secrets.token_urlsafe(16)
    html = generate_html(record, nonce=nonce)
    return HTMLResponse(content=html, headers=build_security_headers(nonce))


@router.get("/api/card")
async def card_data(record: Dict[str, Any] = Depends(get_record)):
    """Return the card data without private fields."""
    return safe_card_data(record)
