"""FastAPI dependency injection for the card."""

from typing import Any, Dict

from fastapi import Request

from devcard.loader import load_card, sanitize_record


def get_record(request: Request) -> Dict[str, Any]:
    """
    Get the current card.

    Re-reads the card file on every request so edits show up on reload;
    falls back to the record the app was created with.
    """
    card_path = request.app.state.card_path
    if card_path is not None:
        return sanitize_record(load_card(card_path))
    return sanitize_record(request.app.state.record or {})
