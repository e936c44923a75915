"""Loader package - devcard YAML decoding and sanitizing."""

from .card_loader import (
    CardLoadError,
    load_card,
    parse_card,
    sanitize_record,
    safe_card_data,
    strip_control,
)

__all__ = [
    "CardLoadError",
    "load_card",
    "parse_card",
    "sanitize_record",
    "safe_card_data",
    "strip_control",
]
