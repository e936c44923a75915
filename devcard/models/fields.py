"""
Field resolution for devcard records.

Cards written by older versions of /devcard:stats use different key names
for a few Claude statistics. Lookups try the current name first and fall
back to the legacy one.
"""

from typing import Any, Mapping, Optional

from devcard.models.entities import ClaudeStats

# Current key first, legacy key second
SINCE_KEYS = ('active_since', 'since')
MESSAGES_KEYS = ('total_messages', 'messages')
MODEL_KEYS = ('primary_model', 'model')


def first_present(mapping: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key that is set to something non-empty."""
    for key in keys:
        value = mapping.get(key)
        if value is None or value == '':
            continue
        return value
    return default


def _as_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_text(value: Any) -> str:
    return '' if value is None else str(value)


def resolve_claude_stats(claude: Optional[Mapping[str, Any]]) -> ClaudeStats:
    """
    Resolve the ``claude`` section of a card into a ClaudeStats.

    Args:
        claude: The ``claude`` mapping of a decoded card (may be None)
    """
    if not isinstance(claude, Mapping):
        return ClaudeStats()

    peak_hours = claude.get('peak_hours')
    if not isinstance(peak_hours, (list, tuple)):
        peak_hours = []

    return ClaudeStats(
        since=_as_text(first_present(claude, *SINCE_KEYS, default='')),
        messages=_as_int(first_present(claude, *MESSAGES_KEYS, default=0)),
        model=_as_text(first_present(claude, *MODEL_KEYS, default='')),
        sessions=_as_int(claude.get('sessions') or 0),
        style=_as_text(claude.get('style')),
        style_description=_as_text(claude.get('style_description')),
        rhythm=_as_text(claude.get('rhythm')),
        peak_hours=[_as_int(h) for h in peak_hours],
    )
