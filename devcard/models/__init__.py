"""Models package - card entities and field resolution."""

from .entities import ClaudeStats
from .fields import first_present, resolve_claude_stats

__all__ = [
    "ClaudeStats",
    "first_present",
    "resolve_claude_stats",
]
