"""
Data structures (entities) for devcard.

Uses dataclasses for clean, typed data structures.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ClaudeStats:
    """Claude Code usage statistics shown on a card."""
    since: str = ''  # YYYY-MM-DD or YYYY-MM
    messages: int = 0
    model: str = ''
    sessions: int = 0
    style: str = ''
    style_description: str = ''
    rhythm: str = ''
    peak_hours: List[int] = field(default_factory=list)

    @property
    def since_month(self) -> str:
        """Return 'YYYY/MM' for the since date, or '' if unknown."""
        if len(self.since) < 7:
            return ''
        return self.since[:7].replace('-', '/', 1)
