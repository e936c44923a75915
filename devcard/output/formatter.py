"""
Output formatting for devcard.

Handles colors, word wrapping, number formatting and escaping shared by
the terminal, SVG and HTML renderers.
"""

import html
import os
import re
import sys
from typing import Iterable, List, Union

# Enable ANSI colors on Windows
if sys.platform == 'win32':
    os.system('')  # Triggers VT100 emulation


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    ITALIC = '\033[3m'

    # Foreground colors
    YELLOW = '\033[33m'
    GREEN = '\033[32m'
    WHITE = '\033[37m'
    GRAY = '\033[90m'
    MAGENTA = '\033[95m'
    CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'
    CLAUDE_ORANGE = '\033[38;2;218;119;86m'


# Hex equivalent of Colors.CLAUDE_ORANGE for SVG/HTML
CLAUDE_ORANGE_HEX = '#DA7756'


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Apply color if enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def bold(text: str, enabled: bool = True) -> str:
    """Make text bold."""
    if not enabled:
        return text
    return f"{Colors.BOLD}{text}{Colors.RESET}"


def dim(text: str, enabled: bool = True) -> str:
    """Make text dim/gray."""
    if not enabled:
        return text
    return f"{Colors.DIM}{text}{Colors.RESET}"


def italic(text: str, color: str = '', enabled: bool = True) -> str:
    """Make text italic, optionally colored."""
    if not enabled:
        return text
    return f"{color}{Colors.ITALIC}{text}{Colors.RESET}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)


# Formatting functions
def format_count(value: Union[int, float]) -> str:
    """Format a count compactly: 950, 1.5K, 12K."""
    value = int(value)
    if value >= 10_000:
        return f"{int(value / 1000 + 0.5)}K"
    elif value >= 1_000:
        short = f"{value / 1000:.1f}"
        if short.endswith('.0'):
            short = short[:-2]
        return f"{short}K"
    return str(value)


def format_hour_12h(hour: int) -> str:
    """Format an hour of day as 9am / 3pm."""
    hour = hour % 24
    suffix = 'am' if hour < 12 else 'pm'
    display = hour % 12 or 12
    return f"{display}{suffix}"


def format_peak_hours(hours: Iterable[int]) -> str:
    """Format peak hours as '(peak: 10am-2pm)', or '' if none."""
    parts = [format_hour_12h(h) for h in hours]
    if not parts:
        return ''
    return f" (peak: {'-'.join(parts)})"


def format_stats_line(sessions: int, messages: int, since: str, separator: str) -> str:
    """Join the non-empty session/message/since parts of a stats line."""
    parts = []
    if sessions:
        parts.append(f"{format_count(sessions)} sessions")
    if messages:
        parts.append(f"{format_count(messages)} messages")
    if since:
        parts.append(f"since {since}")
    return separator.join(parts)


def capitalize_label(key: str) -> str:
    """Turn a YAML key into a display label: 'ci_cd' -> 'Ci/cd'."""
    if not key:
        return key
    return key[0].upper() + key[1:].replace('_', '/')


def word_wrap(text: str, max_width: int) -> List[str]:
    """
    Greedy word wrap that keeps paragraph breaks.

    Blank paragraphs are kept as empty lines. Words longer than the width
    are placed on their own line rather than split.
    """
    result = []
    for para in str(text).split('\n'):
        if not para.strip():
            result.append('')
            continue
        line = ''
        for word in para.split():
            if line and len(line) + len(word) + 1 > max_width:
                result.append(line)
                line = word
            else:
                line = f"{line} {word}" if line else word
        if line:
            result.append(line)
    return result


def escape_markup(value) -> str:
    """Escape text for HTML or SVG output."""
    return html.escape('' if value is None else str(value), quote=True)


def safe_href(url) -> str:
    """Allow only http(s) and mailto links; anything else becomes '#'."""
    text = str(url).strip()
    lowered = text.lower()
    if lowered.startswith(('https://', 'http://', 'mailto:')):
        return text
    return '#'


def project_tag(project) -> str:
    """Tag shown next to a project: its status, else its first tag."""
    tags = project.get('tags')
    tag = project.get('status') or (tags[0] if isinstance(tags, list) and tags else '')
    return str(tag) if tag else ''
