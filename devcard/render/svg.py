"""
SVG renderer for devcard.

Generates a fixed-width card image written by ``devcard --svg``.
"""

from typing import Any, Dict, List

from devcard.heatmap import HeatmapView, LABEL_POSITIONS, cell_opacity, prepare_heatmap
from devcard.loader import sanitize_record
from devcard.models import resolve_claude_stats
from devcard.output.formatter import (
    CLAUDE_ORANGE_HEX, capitalize_label, escape_markup as esc,
    format_peak_hours, format_stats_line, project_tag, word_wrap
)

CARD_WIDTH = 720
PADDING = 32
LINE_HEIGHT = 20
WRAP_COLUMNS = 80

# Heatmap strip geometry
CELL_WIDTH = 24
CELL_GAP = 2
CELL_HEIGHT = 16

BACKGROUND = '#0d1117'
BORDER = '#30363d'
TEXT = '#c9d1d9'
MUTED = '#6e7681'
HEADING = '#d29922'
ARCHETYPE = '#bc8cff'


class SvgCanvas:
    """Accumulates SVG elements top to bottom."""

    def __init__(self):
        self.elements: List[str] = []
        self.y = PADDING

    def text(self, content: str, color: str = TEXT, size: int = 13,
             weight: str = 'normal', style: str = 'normal', x: int = PADDING) -> None:
        """Add one line of text at the cursor and advance it."""
        self.y += LINE_HEIGHT
        self.elements.append(
            f'<text x="{x}" y="{self.y}" fill="{color}" font-size="{size}" '
            f'font-weight="{weight}" font-style="{style}">{esc(content)}</text>'
        )

    def gap(self, height: int = LINE_HEIGHT // 2) -> None:
        self.y += height

    def divider(self) -> None:
        self.gap()
        self.elements.append(
            f'<line x1="{PADDING}" y1="{self.y}" x2="{CARD_WIDTH - PADDING}" '
            f'y2="{self.y}" stroke="{BORDER}" stroke-width="1"/>'
        )

    def heading(self, title: str) -> None:
        self.gap()
        self.text(title.upper(), color=HEADING, weight='bold')

    def wrapped(self, content: str, color: str = TEXT, style: str = 'normal', indent: int = 0) -> None:
        for line in word_wrap(content, WRAP_COLUMNS - indent // 8):
            self.text(line, color=color, style=style, x=PADDING + indent)

    def heatmap(self, view: HeatmapView) -> None:
        """Draw 24 cells and the axis labels beneath them."""
        self.gap()
        top = self.y + 4
        peak = view.peak
        for i, value in enumerate(view.data):
            x = PADDING + i * (CELL_WIDTH + CELL_GAP)
            self.elements.append(
                f'<rect x="{x}" y="{top}" width="{CELL_WIDTH}" height="{CELL_HEIGHT}" rx="2" '
                f'fill="{CLAUDE_ORANGE_HEX}" fill-opacity="{cell_opacity(value, peak):.2f}">'
                f'<title>{view.hour_at(i)}:00</title></rect>'
            )
        self.y = top + CELL_HEIGHT + 14
        for pos, label in zip(LABEL_POSITIONS, view.labels):
            x = PADDING + pos * (CELL_WIDTH + CELL_GAP)
            self.elements.append(
                f'<text x="{x}" y="{self.y}" fill="{MUTED}" font-size="10">{esc(label)}</text>'
            )

    def render(self) -> str:
        height = self.y + PADDING
        body = '\n  '.join(self.elements)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{CARD_WIDTH}" height="{height}" '
            f'viewBox="0 0 {CARD_WIDTH} {height}" '
            "font-family=\"'JetBrains Mono', 'SF Mono', Consolas, monospace\">\n"
            f'  <rect width="{CARD_WIDTH}" height="{height}" rx="12" fill="{BACKGROUND}" stroke="{BORDER}"/>\n'
            f'  {body}\n'
            '</svg>\n'
        )


def _key_value_rows(canvas: SvgCanvas, mapping: Dict[str, Any], value_color: str) -> None:
    for key, value in mapping.items():
        if isinstance(value, (list, tuple)):
            value = ' · '.join(str(v) for v in value)
        label = capitalize_label(str(key)).ljust(14)
        canvas.text(f"{label}{value}", color=value_color)


def _draw_claude(canvas: SvgCanvas, claude: Dict[str, Any]) -> None:
    stats = resolve_claude_stats(claude)
    canvas.heading("Claude Code")
    if stats.style:
        canvas.text(stats.style, color=ARCHETYPE)
    if stats.style_description:
        canvas.wrapped(f'"{stats.style_description}"', color=MUTED, style='italic')

    stats_line = format_stats_line(stats.sessions, stats.messages, stats.since_month, '  ·  ')
    if stats_line:
        canvas.text(stats_line)
    if stats.model:
        canvas.text(f"{'Model'.ljust(12)}{stats.model}")
    if stats.rhythm:
        canvas.text(f"{'Rhythm'.ljust(12)}{stats.rhythm}{format_peak_hours(stats.peak_hours)}")

    view = prepare_heatmap(claude)
    if view is not None:
        canvas.heatmap(view)


def generate_svg(data: Dict[str, Any]) -> str:
    """
    Generate an SVG image of a devcard.

    Args:
        data: Decoded card mapping

    Returns:
        Complete SVG document as a string
    """
    data = sanitize_record(data or {})
    canvas = SvgCanvas()

    canvas.text(str(data.get('name') or 'DEV').upper(), color=CLAUDE_ORANGE_HEX, size=24, weight='bold')
    canvas.gap(8)

    title_parts = [str(p) for p in (data.get('title'), data.get('location')) if p]
    if title_parts:
        canvas.text(' · '.join(title_parts), color=MUTED)
    if data.get('archetype'):
        canvas.text(f"Claude's read: {data['archetype']}", color=ARCHETYPE, style='italic')
    canvas.divider()

    bio = data.get('bio')
    if bio:
        canvas.heading("Bio")
        canvas.wrapped(bio)

    about = data.get('about')
    if about and about != bio:
        canvas.heading("About")
        canvas.wrapped(about)

    stack = data.get('stack')
    if isinstance(stack, dict) and stack:
        canvas.heading("Stack")
        _key_value_rows(canvas, stack, TEXT)

    interests = data.get('interests')
    if isinstance(interests, list) and interests:
        canvas.heading("Interests")
        canvas.wrapped(' · '.join(str(i) for i in interests))

    projects = data.get('projects')
    if isinstance(projects, list) and projects:
        canvas.heading("Projects")
        for proj in projects:
            if not isinstance(proj, dict):
                continue
            tag = project_tag(proj)
            status = f"  [{tag}]" if tag else ''
            canvas.text(f"▸ {proj.get('name', '')}{status}")
            if proj.get('description'):
                canvas.wrapped(str(proj['description']), color=MUTED, indent=16)

    experience = data.get('experience')
    if isinstance(experience, list) and experience:
        canvas.heading("Experience")
        for exp in experience:
            if not isinstance(exp, dict):
                continue
            period = f" ({exp['period']})" if exp.get('period') else ''
            canvas.text(f"{exp.get('role', '')} @ {exp.get('company', '')}{period}")
            if exp.get('highlight'):
                canvas.wrapped(str(exp['highlight']), color=MUTED, indent=16)

    links = data.get('links')
    if isinstance(links, dict) and links:
        canvas.heading("Links")
        _key_value_rows(canvas, links, CLAUDE_ORANGE_HEX)

    if data.get('dna'):
        canvas.heading("Claude's Take")
        canvas.wrapped(str(data['dna']), color=CLAUDE_ORANGE_HEX, style='italic')

    if data.get('next_project'):
        canvas.heading("What to Build Next")
        canvas.wrapped(str(data['next_project']), indent=16)

    claude = data.get('claude')
    if isinstance(claude, dict):
        _draw_claude(canvas, claude)

    canvas.gap()
    return canvas.render()
