"""
Terminal renderer for devcard.

Generates the styled plain-text card printed by ``devcard FILE``.
"""

from typing import Any, Dict, List, Optional

from devcard.heatmap import HeatmapView, LABEL_POSITIONS, block_glyph, prepare_heatmap
from devcard.loader import sanitize_record
from devcard.models import resolve_claude_stats
from devcard.output.formatter import (
    Colors, bold, colorize, dim, italic,
    capitalize_label, format_peak_hours, format_stats_line, project_tag, word_wrap
)

PROJECT_STATUS_COLORS = {
    'shipped': Colors.GREEN,
    'wip': Colors.YELLOW,
    'concept': Colors.MAGENTA,
    'archived': Colors.GRAY,
}


def _section(lines: List[str], title: str, color_enabled: bool) -> None:
    lines.append("")
    lines.append(colorize(title, Colors.YELLOW, color_enabled))


def _key_value_rows(mapping: Dict[str, Any], value_color: str, color_enabled: bool) -> List[str]:
    width = max([len(str(k)) for k in mapping] + [8]) + 2
    rows = []
    for key, value in mapping.items():
        if isinstance(value, (list, tuple)):
            value = ' · '.join(str(v) for v in value)
        label = capitalize_label(str(key)).ljust(width)
        rows.append(colorize(label, Colors.GRAY, color_enabled) +
                    colorize(str(value), value_color, color_enabled))
    return rows


def format_heatmap_axis(labels: List[str]) -> str:
    """Place each label at its display column, nudging right to avoid overlap."""
    axis = ''
    for pos, label in zip(LABEL_POSITIONS, labels):
        start = max(pos, len(axis) + 1) if axis else pos
        axis = axis.ljust(start) + label
    return axis


def render_heatmap(view: HeatmapView, color_enabled: bool = True) -> List[str]:
    """Render the 24-hour strip and its axis as two indented lines."""
    peak = view.peak
    blocks = ''.join(block_glyph(v, peak) for v in view.data)
    return [
        f"  {colorize(blocks, Colors.CLAUDE_ORANGE, color_enabled)}",
        f"  {colorize(format_heatmap_axis(view.labels), Colors.GRAY, color_enabled)}",
    ]


def _render_claude(lines: List[str], claude: Dict[str, Any], width: int, color_enabled: bool) -> None:
    stats = resolve_claude_stats(claude)

    _section(lines, "Claude Code", color_enabled)
    if stats.style:
        lines.append(f"  {colorize(stats.style, Colors.MAGENTA, color_enabled)}")
    if stats.style_description:
        for line in word_wrap(stats.style_description, width - 6):
            quoted = f'"{line}"'
            lines.append(f"  {italic(quoted, Colors.DIM, color_enabled)}")
    lines.append("")

    stats_line = format_stats_line(stats.sessions, stats.messages, stats.since_month, '  ·  ')
    if stats_line:
        lines.append(f"  {colorize(stats_line, Colors.WHITE, color_enabled)}")

    lines.append("")
    if stats.model:
        lines.append(f"  {colorize('Model'.ljust(12), Colors.GRAY, color_enabled)}"
                     f"{colorize(stats.model, Colors.WHITE, color_enabled)}")
    if stats.rhythm:
        peak = format_peak_hours(stats.peak_hours)
        lines.append(f"  {colorize('Rhythm'.ljust(12), Colors.GRAY, color_enabled)}"
                     f"{colorize(stats.rhythm, Colors.WHITE, color_enabled)}"
                     f"{colorize(peak, Colors.GRAY, color_enabled) if peak else ''}")

    view = prepare_heatmap(claude)
    if view is not None:
        lines.append("")
        lines.extend(render_heatmap(view, color_enabled))


def render_card(
    data: Dict[str, Any],
    color_enabled: bool = True,
    width: int = 62
) -> str:
    """
    Render a devcard for the terminal.

    Args:
        data: Decoded card mapping
        color_enabled: Whether to apply ANSI colors
        width: Card width in columns
    """
    data = sanitize_record(data or {})
    divider = colorize('─' * width, Colors.GRAY, color_enabled)
    lines = [""]

    name = str(data.get('name') or 'DEV').upper()
    lines.append(bold(colorize(name, Colors.CLAUDE_ORANGE, color_enabled), color_enabled))

    title_parts = [str(p) for p in (data.get('title'), data.get('location')) if p]
    if title_parts:
        lines.append(colorize(' · '.join(title_parts), Colors.GRAY, color_enabled))

    if data.get('archetype'):
        lines.append(colorize("Claude's read: ", Colors.GRAY, color_enabled) +
                     italic(str(data['archetype']), Colors.MAGENTA, color_enabled))

    lines.append(divider)

    bio = data.get('bio')
    if bio:
        _section(lines, "Bio", color_enabled)
        lines.extend(colorize(line, Colors.WHITE, color_enabled) for line in word_wrap(bio, width - 2))

    about = data.get('about')
    if about and about != bio:
        _section(lines, "About", color_enabled)
        lines.extend(colorize(line, Colors.WHITE, color_enabled) for line in word_wrap(about, width - 2))

    stack = data.get('stack')
    if isinstance(stack, dict) and stack:
        _section(lines, "Stack", color_enabled)
        lines.extend(_key_value_rows(stack, Colors.WHITE, color_enabled))

    interests = data.get('interests')
    if isinstance(interests, list) and interests:
        _section(lines, "Interests", color_enabled)
        lines.append(colorize(' · '.join(str(i) for i in interests), Colors.WHITE, color_enabled))

    projects = data.get('projects')
    if isinstance(projects, list) and projects:
        _section(lines, "Projects", color_enabled)
        for proj in projects:
            if not isinstance(proj, dict):
                continue
            tag = project_tag(proj)
            tag_str = ''
            if tag:
                tag_color = PROJECT_STATUS_COLORS.get(tag, Colors.CLAUDE_ORANGE)
                tag_str = '  ' + colorize(f"[{tag}]", tag_color, color_enabled)
            lines.append(colorize('▸ ', Colors.GREEN, color_enabled) +
                         colorize(str(proj.get('name', '')), Colors.BRIGHT_WHITE, color_enabled) + tag_str)
            if proj.get('description'):
                lines.append(f"  {colorize(str(proj['description']), Colors.GRAY, color_enabled)}")

    experience = data.get('experience')
    if isinstance(experience, list) and experience:
        _section(lines, "Experience", color_enabled)
        for exp in experience:
            if not isinstance(exp, dict):
                continue
            period = ''
            if exp.get('period'):
                period = ' ' + colorize(f"({exp['period']})", Colors.GRAY, color_enabled)
            lines.append(colorize(str(exp.get('role', '')), Colors.WHITE, color_enabled) + ' ' +
                         colorize(f"@ {exp.get('company', '')}", Colors.GRAY, color_enabled) + period)
            if exp.get('highlight'):
                lines.append(f"  {colorize(str(exp['highlight']), Colors.GRAY, color_enabled)}")

    if data.get('private_note'):
        lines.append("")
        for line in word_wrap(data['private_note'], width - 4):
            lines.append(f"  {italic(line, Colors.DIM, color_enabled)}")

    links = data.get('links')
    if isinstance(links, dict) and links:
        _section(lines, "Links", color_enabled)
        lines.extend(_key_value_rows(links, Colors.CLAUDE_ORANGE, color_enabled))

    if data.get('dna'):
        _section(lines, "Claude's Take", color_enabled)
        for line in word_wrap(data['dna'], width - 4):
            lines.append(f"  {italic(line, Colors.CLAUDE_ORANGE, color_enabled)}")

    if data.get('next_project'):
        lines.append("")
        lines.append(colorize("What to Build Next", Colors.YELLOW, color_enabled) + '  ' +
                     dim("(Claude's suggestion)", color_enabled))
        for line in word_wrap(data['next_project'], width - 4):
            lines.append(f"  {colorize('▍', Colors.CYAN, color_enabled)} "
                         f"{colorize(line, Colors.BRIGHT_WHITE, color_enabled)}")

    claude: Optional[Dict[str, Any]] = data.get('claude')
    if isinstance(claude, dict):
        _render_claude(lines, claude, width, color_enabled)

    lines.append("")
    lines.append(divider)

    return '\n'.join(lines)
