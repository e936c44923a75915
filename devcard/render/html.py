"""
HTML renderer for devcard.

Generates the standalone page served by ``devcard --serve`` and written
by ``devcard --html``.
"""

from typing import Any, Dict, List

from devcard.heatmap import HeatmapView, LABEL_POSITIONS, cell_opacity, prepare_heatmap
from devcard.loader import sanitize_record
from devcard.models import resolve_claude_stats
from devcard.output.formatter import (
    CLAUDE_ORANGE_HEX, capitalize_label, escape_markup as esc,
    format_peak_hours, format_stats_line, project_tag, safe_href
)

VALID_STATUSES = {'shipped', 'wip', 'concept', 'archived'}

MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

PAGE_STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { background: #0a0a0a; display: flex; justify-content: center; padding: 40px 20px;
           font-family: 'JetBrains Mono', 'Fira Code', 'SF Mono', Consolas, monospace; }
    .terminal { background: #0d1117; width: 100%; max-width: 720px; border: 1px solid #30363d;
                border-radius: 12px; overflow: hidden; }
    .titlebar { background: #161b22; padding: 10px 16px; border-bottom: 1px solid #30363d;
                font-size: 13px; color: #484f58; }
    .card { padding: 28px 32px 24px; }
    .dev-name { color: ACCENT; font-size: 28px; font-weight: 700; text-transform: uppercase;
                letter-spacing: 0.08em; margin-bottom: 8px; }
    .title-line { color: #484f58; font-size: 14px; margin-bottom: 8px; }
    .archetype-line { font-size: 13px; margin-bottom: 16px; }
    .archetype-prefix { color: #6e7681; }
    .archetype-value { color: #bc8cff; font-style: italic; }
    .divider, .divider-bottom { border: none; border-top: 1px solid #21262d; margin: 16px 0; }
    .section { margin: 18px 0; }
    .section-header { color: #d29922; font-size: 14px; margin-bottom: 6px; }
    .section-body, .stack-techs, .proj-name, .exp-role { color: #c9d1d9; font-size: 13px; }
    .stack-label, .link-label, .exp-at, .exp-period, .proj-desc, .exp-highlight { color: #6e7681; font-size: 13px; }
    .stack-label, .link-label { display: inline-block; min-width: 110px; }
    .interest-tag { display: inline-block; border: 1px solid #30363d; border-radius: 12px;
                    padding: 2px 10px; margin: 2px; color: #c9d1d9; font-size: 12px; }
    .tag-shipped { color: #3fb950; } .tag-wip { color: #d29922; }
    .tag-concept { color: #bc8cff; } .tag-archived { color: #6e7681; } .tag-default { color: ACCENT; }
    .private-note { color: #484f58; font-style: italic; font-size: 12px; }
    .link-url { color: ACCENT; text-decoration: none; font-size: 13px; }
    .insights-disclosure { margin: 16px 0; color: #c9d1d9; font-size: 13px; }
    .insights-toggle { cursor: pointer; color: #8b949e; }
    .dna-text { color: ACCENT; font-style: italic; margin-top: 8px; }
    .claude-style { color: #bc8cff; margin-top: 8px; }
    .claude-style-desc { color: #6e7681; font-style: italic; }
    .claude-stats-line { margin: 8px 0; }
    .claude-meta-label { color: #6e7681; display: inline-block; min-width: 90px; }
    .heatmap-wrap { margin-top: 12px; }
    .heatmap-row { display: grid; grid-template-columns: repeat(24, 1fr); gap: 2px; }
    .heatmap-cell { height: 14px; border-radius: 2px; background: ACCENT; }
    .heatmap-axis { display: grid; grid-template-columns: repeat(24, 1fr); color: #484f58;
                    font-size: 10px; margin-top: 4px; }
    .next-project-standalone { margin: 16px 0; border: 1px solid rgba(88, 166, 255, 0.2);
                               border-radius: 8px; padding: 16px 18px; }
    .next-project-header { color: #58a6ff; font-size: 14px; font-weight: 600; }
    .next-project-attribution { color: #6e7681; font-size: 11px; font-style: italic; margin: 4px 0 10px; }
    .next-project-text { color: #c9d1d9; font-size: 13px; }
""".replace('ACCENT', CLAUDE_ORANGE_HEX)


def format_since_long(since: str) -> str:
    """Format 'YYYY-MM[-DD]' as 'Mar 2024', or '' if it can't be read."""
    try:
        year, month = since[:4], int(since[5:7])
    except ValueError:
        return ''
    if not year.isdigit() or not 1 <= month <= 12:
        return ''
    return f"{MONTHS[month - 1]} {year}"


def render_heatmap_html(view: HeatmapView) -> str:
    """Render the heatmap as a row of cells plus an axis row."""
    peak = view.peak
    cells = []
    for i, value in enumerate(view.data):
        unit = 'session' if value == 1 else 'sessions'
        title = f"{view.hour_at(i)}:00 - {value} {unit}"
        cells.append(
            f'<div class="heatmap-cell" style="opacity:{cell_opacity(value, peak):.2f}" '
            f'title="{esc(title)}"></div>'
        )
    # Grid columns are 1-based
    labels = ''.join(
        f'<span style="grid-column:{pos + 1}">{esc(label)}</span>'
        for pos, label in zip(LABEL_POSITIONS, view.labels)
    )
    return (
        '<div class="heatmap-wrap">'
        f'<div class="heatmap-row">{"".join(cells)}</div>'
        f'<div class="heatmap-axis">{labels}</div>'
        '</div>'
    )


def _section(title: str, body: str) -> str:
    return (f'<div class="section"><div class="section-header">{esc(title)}</div>'
            f'{body}</div>')


def _claude_disclosure(claude: Dict[str, Any]) -> str:
    stats = resolve_claude_stats(claude)
    parts: List[str] = []
    if stats.style:
        parts.append(f'<div class="claude-style">{esc(stats.style)}</div>')
    if stats.style_description:
        parts.append(f'<div class="claude-style-desc">{esc(stats.style_description)}</div>')

    stats_line = format_stats_line(stats.sessions, stats.messages,
                                   format_since_long(stats.since), ' &middot; ')
    if stats_line:
        parts.append(f'<div class="claude-stats-line">{stats_line}</div>')

    meta = []
    if stats.model:
        meta.append('<div class="claude-meta-row"><span class="claude-meta-label">Model</span>'
                    f'<span class="claude-meta-value">{esc(stats.model)}</span></div>')
    if stats.rhythm:
        rhythm = stats.rhythm + format_peak_hours(stats.peak_hours)
        meta.append('<div class="claude-meta-row"><span class="claude-meta-label">Rhythm</span>'
                    f'<span class="claude-meta-value">{esc(rhythm)}</span></div>')
    if meta:
        parts.append(f'<div class="claude-meta">{"".join(meta)}</div>')

    view = prepare_heatmap(claude)
    if view is not None:
        parts.append(render_heatmap_html(view))

    return (
        '<details class="insights-disclosure claude-disclosure">'
        '<summary class="insights-toggle">Claude Code Statistics</summary>'
        f'<div class="insights-content">{"".join(parts)}</div>'
        '</details>'
    )


def _sections(data: Dict[str, Any]) -> str:
    out: List[str] = []
    bio = data.get('bio')
    if bio:
        out.append(_section('Bio', f'<div class="section-body">{esc(bio)}</div>'))

    about = data.get('about')
    if about and about != bio:
        body = esc(about).replace('\n', '<br>')
        out.append(_section('About', f'<div class="section-body">{body}</div>'))

    stack = data.get('stack')
    if isinstance(stack, dict) and stack:
        rows = []
        for category, techs in stack.items():
            if isinstance(techs, (list, tuple)):
                tech_str = ' &middot; '.join(esc(t) for t in techs)
            else:
                tech_str = esc(techs)
            rows.append(f'<div class="stack-row"><span class="stack-label">{esc(capitalize_label(str(category)))}</span>'
                        f'<span class="stack-techs">{tech_str}</span></div>')
        out.append(_section('Stack', ''.join(rows)))

    interests = data.get('interests')
    if isinstance(interests, list) and interests:
        tags = ''.join(f'<span class="interest-tag">{esc(i)}</span>' for i in interests)
        out.append(_section('Interests', f'<div class="interest-tags">{tags}</div>'))

    projects = data.get('projects')
    if isinstance(projects, list) and projects:
        rows = []
        for proj in projects:
            if not isinstance(proj, dict):
                continue
            status = project_tag(proj)
            status_class = status if status in VALID_STATUSES else 'default'
            tag = f'<span class="tag tag-{status_class}">[{esc(status)}]</span>' if status else ''
            desc = f'<div class="proj-desc">{esc(proj["description"])}</div>' if proj.get('description') else ''
            rows.append('<div class="project"><div class="proj-header"><span class="bullet">&#9656;</span> '
                        f'<span class="proj-name">{esc(proj.get("name", ""))}</span> {tag}</div>{desc}</div>')
        out.append(_section('Projects', ''.join(rows)))

    experience = data.get('experience')
    if isinstance(experience, list) and experience:
        rows = []
        for exp in experience:
            if not isinstance(exp, dict):
                continue
            period = f' <span class="exp-period">({esc(exp["period"])})</span>' if exp.get('period') else ''
            highlight = f'<div class="exp-highlight">{esc(exp["highlight"])}</div>' if exp.get('highlight') else ''
            rows.append(f'<div class="experience"><span class="exp-role">{esc(exp.get("role", ""))}</span>'
                        f'<span class="exp-at"> @ {esc(exp.get("company", ""))}</span>{period}{highlight}</div>')
        out.append(_section('Experience', ''.join(rows)))

    if data.get('private_note'):
        out.append(f'<div class="section"><div class="private-note">{esc(data["private_note"])}</div></div>')

    links = data.get('links')
    if isinstance(links, dict) and links:
        rows = []
        for label, url in links.items():
            rows.append(f'<div class="link-row"><span class="link-label">{esc(capitalize_label(str(label)))}</span>'
                        f'<a class="link-url" href="{esc(safe_href(url))}" target="_blank" '
                        f'rel="noopener noreferrer">{esc(url)}</a></div>')
        out.append(_section('Links', ''.join(rows)))

    return ''.join(out)


def generate_html(data: Dict[str, Any], nonce: str = '') -> str:
    """
    Generate a standalone HTML page for a devcard.

    Args:
        data: Decoded card mapping
        nonce: CSP nonce for the inline style block (empty for static files)
    """
    data = sanitize_record(data or {})
    name = str(data.get('name') or 'Dev')
    username = str(data.get('username') or '-'.join(name.lower().split()))
    title_line = ' &middot; '.join(esc(p) for p in (data.get('title'), data.get('location')) if p)

    archetype = ''
    if data.get('archetype'):
        archetype = ('<div class="archetype-line"><span class="archetype-prefix">Claude\'s read:</span> '
                     f'<span class="archetype-value">{esc(data["archetype"])}</span></div>')

    insights = ''
    if data.get('dna'):
        insights = ('<details class="insights-disclosure">'
                    '<summary class="insights-toggle">Claude\'s Insights</summary>'
                    f'<div class="insights-content"><div class="dna-text">{esc(data["dna"])}</div></div>'
                    '</details>')

    claude = data.get('claude')
    claude_html = _claude_disclosure(claude) if isinstance(claude, dict) else ''

    next_project = ''
    if data.get('next_project'):
        next_project = ('<div class="next-project-standalone">'
                        '<div class="next-project-header">What to Build Next</div>'
                        '<div class="next-project-attribution">Based on your skills, Claude suggests:</div>'
                        f'<div class="next-project-text">{esc(data["next_project"])}</div></div>')

    nonce_attr = f' nonce="{esc(nonce)}"' if nonce else ''

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>devcard - {esc(name)}</title>
  <style{nonce_attr}>{PAGE_STYLE}</style>
</head>
<body>
  <div class="terminal">
    <div class="titlebar">~ devcard @{esc(username)}</div>
    <div class="card">
      <div class="dev-name">{esc(name)}</div>
      <div class="title-line">{title_line}</div>
      {archetype}
      <hr class="divider">
      {_sections(data)}
      <hr class="divider-bottom">
      {insights}
      {claude_html}
      {next_project}
    </div>
  </div>
</body>
</html>
"""
