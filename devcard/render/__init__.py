"""Render package - terminal, SVG and HTML card renderers."""

from .terminal import render_card
from .svg import generate_svg
from .html import generate_html

__all__ = ["render_card", "generate_svg", "generate_html"]
