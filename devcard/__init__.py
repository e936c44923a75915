"""devcard - render a developer profile card for the terminal, SVG or HTML."""

__version__ = "1.0.0"
