#!/usr/bin/env python3
"""
devcard

Render a developer profile card in the terminal, as SVG or HTML, or
serve it as a local web page.

Usage:
    python -m devcard [FILE] [options]
    cat devcard.yaml | python -m devcard --plain
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from devcard.config.loader import load_config, get_default_card_path
from devcard.loader import CardLoadError, load_card, parse_card


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = argparse.ArgumentParser(
        prog='devcard',
        description='Render a developer profile card'
    )

    parser.add_argument('file', nargs='?', metavar='FILE',
                       help="Card YAML file ('-' for stdin; default from config)")

    # Output options
    parser.add_argument('--plain', action='store_true',
                       help='Disable colors in terminal output')
    parser.add_argument('--svg', metavar='OUT',
                       help='Write the card as an SVG image')
    parser.add_argument('--html', metavar='OUT',
                       help='Write the card as a standalone HTML page')

    # Web page
    parser.add_argument('--serve', action='store_true',
                       help='Serve the card as a local web page')
    parser.add_argument('--port', type=int, default=None,
                       help='Port for the web page (default: 3456)')
    parser.add_argument('--host', default=None,
                       help='Host for the web page (default: 127.0.0.1)')
    parser.add_argument('--no-open', action='store_true',
                       help="Don't open a browser on serve")

    parser.add_argument('--config', metavar='PATH',
                       help='Config file (default: ~/.devcard/config.json)')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Verbose output')

    return parser


def resolve_card_source(args, config: Dict[str, Any], stdin=None) -> Optional[Path]:
    """
    Decide where the card comes from.

    Returns the card path, or None when the card should be read from stdin.
    """
    if args.file == '-':
        return None
    if args.file:
        return Path(args.file)
    stdin = stdin if stdin is not None else sys.stdin
    if not stdin.isatty():
        return None
    return get_default_card_path(config)


def read_card(card_path: Optional[Path]) -> Dict[str, Any]:
    """Load the card from a file, or from stdin when card_path is None."""
    if card_path is None:
        return parse_card(sys.stdin.read(), source='<stdin>')
    return load_card(card_path)


def _write_output(path: str, content: str) -> None:
    out_path = Path(path).expanduser()
    with open(out_path, 'w', encoding='utf-8') as f:
        f.write(content)
    print(f"Wrote {out_path}")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    config = load_config(Path(args.config).expanduser() if args.config else None)
    color_enabled = config['display']['color_enabled'] and not args.plain

    card_path = resolve_card_source(args, config)
    try:
        data = read_card(card_path)
    except CardLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        if card_path is not None and args.file is None:
            print("Pass a card file, or set 'default_card_path' in ~/.devcard/config.json.",
                  file=sys.stderr)
        sys.exit(1)

    if args.serve:
        _run_serve(config, args, card_path, data)
        return

    if args.svg or args.html:
        if args.svg:
            from devcard.render.svg import generate_svg
            _write_output(args.svg, generate_svg(data))
        if args.html:
            from devcard.render.html import generate_html
            _write_output(args.html, generate_html(data))
        return

    from devcard.render.terminal import render_card
    print(render_card(data, color_enabled=color_enabled,
                      width=config['display']['card_width']))


def _run_serve(config, args, card_path: Optional[Path], data: Dict[str, Any]):
    """Start the local web page server."""
    try:
        import uvicorn
    except ImportError:
        print("Error: Serving requires additional dependencies.")
        print("Install them with: python -m pip install fastapi uvicorn[standard]")
        sys.exit(1)

    from devcard.server.app import create_app
    app = create_app(config=config, card_path=card_path, record=data)

    host = args.host or config['server']['host']
    port = args.port or config['server']['port']
    url = f"http://{host}:{port}"
    print(f"\nServing devcard at {url}")
    print("Press Ctrl+C to stop\n")

    if config['server']['open_browser'] and not args.no_open:
        import webbrowser
        import threading
        threading.Timer(1.0, webbrowser.open, args=[url]).start()

    uvicorn.run(app, host=host, port=port, log_level="info" if args.verbose else "warning")


if __name__ == '__main__':
    main()
