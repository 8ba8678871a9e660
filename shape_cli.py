#!/usr/bin/env python3
"""Command-line interface for shape icon exports.

This module exports shape documents without running the HTTP server: it
encodes a saved document as SVG, ICO or PNG, writes built-in demos out as
documents, and prints seeded palettes.

Usage:
    python shape_cli.py export icon-layers.json --format ico --output favicon.ico
    python shape_cli.py export icon-layers.json --format png --size 512 --output icon.png
    python shape_cli.py demo geometricMandala --output mandala.json
    python shape_cli.py palette --seed 7 --base "#ff6b6b"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from shape_lib.api import IconService
from shape_lib.config import CANVAS_SIZE
from shape_lib.errors import ShapeLibError

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('svg', 'ico', 'png', 'touch-icon')


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='Export layered shape icons'
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Log level (default: WARNING)')
    sub = parser.add_subparsers(dest='command', required=True)

    export = sub.add_parser('export', help='Encode a shape document')
    export.add_argument('document', type=str,
                        help='Path to a JSON shape document')
    export.add_argument('--format', '-f', choices=EXPORT_FORMATS, default='svg',
                        help='Output format (default: svg)')
    export.add_argument('--output', '-o', type=str, required=True,
                        help='Output file path')
    export.add_argument('--size', '-s', type=int, default=CANVAS_SIZE,
                        help=f'Edge length for svg/png (default: {CANVAS_SIZE})')

    demo = sub.add_parser('demo', help='Write a built-in demo as a document')
    demo.add_argument('key', type=str, help='Demo key, e.g. bloomingFlower')
    demo.add_argument('--output', '-o', type=str, required=True,
                      help='Output JSON path')

    palette = sub.add_parser('palette', help='Print a harmonious palette')
    palette.add_argument('--seed', type=int, default=0,
                         help='PRNG seed (default: 0)')
    palette.add_argument('--base', type=str, default=None,
                         help='Base hex color (default: picked from the seed)')
    return parser


def _export_command(args, service: IconService) -> None:
    """Handle the export command.

    Args:
        args: Parsed command-line arguments.
        service: IconService instance.
    """
    shapes = service.import_json(Path(args.document).read_text())
    logger.debug("Loaded %d shapes from %s", len(shapes), args.document)
    if args.format == 'svg':
        data = service.export_svg(shapes, args.size).encode('utf-8')
    elif args.format == 'ico':
        data = service.export_ico(shapes)
    elif args.format == 'png':
        data = service.export_png(shapes, args.size)
    else:
        data = service.export_touch_icon(shapes)
    Path(args.output).write_bytes(data)
    print(f"Wrote {len(shapes)} shapes as {args.format} to {args.output} ({len(data)} bytes)")


def _demo_command(args, service: IconService) -> None:
    if args.key not in service.demos:
        known = ", ".join(service.demos.list_keys())
        raise ShapeLibError(f"Unknown demo {args.key!r} (available: {known})")
    shapes = service.demo_shapes(args.key)
    Path(args.output).write_text(service.export_json(shapes))
    print(f"Wrote demo {args.key} ({len(shapes)} shapes) to {args.output}")


def _palette_command(args, service: IconService) -> None:
    print(json.dumps(service.random_palette(args.seed, args.base), indent=2))


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for shape icon exports.

    Returns:
        Process exit status (0 on success, 1 on a rejected input).
    """
    from shape_flask import configure_logging

    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    service = IconService()
    handlers = {
        'export': _export_command,
        'demo': _demo_command,
        'palette': _palette_command,
    }
    try:
        handlers[args.command](args, service)
    except (ShapeLibError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
