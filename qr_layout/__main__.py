# -*- coding: utf-8 -*-
"""
QR Layout - Command Line Entry Point

Writes a picture of a symbol's layout to a PNG file.

Run:
    python -m qr_layout --version 2 --output qr.png
"""

import argparse
import logging
import sys

from .geometry import OutOfRangeError
from .renderer import DEFAULT_BORDER, DEFAULT_SCALE, VIEWS, render_image, save_png
from .symbol import QrSymbol

logger = logging.getLogger("qr_layout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qr-layout",
        description="Render the module layout of a QR (1-40) or Micro QR (41-44) symbol.",
    )
    parser.add_argument("-v", "--version", type=int, default=2,
                        help="symbol version, 1-40 for QR, 41-44 for Micro QR M1-M4 (default: 2)")
    parser.add_argument("-o", "--output", default="qr.png",
                        help="PNG file to write (default: qr.png)")
    parser.add_argument("--view", choices=VIEWS, default="debug",
                        help="what to draw (default: debug)")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="pixels per module (default: %(default)s)")
    parser.add_argument("--border", type=int, default=DEFAULT_BORDER,
                        help="quiet zone in modules (default: %(default)s)")
    parser.add_argument("--skip-function-patterns", action="store_true",
                        help="leave finder, timing and alignment modules out of the codeword blocks")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        symbol = QrSymbol(args.version, skip_function_patterns=args.skip_function_patterns)
    except OutOfRangeError as ex:
        logger.error("Error creating QR layout: %s", ex)
        return 1

    try:
        img = render_image(symbol, view=args.view, scale=args.scale, border=args.border)
    except ValueError as ex:
        logger.error("Error rendering QR layout: %s", ex)
        return 1

    try:
        save_png(img, args.output)
    except OSError as ex:
        logger.error("Error creating file: %s", ex)
        return 1

    logger.info("Version %d: %d modules in %d blocks",
                symbol.version, symbol.module_count, len(symbol.encoding_region))
    return 0


if __name__ == "__main__":
    sys.exit(main())
