# -*- coding: utf-8 -*-
"""
QR Layout Renderer Module

This module turns a QrSymbol into pictures for debugging the layout. It is a
consumer of the layout engine only; nothing here feeds back into geometry or
traversal.

Views:
    blank: structural patterns in black on white
    debug: blank symbol with every codeword block painted its own gray shade
    zones: finder / timing / alignment colored by zone, blocks shaded beneath

Functions:
    render_image: Render any view as a PIL image
    render_blank_image: Grayscale blank symbol
    render_debug_image: Grayscale blank symbol plus block shades
    render_zones_image: RGB zone-colored symbol
    render_debug_svg: Debug view as SVG
    image_to_png_bytes / image_to_png_b64 / save_png: PNG output helpers
"""

import base64
import logging
from io import BytesIO
from typing import Dict, Tuple

import numpy as np
from PIL import Image

from .functional_areas import build_zone_map
from .symbol import QrSymbol, block_shade

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 10
DEFAULT_BORDER = 4

LIGHT = 255
DARK = 0

# Color palette for zone visualization
PALETTE: Dict[str, Tuple[int, int, int]] = {
    'background': (255, 255, 255),    # White background
    'finder': (128, 0, 128),          # Purple - Finder patterns
    'timing': (255, 165, 0),          # Orange - Timing patterns
    'alignment': (0, 128, 128),       # Teal - Alignment patterns
    'reserved': (230, 230, 230),      # Light gray - Light modules inside a pattern
}

VIEWS = ('debug', 'blank', 'zones')


def _gray_pixels(symbol: QrSymbol, with_blocks: bool) -> np.ndarray:
    size = symbol.width
    pixels = np.full((size, size), LIGHT, dtype=np.uint8)
    pixels[np.array(symbol.blank_matrix(), dtype=bool)] = DARK

    if with_blocks:
        # Blocks are painted over the patterns.
        for index, block in enumerate(symbol.encoding_region):
            ys = [module.y for module in block]
            xs = [module.x for module in block]
            pixels[ys, xs] = block_shade(index)

    return pixels


def _zone_pixels(symbol: QrSymbol) -> np.ndarray:
    size = symbol.width
    pixels = np.full((size, size, 3), PALETTE['background'], dtype=np.uint8)

    for index, block in enumerate(symbol.encoding_region):
        shade = block_shade(index)
        for module in block:
            pixels[module.y, module.x] = (shade, shade, shade)

    matrix = symbol.blank_matrix()
    zones = build_zone_map(symbol.version)
    for y, row in enumerate(zones):
        for x, zone in enumerate(row):
            if zone is None:
                continue
            if matrix[y][x]:
                pixels[y, x] = PALETTE[zone]
            else:
                pixels[y, x] = PALETTE['reserved']

    return pixels


def _to_image(pixels: np.ndarray, scale: int, border: int) -> Image.Image:
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    if border < 0:
        raise ValueError(f"border must be >= 0, got {border}")

    pad = ((border, border), (border, border)) + ((0, 0),) * (pixels.ndim - 2)
    padded = np.pad(pixels, pad, mode='constant', constant_values=LIGHT)
    scaled = np.repeat(np.repeat(padded, scale, axis=0), scale, axis=1)
    return Image.fromarray(scaled)


def render_blank_image(symbol: QrSymbol, scale: int = DEFAULT_SCALE,
                       border: int = DEFAULT_BORDER) -> Image.Image:
    """Grayscale image of the blank symbol (structural patterns only)."""
    return _to_image(_gray_pixels(symbol, with_blocks=False), scale, border)


def render_debug_image(symbol: QrSymbol, scale: int = DEFAULT_SCALE,
                       border: int = DEFAULT_BORDER) -> Image.Image:
    """
    Grayscale image of the blank symbol with the encoding region painted in.

    Module colors:
        0       structural module not covered by any block
        255     background
        64-176  block shade, cycling every 8 blocks

    Args:
        symbol (QrSymbol): Symbol to render
        scale (int): Pixel size per module
        border (int): Quiet zone size in modules

    Returns:
        Image.Image: 'L' mode image of (width + 2 * border) * scale pixels
    """
    return _to_image(_gray_pixels(symbol, with_blocks=True), scale, border)


def render_zones_image(symbol: QrSymbol, scale: int = DEFAULT_SCALE,
                       border: int = DEFAULT_BORDER) -> Image.Image:
    """
    RGB image with every structural zone in its palette color.

    Set modules of a finder, timing or alignment pattern take the zone
    color, light modules inside a pattern take the 'reserved' gray, and the
    remaining modules show their block shade.
    """
    return _to_image(_zone_pixels(symbol), scale, border)


_RENDERERS = {
    'debug': render_debug_image,
    'blank': render_blank_image,
    'zones': render_zones_image,
}


def render_image(symbol: QrSymbol, view: str = 'debug', scale: int = DEFAULT_SCALE,
                 border: int = DEFAULT_BORDER) -> Image.Image:
    """Render one of VIEWS; raises ValueError for an unknown view."""
    try:
        renderer = _RENDERERS[view]
    except KeyError:
        raise ValueError(f"unknown view {view!r}, expected one of {', '.join(VIEWS)}") from None
    logger.debug("Rendering %s view of %r (scale=%d, border=%d)", view, symbol, scale, border)
    return renderer(symbol, scale=scale, border=border)


def render_debug_svg(symbol: QrSymbol, scale: int = DEFAULT_SCALE,
                     border: int = DEFAULT_BORDER) -> bytes:
    """
    Render the debug view as SVG.

    Args:
        symbol (QrSymbol): Symbol to render
        scale (int): Size of each module in user units
        border (int): Quiet zone size in modules

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    pixels = _gray_pixels(symbol, with_blocks=True)
    size_mod = symbol.width + 2 * border
    px = size_mod * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="rgb{PALETTE["background"]}"/>')

    for y in range(symbol.width):
        for x in range(symbol.width):
            level = int(pixels[y, x])
            if level == LIGHT:
                continue
            rx = (x + border) * scale
            ry = (y + border) * scale
            out.append(f'<rect x="{rx}" y="{ry}" width="{scale}" height="{scale}" fill="rgb({level}, {level}, {level})"/>')

    out.append('</svg>')
    return "\n".join(out).encode("utf-8")


def image_to_png_bytes(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


def image_to_png_b64(img: Image.Image) -> str:
    """Base64 PNG, ready for a data: URL."""
    return base64.b64encode(image_to_png_bytes(img)).decode('ascii')


def save_png(img: Image.Image, path) -> None:
    img.save(path, format='PNG')
    logger.info("Wrote %dx%d image to %s", img.width, img.height, path)
