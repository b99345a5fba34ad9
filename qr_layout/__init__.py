# -*- coding: utf-8 -*-
"""
QR Layout - Core Module

This package computes the physical module layout of QR and Micro QR symbols:
grid dimensions, structural pattern placement and the zigzag order in which
data modules receive codeword bits.

Modules:
    geometry: Version validation, widths, timing offsets, alignment anchors
    functional_areas: Finder, timing and alignment pattern stamping
    layout: Zigzag traversal and codeword blocks
    symbol: QrSymbol facade tying the above together
    renderer: PNG/SVG debug output
"""

__version__ = "1.0.0"

from .geometry import (
    OutOfRangeError,
    validate_version,
    width,
    is_compact,
    timing_line_offset,
    alignment_anchors,
    alignment_centers,
)
from .functional_areas import build_blank_matrix, build_function_mask
from .layout import BLOCK_SIZE, Module, generate_encoding_region
from .symbol import QrSymbol

__all__ = [
    'OutOfRangeError',
    'validate_version',
    'width',
    'is_compact',
    'timing_line_offset',
    'alignment_anchors',
    'alignment_centers',
    'build_blank_matrix',
    'build_function_mask',
    'BLOCK_SIZE',
    'Module',
    'generate_encoding_region',
    'QrSymbol',
]
