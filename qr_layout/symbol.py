# -*- coding: utf-8 -*-
"""
QR Symbol Module

QrSymbol ties the geometry, the structural patterns and the layout traversal
of one version together. The version is validated once, at construction;
the encoding region is computed at the same time and never changes.
"""

import logging
from typing import List, Optional, Tuple

from .functional_areas import Matrix, build_blank_matrix
from .geometry import (
    alignment_anchors,
    alignment_centers,
    is_compact,
    timing_line_offset,
    validate_version,
    width,
)
from .layout import EncodingRegion, generate_encoding_region

logger = logging.getLogger(__name__)

# Gray levels used to tell consecutive blocks apart in debug output
SHADE_BASE = 64
SHADE_STEP = 16
SHADE_CYCLE = 8


def block_shade(index: int) -> int:
    """Gray level (64-176) for the block at ``index``."""
    return (index % SHADE_CYCLE) * SHADE_STEP + SHADE_BASE


class QrSymbol:
    """
    Layout of a single QR or Micro QR symbol.

    Args:
        version (int): 1-40 for QR Code, 41-44 for Micro QR M1-M4
        skip_function_patterns (bool): Exclude structural modules from the
            encoding region (see generate_encoding_region)

    Raises:
        TypeError: If version is not an integer
        OutOfRangeError: If version is outside 1..44

    Example:
        >>> symbol = QrSymbol(2)
        >>> symbol.width, symbol.is_compact, symbol.alignment_centers
        (25, False, [(18, 18)])
    """

    def __init__(self, version: int, skip_function_patterns: bool = False):
        self._version = validate_version(version)
        self._skip_function_patterns = bool(skip_function_patterns)
        self._encoding_region = generate_encoding_region(
            self._version, skip_function_patterns=self._skip_function_patterns
        )
        logger.debug("Created symbol version %d (%dx%d)", self._version, self.width, self.width)

    def __repr__(self):
        return f"QrSymbol(version={self._version})"

    @property
    def version(self) -> int:
        return self._version

    @property
    def skip_function_patterns(self) -> bool:
        return self._skip_function_patterns

    @property
    def width(self) -> int:
        return width(self._version)

    @property
    def is_compact(self) -> bool:
        return is_compact(self._version)

    @property
    def timing_line_offset(self) -> int:
        return timing_line_offset(self._version)

    @property
    def alignment_anchors(self) -> Tuple[int, ...]:
        return alignment_anchors(self._version)

    @property
    def alignment_centers(self) -> List[Tuple[int, int]]:
        return alignment_centers(self._version)

    @property
    def encoding_region(self) -> EncodingRegion:
        return self._encoding_region

    @property
    def module_count(self) -> int:
        """Number of modules across all codeword blocks."""
        return sum(len(block) for block in self._encoding_region)

    def blank_matrix(self) -> Matrix:
        """Fresh matrix with every structural pattern stamped."""
        return build_blank_matrix(self._version)

    def debug_shades(self) -> List[List[Optional[int]]]:
        """
        Gray level of every module of the encoding region.

        shades[y][x] is the block shade of the module at (x, y), or None if
        the module is in no block.
        """
        size = self.width
        shades: List[List[Optional[int]]] = [[None] * size for _ in range(size)]
        for index, block in enumerate(self._encoding_region):
            shade = block_shade(index)
            for module in block:
                shades[module.y][module.x] = shade
        return shades
