# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module stamps the structural patterns of a QR-family symbol onto a
module matrix: finder patterns, timing patterns and alignment patterns.
Stamping only ever sets modules; a module set by one pattern is never
cleared by another.

Matrices are lists of rows, ``matrix[y][x]`` with True meaning a set
(dark) module.

Functions:
    new_matrix: Build an empty square matrix
    add_finder_pattern: Stamp a 7x7 finder pattern
    add_alignment_pattern: Stamp a 5x5 alignment pattern
    add_timing_patterns: Stamp the horizontal and vertical timing lines
    build_blank_matrix: Blank symbol with every structural pattern stamped
    build_zone_map: Which structural pattern claims each module
    build_function_mask: Modules claimed by any structural pattern
"""

from typing import List, Optional

from .geometry import (
    ALIGNMENT_SIZE,
    FINDER_SIZE,
    alignment_centers,
    finder_origins,
    timing_line_offset,
    width,
)

Matrix = List[List[bool]]
ZoneMap = List[List[Optional[str]]]

ZONE_FINDER = 'finder'
ZONE_TIMING = 'timing'
ZONE_ALIGNMENT = 'alignment'


def new_matrix(size: int) -> Matrix:
    """Return a size x size matrix with every module unset."""
    return [[False] * size for _ in range(size)]


def _ring_motif(size: int) -> List[List[bool]]:
    # Solid square with a light ring one module in from the border.
    # For 7x7 the ring sits at index 1/5, for 5x5 at index 1/3.
    inner = (1, size - 2)
    last = size - 1
    motif = []
    for j in range(size):
        row = []
        for i in range(size):
            light = ((i in inner and j not in (0, last)) or
                     (j in inner and i not in (0, last)))
            row.append(not light)
        motif.append(row)
    return motif


FINDER_MOTIF = _ring_motif(FINDER_SIZE)
ALIGNMENT_MOTIF = _ring_motif(ALIGNMENT_SIZE)


def _stamp(matrix: Matrix, motif: List[List[bool]], left: int, top: int) -> None:
    for j, row in enumerate(motif):
        for i, dark in enumerate(row):
            if dark:
                matrix[top + j][left + i] = True


def add_finder_pattern(matrix: Matrix, left: int, top: int) -> None:
    """
    Stamp a finder pattern with its top-left corner at (left, top).

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111
    """
    _stamp(matrix, FINDER_MOTIF, left, top)


def add_alignment_pattern(matrix: Matrix, x: int, y: int) -> None:
    """
    Stamp an alignment pattern centered at (x, y).

    Pattern: 11111
             10001
             10101
             10001
             11111
    """
    offset = ALIGNMENT_SIZE // 2
    _stamp(matrix, ALIGNMENT_MOTIF, x - offset, y - offset)


def add_timing_patterns(matrix: Matrix, offset: int) -> None:
    """Set every even module of row ``offset`` and column ``offset``."""
    for i in range(0, len(matrix), 2):
        matrix[offset][i] = True
        matrix[i][offset] = True


def build_blank_matrix(version: int) -> Matrix:
    """
    Build the blank symbol for a validated version.

    Timing patterns go first, then the finder patterns, then the alignment
    patterns.

    Args:
        version (int): Validated version number (1-44)

    Returns:
        Matrix: width x width matrix, True where a structural module is set

    Example:
        >>> matrix = build_blank_matrix(1)
        >>> len(matrix), matrix[3][3], matrix[1][1]
        (21, True, False)
    """
    matrix = new_matrix(width(version))

    add_timing_patterns(matrix, timing_line_offset(version))

    for left, top in finder_origins(version):
        add_finder_pattern(matrix, left, top)

    for x, y in alignment_centers(version):
        add_alignment_pattern(matrix, x, y)

    return matrix


def build_zone_map(version: int) -> ZoneMap:
    """
    Label every module claimed by a structural pattern.

    Unlike build_blank_matrix this covers the whole footprint of each
    pattern, light modules included: the full 7x7 finder squares, the full
    5x5 alignment squares and both timing lines end to end. Where patterns
    overlap the finder wins over alignment, and alignment over timing.

    Args:
        version (int): Validated version number (1-44)

    Returns:
        ZoneMap: zone[y][x] is 'finder', 'alignment', 'timing' or None
    """
    size = width(version)
    zones: ZoneMap = [[None] * size for _ in range(size)]

    offset = timing_line_offset(version)
    for i in range(size):
        zones[offset][i] = ZONE_TIMING
        zones[i][offset] = ZONE_TIMING

    half = ALIGNMENT_SIZE // 2
    for cx, cy in alignment_centers(version):
        for y in range(cy - half, cy + half + 1):
            for x in range(cx - half, cx + half + 1):
                zones[y][x] = ZONE_ALIGNMENT

    for left, top in finder_origins(version):
        for y in range(top, top + FINDER_SIZE):
            for x in range(left, left + FINDER_SIZE):
                zones[y][x] = ZONE_FINDER

    return zones


def build_function_mask(version: int) -> Matrix:
    """Return mask[y][x] = True for every module claimed by a structural pattern."""
    return [[zone is not None for zone in row] for row in build_zone_map(version)]
