# -*- coding: utf-8 -*-
"""
QR Symbol Geometry Module

This module derives every geometric quantity of a QR-family symbol from its
version number: the grid width, whether the symbol is a compact (Micro QR)
variant, where the timing lines run and where the alignment patterns sit.

Version numbers 1-40 denote standard QR Codes, 41-44 denote the four
Micro QR variants M1-M4.

Functions:
    validate_version: Single validation gate for version numbers
    width: Side length of the symbol in modules
    is_compact: True for Micro QR versions
    timing_line_offset: Row/column index of the timing patterns
    alignment_anchors: Alignment pattern row/column candidates
    alignment_centers: Alignment pattern centers (finder corners excluded)
    finder_origins: Top-left corners of the finder patterns
"""

from types import MappingProxyType
from typing import List, Tuple

MIN_VERSION = 1
MAX_STANDARD_VERSION = 40
MAX_VERSION = 44

FINDER_SIZE = 7
ALIGNMENT_SIZE = 5


class OutOfRangeError(ValueError):
    """Raised when a version number falls outside 1..44."""

    def __init__(self, version):
        super().__init__(
            f"version must be between {MIN_VERSION} and {MAX_VERSION}, got {version}"
        )
        self.version = version


# ISO/IEC 18004:2015 Annex E - alignment pattern row/column coordinates.
# Micro QR symbols (41-44) carry no alignment patterns.
ALIGNMENT_POSITIONS = MappingProxyType({
    1: (),
    2: (6, 18),
    3: (6, 22),
    4: (6, 26),
    5: (6, 30),
    6: (6, 34),
    7: (6, 22, 38),
    8: (6, 24, 42),
    9: (6, 26, 46),
    10: (6, 28, 50),
    11: (6, 30, 54),
    12: (6, 32, 58),
    13: (6, 34, 62),
    14: (6, 26, 46, 66),
    15: (6, 26, 48, 70),
    16: (6, 26, 50, 74),
    17: (6, 30, 54, 78),
    18: (6, 30, 56, 82),
    19: (6, 30, 58, 86),
    20: (6, 34, 62, 90),
    21: (6, 28, 50, 72, 94),
    22: (6, 26, 50, 74, 98),
    23: (6, 30, 54, 78, 102),
    24: (6, 28, 54, 80, 106),
    25: (6, 32, 58, 84, 110),
    26: (6, 30, 58, 86, 114),
    27: (6, 34, 62, 90, 118),
    28: (6, 26, 50, 74, 98, 122),
    29: (6, 30, 54, 78, 102, 126),
    30: (6, 26, 52, 78, 104, 130),
    31: (6, 30, 56, 82, 108, 134),
    32: (6, 34, 60, 86, 112, 138),
    33: (6, 30, 58, 86, 114, 142),
    34: (6, 34, 62, 90, 118, 146),
    35: (6, 30, 54, 78, 102, 126, 150),
    36: (6, 24, 50, 76, 102, 128, 154),
    37: (6, 28, 54, 80, 106, 132, 158),
    38: (6, 32, 58, 84, 110, 136, 162),
    39: (6, 26, 54, 82, 110, 138, 166),
    40: (6, 30, 58, 86, 114, 142, 170),
    41: (),
    42: (),
    43: (),
    44: (),
})


def validate_version(version: int) -> int:
    """
    Accept a raw version number into the system.

    This is the only place a version is checked; every other function in the
    package assumes it receives a value that passed through here.

    Args:
        version (int): Raw version number

    Returns:
        int: The same version, now known to be in 1..44

    Raises:
        TypeError: If version is not an integer
        OutOfRangeError: If version is < 1 or > 44

    Example:
        >>> validate_version(7)
        7
        >>> validate_version(45)
        Traceback (most recent call last):
        ...
        qr_layout.geometry.OutOfRangeError: version must be between 1 and 44, got 45
    """
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"version must be an int, got {type(version).__name__}")
    if version < MIN_VERSION or version > MAX_VERSION:
        raise OutOfRangeError(version)
    return version


def is_compact(version: int) -> bool:
    """True for the Micro QR versions (41-44)."""
    return version > MAX_STANDARD_VERSION


def width(version: int) -> int:
    """
    Calculate the side length of the symbol in modules.

    Standard versions grow by 4 modules per version starting at 21x21,
    Micro QR versions grow by 2 starting at 11x11.

    Args:
        version (int): Validated version number (1-44)

    Returns:
        int: Grid width, always odd

    Example:
        >>> width(1), width(40), width(41), width(44)
        (21, 177, 11, 17)
    """
    if is_compact(version):
        return 2 * (version - MAX_STANDARD_VERSION) + 9
    return 4 * version + 17


def timing_line_offset(version: int) -> int:
    """Row and column index of the timing patterns: 0 for Micro QR, 6 otherwise."""
    return 0 if is_compact(version) else 6


def alignment_anchors(version: int) -> Tuple[int, ...]:
    """
    Look up the alignment pattern coordinates for a version.

    The same sequence is used for rows and columns; the centers of the
    alignment patterns come from its cross product (see alignment_centers).

    Args:
        version (int): Validated version number (1-44)

    Returns:
        Tuple[int, ...]: Anchor offsets, empty for version 1 and Micro QR

    Example:
        >>> alignment_anchors(7)
        (6, 22, 38)
    """
    return ALIGNMENT_POSITIONS[version]


def alignment_centers(version: int) -> List[Tuple[int, int]]:
    """
    Calculate the (x, y) centers of every alignment pattern of a version.

    The three combinations that would collide with a finder pattern are
    skipped: (first, first), (first, last) and (last, first).

    Args:
        version (int): Validated version number (1-44)

    Returns:
        List[Tuple[int, int]]: Centers in row-major order of the anchor table

    Example:
        >>> alignment_centers(2)
        [(18, 18)]
    """
    anchors = alignment_anchors(version)
    last = len(anchors) - 1
    centers = []

    for i, x in enumerate(anchors):
        for j, y in enumerate(anchors):
            if (i == 0 and j == 0) or (i == 0 and j == last) or (j == 0 and i == last):
                continue
            centers.append((x, y))

    return centers


def finder_origins(version: int) -> List[Tuple[int, int]]:
    """
    Top-left (x, y) corners of the finder patterns.

    Standard symbols have three (top-left, top-right, bottom-left),
    Micro QR symbols only the top-left one.
    """
    if is_compact(version):
        return [(0, 0)]
    far = width(version) - FINDER_SIZE
    return [(0, 0), (far, 0), (0, far)]
