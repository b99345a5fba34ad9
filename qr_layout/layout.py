# -*- coding: utf-8 -*-
"""
QR Code Layout Traversal Module

This module computes the order in which the modules of a symbol receive
codeword bits. The matrix is walked in two-module-wide vertical lanes from
right to left, starting in the bottom-right corner and reversing vertical
direction at the top and bottom edges. The vertical timing column is
stepped over as a lane boundary.

Visited modules are grouped into codeword blocks of 8 (one byte each); the
ordered tuple of blocks is the encoding region of the symbol.

The walk is a two-state machine (UPWARD / DOWNWARD) over a cursor
position, driven by the pure transition function ``advance``.

Functions:
    advance: Move a cursor one step along the zigzag
    iter_modules: Yield every module visited by the walk
    generate_encoding_region: Group the walk into codeword blocks
"""

import logging
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Tuple

from .functional_areas import build_function_mask
from .geometry import timing_line_offset, width

logger = logging.getLogger(__name__)

BLOCK_SIZE = 8


class Module(NamedTuple):
    """One cell of the symbol matrix: x is the column, y the row."""
    x: int
    y: int


CodewordBlock = Tuple[Module, ...]
EncodingRegion = Tuple[CodewordBlock, ...]


class Direction(Enum):
    """Vertical direction of the walk; the value is the row delta."""
    UPWARD = -1
    DOWNWARD = 1

    def reversed(self) -> 'Direction':
        return Direction.DOWNWARD if self is Direction.UPWARD else Direction.UPWARD


class Cursor(NamedTuple):
    x: int
    y: int
    direction: Direction

    def inside(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size


def _steps_left(x: int, timing_x: int) -> bool:
    # True on the right-hand module of a lane (and on the timing column).
    # Lanes right of the timing column start on even columns, lanes left
    # of it on odd columns.
    if x == timing_x:
        return True
    if x > timing_x:
        return x % 2 == 0
    return x % 2 == 1


def advance(cursor: Cursor, size: int, timing_x: int) -> Cursor:
    """
    Move the cursor one step along the zigzag.

    On the right-hand module of a lane the cursor steps left. On the
    left-hand module it steps back right and one row in its direction of
    travel. Overshooting the top or bottom edge moves the cursor two
    columns left into the next lane, back inside the grid, and reverses the
    direction.

    Args:
        cursor (Cursor): Current position and direction
        size (int): Grid width
        timing_x (int): Column of the vertical timing pattern

    Returns:
        Cursor: Next position; may lie outside the grid, which ends the walk

    Example:
        >>> advance(Cursor(20, 20, Direction.UPWARD), 21, 6)
        Cursor(x=19, y=20, direction=<Direction.UPWARD: -1>)
        >>> advance(Cursor(19, 20, Direction.UPWARD), 21, 6)
        Cursor(x=20, y=19, direction=<Direction.UPWARD: -1>)
    """
    x, y, direction = cursor

    if _steps_left(x, timing_x):
        x -= 1
    else:
        x += 1
        y += direction.value

    if not 0 <= y < size:
        x -= 2
        y -= direction.value
        direction = direction.reversed()

    return Cursor(x, y, direction)


def iter_modules(version: int) -> Iterator[Module]:
    """
    Yield every module visited by the zigzag walk, in order.

    Each module is visited at most once. Structural patterns are not
    excluded here.

    Args:
        version (int): Validated version number (1-44)

    Yields:
        Module: Visited modules, starting at the bottom-right corner
    """
    size = width(version)
    timing_x = timing_line_offset(version)
    cursor = Cursor(size - 1, size - 1, Direction.UPWARD)

    while cursor.inside(size):
        yield Module(cursor.x, cursor.y)
        cursor = advance(cursor, size, timing_x)


def generate_encoding_region(version: int, skip_function_patterns: bool = False) -> EncodingRegion:
    """
    Build the encoding region of a symbol: the walk grouped into blocks of 8.

    Every block holds exactly 8 modules except possibly the last one, which
    holds whatever is left over. No empty block is ever emitted.

    Args:
        version (int): Validated version number (1-44)
        skip_function_patterns (bool): Drop modules claimed by a finder,
            timing or alignment pattern before they enter a block. The
            default keeps every visited module.

    Returns:
        EncodingRegion: Tuple of codeword blocks in placement order

    Example:
        >>> region = generate_encoding_region(1)
        >>> len(region), len(region[-1])
        (53, 5)
        >>> region[0][:2]
        (Module(x=20, y=20), Module(x=19, y=20))
    """
    mask: Optional[list] = build_function_mask(version) if skip_function_patterns else None

    blocks = []
    current = []
    visited = 0

    for module in iter_modules(version):
        visited += 1
        if mask is not None and mask[module.y][module.x]:
            continue
        current.append(module)
        if len(current) == BLOCK_SIZE:
            blocks.append(tuple(current))
            current = []

    if current:
        blocks.append(tuple(current))

    logger.debug(
        "Encoding region for version %d: %d modules visited, %d blocks",
        version, visited, len(blocks),
    )
    return tuple(blocks)
