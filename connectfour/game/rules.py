"""
rules.py - Win detection for Connect Four

Win detection is a pure function of the grid: it reports which chip has four
connected and where, and never touches board state. The board records the
result itself when a move is made.
"""

import numpy as np
from typing import Optional, Tuple

from connectfour.debug import debug
from connectfour.game.placement import Placement
from connectfour.utils import (COLUMNS, ROWS, CONNECT_N, EMPTY, Chip, Direction,
                               DIRECTION_VECTORS, is_valid_position)

# Per-cell test order; decides which line is reported when one cell
# starts more than one
SCAN_DIRECTIONS = (
    Direction.VERTICAL,
    Direction.DIAGONAL_UP,
    Direction.DIAGONAL_DOWN,
    Direction.HORIZONTAL,
)


def has_match(grid: np.ndarray, column: int, row: int, direction: Direction) -> bool:
    """
    Check whether the chip at (column, row) starts a line of four.

    Cells beyond the edge of the board simply fail the match.

    Args:
        grid: Board grid indexed [column, row]
        column: Starting column
        row: Starting row
        direction: Direction the line runs in

    Returns:
        True if CONNECT_N matching chips run from the starting cell
    """
    value = grid[column, row]
    if value == EMPTY:
        return False

    dc, dr = DIRECTION_VECTORS[direction]
    for step in range(1, CONNECT_N):
        c, r = column + step * dc, row + step * dr
        if not is_valid_position(c, r) or grid[c, r] != value:
            return False

    return True


def find_four_connected(grid: np.ndarray) -> Optional[Tuple[Chip, Placement]]:
    """
    Scan the whole board for four connected chips.

    Cells are visited column by column, bottom row first, and each occupied
    cell is tested in SCAN_DIRECTIONS order. The first line found is the
    one reported.

    Args:
        grid: Board grid indexed [column, row]

    Returns:
        The winning chip and its placement, or None if nobody has four
    """
    for column in range(COLUMNS):
        for row in range(ROWS):
            if grid[column, row] == EMPTY:
                continue
            for direction in SCAN_DIRECTIONS:
                if has_match(grid, column, row, direction):
                    chip = Chip(int(grid[column, row]))
                    placement = Placement(column, row, direction)
                    debug.trace(f"{chip} has four connected: {placement}", "rules")
                    return chip, placement

    return None
