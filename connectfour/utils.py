"""
utils.py - Constants and enumerations for the Connect Four rules engine

This module holds the fixed board geometry, the chip colors, the line
directions used for win checking, and small grid helpers shared by the
board and the rules.
"""

from enum import Enum
from typing import Optional

import numpy as np

# Board geometry
COLUMNS = 7
ROWS = 6
CONNECT_N = 4  # Number of chips in a line to win

EMPTY = 0  # Grid value of an unoccupied cell


class Chip(Enum):
    """The two chip colors."""
    RED = 1
    BLACK = 2

    def other(self) -> 'Chip':
        """Get the opposing color."""
        return Chip.BLACK if self is Chip.RED else Chip.RED

    def __str__(self):
        return self.name.capitalize()


class Direction(Enum):
    """Directions a line of four can run from its starting cell."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_UP = "diagonal_up"      # Bottom-left to top-right
    DIAGONAL_DOWN = "diagonal_down"  # Top-left to bottom-right


# (column, row) step for each direction; row 0 is the bottom of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


def is_valid_column(column: int) -> bool:
    return 0 <= column < COLUMNS


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index, counted from the bottom

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= column < COLUMNS and 0 <= row < ROWS


def new_grid() -> np.ndarray:
    """An empty grid indexed ``[column, row]``."""
    return np.full((COLUMNS, ROWS), EMPTY, dtype=np.int8)


def chip_at(grid: np.ndarray, column: int, row: int) -> Optional[Chip]:
    """The chip in a cell, or None when the cell is empty."""
    value = int(grid[column, row])
    return None if value == EMPTY else Chip(value)


def get_column_height(grid: np.ndarray, column: int) -> int:
    """
    Get the number of chips stacked in a column.

    Columns fill contiguously from row 0, so the height is also the row
    index the next chip dropped into the column lands on.
    """
    return int(np.count_nonzero(grid[column] != EMPTY))
