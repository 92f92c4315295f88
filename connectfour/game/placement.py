"""
placement.py - Value types describing where a line of four sits on the board
"""

from dataclasses import dataclass
from typing import Tuple

from connectfour.utils import CONNECT_N, DIRECTION_VECTORS, Direction


@dataclass(frozen=True)
class Cell:
    """A single board position; row 0 is the bottom of the board."""
    column: int
    row: int


@dataclass(frozen=True)
class Placement:
    """
    A winning line of four chips.

    The line is the starting cell plus three further steps along
    ``direction``. Placements are plain values: they can be built, compared
    and hashed without any board.
    """
    starting_column: int
    starting_row: int
    direction: Direction

    @property
    def starting_cell(self) -> Cell:
        return Cell(self.starting_column, self.starting_row)

    def cells(self) -> Tuple[Cell, ...]:
        """All four cells of the line, starting cell first."""
        dc, dr = DIRECTION_VECTORS[self.direction]
        return tuple(
            Cell(self.starting_column + i * dc, self.starting_row + i * dr)
            for i in range(CONNECT_N)
        )

    def __str__(self):
        return (f"{self.direction.value} from "
                f"({self.starting_column}, {self.starting_row})")
