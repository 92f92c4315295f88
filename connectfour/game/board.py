"""
board.py - Board state machine for Connect Four

This module implements the Board class, which owns the grid and enforces
every rule of play: turn order, gravity placement, win and stalemate
detection, and reporting of the winning line.
"""

import numpy as np
from typing import List, Optional

from connectfour.debug import debug
from connectfour.exceptions import (GameOverError, OutOfTurnError, InvalidColumnError,
                                    FullColumnError, GameNotOverError, StalemateError)
from connectfour.game.placement import Placement
from connectfour.game.rules import find_four_connected
from connectfour.utils import (COLUMNS, ROWS, EMPTY, Chip, chip_at, get_column_height,
                               is_valid_column, new_grid)


class Board:
    """
    A Connect Four board.

    The grid has 7 columns of 6 cells, row 0 at the bottom. Either color may
    open the game; after that colors must alternate. The game ends when a
    move connects four or fills the board, and no further moves are accepted.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.debug("Initializing new Board", "board")
        self._grid = new_grid()
        self._game_over = False
        self._winner: Optional[Chip] = None
        self._last_played: Optional[Chip] = None
        self._winning_placement: Optional[Placement] = None

    @property
    def last_played(self) -> Optional[Chip]:
        """Color of the most recent successful move."""
        return self._last_played

    def drop(self, chip: Chip, column: int) -> int:
        """
        Drop a chip into a column.

        Checks run in a fixed order and the first failure is raised: game
        over, out of turn, invalid column, full column. A failed drop leaves
        the board untouched.

        Args:
            chip: Color of the chip being dropped
            column: The column to drop into (0-indexed)

        Returns:
            The row the chip came to rest in

        Raises:
            GameOverError: The game has already ended
            OutOfTurnError: ``chip`` also made the previous move
            InvalidColumnError: ``column`` is not on the board
            FullColumnError: ``column`` has no room left
        """
        if not isinstance(chip, Chip):
            raise TypeError(f"Expected a Chip, got {chip!r}")

        if self._game_over:
            debug.debug(f"Rejected {chip} in column {column}: game is over", "board")
            raise GameOverError("The game is over; start a new board")

        if chip is self._last_played:
            debug.debug(f"Rejected {chip} in column {column}: out of turn", "board")
            raise OutOfTurnError(f"{chip} played last; it is {chip.other()}'s turn")

        if not is_valid_column(column):
            debug.debug(f"Rejected {chip} in column {column}: invalid column", "board")
            raise InvalidColumnError(f"Column {column} outside valid range 0-{COLUMNS - 1}")

        if self._grid[column, ROWS - 1] != EMPTY:
            debug.debug(f"Rejected {chip} in column {column}: column full", "board")
            raise FullColumnError(f"Column {column} is full")

        row = get_column_height(self._grid, column)
        self._grid[column, row] = chip.value
        self._last_played = chip
        debug.debug(f"{chip} dropped into ({column}, {row})", "board")

        debug.start_timer("win_check")
        result = find_four_connected(self._grid)
        debug.end_timer("win_check", "board")

        if result is not None:
            self._winner, self._winning_placement = result
            self._game_over = True
            debug.info(f"{self._winner} wins: {self._winning_placement}", "board")
        elif self.is_full():
            self._game_over = True
            debug.info("Board is full: stalemate", "board")

        return row

    def drop_red(self, column: int) -> int:
        """Drop a red chip into ``column``."""
        return self.drop(Chip.RED, column)

    def drop_black(self, column: int) -> int:
        """Drop a black chip into ``column``."""
        return self.drop(Chip.BLACK, column)

    def is_full(self) -> bool:
        """True if every column's top cell is occupied."""
        return bool(np.all(self._grid[:, ROWS - 1] != EMPTY))

    def check_four_connected(self) -> bool:
        """
        Check whether four chips are connected anywhere on the board.

        This is a pure query; the winner and placement are recorded only
        when a move is made.
        """
        return find_four_connected(self._grid) is not None

    def get_winner(self) -> Optional[Chip]:
        """The winning color, or None before the end or after a stalemate."""
        return self._winner

    def is_game_over(self) -> bool:
        return self._game_over

    def get_winning_placement(self) -> Placement:
        """
        Get the line of four that won the game.

        Raises:
            GameNotOverError: The game is still in progress
            StalemateError: The game ended without a winner
        """
        if not self._game_over:
            raise GameNotOverError("The game is still in progress")

        if self._winner is None:
            raise StalemateError("The game ended in a stalemate")

        return self._winning_placement

    def get_cell(self, column: int, row: int) -> Optional[Chip]:
        """
        Get the chip at a position.

        Returns:
            The chip in the cell, or None if it is empty

        Raises:
            InvalidColumnError: ``column`` is not on the board
            IndexError: ``row`` is not on the board
        """
        if not is_valid_column(column):
            raise InvalidColumnError(f"Column {column} outside valid range 0-{COLUMNS - 1}")
        if not 0 <= row < ROWS:
            raise IndexError(f"Row {row} outside valid range 0-{ROWS - 1}")

        return chip_at(self._grid, column, row)

    def get_column_height(self, column: int) -> int:
        """Number of chips in ``column``."""
        if not is_valid_column(column):
            raise InvalidColumnError(f"Column {column} outside valid range 0-{COLUMNS - 1}")

        return get_column_height(self._grid, column)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still take a chip.

        Returns:
            List of column indices; empty once the game is over
        """
        if self._game_over:
            return []

        return [col for col in range(COLUMNS) if self._grid[col, ROWS - 1] == EMPTY]

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            int8 array of shape (COLUMNS, ROWS) indexed [column, row], holding
            0 for empty cells and the Chip value otherwise
        """
        return self._grid.copy()
