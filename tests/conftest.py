"""
Shared pytest fixtures for the Connect Four rules engine
"""

import pytest

from connectfour import Board, Chip
from connectfour.debug import debug


# Fills all 42 cells, alternating colors from Red, without four connected
# anywhere: each cell ends up Red iff ((row + 1) // 2 + column) is even.
STALEMATE_COLUMNS = [
    0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0,
    2, 3, 3, 2, 3, 2, 2, 3, 2, 3, 3, 2,
    4, 5, 6, 4, 5, 6, 5, 4, 4, 6, 6, 5, 4, 5, 6, 4, 5, 6,
]


def play_columns(board, columns, first=Chip.RED):
    """Drop alternating chips into ``columns``, starting with ``first``."""
    chip = first
    for column in columns:
        board.drop(chip, column)
        chip = chip.other()
    return board


@pytest.fixture
def empty_board():
    """A freshly created board"""
    return Board()


@pytest.fixture
def play():
    """Helper that plays a list of columns with alternating colors"""
    return play_columns


@pytest.fixture
def stalemate_columns():
    """Column order that fills the board without a winner"""
    return list(STALEMATE_COLUMNS)


@pytest.fixture
def stalemate_board():
    """A board filled without any four connected"""
    return play_columns(Board(), STALEMATE_COLUMNS)


@pytest.fixture
def restore_debug():
    """Put the logging manager back the way the test found it"""
    level = debug.level
    yield debug
    debug.configure(level=level, enabled=True, components=[], log_file="")
