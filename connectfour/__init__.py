"""
connectfour - Rules engine for Connect Four

This package provides the Connect Four board state machine: move legality,
gravity placement, win and stalemate detection, and the winning line.
"""

from connectfour.exceptions import (ConnectFourError, GameOverError, OutOfTurnError,
                                    InvalidColumnError, FullColumnError,
                                    GameNotOverError, StalemateError)
from connectfour.game import Board, Cell, Placement
from connectfour.utils import COLUMNS, ROWS, CONNECT_N, Chip, Direction

# Version number
__version__ = '0.1.0'

__all__ = [
    'Board', 'Cell', 'Placement', 'Chip', 'Direction',
    'COLUMNS', 'ROWS', 'CONNECT_N',
    'ConnectFourError', 'GameOverError', 'OutOfTurnError', 'InvalidColumnError',
    'FullColumnError', 'GameNotOverError', 'StalemateError',
]
