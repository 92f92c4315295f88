"""
exceptions.py - Errors raised by the Connect Four rules engine

Every failure is a deterministic consequence of the board state and the
arguments of the call that raised it.
"""


class ConnectFourError(Exception):
    """Base class for all rules-engine errors."""


class GameOverError(ConnectFourError):
    """A chip was dropped after the game ended."""


class OutOfTurnError(ConnectFourError):
    """The same color tried to play twice in a row."""


class InvalidColumnError(ConnectFourError):
    """A column index outside the board was given."""


class FullColumnError(ConnectFourError):
    """A chip was dropped into a column with no room left."""


class GameNotOverError(ConnectFourError):
    """The winning placement was requested before the game ended."""


class StalemateError(ConnectFourError):
    """The winning placement was requested for a drawn game."""
