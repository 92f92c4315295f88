"""
connectfour.game - Board and rules for Connect Four

This package contains the board state machine, the win-detection rules and
the value types describing a winning line.
"""

from connectfour.game.board import Board
from connectfour.game.placement import Cell, Placement
from connectfour.game.rules import find_four_connected, has_match

__all__ = ['Board', 'Cell', 'Placement', 'find_four_connected', 'has_match']
