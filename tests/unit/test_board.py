"""
Unit tests: Board move legality, placement and queries
"""

import numpy as np
import pytest

from connectfour import (Chip, COLUMNS, ROWS, GameOverError, OutOfTurnError,
                         InvalidColumnError, FullColumnError, GameNotOverError)


class TestInitialState:

    def test_fresh_board(self, empty_board):
        assert not empty_board.is_game_over()
        assert not empty_board.is_full()
        assert empty_board.get_winner() is None
        assert empty_board.last_played is None
        assert not empty_board.check_four_connected()
        assert empty_board.get_valid_moves() == list(range(COLUMNS))

    def test_state_shape(self, empty_board):
        state = empty_board.get_state()
        assert state.shape == (COLUMNS, ROWS)
        assert not state.any()

    def test_winning_placement_before_game_over(self, empty_board):
        with pytest.raises(GameNotOverError):
            empty_board.get_winning_placement()

    @pytest.mark.parametrize("chip", list(Chip))
    def test_either_color_may_open(self, empty_board, chip):
        assert empty_board.drop(chip, 3) == 0
        assert empty_board.last_played is chip


class TestGravity:

    @pytest.mark.parametrize("column", range(COLUMNS))
    def test_column_fills_bottom_up(self, empty_board, column):
        chip = Chip.RED
        for row in range(ROWS):
            assert empty_board.drop(chip, column) == row
            assert empty_board.get_cell(column, row) is chip
            assert empty_board.get_column_height(column) == row + 1
            chip = chip.other()

        with pytest.raises(FullColumnError):
            empty_board.drop(chip, column)

        assert not empty_board.is_game_over()
        assert column not in empty_board.get_valid_moves()

    def test_cells_above_stay_empty(self, empty_board):
        empty_board.drop_red(2)
        for row in range(1, ROWS):
            assert empty_board.get_cell(2, row) is None

    def test_drop_red_and_black(self, empty_board):
        empty_board.drop_red(0)
        empty_board.drop_black(0)
        assert empty_board.get_cell(0, 0) is Chip.RED
        assert empty_board.get_cell(0, 1) is Chip.BLACK


class TestRejectedMoves:

    def test_same_color_twice(self, empty_board):
        empty_board.drop_red(0)
        before = empty_board.get_state()

        with pytest.raises(OutOfTurnError):
            empty_board.drop_red(1)

        assert np.array_equal(empty_board.get_state(), before)
        assert empty_board.last_played is Chip.RED

    def test_out_of_turn_mid_game(self, empty_board, play):
        play(empty_board, [0, 1, 2, 3, 4])
        before = empty_board.get_state()

        with pytest.raises(OutOfTurnError):
            empty_board.drop_red(5)

        assert np.array_equal(empty_board.get_state(), before)

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_invalid_column(self, empty_board, column):
        with pytest.raises(InvalidColumnError):
            empty_board.drop_red(column)

        assert empty_board.last_played is None
        assert not empty_board.get_state().any()

    def test_out_of_turn_checked_before_column(self, empty_board):
        empty_board.drop_black(0)
        with pytest.raises(OutOfTurnError):
            empty_board.drop_black(7)

    def test_invalid_column_checked_before_full(self, empty_board, play):
        play(empty_board, [0] * ROWS)
        with pytest.raises(InvalidColumnError):
            empty_board.drop_red(-1)

    def test_full_column_keeps_turn(self, empty_board, play):
        play(empty_board, [0] * ROWS)
        with pytest.raises(FullColumnError):
            empty_board.drop_red(0)

        # The rejected move does not use up Red's turn
        empty_board.drop_red(1)
        assert empty_board.get_cell(1, 0) is Chip.RED

    def test_not_a_chip(self, empty_board):
        with pytest.raises(TypeError):
            empty_board.drop("red", 0)


class TestGameOver:

    def test_drop_after_win(self, empty_board, play):
        play(empty_board, [0, 1, 0, 1, 0, 1, 0])
        assert empty_board.is_game_over()

        with pytest.raises(GameOverError):
            empty_board.drop_black(2)

    def test_game_over_checked_first(self, empty_board, play):
        play(empty_board, [0, 1, 0, 1, 0, 1, 0])

        # Same color and a bad column would both fail too
        with pytest.raises(GameOverError):
            empty_board.drop_red(7)

    def test_no_valid_moves_after_win(self, empty_board, play):
        play(empty_board, [0, 1, 0, 1, 0, 1, 0])
        assert empty_board.get_valid_moves() == []


class TestQueries:

    def test_get_cell_bounds(self, empty_board):
        with pytest.raises(InvalidColumnError):
            empty_board.get_cell(7, 0)
        with pytest.raises(IndexError):
            empty_board.get_cell(0, ROWS)

    def test_get_column_height_bounds(self, empty_board):
        with pytest.raises(InvalidColumnError):
            empty_board.get_column_height(-1)

    def test_state_is_a_copy(self, empty_board):
        empty_board.drop_red(0)
        state = empty_board.get_state()
        state[0, 0] = Chip.BLACK.value
        assert empty_board.get_cell(0, 0) is Chip.RED

    def test_check_four_connected_is_pure(self, empty_board, play):
        play(empty_board, [0, 1, 0, 1, 0, 1, 0])
        placement = empty_board.get_winning_placement()

        assert empty_board.check_four_connected()
        assert empty_board.check_four_connected()
        assert empty_board.get_winning_placement() == placement
        assert empty_board.get_winner() is Chip.RED
