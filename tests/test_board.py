"""
Unit tests for the GameBoard class
Tests the session wrapper around the rules engine
"""

import random

import pytest
from minefield.board import GameBoard
from minefield.engine import Outcome, game_from_mines
from minefield.errors import HiddenCellError, InvalidCellError, InvalidConfigurationError
from minefield.generator import MINE


class TestGameBoardInitialization:
    """Test cases for GameBoard initialization"""

    def test_custom_initialization(self):
        """Test board initializes with custom settings"""
        board = GameBoard(16, 30, 99, random.Random(0))

        assert board.rows == 16
        assert board.cols == 30
        assert board.total_mines == 99
        assert board.game_state == Outcome.ONGOING
        assert board.flags_used == 0
        assert board.cells_revealed == 0
        assert board.clicked_mine is None

    def test_mines_are_placed_at_construction(self):
        board = GameBoard(5, 7, 3, random.Random(1))
        assert board.state.contents.count(MINE) == 3

    @pytest.mark.parametrize("rows,cols,mines", [(0, 3, 1), (3, 3, 9), (3, 3, -1)])
    def test_invalid_settings(self, rows, cols, mines):
        with pytest.raises(InvalidConfigurationError):
            GameBoard(rows, cols, mines)


class TestGameLogic:
    """Test cases for core game logic"""

    @pytest.fixture
    def board(self):
        """Create a test board with known mine placement"""
        return GameBoard.from_state(game_from_mines(3, 3, [0]))

    def test_reveal_safe_cell(self, board):
        """Test revealing a numbered cell"""
        result = board.reveal_cell(1, 1)

        assert result is True
        assert board.cells_revealed == 1
        assert board.is_revealed(4)
        assert board.content_of(4) == 1
        assert board.game_state == Outcome.ONGOING

    def test_reveal_mine_cell(self, board):
        """Test revealing a mine cell ends the game"""
        result = board.reveal_cell(0, 0)

        assert result is False
        assert board.game_state == Outcome.LOST
        assert board.clicked_mine == 0
        assert board.cells_revealed == 9

    def test_reveal_zero_cell_wins(self, board):
        result = board.reveal_cell(2, 2)

        assert result is False
        assert board.game_state == Outcome.WON
        assert not board.is_flagged(0)
        assert board.get_remaining_mines() == 1
        assert board.clicked_mine is None

    def test_reveal_already_revealed_cell(self, board):
        """Test revealing an already revealed cell"""
        board.reveal_cell(1, 1)
        state = board.state

        assert board.reveal_cell(1, 1) is True
        assert board.state is state

    def test_reveal_flagged_cell(self, board):
        """Test that flagged cells cannot be revealed"""
        board.toggle_flag_cell(0, 0)

        assert board.reveal_cell(0, 0) is True
        assert board.cells_revealed == 0
        assert board.is_flagged(0)

    def test_reveal_after_game_over(self, board):
        board.reveal(0)
        state = board.state

        assert board.reveal(4) is False
        assert board.state is state

    def test_content_of_hidden_cell(self, board):
        with pytest.raises(HiddenCellError):
            board.content_of(0)

    @pytest.mark.parametrize("row,col", [
        (-1, 0), (0, -1), (3, 0), (0, 3), (5, 5),
        (None, 0), (0, None), ("1", 1), (1, "1"), (1.0, 1), (True, 0),
    ])
    def test_reveal_invalid_position(self, board, row, col):
        with pytest.raises(InvalidCellError):
            board.reveal_cell(row, col)


class TestFlagging:
    """Test cases for flag functionality"""

    @pytest.fixture
    def board(self):
        return GameBoard.from_state(game_from_mines(3, 3, [0, 8]))

    def test_flag_hidden_cell(self, board):
        """Test flagging a hidden cell"""
        board.toggle_flag_cell(1, 1)

        assert board.is_flagged(4)
        assert board.flags_used == 1
        assert board.get_remaining_mines() == 1

    def test_unflag_flagged_cell(self, board):
        """Test unflagging a flagged cell"""
        board.toggle_flag_cell(1, 1)
        board.toggle_flag_cell(1, 1)

        assert not board.is_flagged(4)
        assert board.flags_used == 0
        assert board.get_remaining_mines() == 2

    def test_flag_revealed_cell(self, board):
        """Test that revealed cells cannot be flagged"""
        board.reveal_cell(1, 1)
        board.toggle_flag_cell(1, 1)

        assert not board.is_flagged(4)
        assert board.flags_used == 0

    def test_flag_when_game_over(self, board):
        """Test that flagging is disabled when game is over"""
        board.reveal(8)
        board.toggle_flag(4)

        assert board.flags_used == 0

    def test_flag_out_of_bounds(self, board):
        with pytest.raises(InvalidCellError):
            board.toggle_flag(9)

    @pytest.mark.parametrize("row,col", [(None, 1), ("0", 0)])
    def test_flag_non_integer_position(self, board, row, col):
        with pytest.raises(InvalidCellError):
            board.toggle_flag_cell(row, col)
        assert board.flags_used == 0


class TestReset:
    """Test cases for resetting a game"""

    def test_reset_game(self):
        board = GameBoard(5, 5, 5, random.Random(9))
        board.toggle_flag(0)
        board.reveal(12)

        board.reset_game()

        assert board.cells_revealed == 0
        assert board.flags_used == 0
        assert board.clicked_mine is None
        assert board.game_state == Outcome.ONGOING
        assert board.state.contents.count(MINE) == 5

    def test_reset_from_state_keeps_size(self):
        board = GameBoard.from_state(game_from_mines(2, 4, [3]))
        board.reset_game()

        assert (board.rows, board.cols, board.total_mines) == (2, 4, 1)
