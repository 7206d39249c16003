"""
Minefield Game API
Coordinate-based interface for agents and scripts driving a game
"""

import random
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from . import view
from .board import GameBoard
from .engine import Outcome
from .errors import MinefieldError


class Action(Enum):
    """Available actions for the agent"""
    REVEAL = "reveal"
    FLAG = "flag"
    UNFLAG = "unflag"


class MinesweeperAPI:
    """
    API for agents to interact with a minefield game
    Handles cell coordinates and reports errors in the result instead of raising
    """

    def __init__(self, rows: int, cols: int, mines: int,
                 rng: Optional[random.Random] = None):
        """
        Initialize the game API

        Args:
            rows: Number of rows in the game board
            cols: Number of columns in the game board
            mines: Number of mines to place
            rng: Random source for mine placement

        Raises:
            InvalidConfigurationError: if the board cannot be generated
        """
        self.rows = rows
        self.cols = cols
        self.mines = mines
        self.game_board = GameBoard(rows, cols, mines, rng)
        self.action_history: List[Dict[str, Any]] = []

    def reset_game(self) -> Dict[str, Any]:
        """
        Reset the game to initial state

        Returns:
            Initial game state
        """
        self.game_board.reset_game()
        self.action_history.clear()
        return self.get_game_state()

    def take_action(self, row: int, col: int, action: Action) -> Dict[str, Any]:
        """
        Take an action at the specified coordinates

        Args:
            row: Row coordinate (0-indexed)
            col: Column coordinate (0-indexed)
            action: Action to take (REVEAL, FLAG, UNFLAG)

        Returns:
            Updated game state with action result
        """
        action_record = {
            'row': row,
            'col': col,
            'action': action.value,
            'game_state_before': self.game_board.game_state.value
        }

        success = False
        error = None

        try:
            cell_id = self.game_board.cell_id(row, col)
            if action == Action.REVEAL:
                success = self._reveal_cell(cell_id)
            elif action == Action.FLAG:
                success = self._flag_cell(cell_id, flagged=False)
            elif action == Action.UNFLAG:
                success = self._flag_cell(cell_id, flagged=True)
        except MinefieldError as e:
            error = str(e)

        action_record.update({
            'success': success,
            'error': error,
            'game_state_after': self.game_board.game_state.value
        })
        self.action_history.append(action_record)

        result = {
            'success': success,
            'action': action.value,
            'coordinates': (row, col),
            'state': self.get_game_state()
        }
        if error:
            result['error'] = error
        return result

    def get_game_state(self) -> Dict[str, Any]:
        """Get the current visible game state"""
        state = view.snapshot(self.game_board.state)
        state['action_count'] = len(self.action_history)
        return state

    def get_board_array(self) -> np.ndarray:
        """Get the board as a numpy array, see view.board_array"""
        return view.board_array(self.game_board.state)

    def get_valid_actions(self) -> List[Tuple[int, int, Action]]:
        """
        Get all valid actions in the current state

        Returns:
            List of (row, col, action) tuples
        """
        if self.game_board.game_state is not Outcome.ONGOING:
            return []

        state = self.game_board.state
        grid = state.grid
        valid_actions = []
        for cell_id in grid.cell_ids():
            row, col = grid.id_to_coord(cell_id)
            if cell_id in state.flagged:
                valid_actions.append((row, col, Action.UNFLAG))
            elif cell_id not in state.revealed:
                valid_actions.append((row, col, Action.REVEAL))
                valid_actions.append((row, col, Action.FLAG))
        return valid_actions

    def get_action_history(self) -> List[Dict[str, Any]]:
        return self.action_history.copy()

    def _reveal_cell(self, cell_id: int) -> bool:
        """Reveal a hidden cell; flagged and revealed cells are refused"""
        if self.game_board.game_state is not Outcome.ONGOING:
            return False
        if self.game_board.is_revealed(cell_id) or self.game_board.is_flagged(cell_id):
            return False
        self.game_board.reveal(cell_id)
        return True

    def _flag_cell(self, cell_id: int, flagged: bool) -> bool:
        """Toggle the flag only if the cell's current flag matches `flagged`"""
        if self.game_board.game_state is not Outcome.ONGOING:
            return False
        if self.game_board.is_revealed(cell_id) or self.game_board.is_flagged(cell_id) != flagged:
            return False
        self.game_board.toggle_flag(cell_id)
        return True
