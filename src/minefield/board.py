"""
Minefield - Game Session
Owns the state of one game and applies player actions to it
"""

import random
from typing import Optional

from . import engine
from .engine import GameState, Outcome
from .errors import InvalidCellError
from .grid import Coord


class GameBoard:
    """Manages one minefield game for a presentation layer"""

    def __init__(self, rows: int, cols: int, mines: int,
                 rng: Optional[random.Random] = None):
        self.rng = rng
        self._start(engine.new_game(rows, cols, mines, rng))

    @classmethod
    def from_state(cls, state: GameState) -> "GameBoard":
        """Wrap an existing state, e.g. one built with engine.game_from_mines"""
        board = cls.__new__(cls)
        board.rng = None
        board._start(state)
        return board

    def _start(self, state: GameState):
        self._state = state
        self.clicked_mine: Optional[int] = None  # Mine that ended the game, for red display

    @property
    def state(self) -> GameState:
        """Current immutable game state"""
        return self._state

    @property
    def rows(self) -> int:
        return self._state.config.rows

    @property
    def cols(self) -> int:
        return self._state.config.columns

    @property
    def total_mines(self) -> int:
        return self._state.config.mines

    @property
    def game_state(self) -> Outcome:
        return engine.outcome(self._state)

    @property
    def cells_revealed(self) -> int:
        return len(self._state.revealed)

    @property
    def flags_used(self) -> int:
        return engine.flags_used(self._state)

    def cell_id(self, row: int, col: int) -> int:
        """Convert a position to a cell id, rejecting positions off the board"""
        grid = self._state.grid
        is_int = all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col))
        if not is_int or not grid.in_bounds(row, col):
            raise InvalidCellError((row, col), grid.cell_count)
        return grid.coord_to_id(Coord(row, col))

    def reveal(self, cell_id: int) -> bool:
        """
        Reveal a cell and handle game logic
        Returns True if game should continue, False if game over
        """
        before = self._state
        self._state = engine.reveal(before, cell_id)
        if (self._state is not before and self.clicked_mine is None
                and self.game_state is Outcome.LOST):
            self.clicked_mine = cell_id
        return self.game_state is Outcome.ONGOING

    def reveal_cell(self, row: int, col: int) -> bool:
        return self.reveal(self.cell_id(row, col))

    def toggle_flag(self, cell_id: int):
        """Toggle flag on a cell"""
        self._state = engine.toggle_flag(self._state, cell_id)

    def toggle_flag_cell(self, row: int, col: int):
        self.toggle_flag(self.cell_id(row, col))

    def is_revealed(self, cell_id: int) -> bool:
        return engine.is_revealed(self._state, cell_id)

    def is_flagged(self, cell_id: int) -> bool:
        return engine.is_flagged(self._state, cell_id)

    def content_of(self, cell_id: int) -> int:
        return engine.content_of(self._state, cell_id)

    def get_remaining_mines(self) -> int:
        """Get the number of remaining mines (total mines - flags used)"""
        return engine.remaining_mines(self._state)

    def reset_game(self):
        """Reset the game with a freshly generated layout of the same size"""
        config = self._state.config
        self._start(engine.new_game(config.rows, config.columns, config.mines, self.rng))
