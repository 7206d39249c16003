"""
Minefield package initialization
Rules engine for a grid-based mine-discovery puzzle
"""

from .config import BoardConfig
from .errors import HiddenCellError, InvalidCellError, InvalidConfigurationError, MinefieldError
from .grid import Coord, Grid
from .generator import MINE, generate
from .engine import (
    GameState, Outcome, content_of, game_from_mines, is_flagged, is_revealed,
    new_game, outcome, reveal, toggle_flag,
)
from .board import GameBoard
from .api import Action, MinesweeperAPI

__all__ = [
    'BoardConfig', 'Coord', 'Grid', 'MINE', 'generate',
    'GameState', 'Outcome', 'new_game', 'game_from_mines', 'reveal', 'toggle_flag',
    'outcome', 'is_revealed', 'is_flagged', 'content_of',
    'GameBoard', 'Action', 'MinesweeperAPI',
    'MinefieldError', 'InvalidConfigurationError', 'InvalidCellError', 'HiddenCellError',
]
