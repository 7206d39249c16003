"""
Minefield - Read-only Views
Projections of a game state that never expose unrevealed contents
"""

import json
from typing import Any, Dict, List

import numpy as np

from . import engine
from .engine import GameState, Outcome
from .generator import MINE

# Visible codes: hint numbers 0-8 are shown as themselves
HIDDEN = -3
FLAG = -2


def visible_code(state: GameState, cell_id: int) -> int:
    """What the player sees at a cell (-3=hidden, -2=flag, -1=mine, 0-8=numbers)"""
    if cell_id in state.revealed:
        return state.contents[cell_id]
    if cell_id in state.flagged:
        return FLAG
    return HIDDEN


def visible_board(state: GameState) -> List[List[int]]:
    """Visible codes laid out as rows of cells"""
    columns = state.config.columns
    codes = [visible_code(state, cell_id) for cell_id in state.grid.cell_ids()]
    return [codes[start:start + columns] for start in range(0, len(codes), columns)]


def board_array(state: GameState) -> np.ndarray:
    """
    Get the board as a numpy array

    Returns:
        3D numpy array: [rows, cols, channels]
        Channels:
        0: Visible state (-3=hidden, -2=flag, -1=mine, 0-8=numbers)
        1: Is revealed (0 or 1)
        2: Is flagged (0 or 1)
    """
    shape = (state.config.rows, state.config.columns)
    visible = np.array(visible_board(state), dtype=np.float32)

    revealed_channel = np.zeros(state.config.cell_count, dtype=np.float32)
    flagged_channel = np.zeros(state.config.cell_count, dtype=np.float32)
    revealed_channel[list(state.revealed)] = 1.0
    flagged_channel[list(state.flagged)] = 1.0

    return np.stack([visible, revealed_channel.reshape(shape), flagged_channel.reshape(shape)], axis=-1)


def render_ascii(state: GameState) -> str:
    """Render the visible board as text, one line per row"""
    symbols = {HIDDEN: '#', FLAG: 'F', MINE: '*', 0: '.'}
    return '\n'.join(
        ' '.join(symbols.get(code, str(code)) for code in row)
        for row in visible_board(state)
    )


def snapshot(state: GameState) -> Dict[str, Any]:
    """Summary of the visible game state"""
    result = engine.outcome(state)
    return {
        'board_size': (state.config.rows, state.config.columns),
        'total_mines': state.config.mines,
        'game_state': result.value,
        'cells_revealed': len(state.revealed),
        'flags_used': engine.flags_used(state),
        'remaining_mines': engine.remaining_mines(state),
        'visible_board': visible_board(state),
        'is_game_over': result is not Outcome.ONGOING,
        'is_won': result is Outcome.WON,
        'is_lost': result is Outcome.LOST,
    }


def export_game_state(state: GameState) -> str:
    """Export the visible game state as a JSON string"""
    return json.dumps(snapshot(state), indent=2)
