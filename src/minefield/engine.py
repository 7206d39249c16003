"""
Minefield - Rules Engine
Immutable game state and the reveal / flag transitions applied to it
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Set, Tuple

from .config import BoardConfig
from .errors import HiddenCellError, InvalidConfigurationError
from .generator import MINE, compute_contents, generate
from .grid import Grid

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Enumeration for game outcomes"""
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one game

    contents is fixed at generation time. revealed only grows until the game
    ends; flagged is changed by toggle_flag and cleared for cells as they are
    revealed.
    """
    config: BoardConfig
    contents: Tuple[int, ...]
    revealed: FrozenSet[int] = field(default_factory=frozenset)
    flagged: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def grid(self) -> Grid:
        return Grid(self.config.rows, self.config.columns)

    def mine_ids(self) -> FrozenSet[int]:
        return frozenset(i for i, content in enumerate(self.contents) if content == MINE)


def new_game(rows: int, columns: int, mines: int,
             rng: Optional[random.Random] = None) -> GameState:
    """
    Start a game with a randomly generated layout

    Raises:
        InvalidConfigurationError: if the parameters cannot form a board
    """
    config = BoardConfig(rows, columns, mines).validate()
    return GameState(config, generate(config, rng))


def game_from_mines(rows: int, columns: int, mine_ids: Iterable[int]) -> GameState:
    """Start a game with mines at the given cell ids"""
    mine_set = set(mine_ids)
    config = BoardConfig(rows, columns, len(mine_set)).validate()
    grid = Grid(rows, columns)
    for cell_id in mine_set:
        if not grid.contains(cell_id):
            raise InvalidConfigurationError(f"Mine id {cell_id!r} is not on a {rows}x{columns} board")
    return GameState(config, compute_contents(grid, mine_set))


def flood_fill(grid: Grid, contents: Tuple[int, ...], seed: int) -> Set[int]:
    """
    Collect the connected zero-hint region around seed plus its numbered border

    Uses an explicit stack so large open boards do not hit the recursion
    limit. A cell enters the result at most once; numbered cells are included
    but not expanded.
    """
    to_fill = set()
    stack = [seed]
    while stack:
        cell_id = stack.pop()
        if cell_id in to_fill:
            continue
        to_fill.add(cell_id)
        if contents[cell_id] != 0:
            continue
        stack.extend(n for n in grid.neighbor_ids(cell_id) if n not in to_fill)
    return to_fill


def outcome(state: GameState) -> Outcome:
    """Derive the outcome from the revealed cells"""
    if any(state.contents[cell_id] == MINE for cell_id in state.revealed):
        return Outcome.LOST
    if len(state.revealed) == state.config.safe_cells:
        return Outcome.WON
    return Outcome.ONGOING


def is_over(state: GameState) -> bool:
    return outcome(state) is not Outcome.ONGOING


def reveal(state: GameState, cell_id: int) -> GameState:
    """
    Reveal a cell and return the resulting state

    A mine exposes the whole board. A zero-hint cell flood fills its region.
    A numbered cell is revealed alone. Revealing a cell that is already
    revealed or flagged, or revealing after the game is over, returns the
    state unchanged. Flags are only cleared, on cells that become revealed.

    Raises:
        InvalidCellError: if cell_id is not on the board
    """
    grid = state.grid
    grid.validate_cell(cell_id)

    if is_over(state) or cell_id in state.revealed or cell_id in state.flagged:
        return state

    content = state.contents[cell_id]
    if content == MINE:
        logger.debug("Mine hit at cell %d, exposing board", cell_id)
        # Flags stay so the final board can show which were right
        return replace(state, revealed=frozenset(grid.cell_ids()))

    if content == 0:
        newly_revealed = flood_fill(grid, state.contents, cell_id)
    else:
        newly_revealed = {cell_id}

    revealed = state.revealed | newly_revealed
    flagged = state.flagged - revealed
    next_state = replace(state, revealed=revealed, flagged=flagged)
    if outcome(next_state) is Outcome.WON:
        logger.debug("Board cleared with %d cells revealed", len(revealed))
    return next_state


def toggle_flag(state: GameState, cell_id: int) -> GameState:
    """
    Flag an unrevealed cell, or remove its flag

    Revealed cells cannot be flagged and nothing changes once the game is
    over; in both cases the state is returned unchanged.

    Raises:
        InvalidCellError: if cell_id is not on the board
    """
    state.grid.validate_cell(cell_id)
    if is_over(state) or cell_id in state.revealed:
        return state
    return replace(state, flagged=state.flagged ^ {cell_id})


def is_revealed(state: GameState, cell_id: int) -> bool:
    state.grid.validate_cell(cell_id)
    return cell_id in state.revealed


def is_flagged(state: GameState, cell_id: int) -> bool:
    state.grid.validate_cell(cell_id)
    return cell_id in state.flagged


def content_of(state: GameState, cell_id: int) -> int:
    """
    Get the content of a revealed cell (MINE or a hint number)

    Raises:
        InvalidCellError: if cell_id is not on the board
        HiddenCellError: if the cell is not revealed yet
    """
    state.grid.validate_cell(cell_id)
    if cell_id not in state.revealed:
        raise HiddenCellError(cell_id)
    return state.contents[cell_id]


def flags_used(state: GameState) -> int:
    return len(state.flagged)


def remaining_mines(state: GameState) -> int:
    """Get the number of remaining mines (total mines - flags used)"""
    return max(0, state.config.mines - len(state.flagged))


def safe_cells_left(state: GameState) -> int:
    """Number of non-mine cells still hidden"""
    revealed_safe = sum(1 for cell_id in state.revealed if state.contents[cell_id] != MINE)
    return state.config.safe_cells - revealed_safe
