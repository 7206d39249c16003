"""
Minefield - Board Generation
Places mines and derives the hint number of every cell
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from .config import BoardConfig
from .grid import Grid

logger = logging.getLogger(__name__)

# Content value of a cell holding a mine; every other cell holds its hint 0-8
MINE = -1


def sample_mines(cell_count: int, mines: int, rng) -> List[int]:
    """
    Choose mine cells uniformly without replacement

    Each draw picks a random index into the remaining candidates and removes
    it, so exactly `mines` draws are made and no id is chosen twice.

    Args:
        cell_count: Number of cells on the board
        mines: Number of mines to place (must not exceed cell_count)
        rng: Random source providing randrange()

    Returns:
        List of distinct mine cell ids, in draw order
    """
    candidates = list(range(cell_count))
    mine_ids = []
    for _ in range(mines):
        index = rng.randrange(len(candidates))
        mine_ids.append(candidates.pop(index))
    return mine_ids


def compute_contents(grid: Grid, mine_ids: Iterable[int]) -> Tuple[int, ...]:
    """Build the content of every cell: MINE, or the count of neighboring mines"""
    mine_set = set(mine_ids)
    contents = []
    for cell_id in grid.cell_ids():
        if cell_id in mine_set:
            contents.append(MINE)
        else:
            contents.append(sum(1 for n in grid.neighbor_ids(cell_id) if n in mine_set))
    return tuple(contents)


def generate(config: BoardConfig, rng: Optional[random.Random] = None) -> Tuple[int, ...]:
    """
    Generate the hidden layout for a new game

    Args:
        config: Board configuration, validated before anything is sampled
        rng: Random source; a fresh random.Random() when omitted

    Returns:
        Content tuple indexed by cell id
    """
    config.validate()
    if rng is None:
        rng = random.Random()

    grid = Grid(config.rows, config.columns)
    mine_ids = sample_mines(grid.cell_count, config.mines, rng)
    logger.debug("Generated %dx%d board with %d mines",
                 config.rows, config.columns, config.mines)
    return compute_contents(grid, mine_ids)
