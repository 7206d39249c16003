"""
Minefield - Grid Indexing
Maps linear cell ids to (row, column) coordinates and back
"""

from typing import List, NamedTuple

from .errors import InvalidCellError


# Row-major order so neighbor lists are deterministic
NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


class Coord(NamedTuple):
    row: int
    column: int


class Grid:
    """Rectangular grid of rows x columns cells, ids assigned row by row"""

    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def cell_ids(self) -> range:
        return range(self.cell_count)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def contains(self, cell_id) -> bool:
        """Check if cell_id is an integer id on this grid"""
        if isinstance(cell_id, bool) or not isinstance(cell_id, int):
            return False
        return 0 <= cell_id < self.cell_count

    def validate_cell(self, cell_id) -> int:
        """Return cell_id unchanged, or raise InvalidCellError"""
        if not self.contains(cell_id):
            raise InvalidCellError(cell_id, self.cell_count)
        return cell_id

    def coord_to_id(self, coord: Coord) -> int:
        return coord.row * self.columns + coord.column

    def id_to_coord(self, cell_id: int) -> Coord:
        row, column = divmod(cell_id, self.columns)
        return Coord(row, column)

    def neighbor_ids(self, cell_id: int) -> List[int]:
        """
        Get the ids of all in-bounds neighbors of a cell

        Corner cells have 3 neighbors, edge cells 5 and interior cells 8.
        """
        row, column = self.id_to_coord(cell_id)
        neighbors = []
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, column + dc
            if self.in_bounds(nr, nc):
                neighbors.append(self.coord_to_id(Coord(nr, nc)))
        return neighbors

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.columns) == (other.rows, other.columns)

    def __hash__(self):
        return hash((self.rows, self.columns))

    def __repr__(self):
        return f"Grid({self.rows}, {self.columns})"
