"""
Minefield - Error Types
Exceptions raised by the rules engine for invalid input
"""


class MinefieldError(Exception):
    """Base class for all engine errors"""


class InvalidConfigurationError(MinefieldError, ValueError):
    """Board dimensions or mine count cannot form a playable board"""


class InvalidCellError(MinefieldError, IndexError):
    """A cell id is not an integer inside the board"""

    def __init__(self, cell_id, cell_count: int):
        super().__init__(f"Invalid cell {cell_id!r} for a board of {cell_count} cells")
        self.cell_id = cell_id
        self.cell_count = cell_count


class HiddenCellError(MinefieldError, LookupError):
    """Content of an unrevealed cell was requested"""

    def __init__(self, cell_id: int):
        super().__init__(f"Cell {cell_id} has not been revealed")
        self.cell_id = cell_id
