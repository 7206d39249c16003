"""
Minefield - Board Configuration
Immutable parameters describing one game instance
"""

from dataclasses import dataclass

from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions and mine count of a board (rows, columns, mines)"""
    rows: int
    columns: int
    mines: int

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win"""
        return self.cell_count - self.mines

    def validate(self) -> "BoardConfig":
        """
        Check the configuration can be generated

        Returns:
            The configuration itself, so calls can be chained

        Raises:
            InvalidConfigurationError: non-integer or non-positive dimensions,
                negative mine count, or no cell left free of mines
        """
        for name in ('rows', 'columns', 'mines'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")

        if self.rows <= 0 or self.columns <= 0:
            raise InvalidConfigurationError(
                f"Board dimensions must be positive, got {self.rows}x{self.columns}")
        if self.mines < 0:
            raise InvalidConfigurationError(f"Mine count cannot be negative, got {self.mines}")
        if self.mines >= self.cell_count:
            raise InvalidConfigurationError(
                f"Cannot place {self.mines} mines on {self.cell_count} cells: "
                f"at least one cell must be free")
        return self
