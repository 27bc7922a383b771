"""Square tiles of Game of Life cells.

A tile is one square of the infinite strip. The strip is built from a single
row of tiles laid along x, so each tile wraps vertically onto itself and only
needs its left and right neighbours to form a complete Moore neighbourhood
for every cell it holds.
"""

import numpy as np
from typing import Iterable, Optional, Protocol, Tuple
import logging

from .life_rules import apply_rule, window_totals

logger = logging.getLogger(__name__)


class TileSource(Protocol):
    """Anything that can describe a square pattern cell by cell."""

    @property
    def size(self) -> int:
        ...

    def get(self, x: int, y: int) -> bool:
        ...


class Tile:
    """Square boolean grid of side `size`.

    Cells are stored as a numpy array indexed ``cells[y, x]``. Two tiles are
    equal when every cell matches. Tiles handed to a board are treated as
    values: every transition produces a new tile.

    Attributes:
        size: Side length in cells
        cells: 2D numpy boolean array of shape (size, size)
    """

    __hash__ = None

    def __init__(self, size: int, cells: Optional[np.ndarray] = None):
        """Initialize tile, all dead unless `cells` is given.

        Args:
            size: Side length (cells)
            cells: Optional initial (size, size) boolean array, copied

        Raises:
            ValueError: If size is not positive or cells don't match it
        """
        if size < 1:
            raise ValueError(f"Tile size must be positive, got {size}")

        self.size = size

        if cells is not None:
            if cells.shape != (size, size):
                raise ValueError(f"Cell array shape {cells.shape} doesn't match tile size {size}")
            if cells.dtype != bool:
                raise ValueError("Cell array must be boolean")
            self.cells = cells.copy()
        else:
            self.cells = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> 'Tile':
        """Create tile from a square array indexed [y, x]."""
        cells = np.asarray(cells)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Tile array must be square, got shape {cells.shape}")
        if cells.dtype != bool:
            cells = cells.astype(bool)
        return cls(cells.shape[0], cells)

    @classmethod
    def from_cells(cls, size: int, live: Iterable[Tuple[int, int]]) -> 'Tile':
        """Create tile of given size with the listed (x, y) cells alive."""
        tile = cls(size)
        for x, y in live:
            tile.set(x, y, True)
        return tile

    @classmethod
    def copy_from(cls, source: TileSource) -> 'Tile':
        """Copy any `TileSource` into a new tile."""
        size = source.size
        tile = cls(size)
        for y in range(size):
            for x in range(size):
                tile.set(x, y, source.get(x, y))
        return tile

    def copy(self) -> 'Tile':
        """Create a deep copy of the tile."""
        return Tile(self.size, self.cells)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.size}x{self.size} tile")

    def get(self, x: int, y: int) -> bool:
        """Get cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return bool(self.cells[y, x])

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self.cells[y, x] = alive

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.cells)

    def mirror(self) -> 'Tile':
        """Return a new tile reflected along the vertical axis (x -> size-1-x)."""
        return Tile(self.size, self.cells[:, ::-1])

    def next_generation(self, previous: 'Tile', next: 'Tile') -> 'Tile':
        """Compute the next generation of this tile.

        Neighbour lookups left of column 0 read `previous`, lookups right of
        the last column read `next`. Rows always wrap within the tile, for
        whichever of the three tiles is being read.

        Args:
            previous: Tile immediately to the left
            next: Tile immediately to the right

        Returns:
            New tile holding the next generation

        Raises:
            ValueError: If neighbour sizes differ from this tile
        """
        if previous.size != self.size or next.size != self.size:
            raise ValueError(
                f"Neighbour sizes ({previous.size}, {next.size}) don't match tile size {self.size}"
            )

        # Columns: last of previous, all of self, first of next
        row_band = np.concatenate(
            (previous.cells[:, -1:], self.cells, next.cells[:, :1]), axis=1
        )
        # Rows wrap toroidally
        extended = np.concatenate((row_band[-1:], row_band, row_band[:1]), axis=0)

        new_cells = apply_rule(self.cells, window_totals(extended))
        return Tile(self.size, new_cells)

    def render_line(self, y: int, alive_char: str = 'X', dead_char: str = '.') -> str:
        """Render one row of the tile as text."""
        return ''.join(alive_char if cell else dead_char for cell in self.cells[y])

    def __eq__(self, other: object) -> bool:
        """Check equality with another tile."""
        if not isinstance(other, Tile):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return '\n'.join(self.render_line(y) for y in range(self.size))

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Tile({self.size}x{self.size}, alive={self.count_alive()})"
