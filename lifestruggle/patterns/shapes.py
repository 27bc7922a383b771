"""Classic Life patterns as (x, y) cell offsets, and helpers to stamp them.

Offsets use x across and y down, the same as `Tile.get`/`Tile.set`.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.tile import Tile

# Lightweight spaceship travelling +x (period 4, c/2)
LWSS_CELLS: Tuple[Tuple[int, int], ...] = (
    (0, 0), (3, 0),
    (4, 1),
    (0, 2), (4, 2),
    (1, 3), (2, 3), (3, 3), (4, 3),
)

# Glider travelling -x +y (period 4, c/4)
GLIDER_CELLS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (0, 2), (1, 2), (2, 2),
)

# Horizontal blinker (period 2)
BLINKER_CELLS: Tuple[Tuple[int, int], ...] = ((0, 0), (1, 0), (2, 0))

# Block still life
BLOCK_CELLS: Tuple[Tuple[int, int], ...] = ((0, 0), (1, 0), (0, 1), (1, 1))


def stamp(tile: Tile, cells: Sequence[Tuple[int, int]], x: int = 0, y: int = 0) -> Tile:
    """Set `cells` alive in `tile`, offset by (x, y).

    Modifies `tile` in place and returns it.

    Raises:
        IndexError: If any stamped cell falls outside the tile
    """
    for dx, dy in cells:
        tile.set(x + dx, y + dy, True)
    return tile


def lwss_at(tile: Tile, x: int = 0, y: int = 0) -> Tile:
    """Stamp a lightweight spaceship heading +x with its top-left at (x, y)."""
    return stamp(tile, LWSS_CELLS, x, y)


def glider_at(tile: Tile, x: int = 0, y: int = 0) -> Tile:
    """Stamp a glider heading -x +y with its top-left at (x, y)."""
    return stamp(tile, GLIDER_CELLS, x, y)


def blinker_at(tile: Tile, x: int = 0, y: int = 0) -> Tile:
    return stamp(tile, BLINKER_CELLS, x, y)


def block_at(tile: Tile, x: int = 0, y: int = 0) -> Tile:
    return stamp(tile, BLOCK_CELLS, x, y)


def random_tile(size: int, density: float = 0.5,
                rng: Optional[np.random.Generator] = None) -> Tile:
    """Create tile with each cell alive with probability `density`.

    Args:
        size: Tile side length
        density: Probability of cell being alive (0.0 to 1.0)
        rng: Optional numpy generator for reproducible tiles
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be in [0.0, 1.0], got {density}")
    rng = rng if rng is not None else np.random.default_rng()
    return Tile(size, rng.random((size, size)) < density)
