"""Periodic backgrounds for the infinite parts of the strip.

Far from the contested zone every tile is a copy of a player's starting tile
and every neighbour is too, so the background evolves as one tile wrapped
onto itself. `TileCycle` records that evolution until it returns to the
starting tile, which lets the board look up the background at any
generation without simulating it.
"""

from typing import Iterator, Tuple
import logging

from .tile import Tile
from .cycle_detection import revisits_earlier_state, find_cycle

logger = logging.getLogger(__name__)


class CycleDetectionError(RuntimeError):
    """Raised when a background loops without ever returning to its start.

    Attributes:
        tail_length: Generations before the background enters its loop
        period: Length of the loop it falls into
    """

    def __init__(self, message: str, tail_length: int, period: int):
        super().__init__(message)
        self.tail_length = tail_length
        self.period = period


def self_step(tile: Tile) -> Tile:
    """Advance a tile that is surrounded by copies of itself."""
    return tile.next_generation(tile, tile)


class TileCycle:
    """Minimal periodic orbit of a self-neighbouring tile.

    ``tiles[0]`` is the starting tile and stepping ``tiles[-1]`` yields
    ``tiles[0]`` again. Immutable after construction.
    """

    def __init__(self, tile: Tile):
        """Discover the orbit of `tile`.

        Args:
            tile: Starting tile (generation 0)

        Raises:
            CycleDetectionError: If the orbit loops without returning to `tile`
        """
        tiles = [tile.copy()]

        while True:
            next_tile = self_step(tiles[-1])
            if next_tile == tiles[0]:
                break

            tiles.append(next_tile)
            if revisits_earlier_state(tiles):
                tail_length, period = find_cycle(tiles[0], self_step)
                raise CycleDetectionError(
                    f"Tile {tile!r} enters a cycle of length {period} after "
                    f"{tail_length} generations and never returns to its start",
                    tail_length, period
                )

        self._tiles: Tuple[Tile, ...] = tuple(tiles)
        logger.debug(f"Discovered tile cycle of length {len(self._tiles)} for {tile!r}")

    @property
    def period(self) -> int:
        """Number of generations before the background repeats."""
        return len(self._tiles)

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    @property
    def original(self) -> Tile:
        """The generation 0 tile."""
        return self._tiles[0]

    @property
    def tile_size(self) -> int:
        return self._tiles[0].size

    def default_at_generation(self, generation: int) -> Tile:
        """Background tile at an untouched position at `generation`."""
        return self._tiles[generation % len(self._tiles)]

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __repr__(self) -> str:
        return f"TileCycle(size={self.tile_size}, period={self.period})"
