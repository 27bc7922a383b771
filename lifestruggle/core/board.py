"""Bounded window over the infinite strip of tiles.

Positions x < 0 belong to player A and x >= 0 to player B. Any position the
board does not store explicitly holds its side's background tile for the
current generation. Disturbance travels at most one tile per generation, so
each step only has to look one tile past either end of the stored window.

Two storage strategies implement the same interface:

- `WindowBoard`: contiguous tuple of tiles plus the position of the first one
- `SparseBoard`: dict holding only positions that differ from the background

Boards are values. `next_generation` builds a new board from a read-only
snapshot of the current one and never modifies it.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import logging

from .tile import Tile
from .tile_cycle import TileCycle

logger = logging.getLogger(__name__)


class Backgrounds:
    """Background configuration for both sides of the strip.

    Attributes:
        a: Cycle filling every untouched position x < 0
        b: Cycle filling every untouched position x >= 0
    """

    def __init__(self, a: TileCycle, b: TileCycle):
        if a.tile_size != b.tile_size:
            raise ValueError(f"Background tile sizes differ: {a.tile_size} vs {b.tile_size}")
        self.a = a
        self.b = b

    @classmethod
    def discover(cls, tile_a: Tile, tile_b: Tile,
                 executor: Optional[Executor] = None) -> 'Backgrounds':
        """Discover both background cycles concurrently.

        Args:
            tile_a: Player A's starting tile
            tile_b: Player B's starting tile (already mirrored)
            executor: Pool to run on; a two-worker pool is used if omitted

        Raises:
            CycleDetectionError: If either tile never returns to itself
        """
        if executor is None:
            with ThreadPoolExecutor(max_workers=2) as pool:
                return cls.discover(tile_a, tile_b, pool)

        future_a = executor.submit(TileCycle, tile_a)
        future_b = executor.submit(TileCycle, tile_b)
        return cls(future_a.result(), future_b.result())

    @property
    def tile_size(self) -> int:
        return self.a.tile_size

    def cycle_for(self, x: int) -> TileCycle:
        """Background cycle owning position x."""
        return self.a if x < 0 else self.b

    def default_at(self, x: int, generation: int) -> Tile:
        """Background tile at position x for the given generation."""
        return self.cycle_for(x).default_at_generation(generation)

    def converged_at(self, generation: int) -> bool:
        """Whether both backgrounds are identical at `generation`."""
        return self.a.default_at_generation(generation) == self.b.default_at_generation(generation)


class Board(ABC):
    """Explicit tiles for the disturbed region plus the two backgrounds.

    Attributes:
        backgrounds: Side configuration shared by every generation
        generation: Number of generations since the start
        executor: Optional pool used for the per-position map
    """

    def __init__(self, backgrounds: Backgrounds, generation: int = 0,
                 executor: Optional[Executor] = None):
        self.backgrounds = backgrounds
        self.generation = generation
        self.executor = executor

    @classmethod
    def create(cls, tile_a: Tile, tile_b: Tile,
               executor: Optional[Executor] = None) -> Optional['Board']:
        """Start a new game between two tiles.

        Args:
            tile_a: Player A's tile, facing +x
            tile_b: Player B's tile, already mirrored to face -x
            executor: Optional pool for cycle discovery and generation steps

        Returns:
            Empty board at generation 0, or None if the tiles are identical
            and the two sides can't be told apart

        Raises:
            ValueError: If the tiles differ in size
            CycleDetectionError: If either background never returns to its start
        """
        if tile_a.size != tile_b.size:
            raise ValueError(f"Tile sizes differ: {tile_a.size} vs {tile_b.size}")

        if tile_a == tile_b:
            logger.debug("Identical tiles, no board created")
            return None

        backgrounds = Backgrounds.discover(tile_a, tile_b, executor)
        logger.debug(f"Created {cls.__name__} with cycle lengths "
                     f"{backgrounds.a.period}, {backgrounds.b.period}")
        return cls._empty(backgrounds, executor)

    @classmethod
    def _empty(cls, backgrounds: Backgrounds, executor: Optional[Executor]) -> 'Board':
        return cls._build(backgrounds, 0, executor, 0, [])

    @classmethod
    @abstractmethod
    def _build(cls, backgrounds: Backgrounds, generation: int,
               executor: Optional[Executor], first: int, tiles: Sequence[Tile]) -> 'Board':
        """Construct a board from contiguous tiles starting at position `first`.

        Neither end of `tiles` equals its side's background.
        """

    @abstractmethod
    def stored_tile(self, x: int) -> Optional[Tile]:
        """Explicitly stored tile at x, or None if x holds the background."""

    @abstractmethod
    def extent(self) -> Optional[Tuple[int, int]]:
        """(first, last) stored positions, or None when nothing is stored."""

    def first_or(self, default: int) -> int:
        extent = self.extent()
        return default if extent is None else extent[0]

    def last_or(self, default: int) -> int:
        extent = self.extent()
        return default if extent is None else extent[1]

    def lowest_non_a(self) -> int:
        """Leftmost position that isn't A's background (0 if none)."""
        return self.first_or(0)

    def highest_non_b(self) -> int:
        """Rightmost position that isn't B's background (-1 if none)."""
        return self.last_or(-1)

    @property
    def tile_size(self) -> int:
        return self.backgrounds.tile_size

    def contested_span(self) -> Tuple[int, int]:
        """(lowest non-A, highest non-B) positions, widened to reach the origin.

        With one more tile on each side the span always includes -1 and 0.
        Tiles between the origin and the window still hold their own side's
        background, but the boundary between the sides must be simulated.
        """
        return min(self.lowest_non_a(), 0), max(self.highest_non_b(), -1)

    def default_at(self, x: int) -> Tile:
        """Background tile at x for the current generation."""
        return self.backgrounds.default_at(x, self.generation)

    def tile_at(self, x: int) -> Tile:
        """Tile at any position of the infinite strip."""
        tile = self.stored_tile(x)
        if tile is None:
            return self.default_at(x)
        return tile

    def tiles_between(self, first: int, last: int) -> Iterator[Tuple[int, Tile]]:
        """(position, tile) pairs for every position in [first, last]."""
        for x in range(first, last + 1):
            yield x, self.tile_at(x)

    def _advance_position(self, x: int) -> Tile:
        return self.tile_at(x).next_generation(self.tile_at(x - 1), self.tile_at(x + 1))

    def _map(self, positions: range) -> List[Tile]:
        if self.executor is None:
            return [self._advance_position(x) for x in positions]
        # Consuming the iterator re-raises the first worker exception
        return list(self.executor.map(self._advance_position, positions))

    def next_generation(self) -> Optional['Board']:
        """Advance one generation.

        Returns:
            New board one generation ahead, or None if the two backgrounds
            become identical (the game has converged and can't continue)
        """
        generation = self.generation + 1

        if self.backgrounds.converged_at(generation):
            logger.debug(f"Backgrounds converge at generation {generation}")
            return None

        first, last = self.contested_span()
        first -= 1
        last += 1
        new_tiles = self._map(range(first, last + 1))

        # Trim both ends back to the first tiles that differ from the background
        low, high = 0, len(new_tiles) - 1
        while low <= high and new_tiles[low] == self.backgrounds.default_at(first + low, generation):
            low += 1
        while high >= low and new_tiles[high] == self.backgrounds.default_at(first + high, generation):
            high -= 1

        return self._build(self.backgrounds, generation, self.executor,
                           first + low, new_tiles[low:high + 1])

    def score(self) -> Tuple[int, int]:
        """Territory gained minus territory lost, for (A, B).

        Each side starts by losing every tile of its own territory inside the
        contested span. Every tile in the span that matches a side's current
        background then counts one point for that side, wherever it is.
        """
        first, last = self.contested_span()

        score_a = first
        score_b = -last - 1

        tile_a = self.backgrounds.a.default_at_generation(self.generation)
        tile_b = self.backgrounds.b.default_at_generation(self.generation)
        for _, tile in self.tiles_between(first, last):
            if tile == tile_a:
                score_a += 1
            elif tile == tile_b:
                score_b += 1

        return score_a, score_b

    def display_range(self) -> Tuple[int, int]:
        """Positions worth drawing: the window, or -1 and 0 when it is empty."""
        return self.first_or(-1), self.last_or(0)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(generation={self.generation}, "
                f"extent={self.extent()}, tile_size={self.tile_size})")


class WindowBoard(Board):
    """Contiguous window of tiles starting at position `offset`."""

    def __init__(self, backgrounds: Backgrounds, generation: int = 0,
                 executor: Optional[Executor] = None,
                 offset: int = 0, tiles: Sequence[Tile] = ()):
        super().__init__(backgrounds, generation, executor)
        self.offset = offset
        self.tiles: Tuple[Tile, ...] = tuple(tiles)

    @classmethod
    def _build(cls, backgrounds, generation, executor, first, tiles):
        return cls(backgrounds, generation, executor, first, tiles)

    def stored_tile(self, x: int) -> Optional[Tile]:
        index = x - self.offset
        if 0 <= index < len(self.tiles):
            return self.tiles[index]
        return None

    def extent(self) -> Optional[Tuple[int, int]]:
        if not self.tiles:
            return None
        return self.offset, self.offset + len(self.tiles) - 1


class SparseBoard(Board):
    """Only positions whose tile differs from the background are stored."""

    def __init__(self, backgrounds: Backgrounds, generation: int = 0,
                 executor: Optional[Executor] = None,
                 tiles: Optional[Dict[int, Tile]] = None):
        super().__init__(backgrounds, generation, executor)
        self.tiles: Dict[int, Tile] = dict(sorted((tiles or {}).items()))

    @classmethod
    def _build(cls, backgrounds, generation, executor, first, tiles):
        stored = {}
        for index, tile in enumerate(tiles):
            x = first + index
            if tile != backgrounds.default_at(x, generation):
                stored[x] = tile
        return cls(backgrounds, generation, executor, stored)

    def stored_tile(self, x: int) -> Optional[Tile]:
        return self.tiles.get(x)

    def extent(self) -> Optional[Tuple[int, int]]:
        if not self.tiles:
            return None
        # Keys are inserted in ascending order
        keys = list(self.tiles)
        return keys[0], keys[-1]


BOARD_KINDS = {
    'window': WindowBoard,
    'sparse': SparseBoard,
}
