"""Tests for background cycle discovery."""

import pytest
from lifestruggle.core.tile import Tile
from lifestruggle.core.tile_cycle import TileCycle, CycleDetectionError, self_step
from lifestruggle.patterns.shapes import blinker_at, block_at, glider_at, lwss_at


def advance(tile, generations):
    for _ in range(generations):
        tile = self_step(tile)
    return tile


class TestTileCycleDiscovery:
    """Test cycle lengths of known patterns."""

    def test_empty_tile(self):
        """An empty background never changes."""
        cycle = TileCycle(Tile(8))
        assert cycle.period == 1
        assert len(cycle) == 1

    def test_still_life(self):
        cycle = TileCycle(block_at(Tile(8), 2, 2))
        assert cycle.period == 1

    def test_blinker(self):
        """Blinker background has period 2."""
        tile = blinker_at(Tile(8), 2, 3)
        cycle = TileCycle(tile)

        assert cycle.period == 2
        assert cycle.tiles[1] == Tile.from_cells(8, [(3, 2), (3, 3), (3, 4)])

    def test_glider(self):
        """A glider crosses an 8x8 torus diagonally in 32 generations."""
        cycle = TileCycle(glider_at(Tile(8), 1, 1))
        assert cycle.period == 32

    def test_original_is_start_tile(self):
        tile = blinker_at(Tile(8), 2, 3)
        cycle = TileCycle(tile)
        assert cycle.original == tile
        assert cycle.tile_size == 8

    def test_start_tile_is_copied(self):
        """Later changes to the caller's tile don't leak into the cycle."""
        tile = blinker_at(Tile(8), 2, 3)
        cycle = TileCycle(tile)
        tile.set(0, 0, True)
        assert cycle.original != tile


class TestCycleSoundness:
    """Stepping a background k times reproduces it, and no sooner."""

    @pytest.mark.parametrize("make_tile", [
        lambda: Tile(8),
        lambda: blinker_at(Tile(8), 2, 3),
        lambda: glider_at(Tile(8), 1, 1),
        lambda: lwss_at(Tile(8)),
        lambda: glider_at(glider_at(Tile(12), 1, 1), 1, 7),
    ])
    def test_period_is_minimal(self, make_tile):
        tile = make_tile()
        cycle = TileCycle(tile)

        assert advance(tile, cycle.period) == tile
        for j in range(1, cycle.period):
            assert advance(tile, j) != tile

    def test_last_tile_steps_to_first(self):
        cycle = TileCycle(glider_at(Tile(8), 1, 1))
        assert self_step(cycle.tiles[-1]) == cycle.tiles[0]

    def test_default_at_generation(self):
        """Generation numbers index the cycle modulo its length."""
        tile = blinker_at(Tile(8), 2, 3)
        cycle = TileCycle(tile)

        assert cycle.default_at_generation(0) == tile
        assert cycle.default_at_generation(1) == cycle.tiles[1]
        assert cycle.default_at_generation(100) == tile
        assert cycle.default_at_generation(101) == advance(tile, 101)

    def test_iteration(self):
        cycle = TileCycle(blinker_at(Tile(8), 2, 3))
        assert list(cycle) == list(cycle.tiles)


class TestCycleDetectionErrors:
    """Backgrounds that never return to their start fail fast."""

    def test_dying_cell(self):
        """A lone cell dies and the background stays empty forever."""
        tile = Tile.from_cells(8, [(4, 4)])

        with pytest.raises(CycleDetectionError) as excinfo:
            TileCycle(tile)

        assert excinfo.value.tail_length == 1
        assert excinfo.value.period == 1

    def test_settles_into_block(self):
        """An L-tromino grows into a block and never returns."""
        tile = Tile.from_cells(8, [(3, 3), (4, 3), (3, 4)])

        with pytest.raises(CycleDetectionError, match="never returns"):
            TileCycle(tile)

    def test_is_runtime_error(self):
        assert issubclass(CycleDetectionError, RuntimeError)
