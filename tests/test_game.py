"""End-to-end struggles between player tiles.

Scores here are reference results for the classic matchups: a lightweight
spaceship against an empty tile, and a spaceship against a pair of gliders.
"""

import pytest
from lifestruggle.core.board import Backgrounds
from lifestruggle.core.tile import Tile
from lifestruggle.game import (
    StruggleConfig, StruggleResult, run_struggle, struggle,
    SCORED, MIRROR_DRAW, CONVERGENCE_DRAW
)
from lifestruggle.patterns.shapes import glider_at, lwss_at


def two_gliders(size):
    """Two gliders heading -x +y, mirrored so they head +x +y."""
    tile = Tile(size)
    glider_at(tile, 8, 0)
    glider_at(tile, 8, 10)
    return tile.mirror()


class TestStruggleConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = StruggleConfig()
        assert config.generations == 100
        assert config.workers >= 1
        assert config.board_kind == 'window'
        assert config.log_interval == 200
        assert config.image_path is None

    @pytest.mark.parametrize("kwargs,message", [
        ({"generations": -1}, "generations"),
        ({"workers": 0}, "workers"),
        ({"board_kind": "tree"}, "Unknown board kind"),
        ({"log_interval": 0}, "log_interval"),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            StruggleConfig(**kwargs)

    def test_copy(self, tmp_path):
        config = StruggleConfig(generations=7, workers=2, board_kind='sparse',
                                log_interval=3, image_path=tmp_path / "out.png")
        clone = config.copy()

        assert clone is not config
        assert repr(clone) == repr(config)


class TestLwssVsEmpty:
    """Spaceships flying into an empty opponent."""

    @pytest.mark.parametrize("board_kind", ["window", "sparse"])
    def test_lwss_wins(self, board_kind):
        config = StruggleConfig(board_kind=board_kind)
        assert struggle(100, lwss_at(Tile(8)), Tile(8), config) == (6, -6)

    def test_swapped_sides(self):
        """Playing from the other side swaps the score."""
        score_b, score_a = struggle(100, Tile(8), lwss_at(Tile(8)))
        assert (score_a, score_b) == (6, -6)

    def test_lwss_against_itself(self):
        assert struggle(100, lwss_at(Tile(8)), lwss_at(Tile(8))) == (0, 0)

    def test_empty_against_empty(self):
        """Identical players are a mirror draw."""
        result = run_struggle(Tile(8), Tile(8), StruggleConfig(generations=100))

        assert result.outcome == MIRROR_DRAW
        assert result.score == (0, 0)
        assert result.generations == 0
        assert result.board is None
        assert result.is_draw

    def test_serial_matches_threaded(self):
        serial = struggle(60, lwss_at(Tile(8)), Tile(8), StruggleConfig(workers=1))
        threaded = struggle(60, lwss_at(Tile(8)), Tile(8), StruggleConfig(workers=4))
        assert serial == threaded


class TestLwssVsGliders:
    """Score depends on how long the struggle runs."""

    def test_500_generations(self):
        assert struggle(500, lwss_at(Tile(40)), two_gliders(40)) == (-2, -1)

    def test_2000_generations(self):
        assert struggle(2000, lwss_at(Tile(40)), two_gliders(40)) == (-3, -1)


class TestRunStruggle:
    """Test the result object and side effects."""

    def test_scored_result(self):
        result = run_struggle(lwss_at(Tile(8)), Tile(8), StruggleConfig(generations=20))

        assert isinstance(result, StruggleResult)
        assert result.outcome == SCORED
        assert not result.is_draw
        assert result.generations == 20
        assert result.board.generation == 20
        assert result.score == result.board.score()

    def test_returned_board_can_continue(self):
        """The final board is detached from the closed worker pool."""
        result = run_struggle(lwss_at(Tile(8)), Tile(8),
                              StruggleConfig(generations=10, workers=2))
        assert result.board.executor is None
        assert result.board.next_generation().generation == 11

    def test_inputs_are_not_modified(self):
        tile_a, tile_b = lwss_at(Tile(8)), lwss_at(Tile(8))
        run_struggle(tile_a, tile_b, StruggleConfig(generations=5))
        assert tile_a == lwss_at(Tile(8))
        assert tile_b == lwss_at(Tile(8))

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="sizes differ"):
            run_struggle(Tile(8), Tile(9))

    def test_tile_source_input(self):
        """Players can be any object with size and get()."""

        class Source:
            def __init__(self, tile):
                self.size = tile.size
                self._tile = tile

            def get(self, x, y):
                return self._tile.get(x, y)

        assert struggle(100, Source(lwss_at(Tile(8))), Source(Tile(8))) == (6, -6)

    def test_image_written(self, tmp_path):
        path = tmp_path / "life.png"
        run_struggle(lwss_at(Tile(8)), Tile(8), StruggleConfig(generations=10, image_path=path))
        assert path.exists()

    def test_convergence_draw(self, monkeypatch):
        """Converging backgrounds end the game as a draw."""
        monkeypatch.setattr(Backgrounds, "converged_at", lambda self, generation: generation >= 3)

        result = run_struggle(lwss_at(Tile(8)), Tile(8), StruggleConfig(generations=10))

        assert result.outcome == CONVERGENCE_DRAW
        assert result.score == (0, 0)
        assert result.generations == 2
        assert result.board.generation == 2

    def test_negative_generations(self):
        with pytest.raises(ValueError, match="non-negative"):
            struggle(-1, lwss_at(Tile(8)), Tile(8))
