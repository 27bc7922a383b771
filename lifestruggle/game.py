"""
Life Struggle game driver

A one-versus-one Game of Life. Each player supplies a square tile of the same
size. Player A's tile fills the strip left of x=0 and player B's tile,
mirrored so both face their opponent, fills the strip to the right. After a
fixed number of generations each player scores one point per enemy tile
converted into their own background and loses one point per own tile
disrupted.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union
import logging
import os

from .core.board import BOARD_KINDS, Board
from .core.render import save_image
from .core.tile import Tile, TileSource

logger = logging.getLogger(__name__)

# Outcomes reported in StruggleResult.outcome
SCORED = "scored"
MIRROR_DRAW = "mirror_draw"
CONVERGENCE_DRAW = "convergence_draw"

DRAW_SCORE = (0, 0)


class StruggleConfig:
    """Settings for running a struggle."""

    def __init__(self,
                 generations: int = 100,
                 workers: Optional[int] = None,
                 board_kind: str = 'window',
                 log_interval: int = 200,
                 image_path: Optional[Union[str, Path]] = None):
        """Initialize struggle configuration.

        Args:
            generations: Generations to simulate before scoring (0+)
            workers: Threads for the per-position map (None = CPU count, 1 = serial)
            board_kind: Window storage, 'window' (contiguous) or 'sparse'
            log_interval: Generations between progress log lines (1+)
            image_path: If set, the final board is saved there as an image

        Raises:
            ValueError: If any setting is out of range
        """
        if generations < 0:
            raise ValueError("generations must be non-negative")
        if workers is not None and workers < 1:
            raise ValueError("workers must be at least 1")
        if board_kind not in BOARD_KINDS:
            raise ValueError(f"Unknown board kind: {board_kind}")
        if log_interval < 1:
            raise ValueError("log_interval must be at least 1")

        self.generations = generations
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.board_kind = board_kind
        self.log_interval = log_interval
        self.image_path = Path(image_path) if image_path is not None else None

    def copy(self) -> 'StruggleConfig':
        """Create a copy of the configuration."""
        return StruggleConfig(
            generations=self.generations,
            workers=self.workers,
            board_kind=self.board_kind,
            log_interval=self.log_interval,
            image_path=self.image_path
        )

    def __repr__(self) -> str:
        return (f"StruggleConfig(generations={self.generations}, workers={self.workers}, "
                f"board_kind={self.board_kind!r}, log_interval={self.log_interval}, "
                f"image_path={self.image_path})")


@dataclass
class StruggleResult:
    """Outcome of one struggle."""
    score: Tuple[int, int]   # (score_a, score_b)
    outcome: str             # SCORED, MIRROR_DRAW or CONVERGENCE_DRAW
    generations: int         # Generations actually simulated
    board: Optional[Board] = None  # Last valid board, None for a mirror draw

    @property
    def is_draw(self) -> bool:
        return self.outcome != SCORED


def _as_tile(source: Union[Tile, TileSource]) -> Tile:
    if isinstance(source, Tile):
        return source.copy()
    return Tile.copy_from(source)


def run_struggle(tile_a: Union[Tile, TileSource],
                 tile_b: Union[Tile, TileSource],
                 config: Optional[StruggleConfig] = None) -> StruggleResult:
    """Play tile A against tile B.

    Tile B is mirrored before play so both players design their tile facing +x.

    Draw policy: identical tiles after mirroring, or backgrounds that become
    identical before the last generation, score (0, 0).

    Raises:
        ValueError: If the tiles differ in size
        CycleDetectionError: If either tile's background never returns to itself
    """
    config = config or StruggleConfig()

    board_a = _as_tile(tile_a)
    board_b = _as_tile(tile_b).mirror()
    if board_a.size != board_b.size:
        raise ValueError(f"Tile sizes differ: {board_a.size} vs {board_b.size}")

    board_cls = BOARD_KINDS[config.board_kind]
    executor = ThreadPoolExecutor(max_workers=config.workers) if config.workers > 1 else None

    board = None
    try:
        board = board_cls.create(board_a, board_b, executor)
        if board is None:
            logger.info("Mirror draw: players are identical after mirroring")
            return StruggleResult(DRAW_SCORE, MIRROR_DRAW, 0)

        logger.info(f"Cycle lengths: {board.backgrounds.a.period}, {board.backgrounds.b.period}")

        for _ in range(config.generations):
            next_board = board.next_generation()
            if next_board is None:
                logger.info(f"Convergence draw at generation {board.generation + 1}")
                return StruggleResult(DRAW_SCORE, CONVERGENCE_DRAW, board.generation, board)

            board = next_board
            if board.generation % config.log_interval == 0:
                logger.info(f"Generation {board.generation}: window {board.extent()}")
    finally:
        if executor is not None:
            executor.shutdown()
            # Returned boards must not hold on to the closed pool
            if board is not None:
                board.executor = None

    score = board.score()
    logger.info(f"Score: {score[0]} to {score[1]}")

    if config.image_path is not None:
        save_image(board, config.image_path)

    return StruggleResult(score, SCORED, board.generation, board)


def struggle(generations: int,
             tile_a: Union[Tile, TileSource],
             tile_b: Union[Tile, TileSource],
             config: Optional[StruggleConfig] = None) -> Tuple[int, int]:
    """Play `generations` generations and return (score_a, score_b)."""
    if generations < 0:
        raise ValueError("generations must be non-negative")
    config = config.copy() if config is not None else StruggleConfig()
    config.generations = generations
    return run_struggle(tile_a, tile_b, config).score
