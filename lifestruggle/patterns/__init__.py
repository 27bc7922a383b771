"""Pattern stamps for building starting tiles."""

from .shapes import (
    LWSS_CELLS, GLIDER_CELLS, BLINKER_CELLS, BLOCK_CELLS,
    stamp, lwss_at, glider_at, blinker_at, block_at, random_tile
)

__all__ = [
    'LWSS_CELLS',
    'GLIDER_CELLS',
    'BLINKER_CELLS',
    'BLOCK_CELLS',
    'stamp',
    'lwss_at',
    'glider_at',
    'blinker_at',
    'block_at',
    'random_tile',
]
