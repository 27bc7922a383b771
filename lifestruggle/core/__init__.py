"""Simulation core: tiles, background cycles and the bounded board window."""

from .tile import Tile, TileSource
from .tile_cycle import TileCycle, CycleDetectionError
from .board import Backgrounds, Board, WindowBoard, SparseBoard

__all__ = [
    'Tile',
    'TileSource',
    'TileCycle',
    'CycleDetectionError',
    'Backgrounds',
    'Board',
    'WindowBoard',
    'SparseBoard',
]
