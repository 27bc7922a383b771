"""
Board rendering

Read-only projections of a board's window: a text grid for terminals and
logs, and a one-pixel-per-cell raster saved through Pillow.
"""

from pathlib import Path
from typing import Optional, Tuple, Union
import logging

import numpy as np
from PIL import Image

from .board import Board

logger = logging.getLogger(__name__)


def _resolve_range(board: Board, positions: Optional[Tuple[int, int]]) -> Tuple[int, int]:
    if positions is None:
        return board.display_range()
    first, last = positions
    if last < first:
        raise ValueError(f"Empty position range [{first}, {last}]")
    return first, last


def render_text(board: Board, positions: Optional[Tuple[int, int]] = None,
                alive_char: str = 'X', dead_char: str = '.') -> str:
    """Render tiles side by side under a row of position labels.

    Args:
        board: Board to draw
        positions: Optional (first, last) range, defaults to the board window
        alive_char: Character for live cells
        dead_char: Character for dead cells

    Returns:
        Multi-line string, one header line then one line per cell row
    """
    first, last = _resolve_range(board, positions)
    width = max(board.tile_size - 2, 0)

    header = ''.join(f"|{x:^{width}}|" for x in range(first, last + 1))
    lines = [header]

    tiles = [tile for _, tile in board.tiles_between(first, last)]
    for y in range(board.tile_size):
        lines.append(''.join(tile.render_line(y, alive_char, dead_char) for tile in tiles))

    return '\n'.join(lines)


def render_array(board: Board, positions: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """Concatenate the window's tiles into one boolean array.

    Returns:
        Array of shape (tile_size, tile_size * tile_count), indexed [y, x]
    """
    first, last = _resolve_range(board, positions)
    return np.concatenate([tile.cells for _, tile in board.tiles_between(first, last)], axis=1)


def render_image(board: Board, positions: Optional[Tuple[int, int]] = None) -> Image.Image:
    """Grayscale image of the window, live cells black and dead cells white."""
    cells = render_array(board, positions)
    pixels = np.where(cells, 0, 255).astype(np.uint8)
    return Image.fromarray(pixels)


def save_image(board: Board, path: Union[str, Path],
               positions: Optional[Tuple[int, int]] = None) -> Path:
    """Write the window image to `path` (format from the file suffix)."""
    path = Path(path)
    image = render_image(board, positions)
    image.save(path)
    logger.info(f"Saved {image.width}x{image.height} board image to {path}")
    return path
