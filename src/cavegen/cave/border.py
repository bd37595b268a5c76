from __future__ import annotations

from .tiles import CaveGrid, Tile


def add_border(grid: CaveGrid, border_size: int = 10) -> CaveGrid:
    """Return a new grid with ``border_size`` wall tiles on every side.

    The source grid is left untouched and sits offset by ``border_size`` on both axes.
    """
    if border_size < 0:
        raise ValueError("border_size must not be negative")
    bordered = CaveGrid(grid.width + 2 * border_size, grid.height + 2 * border_size, fill=Tile.WALL)
    for y, row in enumerate(grid.tiles):
        bordered.tiles[y + border_size][border_size:border_size + grid.width] = row[:]
    return bordered
