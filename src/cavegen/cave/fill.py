from __future__ import annotations

import logging
import random

from .tiles import CaveGrid, Tile

logger = logging.getLogger(__name__)


def random_fill(width: int, height: int, fill_percent: int, rng: random.Random) -> CaveGrid:
    """Seed a grid with random walls; the outer ring is always wall.

    Each interior tile draws once from ``rng`` in scan order and becomes a
    wall with probability ``fill_percent / 100``.
    """
    grid = CaveGrid(width, height)
    for x in range(width):
        for y in range(height):
            if grid.on_outer_ring(x, y):
                grid.tiles[y][x] = Tile.WALL
            else:
                grid.tiles[y][x] = Tile.WALL if rng.randrange(100) < fill_percent else Tile.OPEN
    logger.debug("Random fill %s: %d%% requested, %d walls", grid, fill_percent, grid.count(Tile.WALL))
    return grid
