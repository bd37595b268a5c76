from __future__ import annotations

import logging

from .tiles import CaveGrid, Tile

logger = logging.getLogger(__name__)

SNAPSHOT = "snapshot"
IN_PLACE = "in_place"


def count_wall_neighbours(tiles, x: int, y: int, width: int, height: int) -> int:
    """Count walls in the Moore neighbourhood; out-of-range cells count as walls."""
    count = 0
    for nx in (x - 1, x, x + 1):
        for ny in (y - 1, y, y + 1):
            if nx == x and ny == y:
                continue
            if 0 <= nx < width and 0 <= ny < height:
                if tiles[ny][nx] == Tile.WALL:
                    count += 1
            else:
                count += 1
    return count


def smooth_pass(grid: CaveGrid, mode: str = SNAPSHOT) -> None:
    """Apply one majority-rule pass to ``grid``.

    More than 4 wall neighbours makes a wall, fewer than 4 makes open space,
    exactly 4 leaves the tile alone. In ``snapshot`` mode every tile reads the
    previous pass; ``in_place`` mode lets later tiles see earlier updates.
    """
    if mode not in (SNAPSHOT, IN_PLACE):
        raise ValueError(f"Unknown smoothing mode: {mode!r}")
    source = [row[:] for row in grid.tiles] if mode == SNAPSHOT else grid.tiles
    w, h = grid.width, grid.height
    for x in range(w):
        for y in range(h):
            walls = count_wall_neighbours(source, x, y, w, h)
            if walls > 4:
                grid.tiles[y][x] = Tile.WALL
            elif walls < 4:
                grid.tiles[y][x] = Tile.OPEN


def smooth(grid: CaveGrid, passes: int = 5, mode: str = SNAPSHOT) -> None:
    for _ in range(passes):
        smooth_pass(grid, mode)
    logger.debug("Smoothed %s with %d %s passes, %d walls", grid, passes, mode, grid.count(Tile.WALL))
