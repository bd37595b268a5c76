from __future__ import annotations

import logging
from collections import deque
from typing import List

from .tiles import CaveGrid, Coord, Tile

logger = logging.getLogger(__name__)

Region = List[Coord]

# Orthogonal neighbours in the order a 3x3 scan meets them
_FLOOD_ORDER = ((-1, 0), (0, -1), (0, 1), (1, 0))


def flood_region(grid: CaveGrid, start: Coord, visited: List[List[bool]]) -> Region:
    """Breadth-first flood fill of the 4-connected region containing ``start``.

    Marks every collected tile in ``visited`` (indexed [y][x]).
    """
    tile = grid.get(start.x, start.y)
    tiles: Region = []
    q = deque([start])
    visited[start.y][start.x] = True
    while q:
        cur = q.popleft()
        tiles.append(cur)
        for dx, dy in _FLOOD_ORDER:
            nx, ny = cur.x + dx, cur.y + dy
            if not grid.in_bounds(nx, ny):
                continue
            if not visited[ny][nx] and grid.tiles[ny][nx] == tile:
                visited[ny][nx] = True
                q.append(Coord(nx, ny))
    return tiles


def get_regions(grid: CaveGrid, tile: Tile) -> List[Region]:
    """Partition all tiles of type ``tile`` into maximal 4-connected regions.

    Seeds are taken in scan order, so the result is reproducible for a given grid.
    """
    visited = [[False] * grid.width for _ in range(grid.height)]
    regions: List[Region] = []
    for c in grid.coords():
        if not visited[c.y][c.x] and grid.tiles[c.y][c.x] == tile:
            regions.append(flood_region(grid, c, visited))
    logger.debug("Found %d %s regions in %s", len(regions), Tile(tile).name, grid)
    return regions


def touches_outer_ring(grid: CaveGrid, region: Region) -> bool:
    return any(grid.on_outer_ring(c.x, c.y) for c in region)
