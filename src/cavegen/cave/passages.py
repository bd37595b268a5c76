from __future__ import annotations

from typing import List

from .tiles import CaveGrid, Coord, Tile


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def get_line(start: Coord, end: Coord) -> List[Coord]:
    """Integer line from ``start`` to ``end``, both endpoints included.

    Steps along the longer axis and accumulates the shorter delta, so every
    consecutive pair of cells is 8-connected. ``get_line(c, c)`` is ``[c]``.
    """
    x, y = start
    dx = end.x - start.x
    dy = end.y - start.y

    inverted = False
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)

    if longest < shortest:
        inverted = True
        longest, shortest = shortest, longest
        step, gradient_step = gradient_step, step

    line: List[Coord] = []
    gradient_accum = longest // 2
    for _ in range(longest + 1):
        line.append(Coord(x, y))
        if inverted:
            y += step
        else:
            x += step
        gradient_accum += shortest
        if gradient_accum >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            gradient_accum -= longest
    return line


def stamp_disc(grid: CaveGrid, centre: Coord, radius: int) -> None:
    """Open every in-bounds tile within ``radius`` of ``centre`` (inclusive)."""
    r2 = radius * radius
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy <= r2:
                x, y = centre.x + dx, centre.y + dy
                if grid.in_bounds(x, y):
                    grid.tiles[y][x] = Tile.OPEN


def carve_passage(grid: CaveGrid, tile_a: Coord, tile_b: Coord, radius: int = 5) -> List[Coord]:
    line = get_line(tile_a, tile_b)
    for c in line:
        stamp_disc(grid, c, radius)
    return line
