from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Sequence


class Tile(IntEnum):
    OPEN = 0
    WALL = 1


class Coord(NamedTuple):
    x: int
    y: int


ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))


class CaveGrid:
    """A fixed-size wall/open tile grid.

    Coordinates are (x, y) with 0 <= x < width and 0 <= y < height. Every
    pipeline stage mutates the same instance; callers receive it read-only
    once generation has finished.

    Scans are column-major: x in the outer loop, y in the inner loop. With
    ``tiles[y][x]`` storage this is not row order, but it is the order that
    random draws, regions and rooms depend on, so seeded output changes if
    it is swapped.
    """

    def __init__(self, width: int, height: int, fill: Tile = Tile.WALL) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("CaveGrid width/height must be > 0")
        self.width = width
        self.height = height
        self.tiles: List[List[Tile]] = [[fill for _ in range(width)] for _ in range(height)]  # tiles[y][x]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def on_outer_ring(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile ({x},{y}) out of bounds for {self!r}")
        return self.tiles[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile ({x},{y}) out of bounds for {self!r}")
        self.tiles[y][x] = Tile(tile)

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) == Tile.WALL

    def is_open(self, x: int, y: int) -> bool:
        return self.get(x, y) == Tile.OPEN

    def coords(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                yield Coord(x, y)

    def neighbors4(self, x: int, y: int) -> Iterator[Coord]:
        for dx, dy in ORTHOGONAL:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield Coord(nx, ny)

    def assign(self, coords: Iterable[Coord], tile: Tile) -> None:
        for c in coords:
            self.set(c.x, c.y, tile)

    def seal_outer_ring(self) -> None:
        for x in range(self.width):
            self.tiles[0][x] = Tile.WALL
            self.tiles[self.height - 1][x] = Tile.WALL
        for y in range(self.height):
            self.tiles[y][0] = Tile.WALL
            self.tiles[y][self.width - 1] = Tile.WALL

    def count(self, tile: Tile) -> int:
        return sum(1 for row in self.tiles for t in row if t == tile)

    def copy(self) -> "CaveGrid":
        clone = CaveGrid(self.width, self.height)
        clone.tiles = [row[:] for row in self.tiles]
        return clone

    def to_rows(self, wall_char: str = "#", open_char: str = ".") -> List[str]:
        return ["".join(wall_char if t == Tile.WALL else open_char for t in row) for row in self.tiles]

    @classmethod
    def from_rows(cls, rows: Sequence[str], wall_chars: Iterable[str] = ("#",)) -> "CaveGrid":
        """Build a grid from ASCII rows for tests/tools.

        Any char in wall_chars is a wall; all others are open.
        """
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise ValueError("All rows must be same width")
        grid = cls(width, len(rows))
        wall_set = set(wall_chars)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid.tiles[y][x] = Tile.WALL if ch in wall_set else Tile.OPEN
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaveGrid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.tiles == other.tiles

    def __repr__(self) -> str:
        return f"CaveGrid({self.width}x{self.height})"
