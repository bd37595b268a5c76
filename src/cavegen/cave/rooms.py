from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, List, Set

from .regions import Region, get_regions, touches_outer_ring
from .tiles import CaveGrid, Coord, Tile

logger = logging.getLogger(__name__)


def find_edge_tiles(grid: CaveGrid, tiles: Region) -> List[Coord]:
    """Return the tiles with at least one orthogonal wall neighbour, in tile order."""
    edges: List[Coord] = []
    for t in tiles:
        if any(grid.tiles[n.y][n.x] == Tile.WALL for n in grid.neighbors4(t.x, t.y)):
            edges.append(t)
    return edges


@dataclass
class Room:
    """An open region that survived filtering.

    ``connected_rooms`` holds indices into the owning :class:`RoomGraph`.
    """

    index: int
    tiles: List[Coord]
    edge_tiles: List[Coord]
    connected_rooms: Set[int] = field(default_factory=set)
    is_main_room: bool = False
    is_accessible_from_main_room: bool = False

    @property
    def size(self) -> int:
        return len(self.tiles)


class RoomGraph:
    """Rooms in a dense list with symmetric, index-based connections."""

    def __init__(self, rooms: List[Room]) -> None:
        self.rooms = rooms

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    def __getitem__(self, index: int) -> Room:
        return self.rooms[index]

    @property
    def main_room(self) -> Room | None:
        return self.rooms[0] if self.rooms else None

    def is_connected(self, a: int, b: int) -> bool:
        return b in self.rooms[a].connected_rooms

    def connect(self, a: int, b: int) -> bool:
        """Connect rooms ``a`` and ``b``; returns False if already connected.

        Accessibility from the main room spreads across the new link.
        """
        if a == b or self.is_connected(a, b):
            return False
        room_a, room_b = self.rooms[a], self.rooms[b]
        room_a.connected_rooms.add(b)
        room_b.connected_rooms.add(a)
        if room_a.is_accessible_from_main_room:
            self.set_accessible(b)
        elif room_b.is_accessible_from_main_room:
            self.set_accessible(a)
        return True

    def set_accessible(self, index: int) -> None:
        q = deque([index])
        while q:
            room = self.rooms[q.popleft()]
            if room.is_accessible_from_main_room:
                continue
            room.is_accessible_from_main_room = True
            q.extend(room.connected_rooms)

    def accessible(self) -> List[Room]:
        return [r for r in self.rooms if r.is_accessible_from_main_room]

    def inaccessible(self) -> List[Room]:
        return [r for r in self.rooms if not r.is_accessible_from_main_room]

    def all_accessible(self) -> bool:
        return all(r.is_accessible_from_main_room for r in self.rooms)


def remove_small_wall_regions(grid: CaveGrid, threshold: int) -> int:
    """Open up wall regions smaller than ``threshold``.

    Regions touching the outer ring are kept so the grid stays enclosed.
    """
    removed = 0
    for region in get_regions(grid, Tile.WALL):
        if len(region) < threshold and not touches_outer_ring(grid, region):
            grid.assign(region, Tile.OPEN)
            removed += 1
    return removed


def build_rooms(grid: CaveGrid, threshold: int) -> RoomGraph:
    """Fill open regions smaller than ``threshold`` and turn the rest into rooms.

    Rooms are ordered largest first; the first one is the main room.
    """
    survivors: List[Region] = []
    filled = 0
    for region in get_regions(grid, Tile.OPEN):
        if len(region) < threshold:
            grid.assign(region, Tile.WALL)
            filled += 1
        else:
            survivors.append(region)

    # Edge tiles are computed after every small pocket has been filled
    survivors.sort(key=len, reverse=True)
    rooms = [Room(i, tiles, find_edge_tiles(grid, tiles)) for i, tiles in enumerate(survivors)]
    graph = RoomGraph(rooms)
    if rooms:
        rooms[0].is_main_room = True
        rooms[0].is_accessible_from_main_room = True
    else:
        logger.warning("No room reached %d tiles in %s; nothing to connect", threshold, grid)
    logger.debug("Filled %d open pockets, kept %d rooms", filled, len(rooms))
    return graph


def process_regions(grid: CaveGrid, wall_threshold: int = 50, room_threshold: int = 50) -> RoomGraph:
    removed = remove_small_wall_regions(grid, wall_threshold)
    logger.debug("Opened %d wall regions below %d tiles", removed, wall_threshold)
    return build_rooms(grid, room_threshold)
