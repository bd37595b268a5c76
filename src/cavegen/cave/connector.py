from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional

from .passages import carve_passage
from .rooms import Room, RoomGraph
from .tiles import CaveGrid, Coord

logger = logging.getLogger(__name__)


class Passage(NamedTuple):
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord


class _Candidate(NamedTuple):
    distance: int
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord


def _closest(graph: RoomGraph, rooms_a: Iterable[Room], rooms_b: List[Room]) -> Optional[_Candidate]:
    """Closest pair of edge tiles between any room of ``rooms_a`` and any room of ``rooms_b``.

    Distances are squared euclidean; the first pair found at the minimum wins.
    """
    best: Optional[_Candidate] = None
    for room_a in rooms_a:
        for room_b in rooms_b:
            if room_a.index == room_b.index or graph.is_connected(room_a.index, room_b.index):
                continue
            for tile_a in room_a.edge_tiles:
                for tile_b in room_b.edge_tiles:
                    dx = tile_a.x - tile_b.x
                    dy = tile_a.y - tile_b.y
                    dist = dx * dx + dy * dy
                    if best is None or dist < best.distance:
                        best = _Candidate(dist, room_a.index, room_b.index, tile_a, tile_b)
    return best


class RoomConnector:
    """Carves passages until every room is reachable from the main room.

    Pass one links each still-unconnected room to its nearest neighbour.
    Pass two repeatedly joins the nearest inaccessible/accessible pair until
    nothing is left inaccessible or no pair can be formed.
    """

    def __init__(self, grid: CaveGrid, graph: RoomGraph, radius: int = 5) -> None:
        self.grid = grid
        self.graph = graph
        self.radius = radius
        self.passages: List[Passage] = []

    def connect_all(self) -> List[Passage]:
        if len(self.graph) < 2:
            return self.passages
        self._connect_nearest()
        self._force_access_from_main_room()
        logger.debug("Carved %d passages between %d rooms", len(self.passages), len(self.graph))
        return self.passages

    def _connect_nearest(self) -> None:
        for room in self.graph:
            if room.connected_rooms:
                continue
            best = _closest(self.graph, [room], self.graph.rooms)
            if best is not None:
                self._create_passage(best)

    def _force_access_from_main_room(self) -> None:
        while True:
            inaccessible = self.graph.inaccessible()
            if not inaccessible:
                return
            best = _closest(self.graph, inaccessible, self.graph.accessible())
            if best is None:
                logger.warning("%d rooms cannot be linked to the main room", len(inaccessible))
                return
            self._create_passage(best)

    def _create_passage(self, best: _Candidate) -> None:
        if not self.graph.connect(best.room_a, best.room_b):
            return
        carve_passage(self.grid, best.tile_a, best.tile_b, self.radius)
        self.passages.append(Passage(best.room_a, best.room_b, best.tile_a, best.tile_b))
        logger.debug(
            "Passage %d<->%d from %s to %s (dist^2=%d)",
            best.room_a,
            best.room_b,
            tuple(best.tile_a),
            tuple(best.tile_b),
            best.distance,
        )


def connect_closest_rooms(grid: CaveGrid, graph: RoomGraph, radius: int = 5) -> List[Passage]:
    return RoomConnector(grid, graph, radius).connect_all()
