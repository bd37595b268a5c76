from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from ..config import CaveSettings
from ..rng import resolve_seed, seeded_random
from .border import add_border
from .connector import Passage, connect_closest_rooms
from .fill import random_fill
from .mesh import MeshBuilder
from .rooms import RoomGraph, process_regions, remove_small_wall_regions
from .smoothing import smooth
from .tiles import CaveGrid, Tile

logger = logging.getLogger(__name__)


@dataclass
class CaveResult:
    seed: str
    grid: CaveGrid  # un-bordered
    bordered: CaveGrid
    rooms: RoomGraph
    passages: List[Passage] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "seed": self.seed,
            "size": [self.grid.width, self.grid.height],
            "bordered_size": [self.bordered.width, self.bordered.height],
            "rooms": [r.size for r in self.rooms],
            "passages": [[p.room_a, p.room_b, list(p.tile_a), list(p.tile_b)] for p in self.passages],
            "open_ratio": round(self.grid.count(Tile.OPEN) / float(self.grid.width * self.grid.height), 4),
        }


class CaveGenerator:
    """Runs the full cave pipeline for one settings bundle.

    Stages run in order: random fill, smoothing, region filtering, room
    connection, outer-ring sealing, wall fragment cleanup, border padding.
    Each stage finishes before the next one reads the grid.
    """

    def __init__(self, settings: CaveSettings) -> None:
        self.settings = settings

    def run(self) -> CaveResult:
        s = self.settings
        seed = resolve_seed(s.seed, s.use_random_seed)
        rng = seeded_random(seed)

        grid = random_fill(s.width, s.height, s.fill_percent, rng)
        smooth(grid, s.smoothing_passes, s.smoothing_mode)
        rooms = process_regions(grid, s.wall_threshold, s.room_threshold)
        passages = connect_closest_rooms(grid, rooms, s.passage_radius)
        # Passage discs may reach the edge of the grid and split walls into fragments
        grid.seal_outer_ring()
        remove_small_wall_regions(grid, s.wall_threshold)
        bordered = add_border(grid, s.border_size)

        logger.info(
            "Generated cave %dx%d seed=%s rooms=%d passages=%d",
            s.width,
            s.height,
            seed,
            len(rooms),
            len(passages),
        )
        return CaveResult(seed=seed, grid=grid, bordered=bordered, rooms=rooms, passages=passages)


def generate(settings: CaveSettings) -> CaveGrid:
    """Generate a cave and return the bordered grid."""
    return CaveGenerator(settings).run().bordered


def build_cave(settings: CaveSettings, mesh_builder: MeshBuilder) -> Any:
    """Generate a cave and hand the bordered grid to ``mesh_builder``."""
    result = CaveGenerator(settings).run()
    return mesh_builder.generate_mesh(result.bordered, Tile.WALL)
