from __future__ import annotations

from typing import Any, Protocol, Tuple

from .tiles import CaveGrid, Coord, Tile


class MeshBuilder(Protocol):
    """External collaborator that turns a finished grid into geometry."""

    def generate_mesh(self, grid: CaveGrid, wall_value: Tile) -> Any:
        ...


def coord_to_world_point(coord: Coord, width: int, height: int) -> Tuple[float, float, float]:
    """Centre of ``coord`` in world space, with the grid centred on the origin."""
    return (-width / 2 + 0.5 + coord.x, 2.0, -height / 2 + 0.5 + coord.y)
