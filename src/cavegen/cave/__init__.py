from .tiles import Coord, CaveGrid, Tile
from .factory import CaveGenerator, CaveResult, build_cave, generate

__all__ = ["Coord", "CaveGrid", "Tile", "CaveGenerator", "CaveResult", "build_cave", "generate"]
