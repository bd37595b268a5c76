from importlib.metadata import version, PackageNotFoundError

from .cave import CaveGenerator, CaveGrid, CaveResult, Coord, Tile, build_cave, generate
from .config import CaveSettings
from .errors import CavegenError, InvalidConfiguration

__all__ = [
    "__version__",
    "CaveGenerator",
    "CaveGrid",
    "CaveResult",
    "CaveSettings",
    "CavegenError",
    "Coord",
    "InvalidConfiguration",
    "Tile",
    "build_cave",
    "generate",
]

try:
    __version__ = version("cavegen")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
