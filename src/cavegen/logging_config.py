import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV = "CAVEGEN_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def resolve_level(default: int) -> int:
    """Level named by CAVEGEN_LOG_LEVEL, or ``default`` when unset or unknown."""
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route cavegen output through a single handler on the root logger.

    Calling it again replaces the previous handler instead of stacking one.
    """
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
