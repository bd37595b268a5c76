from __future__ import annotations

import hashlib
import logging
import random
import time
from typing import Optional

logger = logging.getLogger(__name__)


def derive_seed(source: str) -> int:
    """Derive a 32-bit integer seed from an arbitrary string using SHA256.

    The builtin ``hash()`` is salted per process, so it cannot key a
    reproducible sequence.
    """
    digest = hashlib.sha256(source.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & 0xFFFFFFFF


def resolve_seed(seed: Optional[str], use_random_seed: bool = False) -> str:
    """Return the seed string to generate with.

    A time-derived seed is used when requested or when no seed was given.
    """
    if use_random_seed or seed is None:
        actual = str(time.time())
        logger.info("Using time-derived seed: %s", actual)
        return actual
    return str(seed)


def seeded_random(seed: str) -> random.Random:
    derived = derive_seed(seed)
    logger.debug("Derived seed for %r -> %d", seed, derived)
    return random.Random(derived)
