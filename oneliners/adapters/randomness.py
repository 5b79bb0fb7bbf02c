"""
Randomness adapters.

Implement RandomPort on top of the ``random`` module. Neither adapter is
suitable for secrets; cryptographic values go through ``secrets`` directly.
"""

from __future__ import annotations

import logging
import random

logger = logging.getLogger(__name__)


class SystemRandomAdapter:
    """Draws from the ``random`` module's shared generator."""

    def random(self) -> float:
        return random.random()

    def randbelow(self, n: int) -> int:
        return random.randrange(n)


class SeededRandomAdapter:
    """
    Randomness adapter with a fixed seed.

    Useful for deterministic testing: two adapters built with the same seed
    produce the same sequence.
    """

    def __init__(self, seed: int | str | bytes) -> None:
        self._rng = random.Random(seed)
        logger.debug("Seeded random adapter created (seed=%r)", seed)

    def random(self) -> float:
        return self._rng.random()

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)
