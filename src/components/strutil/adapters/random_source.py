"""
Random source adapters.
"""

from __future__ import annotations

import random
from collections.abc import Sequence


class ProcessRandomSource:
    """Draws from the process-wide ``random`` module state."""

    def choices(self, population: Sequence[str], k: int) -> list[str]:
        return random.choices(population, k=k)


class SeededRandomSource:
    """Private ``random.Random`` instance, reproducible for a given seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choices(self, population: Sequence[str], k: int) -> list[str]:
        return self._rng.choices(population, k=k)


default_random_source = ProcessRandomSource()
