"""Seeded random number source for the simulations."""

from __future__ import annotations

import random


class RandomGenerator:
    """Uniform and normal draws from a single seeded engine."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._engine = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        """A draw from the half-open interval [low, high)."""
        return low + (high - low) * self._engine.random()

    def gaussian(self, mean: float, stddev: float) -> float:
        """A draw from the normal distribution with the given parameters."""
        return self._engine.gauss(mean, stddev)