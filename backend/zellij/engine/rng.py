"""Seeded linear congruential generator used by every randomised stage."""

from __future__ import annotations

import math

_MULTIPLIER = 1664525.0
_INCREMENT = 1013904223.0
_MODULUS = 4294967296.0  # 2**32


class SeededRandom:
    """Deterministic stream of floats in [0, 1).

    The recurrence runs in doubles with fmod so seeds larger than 2**32
    (millisecond timestamps) produce the same stream as the browser version.
    One instance belongs to exactly one generation call.
    """

    def __init__(self, seed: int) -> None:
        self._state = float(seed)
        self.draws = 0

    @property
    def state(self) -> int:
        return int(self._state)

    def random(self) -> float:
        self._state = math.fmod(self._state * _MULTIPLIER + _INCREMENT, _MODULUS)
        self.draws += 1
        return self._state / _MODULUS

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return math.floor(self.random() * n)
