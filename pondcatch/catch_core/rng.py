"""
RNG - Uniform Sources
=====================

Provides the uniform [0, 1) samples the spawner draws from. A seeded
source makes sessions reproducible; a scripted source replays a fixed
sequence of samples.
"""

from __future__ import annotations

import math
import random
from typing import Iterable, List, Optional

# Largest double below 1.0
_BELOW_ONE = math.nextafter(1.0, 0.0)


def fold_unit(value: float) -> float:
    """
    Fold any sample back into [0, 1).

    Non-finite and negative values map to 0.0, values at or above 1.0 to the
    largest double below 1.0.
    """
    if not math.isfinite(value) or value < 0.0:
        return 0.0
    if value >= 1.0:
        return _BELOW_ONE
    return float(value)


class UniformSource:
    """Seedable uniform random source."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize source.

        Args:
            seed: Random seed for reproducibility. Random if None.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        """Next sample in [0, 1)."""
        return fold_unit(self._rng.random())

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Restart the sequence.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)


class ScriptedSource:
    """
    Replays a fixed list of samples, cycling when exhausted.

    Samples outside [0, 1) are folded back into range.
    """

    def __init__(self, samples: Iterable[float]):
        self._samples: List[float] = [fold_unit(s) for s in samples]
        if not self._samples:
            raise ValueError("ScriptedSource needs at least one sample")
        self._index = 0

    def random(self) -> float:
        value = self._samples[self._index]
        self._index = (self._index + 1) % len(self._samples)
        return value

    def reset(self, seed: Optional[int] = None) -> None:
        """Rewind to the first sample. The seed is ignored."""
        self._index = 0
