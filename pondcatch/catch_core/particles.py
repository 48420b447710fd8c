"""
Particle Pool
=============

Floating score text shown where a fish was caught. Particles drift up and
age by one frame per tick, and are removed when their life runs out.

The pool is an arena of slots: expired particles leave a tombstone
(None) and their slot index goes on a free list for reuse, so no list is
rebuilt per frame. Iteration order is slot order and carries no meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class Particle:
    """A single floating score text."""
    x: float
    y: float
    value: int
    remaining_life: int
    rise_speed: float

    @property
    def text(self) -> str:
        """Text to draw, e.g. '+3'."""
        return f"+{self.value}"

    @property
    def alive(self) -> bool:
        return self.remaining_life > 0


class ParticlePool:
    """Slot arena holding the live particles."""

    def __init__(self, capacity: int = 16):
        """
        Initialize pool.

        Args:
            capacity: Initial number of slots. The arena grows when full.
        """
        capacity = max(1, capacity)
        self._slots: List[Optional[Particle]] = [None] * capacity
        # Pop from the end so low slots are reused first
        self._free: List[int] = list(range(capacity - 1, -1, -1))
        self._live: int = 0

    def __len__(self) -> int:
        """Number of live particles."""
        return self._live

    def __iter__(self) -> Iterator[Particle]:
        """Iterate over live particles."""
        for particle in self._slots:
            if particle is not None:
                yield particle

    @property
    def capacity(self) -> int:
        """Current number of slots, live or free."""
        return len(self._slots)

    def emit(
        self,
        x: float,
        y: float,
        value: int,
        life: int,
        rise_speed: float
    ) -> Particle:
        """
        Add a particle.

        Args:
            x: Horizontal position (text anchor).
            y: Vertical position.
            value: Score value to display.
            life: Frames before the particle expires.
            rise_speed: Upward drift per frame.

        Returns:
            The new particle.
        """
        particle = Particle(
            x=float(x),
            y=float(y),
            value=int(value),
            remaining_life=int(life),
            rise_speed=float(rise_speed)
        )

        if not self._free:
            # Double the arena
            start = len(self._slots)
            self._slots.extend([None] * start)
            self._free.extend(range(len(self._slots) - 1, start - 1, -1))

        slot = self._free.pop()
        self._slots[slot] = particle
        self._live += 1
        return particle

    def age(self) -> int:
        """
        Advance every particle by one frame.

        Each particle rises by its speed and loses one frame of life;
        particles with no life left are removed.

        Returns:
            Number of particles removed.
        """
        expired = 0
        for slot, particle in enumerate(self._slots):
            if particle is None:
                continue
            particle.y -= particle.rise_speed
            particle.remaining_life -= 1
            if particle.remaining_life <= 0:
                self._slots[slot] = None
                self._free.append(slot)
                expired += 1

        self._live -= expired
        return expired

    def clear(self) -> None:
        """Remove all particles, keeping the arena size."""
        capacity = len(self._slots)
        self._slots = [None] * capacity
        self._free = list(range(capacity - 1, -1, -1))
        self._live = 0
