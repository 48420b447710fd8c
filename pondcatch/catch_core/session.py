"""
Session State
=============

The authoritative mutable state of one play session: score, lives, fish
speed, pause flag, the falling fish, the net and the floating score text.

SessionState is mutated only by the update step (see update.py) and by the
control commands defined here. Each CoreGame owns its own SessionState, so
independent sessions can run side by side.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from pondcatch.catch_core.config_loader import GameConfig, get_config
from pondcatch.catch_core.particles import ParticlePool
from pondcatch.catch_core.species_catalog import FishKind


@dataclass
class FallingObject:
    """The single fish currently falling."""
    x: float
    y: float
    kind: FishKind
    value: int
    size: float
    species_id: int = 0

    @property
    def center_x(self) -> float:
        return self.x + self.size / 2


@dataclass
class Catcher:
    """
    The player's net.

    Position is written by the input layer only. The effective bounds are
    the base size times the presentation scale.
    """
    x: float
    y: float
    base_width: float
    base_height: float
    scale: float = 1.0

    @property
    def width(self) -> float:
        return self.base_width * self.scale

    @property
    def height(self) -> float:
        return self.base_height * self.scale


class SessionState:
    """
    Mutable state of one session.

    Control semantics:
    - restart(): full reset, allowed at any time
    - pause(): no-op if already paused or ended
    - resume(): no-op once lives reach 0
    - toggle(): resume if paused, else pause
    """

    def __init__(self, fish: FallingObject, config: Optional[GameConfig] = None):
        """
        Initialize a fresh session.

        Args:
            fish: The first falling fish.
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config

        # Play area, resized by the presentation layer
        self.play_width: float = float(config.board.width)
        self.play_height: float = float(config.board.height)

        self.score: int = 0
        self.lives: int = config.lives.max
        self.fish_speed: float = config.fish.base_speed
        self.paused: bool = False

        self.fish: FallingObject = fish
        self.net = Catcher(
            x=0.0,
            y=0.0,
            base_width=config.net.width,
            base_height=config.net.height,
            scale=config.net.scale
        )
        self.particles = ParticlePool(config.particles.capacity)

        # Counters for info and observations
        self.catches: int = 0
        self.misses: int = 0
        self.ticks: int = 0

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def ended(self) -> bool:
        """True once all lives are lost."""
        return self.lives == 0

    @property
    def max_lives(self) -> int:
        return self._config.lives.max

    @property
    def base_speed(self) -> float:
        return self._config.fish.base_speed

    @property
    def margin_left(self) -> float:
        return float(self._config.board.margin_left)

    @property
    def margin_right(self) -> float:
        return float(self._config.board.margin_right)

    def restart(self, fish: FallingObject) -> None:
        """
        Reset to the start of a new session.

        Args:
            fish: Freshly spawned fish to start with.
        """
        self.score = 0
        self.fish_speed = self._config.fish.base_speed
        self.lives = self._config.lives.max
        self.paused = False
        self.particles.clear()
        self.fish = fish

        self.catches = 0
        self.misses = 0
        self.ticks = 0

    def pause(self) -> bool:
        """
        Pause the simulation.

        Returns:
            True if the session was paused by this call.
        """
        if self.paused or self.ended:
            return False
        self.paused = True
        return True

    def resume(self) -> bool:
        """
        Resume the simulation. A session with no lives left stays paused.

        Returns:
            True if the session was resumed by this call.
        """
        if self.lives == 0:
            return False
        was_paused = self.paused
        self.paused = False
        return was_paused

    def toggle(self) -> bool:
        """
        Resume if paused, else pause.

        Returns:
            True if the pause state changed.
        """
        if self.paused:
            return self.resume()
        return self.pause()

    def set_catcher_position(self, x: float, y: float) -> None:
        """Move the net. Clamping and centering are the caller's concern."""
        self.net.x = float(x)
        self.net.y = float(y)

    def set_catcher_scale(self, scale: float) -> None:
        """Set the net's presentation scale. Non-positive and non-finite values are ignored."""
        if math.isfinite(scale) and scale > 0:
            self.net.scale = float(scale)

    def resize(self, width: float, height: float) -> None:
        """
        Change the play area. Takes effect on the next miss test and spawn.

        Non-positive and non-finite sizes are ignored.
        """
        if math.isfinite(width) and width > 0:
            self.play_width = float(width)
        if math.isfinite(height) and height > 0:
            self.play_height = float(height)
