"""
State Snapshot
==============

Packs session state into fixed-size numpy arrays for Gymnasium observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import numpy as np

from pondcatch.catch_core.config_loader import GameConfig, get_config
from pondcatch.catch_core.session import SessionState


@dataclass
class GameSnapshot:
    """
    Complete session snapshot.

    Particle arrays are fixed-size with a mask for the live entries.
    """
    # Core state
    score: int
    lives: int
    fish_speed: float
    paused: bool
    ended: bool
    ticks: int
    catches: int
    misses: int

    # Play area
    play_width: float
    play_height: float

    # Fish
    fish_x: float
    fish_y: float
    fish_size: float
    fish_species_id: int
    fish_value: int

    # Net (effective bounds)
    net_x: float
    net_y: float
    net_width: float
    net_height: float

    # Derived features
    frames_to_exit: float             # Frames until the fish leaves the play area
    fish_net_dx: float                # Fish center X minus net center X

    # Particle arrays (fixed size, padded)
    particles_count: int
    particle_x: np.ndarray            # (MAX_PARTICLES,) float32
    particle_y: np.ndarray            # (MAX_PARTICLES,) float32
    particle_value: np.ndarray        # (MAX_PARTICLES,) int16
    particle_life: np.ndarray         # (MAX_PARTICLES,) int16
    particle_mask: np.ndarray         # (MAX_PARTICLES,) int8

    # Optional image
    board_rgb: Optional[np.ndarray] = None

    def to_obs_dict(self) -> Dict[str, np.ndarray]:
        """Convert to Gymnasium observation dictionary."""
        obs = {
            # Core state
            "score": np.array(self.score, dtype=np.int64),
            "lives": np.array(self.lives, dtype=np.int32),
            "fish_speed": np.array(self.fish_speed, dtype=np.float32),
            "paused": np.array(int(self.paused), dtype=np.int8),
            "ended": np.array(int(self.ended), dtype=np.int8),
            "ticks": np.array(self.ticks, dtype=np.int64),
            "catches": np.array(self.catches, dtype=np.int64),
            "misses": np.array(self.misses, dtype=np.int32),

            # Play area
            "play_width": np.array(self.play_width, dtype=np.float32),
            "play_height": np.array(self.play_height, dtype=np.float32),

            # Fish
            "fish_x": np.array(self.fish_x, dtype=np.float32),
            "fish_y": np.array(self.fish_y, dtype=np.float32),
            "fish_size": np.array(self.fish_size, dtype=np.float32),
            "fish_species_id": np.array(self.fish_species_id, dtype=np.int32),
            "fish_value": np.array(self.fish_value, dtype=np.int32),

            # Net
            "net_x": np.array(self.net_x, dtype=np.float32),
            "net_y": np.array(self.net_y, dtype=np.float32),
            "net_width": np.array(self.net_width, dtype=np.float32),
            "net_height": np.array(self.net_height, dtype=np.float32),

            # Derived
            "frames_to_exit": np.array(self.frames_to_exit, dtype=np.float32),
            "fish_net_dx": np.array(self.fish_net_dx, dtype=np.float32),

            # Particles
            "particles_count": np.array(self.particles_count, dtype=np.int32),
            "particle_x": self.particle_x,
            "particle_y": self.particle_y,
            "particle_value": self.particle_value,
            "particle_life": self.particle_life,
            "particle_mask": self.particle_mask,
        }

        if self.board_rgb is not None:
            obs["board_rgb"] = self.board_rgb

        return obs


class SnapshotBuilder:
    """Builds session snapshots with fixed-size particle arrays."""

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._config = config
        self._max_particles = config.observation.max_particles

    @property
    def max_particles(self) -> int:
        return self._max_particles

    def build(
        self,
        state: SessionState,
        board_rgb: Optional[np.ndarray] = None
    ) -> GameSnapshot:
        """
        Build a snapshot of the session.

        Args:
            state: Session to capture.
            board_rgb: Optional rendered image to attach.

        Returns:
            GameSnapshot with particle arrays padded to max_particles.
            Particles beyond that are dropped from the arrays but still
            counted in particles_count.
        """
        max_p = self._max_particles
        particle_x = np.zeros(max_p, dtype=np.float32)
        particle_y = np.zeros(max_p, dtype=np.float32)
        particle_value = np.zeros(max_p, dtype=np.int16)
        particle_life = np.zeros(max_p, dtype=np.int16)
        particle_mask = np.zeros(max_p, dtype=np.int8)

        for i, particle in enumerate(state.particles):
            if i >= max_p:
                break
            particle_x[i] = particle.x
            particle_y[i] = particle.y
            particle_value[i] = particle.value
            particle_life[i] = particle.remaining_life
            particle_mask[i] = 1

        fish = state.fish
        net = state.net

        # Distance left until the top edge passes the bottom of the play area
        remaining = max(0.0, state.play_height - fish.y)
        frames_to_exit = remaining / state.fish_speed if state.fish_speed > 0 else 0.0

        fish_net_dx = fish.center_x - (net.x + net.width / 2)

        return GameSnapshot(
            score=state.score,
            lives=state.lives,
            fish_speed=state.fish_speed,
            paused=state.paused,
            ended=state.ended,
            ticks=state.ticks,
            catches=state.catches,
            misses=state.misses,
            play_width=state.play_width,
            play_height=state.play_height,
            fish_x=fish.x,
            fish_y=fish.y,
            fish_size=fish.size,
            fish_species_id=fish.species_id,
            fish_value=fish.value,
            net_x=net.x,
            net_y=net.y,
            net_width=net.width,
            net_height=net.height,
            frames_to_exit=frames_to_exit,
            fish_net_dx=fish_net_dx,
            particles_count=len(state.particles),
            particle_x=particle_x,
            particle_y=particle_y,
            particle_value=particle_value,
            particle_life=particle_life,
            particle_mask=particle_mask,
            board_rgb=board_rgb
        )
