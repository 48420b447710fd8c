"""
Game Rules
==========

Handles spawn positioning and the miss / life-loss rule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from pondcatch.catch_core.session import SessionState


@dataclass
class MissResult:
    """Result of applying a miss."""
    lives_left: int
    ended: bool


class SpawnRules:
    """
    Horizontal spawn range.

    Fish spawn between the side margins so they never start inside the
    decorative columns. A play area too narrow for the margins, or one
    whose width is not finite, collapses the range onto the left margin.
    """

    @staticmethod
    def get_spawn_x_range(
        play_width: float,
        fish_size: float,
        margin_left: float,
        margin_right: float
    ) -> Tuple[float, float]:
        """
        Get valid spawn X range.

        Args:
            play_width: Current play area width.
            fish_size: Side of the fish square.
            margin_left: Spawn-free column on the left.
            margin_right: Spawn-free column on the right.

        Returns:
            (min_x, max_x) tuple with min_x <= max_x.
        """
        min_x = margin_left
        max_x = play_width - margin_right - fish_size
        if not math.isfinite(max_x) or not max_x > min_x:
            return (min_x, min_x)
        return (min_x, max_x)

    @classmethod
    def sample_to_spawn_x(
        cls,
        r: float,
        play_width: float,
        fish_size: float,
        margin_left: float,
        margin_right: float
    ) -> float:
        """
        Convert a uniform sample in [0, 1) to a spawn X coordinate.

        Returns:
            X coordinate inside the spawn range.
        """
        min_x, max_x = cls.get_spawn_x_range(
            play_width, fish_size, margin_left, margin_right
        )
        return min_x + r * (max_x - min_x)

    @staticmethod
    def spawn_y(fish_size: float) -> float:
        """Y coordinate for spawning: fully above the visible area."""
        return -fish_size


class LifeRules:
    """
    Miss detection and life loss.

    A miss is a fish whose top edge has passed the bottom of the play area.
    Each miss costs one life; the session ends when lives reach zero.
    """

    @staticmethod
    def is_miss(state: SessionState) -> bool:
        """True if the current fish has left the play area."""
        return state.fish.y > state.play_height

    @staticmethod
    def apply_miss(state: SessionState) -> MissResult:
        """
        Take one life.

        Args:
            state: Session to update.

        Returns:
            MissResult with the remaining lives.
        """
        if state.lives > 0:
            state.lives -= 1
            state.misses += 1
        return MissResult(lives_left=state.lives, ended=state.ended)
