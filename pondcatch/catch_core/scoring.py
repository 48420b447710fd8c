"""
Scoring System
==============

Applies catch rewards: points, floating score text and the speed ramp.
Also maps scores to the presentation tiers (text color, portrait).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from pondcatch.catch_core.config_loader import GameConfig, get_config
from pondcatch.catch_core.session import FallingObject, SessionState
from pondcatch.catch_core.species_catalog import FishKind


@dataclass
class ScoreEvent:
    """Record of a catch."""
    points: int
    kind: FishKind
    x: float                    # Where the score text appeared
    y: float
    speed_after: float          # Fish speed after the ramp

    def __repr__(self) -> str:
        return f"ScoreEvent({self.kind.value}=+{self.points}, speed={self.speed_after:.1f})"


def apply_catch(state: SessionState, fish: FallingObject) -> ScoreEvent:
    """
    Reward a catch.

    Adds the fish's value to the score, emits a floating text at the top
    center of the fish and raises the fish speed by the fixed increment.
    Replacing the fish is left to the caller.

    Args:
        state: Session to update.
        fish: The fish that was caught.

    Returns:
        ScoreEvent describing the catch.
    """
    config = state.config

    state.score += fish.value
    state.catches += 1

    text_x = fish.center_x
    text_y = fish.y
    state.particles.emit(
        text_x,
        text_y,
        fish.value,
        life=config.particles.life,
        rise_speed=config.particles.rise_speed
    )

    # Unconditional on every catch, no cap
    state.fish_speed += config.fish.speed_increment

    return ScoreEvent(
        points=fish.value,
        kind=fish.kind,
        x=text_x,
        y=text_y,
        speed_after=state.fish_speed
    )


def color_for_value(value: int, config: Optional[GameConfig] = None) -> Tuple[int, int, int]:
    """
    Color of the floating text for a score value.

    Gold for 5, blue for 3, white otherwise (with the shipped config).
    """
    if config is None:
        config = get_config()
    return config.colors.for_value(value)


def portrait_tier(score: int, thresholds: Optional[Sequence[int]] = None) -> int:
    """
    Portrait index for a score.

    Args:
        score: Current score.
        thresholds: Ascending score thresholds. Uses config if None.

    Returns:
        Number of thresholds reached, from 0 to len(thresholds).
    """
    if thresholds is None:
        thresholds = get_config().portraits.thresholds
    return sum(1 for t in thresholds if score >= t)
