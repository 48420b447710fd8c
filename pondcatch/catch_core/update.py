"""
Update Step
===========

Advances a session by exactly one frame.

Speeds are pixels per frame and particle lifetimes are frames, so game
feel depends on the frame pump calling tick() at a steady rate (~60 Hz).
There is no delta-time model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pondcatch.catch_core.collision import overlaps
from pondcatch.catch_core.rules import LifeRules
from pondcatch.catch_core.scoring import ScoreEvent, apply_catch
from pondcatch.catch_core.session import SessionState
from pondcatch.catch_core.spawner import FishSpawner


@dataclass
class TickResult:
    """Result of a single frame."""
    advanced: bool                  # False while paused or ended
    catch: Optional[ScoreEvent]
    missed: bool
    ended: bool                     # True only on the frame the last life is lost
    delta_score: int
    particles_expired: int

    @property
    def caught(self) -> bool:
        return self.catch is not None


def tick(state: SessionState, spawner: FishSpawner) -> TickResult:
    """
    Advance the session by one frame.

    While the session is running:
    1. The fish falls by the current speed.
    2. If it has left the play area, a life is lost; the fish is replaced
       unless that was the last life, in which case it stays where it is.
    3. Otherwise, if it overlaps the net, the catch is scored and the
       fish is replaced.

    Particles age first on every call, paused or ended included. A
    particle emitted this frame keeps its emission point and full life
    until the next call.

    Args:
        state: Session to advance.
        spawner: Source of replacement fish.

    Returns:
        TickResult describing what happened this frame.
    """
    state.ticks += 1

    advanced = False
    catch: Optional[ScoreEvent] = None
    missed = False
    ended_now = False
    score_before = state.score

    expired = state.particles.age()

    if not state.paused and not state.ended:
        advanced = True
        state.fish.y += state.fish_speed

        if LifeRules.is_miss(state):
            missed = True
            result = LifeRules.apply_miss(state)
            if result.ended:
                ended_now = True
            else:
                state.fish = spawner.spawn_for(state)

        elif overlaps(state.fish, state.fish.size, state.net):
            catch = apply_catch(state, state.fish)
            state.fish = spawner.spawn_for(state)

    return TickResult(
        advanced=advanced,
        catch=catch,
        missed=missed,
        ended=ended_now,
        delta_score=state.score - score_before,
        particles_expired=expired
    )
