"""
Catch Core - The real-time simulation behind the pond catch game.

This module provides the session model, the per-frame update step, the
Gymnasium environment wrapper and all supporting systems (spawning,
collision, scoring, floating score text).

Main exports:
- CoreGame: Game object the presentation layer drives once per frame
- CatchEnv: Gymnasium environment for agent training
- SessionState: The mutable state of one session
- tick / overlaps / spawn: The pure building blocks of a frame
- GameConfig: Configuration loaded from game_config.yaml
"""

from pondcatch.catch_core.config_loader import GameConfig, load_config
from pondcatch.catch_core.species_catalog import FishKind, FishSpecies, SpeciesCatalog
from pondcatch.catch_core.rng import UniformSource, ScriptedSource
from pondcatch.catch_core.particles import Particle, ParticlePool
from pondcatch.catch_core.session import Catcher, FallingObject, SessionState
from pondcatch.catch_core.collision import overlaps
from pondcatch.catch_core.spawner import FishSpawner, spawn
from pondcatch.catch_core.update import TickResult, tick
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.env_gym import CatchEnv

__all__ = [
    "GameConfig",
    "load_config",
    "FishKind",
    "FishSpecies",
    "SpeciesCatalog",
    "UniformSource",
    "ScriptedSource",
    "Particle",
    "ParticlePool",
    "Catcher",
    "FallingObject",
    "SessionState",
    "overlaps",
    "FishSpawner",
    "spawn",
    "TickResult",
    "tick",
    "CoreGame",
    "CatchEnv",
]
