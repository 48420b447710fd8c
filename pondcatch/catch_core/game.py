"""
Core Game
=========

Main game object combining the session state, spawner, update step and
scoring. This is the surface a presentation or input layer talks to.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pondcatch.catch_core.config_loader import GameConfig, get_config
from pondcatch.catch_core.particles import Particle
from pondcatch.catch_core.rng import UniformSource
from pondcatch.catch_core.scoring import color_for_value, portrait_tier
from pondcatch.catch_core.session import FallingObject, SessionState
from pondcatch.catch_core.spawner import FishSpawner, RandomSource
from pondcatch.catch_core.state_snapshot import GameSnapshot, SnapshotBuilder
from pondcatch.catch_core.species_catalog import SpeciesCatalog
from pondcatch.catch_core.update import TickResult, tick


class CoreGame:
    """
    Main game simulation class.

    Owns:
    - Session state (score, lives, speed, fish, net, particles)
    - Fish spawner and its random source

    One tick = one displayed frame. The frame pump calls tick(); input code
    calls set_catcher_position() and the control commands between frames.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None
    ):
        """
        Initialize game and spawn the first fish.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Ignored when rng is given.
            rng: Custom uniform source, e.g. a ScriptedSource in tests.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._rng = rng if rng is not None else UniformSource(seed)
        self._catalog = SpeciesCatalog(config)
        self._spawner = FishSpawner(config, self._rng, self._catalog)

        self._session = SessionState(
            self._spawner.spawn(config.board.width, config.board.height),
            config
        )
        self._snapshot_builder = SnapshotBuilder(config)
        self._last_result: Optional[TickResult] = None

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def catalog(self) -> SpeciesCatalog:
        """Species table."""
        return self._catalog

    @property
    def session(self) -> SessionState:
        """Underlying session state (read it, don't mutate it)."""
        return self._session

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def lives(self) -> int:
        return self._session.lives

    @property
    def paused(self) -> bool:
        return self._session.paused

    @property
    def ended(self) -> bool:
        """True once all lives are lost."""
        return self._session.ended

    @property
    def fish_speed(self) -> float:
        return self._session.fish_speed

    @property
    def fish(self) -> FallingObject:
        """The fish currently falling."""
        return self._session.fish

    @property
    def particles(self) -> List[Particle]:
        """Live floating score texts."""
        return list(self._session.particles)

    @property
    def last_result(self) -> Optional[TickResult]:
        """Result of the most recent tick, or None before the first."""
        return self._last_result

    # ------------------------------------------------------------------
    # Frame pump and controls
    # ------------------------------------------------------------------

    def tick(self) -> TickResult:
        """Advance one frame."""
        self._last_result = tick(self._session, self._spawner)
        return self._last_result

    def restart(self, seed: Optional[int] = None) -> None:
        """
        Start a new session.

        Args:
            seed: Reseed the random source first. Keeps the sequence going if None.
        """
        if seed is not None:
            self._seed = seed
            self._rng.reset(seed)
        self._session.restart(self._spawner.spawn_for(self._session))
        self._last_result = None

    def pause(self) -> bool:
        return self._session.pause()

    def resume(self) -> bool:
        return self._session.resume()

    def toggle(self) -> bool:
        """Escape-key behaviour: resume if paused, else pause."""
        return self._session.toggle()

    def set_catcher_position(self, x: float, y: float) -> None:
        """Move the net's top-left corner."""
        self._session.set_catcher_position(x, y)

    def set_catcher_scale(self, scale: float) -> None:
        self._session.set_catcher_scale(scale)

    def resize(self, width: float, height: float) -> None:
        """Change the play area, e.g. when the window is resized."""
        self._session.resize(width, height)

    # ------------------------------------------------------------------
    # Render adapter boundary
    # ------------------------------------------------------------------

    def build_snapshot(self, board_rgb=None) -> GameSnapshot:
        """Build current session snapshot."""
        return self._snapshot_builder.build(self._session, board_rgb=board_rgb)

    def get_info(self) -> Dict[str, Any]:
        """Get additional info dict for Gymnasium."""
        state = self._session
        return {
            "score": state.score,
            "lives": state.lives,
            "fish_speed": state.fish_speed,
            "catches": state.catches,
            "misses": state.misses,
            "ticks": state.ticks,
            "paused": state.paused,
            "ended": state.ended,
        }

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data needed for rendering.

        Returns:
            Dict with play area, fish, net, particles and HUD values.
        """
        state = self._session
        fish = state.fish
        net = state.net

        particles_data = []
        for particle in state.particles:
            particles_data.append({
                "x": particle.x,
                "y": particle.y,
                "text": particle.text,
                "value": particle.value,
                "color": color_for_value(particle.value, self._config),
                "remaining_life": particle.remaining_life,
            })

        return {
            "play_width": state.play_width,
            "play_height": state.play_height,
            "margin_left": state.margin_left,
            "margin_right": state.margin_right,
            "fish": {
                "x": fish.x,
                "y": fish.y,
                "size": fish.size,
                "kind": fish.kind.value,
                "value": fish.value,
                "color": color_for_value(fish.value, self._config),
            },
            "net": {
                "x": net.x,
                "y": net.y,
                "width": net.width,
                "height": net.height,
                "visible": not state.paused and not state.ended,
            },
            "particles": particles_data,
            "score": state.score,
            "lives": state.lives,
            "max_lives": state.max_lives,
            "fish_speed": state.fish_speed,
            "paused": state.paused,
            "ended": state.ended,
            "portrait_tier": portrait_tier(state.score, self._config.portraits.thresholds),
        }
