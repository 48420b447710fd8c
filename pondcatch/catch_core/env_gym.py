"""
Gymnasium Environment Wrapper
=============================

Provides a standard Gymnasium interface to the pond catch game.
One environment step is one frame. Reward is the points scored that frame.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple
import numpy as np

import gymnasium as gym
from gymnasium import spaces

from pondcatch.catch_core.config_loader import GameConfig, load_config
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.state_snapshot import GameSnapshot


class CatchEnv(gym.Env):
    """
    Pond catch game as a Gymnasium environment.

    Action Space:
        Box(low=-1.0, high=1.0, shape=(2,), dtype=float32)
        Net center as (x, y), normalized over the play area:
        -1 is the left/top edge, +1 the right/bottom edge.

    Observation Space:
        Dict containing structured session state and optional RGB image.

    Reward:
        Points scored on this frame (0 on most frames).

    Info:
        Contains score, lives, fish_speed, catches, misses, delta_score,
        terminated_reason, etc.
    """

    metadata = {
        "render_modes": ["rgb_array"],
        "render_fps": 60,
    }

    def __init__(
        self,
        config_path: Optional[str] = None,
        render_mode: Optional[str] = None,
        image_obs: Optional[bool] = None,
        image_width: Optional[int] = None,
        image_height: Optional[int] = None,
        max_ticks: Optional[int] = None,
        debug: bool = False,
    ):
        """
        Initialize environment.

        Args:
            config_path: Path to game_config.yaml. Uses default if None.
            render_mode: "rgb_array" for numpy frames, None for headless.
            image_obs: If True, include board_rgb in observations. Config default if None.
            image_width: Override observation image width.
            image_height: Override observation image height.
            max_ticks: Override the episode tick cap.
            debug: If True, enables verbose debug output for agent development.
        """
        super().__init__()

        self._config = load_config(config_path)

        self.render_mode = render_mode
        self._image_obs = (
            self._config.observation.image_enabled if image_obs is None else image_obs
        )
        self._debug = debug

        self._img_width = image_width or self._config.observation.image_width
        self._img_height = image_height or self._config.observation.image_height
        self._max_ticks = max_ticks or self._config.caps.max_ticks

        self._game = CoreGame(config=self._config)
        self._steps = 0

        # Initialize renderer (lazy)
        self._renderer = None

        self.action_space = spaces.Box(
            low=-1.0,
            high=1.0,
            shape=(2,),
            dtype=np.float32
        )

        self.observation_space = self._build_observation_space()

        if self._debug:
            print(f"[DEBUG] CatchEnv initialized")
            print(f"[DEBUG]   Play area: {self._config.board.width}x{self._config.board.height}")
            print(f"[DEBUG]   Fish size: {self._config.fish.size}, base speed: {self._config.fish.base_speed}")
            print(f"[DEBUG]   Tick cap: {self._max_ticks}")

    def _build_observation_space(self) -> spaces.Dict:
        """Build the observation space definition."""
        max_p = self._config.observation.max_particles
        max_lives = self._config.lives.max
        num_species = self._config.num_species
        int_max = np.iinfo(np.int64).max

        def scalar(low, high, dtype):
            return spaces.Box(low=low, high=high, shape=(), dtype=dtype)

        obs_dict = {
            # Core state
            "score": scalar(0, int_max, np.int64),
            "lives": scalar(0, max_lives, np.int32),
            "fish_speed": scalar(0, np.inf, np.float32),
            "paused": scalar(0, 1, np.int8),
            "ended": scalar(0, 1, np.int8),
            "ticks": scalar(0, int_max, np.int64),
            "catches": scalar(0, int_max, np.int64),
            "misses": scalar(0, max_lives, np.int32),

            # Play area
            "play_width": scalar(0, np.inf, np.float32),
            "play_height": scalar(0, np.inf, np.float32),

            # Fish
            "fish_x": scalar(-np.inf, np.inf, np.float32),
            "fish_y": scalar(-np.inf, np.inf, np.float32),
            "fish_size": scalar(0, np.inf, np.float32),
            "fish_species_id": scalar(0, num_species - 1, np.int32),
            "fish_value": scalar(0, np.iinfo(np.int32).max, np.int32),

            # Net
            "net_x": scalar(-np.inf, np.inf, np.float32),
            "net_y": scalar(-np.inf, np.inf, np.float32),
            "net_width": scalar(0, np.inf, np.float32),
            "net_height": scalar(0, np.inf, np.float32),

            # Derived
            "frames_to_exit": scalar(0, np.inf, np.float32),
            "fish_net_dx": scalar(-np.inf, np.inf, np.float32),

            # Particles
            "particles_count": scalar(0, np.iinfo(np.int32).max, np.int32),
            "particle_x": spaces.Box(low=-np.inf, high=np.inf, shape=(max_p,), dtype=np.float32),
            "particle_y": spaces.Box(low=-np.inf, high=np.inf, shape=(max_p,), dtype=np.float32),
            "particle_value": spaces.Box(low=0, high=np.iinfo(np.int16).max, shape=(max_p,), dtype=np.int16),
            "particle_life": spaces.Box(low=0, high=np.iinfo(np.int16).max, shape=(max_p,), dtype=np.int16),
            "particle_mask": spaces.MultiBinary(max_p),
        }

        if self._image_obs:
            obs_dict["board_rgb"] = spaces.Box(
                low=0,
                high=255,
                shape=(self._img_height, self._img_width, 3),
                dtype=np.uint8
            )

        return spaces.Dict(obs_dict)

    def action_to_catcher_position(self, action: np.ndarray) -> Tuple[float, float]:
        """
        Convert a normalized net center to the net's top-left corner.

        Args:
            action: (x, y) in [-1, 1]; values outside are clipped.

        Returns:
            (x, y) catcher position in play-area pixels.
        """
        ax, ay = np.clip(np.asarray(action, dtype=np.float64).reshape(2), -1.0, 1.0)
        state = self._game.session
        center_x = (ax + 1.0) / 2.0 * state.play_width
        center_y = (ay + 1.0) / 2.0 * state.play_height
        return (
            float(center_x - state.net.width / 2),
            float(center_y - state.net.height / 2)
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Reset the environment.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            (observation, info) tuple.
        """
        super().reset(seed=seed)

        self._game.restart(seed=seed)
        self._steps = 0

        obs = self._snapshot_to_obs(self._game.build_snapshot())
        info = self._build_info(delta_score=0)

        return obs, info

    def step(
        self,
        action: np.ndarray
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """
        Execute one frame.

        Args:
            action: Normalized net center (x, y) in [-1, 1].

        Returns:
            (observation, reward, terminated, truncated, info) tuple.
        """
        delta_score = 0
        if not self._game.ended:
            x, y = self.action_to_catcher_position(action)
            self._game.set_catcher_position(x, y)
            result = self._game.tick()
            delta_score = result.delta_score
            self._steps += 1

        terminated = self._game.ended
        truncated = not terminated and self._steps >= self._max_ticks

        obs = self._snapshot_to_obs(self._game.build_snapshot())
        info = self._build_info(delta_score=delta_score, truncated=truncated)

        if self._debug and (delta_score or terminated):
            print(f"[DEBUG] Step {self._steps}: delta_score={delta_score}, "
                  f"score={info['score']}, lives={info['lives']}, "
                  f"speed={info['fish_speed']:.1f}")
            if terminated:
                print(f"[DEBUG] TERMINATED: {info['terminated_reason']}")

        return obs, float(delta_score), terminated, truncated, info

    def _build_info(self, delta_score: int, truncated: bool = False) -> Dict[str, Any]:
        """Build the info dict."""
        info = self._game.get_info()
        info["delta_score"] = delta_score
        info["steps"] = self._steps
        if self._game.ended:
            info["terminated_reason"] = "out_of_lives"
        elif truncated:
            info["terminated_reason"] = "tick_cap"
        else:
            info["terminated_reason"] = ""
        return info

    def _snapshot_to_obs(self, snapshot: GameSnapshot) -> Dict[str, np.ndarray]:
        """Convert snapshot to observation dict."""
        obs = snapshot.to_obs_dict()

        if self._image_obs:
            obs["board_rgb"] = self._render_to_array()

        return obs

    def _render_to_array(self) -> np.ndarray:
        """Render board to RGB array."""
        if self._renderer is None:
            from pondcatch.catch_core.render_solid import SolidRenderer
            self._renderer = SolidRenderer(self._config)

        return self._renderer.render(
            self._game.get_render_data(),
            self._img_width,
            self._img_height
        )

    def render(self) -> Optional[np.ndarray]:
        """
        Render the current game state.

        Returns:
            RGB array if render_mode is "rgb_array", None otherwise.
        """
        if self.render_mode == "rgb_array":
            return self._render_to_array()
        return None

    def close(self) -> None:
        """Clean up resources."""
        if self._renderer is not None:
            self._renderer.close()
            self._renderer = None

    @property
    def game(self) -> CoreGame:
        """Access to underlying game (for debugging/tools)."""
        return self._game

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config
