"""
Test suite for snapshots, observation arrays and the solid renderer.

Ensures the environment returns correctly shaped and typed observations
and that the headless renderer draws the scene it is given.
"""

import numpy as np
import pytest

from pondcatch.catch_core.config_loader import load_config
from pondcatch.catch_core.env_gym import CatchEnv
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.render_solid import KIND_COLORS, SolidRenderer
from pondcatch.catch_core.rng import ScriptedSource


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    # Carp at x=50 every time
    return CoreGame(config=config, rng=ScriptedSource([0.0, 0.0]))


class TestObservationAPI:
    """Verify observation dtypes and shapes."""

    @pytest.fixture
    def obs_after_reset(self):
        env = CatchEnv()
        obs, _ = env.reset(seed=42)
        env.close()
        return obs

    @pytest.mark.parametrize("key, dtype", [
        ("score", np.int64),
        ("ticks", np.int64),
        ("catches", np.int64),
        ("lives", np.int32),
        ("misses", np.int32),
        ("fish_species_id", np.int32),
        ("fish_value", np.int32),
        ("particles_count", np.int32),
        ("paused", np.int8),
        ("ended", np.int8),
        ("fish_speed", np.float32),
        ("fish_x", np.float32),
        ("fish_y", np.float32),
        ("net_x", np.float32),
        ("frames_to_exit", np.float32),
        ("fish_net_dx", np.float32),
    ])
    def test_scalar(self, obs_after_reset, key, dtype):
        assert obs_after_reset[key].dtype == dtype
        assert obs_after_reset[key].shape == ()

    @pytest.mark.parametrize("key, dtype", [
        ("particle_x", np.float32),
        ("particle_y", np.float32),
        ("particle_value", np.int16),
        ("particle_life", np.int16),
        ("particle_mask", np.int8),
    ])
    def test_particle_arrays(self, obs_after_reset, config, key, dtype):
        assert obs_after_reset[key].dtype == dtype
        assert obs_after_reset[key].shape == (config.observation.max_particles,)

    def test_no_image_by_default(self, obs_after_reset):
        assert "board_rgb" not in obs_after_reset


class TestSnapshot:
    """Test snapshot contents."""

    def test_fish_fields(self, game):
        snap = game.build_snapshot()

        assert snap.fish_x == 50
        assert snap.fish_y == -100
        assert snap.fish_value == 1
        assert snap.fish_species_id == 0
        assert snap.lives == 3

    def test_frames_to_exit(self, game):
        snap = game.build_snapshot()
        assert snap.frames_to_exit == pytest.approx(700 / 3.0)

    def test_fish_net_dx(self, game):
        game.set_catcher_position(0, 0)
        snap = game.build_snapshot()
        assert snap.fish_net_dx == pytest.approx(100 - 90)

    def test_particles_padded(self, game):
        game.set_catcher_position(game.fish.x, game.fish.y)
        game.tick()

        obs = game.build_snapshot().to_obs_dict()

        assert int(obs["particles_count"]) == 1
        assert obs["particle_mask"].tolist()[:2] == [1, 0]
        assert obs["particle_value"][0] == 1
        assert obs["particle_life"][0] == 40

    def test_particles_beyond_capacity(self, game, config):
        for i in range(10):
            game.session.particles.emit(i, 0, 3, life=40, rise_speed=2.0)

        snap = game.build_snapshot()

        assert snap.particles_count == 10
        assert int(snap.particle_mask.sum()) == config.observation.max_particles


class TestSolidRenderer:
    """Test the numpy renderer."""

    def test_shape(self, game, config):
        img = SolidRenderer(config).render(game.get_render_data(), 200, 150)
        assert img.shape == (150, 200, 3)
        assert img.dtype == np.uint8

    def test_fish_drawn(self, game, config):
        game.session.fish.y = 200
        img = SolidRenderer(config).render(game.get_render_data(), 800, 600)

        # Center of the carp square
        assert tuple(img[250, 100]) == KIND_COLORS["carp"]

    def test_paused_is_dimmed(self, game, config):
        renderer = SolidRenderer(config)
        game.session.fish.y = 200

        bright = renderer.render(game.get_render_data(), 800, 600)
        game.pause()
        dim = renderer.render(game.get_render_data(), 800, 600)

        assert int(dim[250, 100].sum()) < int(bright[250, 100].sum())
