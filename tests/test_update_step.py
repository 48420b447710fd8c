"""
Tests for the per-frame update step.
"""

import random

import pytest

from pondcatch.catch_core.config_loader import load_config
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.rng import ScriptedSource
from pondcatch.catch_core.species_catalog import FishKind


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    # Every fish is a grasscarp (value 3) spawned at x=350
    return CoreGame(config=config, rng=ScriptedSource([0.5, 0.6]))


def force_hit(game):
    """Put the net on the fish and tick once."""
    fish = game.fish
    game.set_catcher_position(fish.x, fish.y)
    result = game.tick()
    assert result.caught
    return result


def force_miss(game, max_ticks=1000):
    """Move the net away and tick until the fish leaves the play area."""
    game.set_catcher_position(-10000, -10000)
    for _ in range(max_ticks):
        result = game.tick()
        if result.missed:
            return result
    raise AssertionError("fish never left the play area")


class TestFalling:
    """Test fish motion."""

    def test_first_fish(self, game):
        assert game.fish.kind is FishKind.GRASSCARP
        assert game.fish.x == pytest.approx(350)
        assert game.fish.y == -100

    def test_falls_by_speed(self, game):
        game.set_catcher_position(-10000, -10000)
        game.tick()
        assert game.fish.y == pytest.approx(-97)
        game.tick()
        assert game.fish.y == pytest.approx(-94)

    def test_miss_needs_top_edge_past_bottom(self, game):
        """y == play_height is not yet a miss."""
        game.set_catcher_position(-10000, -10000)
        game.session.fish.y = 597

        result = game.tick()
        assert game.fish.y == pytest.approx(600)
        assert not result.missed

        result = game.tick()
        assert result.missed
        assert game.lives == 2


class TestCatch:
    """Test scoring on a hit."""

    def test_hit_scores_and_respawns(self, game):
        result = force_hit(game)

        assert result.delta_score == 3
        assert result.catch.points == 3
        assert game.score == 3
        assert game.fish_speed == pytest.approx(3.2)
        assert game.fish.y == -100
        assert game.session.catches == 1

    def test_hit_emits_particle(self, game):
        """Text appears at the top center of the fish with its full life."""
        force_hit(game)

        particles = game.particles
        assert len(particles) == 1
        assert particles[0].x == pytest.approx(350 + 50)
        assert particles[0].y == pytest.approx(-97)
        assert particles[0].remaining_life == 40
        assert particles[0].text == "+3"

    def test_particle_shown_for_full_life(self, game):
        """A caught fish's text is visible on exactly 40 frames."""
        force_hit(game)
        game.set_catcher_position(-10000, -10000)

        frames = 1
        while game.particles:
            game.tick()
            if game.particles:
                frames += 1

        assert frames == 40

    def test_speed_ramp(self, game):
        """Speed is base + increment * hits, with no cap."""
        for _ in range(5):
            force_hit(game)

        assert game.fish_speed == pytest.approx(3.0 + 5 * 0.2)
        assert game.score == 15

    def test_speed_never_decreases_on_miss(self, game):
        force_hit(game)
        force_miss(game)
        assert game.fish_speed == pytest.approx(3.2)

    def test_hit_and_miss_exclusive(self, game):
        """A frame that misses never tests for a catch."""
        fish = game.fish
        game.session.fish.y = 598
        # The net sits where the fish lands this frame
        game.set_catcher_position(fish.x, 590)

        result = game.tick()

        assert result.missed
        assert not result.caught
        assert game.score == 0
        assert game.lives == 2


class TestLifeLoss:
    """Test misses and the end of the session."""

    def test_miss_respawns(self, game):
        result = force_miss(game)

        assert result.missed
        assert not result.ended
        assert game.lives == 2
        assert game.fish.y == -100

    def test_last_miss_leaves_fish(self, game):
        force_miss(game)
        force_miss(game)

        game.session.fish.y = 598
        fish = game.fish
        result = game.tick()

        assert result.ended
        assert game.ended
        assert game.lives == 0
        assert game.fish is fish
        assert game.fish.y == pytest.approx(601)

    def test_terminal_lockout(self, game):
        """Ticks after game over change nothing but particle ages."""
        force_hit(game)
        for _ in range(3):
            force_miss(game)
        assert game.ended

        fish = game.fish
        y = fish.y
        score = game.score
        speed = game.fish_speed

        for _ in range(50):
            game.set_catcher_position(fish.x, fish.y)
            result = game.tick()
            assert not result.advanced
            assert not result.caught
            assert not result.missed

        assert game.fish is fish
        assert game.fish.y == y
        assert game.score == score
        assert game.lives == 0
        assert game.fish_speed == speed

    def test_resize_changes_miss_line(self, game):
        game.resize(800, 300)
        game.set_catcher_position(-10000, -10000)

        ticks = 0
        while not game.tick().missed:
            ticks += 1
            assert ticks < 1000

        # From -100 to just past 300 at 3 px per frame
        assert ticks == 133


class TestParticleAging:
    """Particles age every frame, whatever the session state."""

    def test_ages_while_paused(self, game):
        force_hit(game)
        game.pause()

        y = game.particles[0].y
        fish_y = game.fish.y
        for _ in range(10):
            result = game.tick()
            assert not result.advanced

        assert game.fish.y == fish_y
        assert game.particles[0].y == pytest.approx(y - 20)
        assert game.particles[0].remaining_life == 30

    def test_expire_while_paused(self, game):
        force_hit(game)
        game.pause()

        expired = sum(game.tick().particles_expired for _ in range(40))

        assert expired == 1
        assert game.particles == []

    def test_ages_after_game_over(self, game):
        for _ in range(3):
            force_miss(game)
        assert game.ended

        game.session.particles.emit(100, 100, 5, life=40, rise_speed=2.0)
        for _ in range(39):
            game.tick()
        assert game.particles[0].y == pytest.approx(100 - 78)

        game.tick()
        assert game.particles == []


class TestRandomPlay:
    """Property checks over long random sessions."""

    def test_score_and_lives_bookkeeping(self, config):
        game = CoreGame(config=config, seed=7)
        moves = random.Random(99)

        for _ in range(20000):
            score = game.score
            lives = game.lives
            speed = game.fish_speed

            game.set_catcher_position(
                moves.uniform(-100, 800),
                moves.uniform(-100, 600)
            )
            result = game.tick()

            if result.caught:
                assert result.catch.points in (1, 3, 5)
                assert game.score == score + result.catch.points
                assert game.fish_speed == pytest.approx(speed + 0.2)
            else:
                assert game.score == score
                assert game.fish_speed == speed

            if result.missed:
                assert game.lives == lives - 1
            else:
                assert game.lives == lives

            assert 0 <= game.lives <= 3
            assert game.ended == (game.lives == 0)

            if game.ended:
                game.restart()

    def test_spawn_stays_between_margins(self, config):
        game = CoreGame(config=config, seed=3)
        moves = random.Random(5)

        for _ in range(5000):
            game.set_catcher_position(moves.uniform(0, 700), moves.uniform(0, 500))
            game.tick()
            if game.fish.y == -100:
                assert 50 <= game.fish.x < 650
            if game.ended:
                game.restart()
