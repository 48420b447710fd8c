"""
Tests for the floating score text pool.
"""

import pytest

from pondcatch.catch_core.particles import ParticlePool


@pytest.fixture
def pool():
    return ParticlePool(capacity=4)


class TestParticleLifetime:
    """Test rise and expiry."""

    def test_text(self, pool):
        particle = pool.emit(10, 20, 5, life=40, rise_speed=2.0)
        assert particle.text == "+5"

    def test_decays_after_life(self, pool):
        """A 40-frame particle is gone after 40 ages, 80 px higher."""
        particle = pool.emit(100, 300, 3, life=40, rise_speed=2.0)

        for _ in range(39):
            assert pool.age() == 0
        assert len(pool) == 1
        assert particle.remaining_life == 1
        assert particle.y == pytest.approx(300 - 78)

        assert pool.age() == 1
        assert len(pool) == 0
        assert particle.y == pytest.approx(300 - 80)
        assert not particle.alive

    def test_x_does_not_move(self, pool):
        particle = pool.emit(123, 300, 1, life=10, rise_speed=2.0)
        for _ in range(5):
            pool.age()
        assert particle.x == 123

    def test_independent_lifetimes(self, pool):
        pool.emit(0, 0, 1, life=2, rise_speed=2.0)
        pool.emit(0, 0, 3, life=5, rise_speed=2.0)

        pool.age()
        pool.age()

        assert [p.value for p in pool] == [3]

    def test_age_empty_pool(self, pool):
        assert pool.age() == 0
        assert len(pool) == 0


class TestParticleArena:
    """Test slot reuse and growth."""

    def test_grows_when_full(self):
        pool = ParticlePool(capacity=2)
        for i in range(3):
            pool.emit(i, 0, 1, life=10, rise_speed=2.0)

        assert len(pool) == 3
        assert pool.capacity == 4

    def test_reuses_free_slots(self):
        pool = ParticlePool(capacity=2)
        pool.emit(0, 0, 1, life=1, rise_speed=2.0)
        pool.emit(0, 0, 1, life=10, rise_speed=2.0)
        pool.age()

        pool.emit(0, 0, 5, life=10, rise_speed=2.0)

        assert len(pool) == 2
        assert pool.capacity == 2
        assert sorted(p.value for p in pool) == [1, 5]

    def test_clear(self, pool):
        for _ in range(6):
            pool.emit(0, 0, 1, life=10, rise_speed=2.0)

        pool.clear()

        assert len(pool) == 0
        assert list(pool) == []
        pool.emit(0, 0, 3, life=10, rise_speed=2.0)
        assert len(pool) == 1
