"""
Tests for the fish/net overlap test.
"""

import pytest

from pondcatch.catch_core.collision import overlaps
from pondcatch.catch_core.session import Catcher, FallingObject
from pondcatch.catch_core.species_catalog import FishKind


@pytest.fixture
def fish():
    return FallingObject(x=0.0, y=0.0, kind=FishKind.CARP, value=1, size=100)


def make_net(x, y, scale=1.0):
    return Catcher(x=x, y=y, base_width=180, base_height=160, scale=scale)


class TestOverlap:
    """Test strict AABB overlap."""

    def test_contained(self, fish):
        assert overlaps(fish, 100, make_net(-40, -30))

    def test_far_apart(self, fish):
        assert not overlaps(fish, 100, make_net(500, 500))

    @pytest.mark.parametrize("net_x, net_y", [
        (100, 0),       # net starts at fish right edge
        (-180, 0),      # net ends at fish left edge
        (0, 100),       # net starts at fish bottom edge
        (0, -160),      # net ends at fish top edge
    ])
    def test_shared_edge_is_not_overlap(self, fish, net_x, net_y):
        """Boxes that only touch do not overlap."""
        assert not overlaps(fish, 100, make_net(net_x, net_y))

    @pytest.mark.parametrize("net_x, net_y", [
        (99, 0),
        (-179, 0),
        (0, 99),
        (0, -159),
    ])
    def test_one_unit_overlap(self, fish, net_x, net_y):
        assert overlaps(fish, 100, make_net(net_x, net_y))

    def test_corner_touch(self, fish):
        assert not overlaps(fish, 100, make_net(100, 100))
        assert overlaps(fish, 100, make_net(99.5, 99.5))


class TestNetScale:
    """The effective net size is the base size times the scale."""

    def test_effective_size(self):
        net = make_net(0, 0, scale=0.5)
        assert net.width == 90
        assert net.height == 80

    def test_smaller_net_misses(self):
        fish = FallingObject(x=95.0, y=0.0, kind=FishKind.BETA, value=5, size=100)

        assert overlaps(fish, 100, make_net(0, 0, scale=1.0))
        assert not overlaps(fish, 100, make_net(0, 0, scale=0.5))

    def test_larger_net_catches(self):
        fish = FallingObject(x=200.0, y=0.0, kind=FishKind.BETA, value=5, size=100)

        assert not overlaps(fish, 100, make_net(0, 0, scale=1.0))
        assert overlaps(fish, 100, make_net(0, 0, scale=1.5))
