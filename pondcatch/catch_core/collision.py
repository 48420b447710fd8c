"""
Collision Detection
===================

Axis-aligned bounding box test between the falling fish and the net.
"""

from __future__ import annotations

from pondcatch.catch_core.session import Catcher, FallingObject


def overlaps(fish: FallingObject, fish_size: float, net: Catcher) -> bool:
    """
    Test whether the fish square and the net rectangle overlap.

    Inequalities are strict on both sides: boxes that only share an edge
    do not overlap.

    Args:
        fish: The falling fish (top-left corner at fish.x, fish.y).
        fish_size: Side of the fish square.
        net: The catcher, using its current effective width and height.

    Returns:
        True on overlap.
    """
    return (
        fish.x + fish_size > net.x
        and fish.x < net.x + net.width
        and fish.y + fish_size > net.y
        and fish.y < net.y + net.height
    )
