"""
Baseline Tracker Agent - Slides the net under the falling fish.

The net parks near the bottom of the pond and follows the fish's column,
but can only move a limited number of pixels per frame, like a hand on a
mouse. As every catch speeds the fish up, the far-away spawns eventually
become unreachable and the agent starts missing.

This serves as:
1. A working example of how to read observations and return actions
2. A baseline benchmark to compare against
"""

import numpy as np
from typing import Any, Dict, Optional


# Pixels the net center may move per frame along each axis
MAX_STEP = 12.0
# Gap between the net's bottom edge and the bottom of the pond
BOTTOM_GAP = 20.0


class CatchAgent:
    """
    Heuristic agent that tracks the fish with a capped net speed.
    """

    def __init__(self, max_step: float = MAX_STEP, debug: bool = False):
        """
        Initialize the agent.

        Args:
            max_step: Maximum net movement per frame, in pixels.
            debug: If True, print decisions to stdout.
        """
        self.max_step = max_step
        self.debug = debug

    def reset(self, seed: Optional[int] = None) -> None:
        """Reset agent state for a new episode (stateless)."""
        pass

    def act(self, observation: Dict[str, Any], debug: bool = False) -> np.ndarray:
        """
        Choose where to put the net center this frame.

        Args:
            observation: Dict of numpy arrays from the environment.
            debug: If True, print debug info for this step.

        Returns:
            Action (x, y) in [-1, 1] for the net center.
        """
        play_width = float(observation["play_width"])
        play_height = float(observation["play_height"])
        net_width = float(observation["net_width"])
        net_height = float(observation["net_height"])

        net_cx = float(observation["net_x"]) + net_width / 2
        net_cy = float(observation["net_y"]) + net_height / 2

        fish_cx = float(observation["fish_x"]) + float(observation["fish_size"]) / 2
        target_cy = play_height - BOTTOM_GAP - net_height / 2

        # Move toward the target, capped per axis
        new_cx = net_cx + np.clip(fish_cx - net_cx, -self.max_step, self.max_step)
        new_cy = net_cy + np.clip(target_cy - net_cy, -self.max_step, self.max_step)

        action = np.array(
            [new_cx / play_width * 2.0 - 1.0, new_cy / play_height * 2.0 - 1.0],
            dtype=np.float32
        )
        action = np.clip(action, -1.0, 1.0)

        if debug or self.debug:
            print(f"[Tracker Agent] fish_cx={fish_cx:.0f}, net_cx={net_cx:.0f}, "
                  f"frames_to_exit={float(observation['frames_to_exit']):.0f}, "
                  f"action=({action[0]:.3f}, {action[1]:.3f})")

        return action


# Convenience function to create agent (used by evaluation harness)
def create_agent(**kwargs) -> CatchAgent:
    """Factory function to create an agent instance."""
    return CatchAgent(**kwargs)
