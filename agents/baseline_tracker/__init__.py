"""
Baseline Tracker Agent Package

A simple heuristic agent that slides the net under the falling fish.
Serves as a benchmark and example.
"""

from .agent import CatchAgent, create_agent

__all__ = ["CatchAgent", "create_agent"]
