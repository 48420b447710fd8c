"""
Evaluation Harness
==================

Plays an agent through every seed of the seed bank and reports, per seed,
how the session went: points, catches, misses, catch rate, the longest run
of catches without a miss and the fish speed the agent was facing at the
end. A seed ends when the agent runs out of lives or reaches the tick cap.

Usage:
    python -m pondcatch.evaluation.run_eval --agent agents/baseline_tracker
"""

from __future__ import annotations

import argparse
import importlib.util
import json
import os
import sys
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, List, Optional
import numpy as np

from pondcatch.catch_core.env_gym import CatchEnv


AgentFn = Callable[[dict], np.ndarray]


@dataclass
class SeedRun:
    """How one session played out."""
    seed: int
    score: int
    catches: int
    misses: int
    longest_streak: int         # Catches in a row without a miss
    final_speed: float          # Fish speed when the session stopped
    ticks: int
    outcome: str                # "out_of_lives" or "tick_cap"
    seconds: float

    @property
    def catch_rate(self) -> float:
        """Share of fish that were caught, 0.0 before any fish resolved."""
        resolved = self.catches + self.misses
        return self.catches / resolved if resolved else 0.0

    @property
    def survived(self) -> bool:
        """True if the agent still had lives at the tick cap."""
        return self.outcome == "tick_cap"


@dataclass
class EvalReport:
    """All seed runs of one agent."""
    runs: List[SeedRun]

    @property
    def scores(self) -> np.ndarray:
        return np.array([r.score for r in self.runs], dtype=np.int64)

    @property
    def mean_score(self) -> float:
        return float(self.scores.mean())

    @property
    def min_score(self) -> int:
        return int(self.scores.min())

    @property
    def max_score(self) -> int:
        return int(self.scores.max())

    @property
    def catch_rate(self) -> float:
        """Catch rate over every fish of every seed."""
        catches = sum(r.catches for r in self.runs)
        resolved = catches + sum(r.misses for r in self.runs)
        return catches / resolved if resolved else 0.0

    @property
    def survival_rate(self) -> float:
        return float(np.mean([r.survived for r in self.runs]))


def load_seed_bank(path: Optional[str] = None) -> List[int]:
    """Read the seeds from seed_bank.json (the packaged one if path is None)."""
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "seed_bank.json")

    with open(path, "r") as f:
        return [int(s) for s in json.load(f)["seeds"]]


def load_agent(agent_path: str) -> AgentFn:
    """
    Import an agent module and return its act function.

    Args:
        agent_path: Agent directory (containing agent.py) or a .py file.
            The module must define create_agent(), a CatchAgent class, or
            a module-level act(obs).

    Returns:
        Callable mapping an observation to an action.

    Raises:
        FileNotFoundError: If there is no agent file.
        AttributeError: If the module exposes none of the entry points.
    """
    path = Path(agent_path)
    module_file = path / "agent.py" if path.is_dir() else path
    if not module_file.is_file():
        raise FileNotFoundError(f"Agent file not found: {module_file}")

    module_spec = importlib.util.spec_from_file_location("catch_agent", module_file)
    if module_spec is None or module_spec.loader is None:
        raise ImportError(f"Cannot import {module_file}")
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    for factory in ("create_agent", "CatchAgent"):
        if hasattr(module, factory):
            return getattr(module, factory)().act
    if hasattr(module, "act"):
        return module.act

    raise AttributeError(
        f"{module_file} needs create_agent(), a CatchAgent class or an act() function"
    )


def run_seed(act: AgentFn, seed: int, max_ticks: Optional[int] = None) -> SeedRun:
    """
    Play one session to its end.

    Args:
        act: Agent's act function.
        seed: Seed for the fish sequence.
        max_ticks: Override the tick cap from the config.

    Returns:
        SeedRun for this seed.
    """
    env = CatchEnv(max_ticks=max_ticks)
    obs, info = env.reset(seed=seed)

    streak = 0
    longest = 0
    start = time.perf_counter()

    while True:
        misses_before = info["misses"]
        obs, _, terminated, truncated, info = env.step(act(obs))

        if info["misses"] > misses_before:
            streak = 0
        elif info["delta_score"] > 0:
            streak += 1
            longest = max(longest, streak)

        if terminated or truncated:
            break

    seconds = time.perf_counter() - start
    env.close()

    return SeedRun(
        seed=seed,
        score=info["score"],
        catches=info["catches"],
        misses=info["misses"],
        longest_streak=longest,
        final_speed=float(info["fish_speed"]),
        ticks=info["steps"],
        outcome=info["terminated_reason"],
        seconds=seconds
    )


def evaluate_agent(
    act: AgentFn,
    seeds: Optional[List[int]] = None,
    max_ticks: Optional[int] = None,
    verbose: bool = True
) -> EvalReport:
    """
    Run the agent on every seed.

    Args:
        act: Agent's act function.
        seeds: Seeds to play. Uses the seed bank if None.
        max_ticks: Override the tick cap from the config.
        verbose: If True, print a line per seed and a summary.

    Returns:
        EvalReport with one SeedRun per seed.
    """
    if seeds is None:
        seeds = load_seed_bank()

    runs = []
    for seed in seeds:
        run = run_seed(act, seed, max_ticks=max_ticks)
        runs.append(run)
        if verbose:
            print(f"  seed {run.seed:>5}: {run.score:>4} pts  "
                  f"{run.catches:>3} caught / {run.misses} missed  "
                  f"streak {run.longest_streak:>3}  "
                  f"speed {run.final_speed:.1f}  ({run.outcome})")

    report = EvalReport(runs=runs)

    if verbose:
        print(f"Score {report.mean_score:.1f} avg "
              f"[{report.min_score}..{report.max_score}], "
              f"catch rate {report.catch_rate:.1%}, "
              f"survived {report.survival_rate:.0%} of {len(runs)} seeds")

    return report


def save_report(report: EvalReport, agent_name: str, output_path: str) -> None:
    """Write the report as JSON."""
    data = {
        "agent": agent_name,
        "mean_score": report.mean_score,
        "catch_rate": report.catch_rate,
        "survival_rate": report.survival_rate,
        "runs": [dict(asdict(run), catch_rate=run.catch_rate) for run in report.runs],
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Report written to {output_path}")


def main():
    parser = argparse.ArgumentParser(description="Evaluate a pond catch agent")
    parser.add_argument("--agent", required=True, help="Agent directory or agent.py file")
    parser.add_argument("--seeds", default=None, help="Seed bank JSON (default: packaged)")
    parser.add_argument("--max-ticks", type=int, default=None, help="Override the tick cap")
    parser.add_argument("--output", default=None, help="Write the report to this JSON file")
    parser.add_argument("--quiet", action="store_true", help="Only print errors")

    args = parser.parse_args()

    try:
        act = load_agent(args.agent)
        seeds = load_seed_bank(args.seeds) if args.seeds else None
        report = evaluate_agent(act, seeds=seeds, max_ticks=args.max_ticks,
                                verbose=not args.quiet)
    except (FileNotFoundError, ImportError, AttributeError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        save_report(report, Path(args.agent).name, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
