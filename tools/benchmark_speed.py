"""
Performance Benchmark
=====================

Measures tick and environment step throughput.

Usage:
    python -m tools.benchmark_speed [--steps S] [--image]
"""

from __future__ import annotations

import argparse
import sys
import time
import numpy as np

from pondcatch.catch_core.config_loader import load_config
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.env_gym import CatchEnv


def benchmark_core(num_ticks: int = 100000, seed: int = 42) -> dict:
    """
    Benchmark raw CoreGame ticks with a net that chases the fish.

    Args:
        num_ticks: Number of ticks to run.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    game = CoreGame(config=load_config(), seed=seed)
    restarts = 0

    start = time.perf_counter()

    for _ in range(num_ticks):
        fish = game.fish
        game.set_catcher_position(fish.x, game.session.play_height - 200)
        game.tick()
        if game.ended:
            game.restart()
            restarts += 1

    elapsed = time.perf_counter() - start

    return {
        "mode": "core",
        "num_steps": num_ticks,
        "restarts": restarts,
        "elapsed_seconds": elapsed,
        "steps_per_second": num_ticks / elapsed,
        "ms_per_step": (elapsed * 1000) / num_ticks
    }


def benchmark_env(
    num_steps: int = 20000,
    seed: int = 42,
    image_obs: bool = False
) -> dict:
    """
    Benchmark environment steps with random actions.

    Args:
        num_steps: Number of steps to run.
        seed: Random seed.
        image_obs: If True, render board_rgb on every step.

    Returns:
        Dict with timing results.
    """
    env = CatchEnv(image_obs=image_obs)
    rng = np.random.default_rng(seed)

    # Warmup
    env.reset(seed=seed)
    for _ in range(100):
        _, _, terminated, truncated, _ = env.step(rng.uniform(-1, 1, size=2))
        if terminated or truncated:
            env.reset()

    env.reset(seed=seed)
    start = time.perf_counter()

    for _ in range(num_steps):
        _, _, terminated, truncated, _ = env.step(rng.uniform(-1, 1, size=2))
        if terminated or truncated:
            env.reset()

    elapsed = time.perf_counter() - start
    env.close()

    return {
        "mode": "env_image" if image_obs else "env",
        "num_steps": num_steps,
        "elapsed_seconds": elapsed,
        "steps_per_second": num_steps / elapsed,
        "ms_per_step": (elapsed * 1000) / num_steps
    }


def print_results(results: dict) -> None:
    """Print benchmark results."""
    print(f"  Mode:            {results['mode']}")
    print(f"  Steps:           {results['num_steps']}")
    print(f"  Elapsed:         {results['elapsed_seconds']:.2f}s")
    print(f"  Steps/second:    {results['steps_per_second']:.0f}")
    print(f"  ms/step:         {results['ms_per_step']:.4f}")
    if "restarts" in results:
        print(f"  Restarts:        {results['restarts']}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark pond catch throughput")
    parser.add_argument("--steps", type=int, default=20000, help="Environment steps")
    parser.add_argument("--ticks", type=int, default=100000, help="Raw core ticks")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--image", action="store_true", help="Also benchmark image observations")

    args = parser.parse_args()

    print("=" * 50)
    print("POND CATCH BENCHMARK")
    print("=" * 50)
    print()

    try:
        print("Core ticks:")
        print_results(benchmark_core(args.ticks, args.seed))

        print("Environment steps:")
        print_results(benchmark_env(args.steps, args.seed))

        if args.image:
            print("Environment steps with board_rgb:")
            print_results(benchmark_env(args.steps, args.seed, image_obs=True))
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
