"""
Evaluation Package
==================

Contains the seed bank and evaluation harness for scoring agents.
"""

from pondcatch.evaluation.run_eval import (
    EvalReport,
    SeedRun,
    evaluate_agent,
    load_agent,
    load_seed_bank,
    run_seed,
)

__all__ = [
    "EvalReport",
    "SeedRun",
    "evaluate_agent",
    "load_agent",
    "load_seed_bank",
    "run_seed",
]
