"""
Evaluation module for hex puzzle agents.

Provides evaluation loops, statistics and result export.
"""
from .evaluator import (
    EpisodeStats,
    EvaluationStats,
    Evaluator,
    save_results,
)

__all__ = [
    "EpisodeStats",
    "EvaluationStats",
    "Evaluator",
    "save_results",
]
