"""
Agents that play the hex puzzle.

Provides a random baseline and an agent that follows the hint engine.
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .hint_agent import HintAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "HintAgent",
]
