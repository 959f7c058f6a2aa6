"""
Evaluation module for hex puzzle agents.

Plays agents through HexcellsEnv and collects win rates, rewards and
how often an agent had to guess.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from agents import BaseAgent
from hexcells import HexcellsEnv, LevelConfig, LEVEL_1

logger = logging.getLogger(__name__)


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0
    guesses: int = 0


@dataclass
class EvaluationStats:
    """Accumulated statistics over many episodes."""

    episodes: List[EpisodeStats] = field(default_factory=list)

    @property
    def episodes_completed(self) -> int:
        return len(self.episodes)

    @property
    def wins(self) -> int:
        return sum(1 for episode in self.episodes if episode.won)

    def _mean(self, values: List[float]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting and serialization."""
        count = self.episodes_completed
        return {
            "episodes": count,
            "wins": self.wins,
            "win_rate": self.wins / count if count else 0.0,
            "avg_reward": self._mean([e.total_reward for e in self.episodes]),
            "avg_steps": self._mean([e.steps for e in self.episodes]),
            "avg_revealed": self._mean([e.revealed_cells for e in self.episodes]),
            "avg_guesses": self._mean([e.guesses for e in self.episodes]),
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents on one level.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        level: Optional[LevelConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 200,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            level: Level to play (default: built-in level 1).
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode before it is cut off.
        """
        self.level = level or LEVEL_1
        self.num_episodes = num_episodes
        self.max_steps = max_steps

    def run_episode(self, env: HexcellsEnv, agent: BaseAgent) -> EpisodeStats:
        """Play one episode from a fresh level."""
        stats = EpisodeStats()
        env.reset()
        agent.reset()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(env.board, valid_actions)
            _, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1
            stats.revealed_cells = info.get("revealed", 0)

            if terminated or truncated:
                stats.won = info.get("game_state") == "WON"
                break

        stats.guesses = agent.guesses_made
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, Any]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = HexcellsEnv(level=self.level)
        stats = EvaluationStats()

        for _ in range(self.num_episodes):
            stats.episodes.append(self.run_episode(env, agent))

        results = stats.to_dict()
        logger.info(
            "Evaluated %s on %r: win rate %.1f%%",
            type(agent).__name__, self.level.name, 100 * results["win_rate"],
        )
        return results

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(agent)
        return results


def save_results(results: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write evaluation results to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(results, f, indent=2)
    return path
