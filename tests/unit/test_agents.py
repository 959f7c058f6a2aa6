"""
Unit tests for agents and the evaluator.
"""
import json

import pytest
from agents import HintAgent, RandomAgent
from evaluation import EpisodeStats, EvaluationStats, Evaluator, save_results
from hexcells import AxialCoord, Board, LEVEL_1, LEVEL_2, LEVELS, LevelConfig


# ============================================================================
# Agent Tests
# ============================================================================

class TestBaseAgentHelpers:
    """Test action index helpers shared by all agents."""

    def test_position_round_trip(self) -> None:
        """Reveal and flag actions map back to their cells."""
        agent = RandomAgent(3, 4, seed=0)
        assert agent.position_to_action(AxialCoord(2, 1)) == 6
        assert agent.position_to_action(AxialCoord(2, 1), flag=True) == 18
        assert agent.action_to_position(18) == (AxialCoord(2, 1), True)

    def test_guess_counter_starts_at_zero(self) -> None:
        """Every agent carries a guess counter, zero until it guesses."""
        agent = RandomAgent(3, 4, seed=0)
        assert agent.guesses_made == 0
        agent.guesses_made = 3
        agent.reset()
        assert agent.guesses_made == 0

    def test_mask_from_board(self) -> None:
        """Hidden cells can be revealed, unrevealed cells flagged."""
        board = Board.from_level(LEVEL_1)
        mask = RandomAgent(3, 4).get_valid_actions_from_board(board)
        assert mask.shape == (24,)
        assert mask[:12].sum() == 11
        assert mask[12:].sum() == 11
        assert not mask[0]


class TestRandomAgent:
    """Test the random baseline."""

    def test_picks_hidden_cells(self) -> None:
        """Chosen actions are always valid reveals."""
        board = Board.from_level(LEVEL_1)
        agent = RandomAgent(3, 4, seed=1)
        for _ in range(20):
            action = agent.select_action(board)
            coord, is_flag = agent.action_to_position(action)
            assert is_flag is False
            assert board.get_cell(coord).is_hidden

    def test_seed_is_reproducible(self) -> None:
        """Same seed, same choices."""
        board = Board.from_level(LEVEL_1)
        first, second = RandomAgent(3, 4, seed=7), RandomAgent(3, 4, seed=7)
        assert [first.select_action(board) for _ in range(5)] == [
            second.select_action(board) for _ in range(5)
        ]


class TestHintAgent:
    """Test the hint-following agent."""

    def test_follows_safe_hint(self) -> None:
        """On level 1 the edge rule at (1, 1) clears (2, 1) first."""
        board = Board.from_level(LEVEL_1)
        agent = HintAgent(3, 4, seed=0)
        action = agent.select_action(board)
        assert agent.action_to_position(action) == (AxialCoord(2, 1), False)
        assert agent.hints_followed == 1
        assert agent.guesses_made == 0

    def test_flags_mine_hint(self) -> None:
        """A MINE hint becomes a flag action."""
        level = LevelConfig(rows=1, cols=3, mines=[(0, 0), (2, 0)], rules=[], revealed=[(1, 0)])
        agent = HintAgent(1, 3, seed=0)
        action = agent.select_action(Board.from_level(level))
        assert agent.action_to_position(action) == (AxialCoord(2, 0), True)

    def test_guesses_without_hint(self) -> None:
        """With nothing to deduce the agent reveals a random hidden cell."""
        board = Board.from_level(LevelConfig(rows=2, cols=2, mines=[(1, 1)], rules=[]))
        agent = HintAgent(2, 2, seed=0)
        action = agent.select_action(board)
        assert action < 4
        assert agent.guesses_made == 1
        agent.reset()
        assert agent.guesses_made == 0


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Test running agents through the environment."""

    def test_random_agent_cannot_win(self) -> None:
        """Without flags a level with mines is never won."""
        results = Evaluator(LEVEL_1, num_episodes=5).evaluate(RandomAgent(3, 4, seed=0))
        assert results["episodes"] == 5
        assert results["win_rate"] == 0.0
        assert results["avg_steps"] >= 1

    @pytest.mark.parametrize("number", sorted(LEVELS))
    def test_hint_agent_metrics(self, number: int) -> None:
        """The hint agent produces well-formed metrics on every level."""
        level = LEVELS[number]
        agent = HintAgent(level.rows, level.cols, seed=0)
        results = Evaluator(level, num_episodes=3).evaluate(agent)
        assert 0.0 <= results["win_rate"] <= 1.0
        assert results["avg_guesses"] >= 0.0
        assert results["avg_steps"] <= 2 * level.rows * level.cols

    def test_guesses_read_from_any_agent(self) -> None:
        """Guess counts come from the agent's counter whatever its type."""

        class CountingAgent(RandomAgent):
            def select_action(self, board, valid_actions=None):
                self.guesses_made += 1
                return super().select_action(board, valid_actions)

        results = Evaluator(LEVEL_1, num_episodes=3).evaluate(CountingAgent(3, 4, seed=0))
        assert results["avg_guesses"] == results["avg_steps"]
        assert results["avg_guesses"] >= 1

    def test_compare(self) -> None:
        """compare() returns one entry per agent."""
        evaluator = Evaluator(LEVEL_2, num_episodes=2)
        results = evaluator.compare({
            "random": RandomAgent(4, 4, seed=0),
            "hint": HintAgent(4, 4, seed=0),
        })
        assert set(results) == {"random", "hint"}

    def test_stats_to_dict(self) -> None:
        """Averages are taken over episodes."""
        stats = EvaluationStats([
            EpisodeStats(total_reward=10.0, steps=4, won=True, revealed_cells=6),
            EpisodeStats(total_reward=-10.0, steps=2, won=False, revealed_cells=2, guesses=2),
        ])
        summary = stats.to_dict()
        assert summary["wins"] == 1
        assert summary["win_rate"] == 0.5
        assert summary["avg_reward"] == 0.0
        assert summary["avg_steps"] == 3.0
        assert summary["avg_guesses"] == 1.0

    def test_empty_stats(self) -> None:
        """No episodes gives zeros instead of dividing by zero."""
        assert EvaluationStats().to_dict()["win_rate"] == 0.0

    def test_save_results(self, tmp_path) -> None:
        """Results are written as JSON."""
        path = save_results({"win_rate": 0.5}, tmp_path / "out" / "results.json")
        assert json.loads(path.read_text()) == {"win_rate": 0.5}
