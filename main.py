#!/usr/bin/env python3
"""
Hexcells - Main entry point.

Usage:
    python main.py play [--level N]
    python main.py hint [--level N] [--reveal Q,R ...] [--flag Q,R ...]
    python main.py evaluate [--agent {random,hint}] [--level N]
    python main.py compare [--level N]
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from hexcells import (  # noqa: E402
    AxialCoord,
    Board,
    ConfigurationError,
    LevelConfig,
    find_hint,
    get_level,
)
from agents import HintAgent, RandomAgent  # noqa: E402
from evaluation import Evaluator, save_results  # noqa: E402


PLAY_HELP = "Commands: r Q R (reveal), f Q R (flag), hint, rules, quit"


def parse_coord(text: str) -> AxialCoord:
    """Parse 'Q,R' into a coordinate."""
    try:
        q, r = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected Q,R but got {text!r}")
    return AxialCoord(q, r)


def load_level(args: argparse.Namespace) -> LevelConfig:
    """Pick the built-in level named on the command line."""
    return get_level(args.level)


def print_board(board: Board) -> None:
    """Print the board and the mines left to flag."""
    print(board.render_text())
    print(f"Mines left: {board.remaining_mines()}")


def play(args: argparse.Namespace) -> None:
    """Play a level interactively in the terminal."""
    board = Board.from_level(load_level(args))
    print(PLAY_HELP)

    while not board.is_game_over:
        print_board(board)
        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue

        action = command[0].lower()
        if action in ("q", "quit"):
            break
        if action == "hint":
            hint = find_hint(board)
            print(hint.explain() if hint else "No hint available")
            continue
        if action == "rules":
            for rule in board.active_rules:
                print(f"  {rule.describe()}")
            continue
        if action in ("r", "f") and len(command) == 3:
            try:
                coord = AxialCoord(int(command[1]), int(command[2]))
            except ValueError:
                print(PLAY_HELP)
                continue
            done = board.reveal_cell(coord) if action == "r" else board.toggle_flag(coord)
            if not done:
                print(f"Cannot {'reveal' if action == 'r' else 'flag'} {coord}")
            continue
        print(PLAY_HELP)

    if board.is_game_over:
        print_board(board)
        print("You won!" if board.is_game_won else "You hit a mine.")


def hint(args: argparse.Namespace) -> None:
    """Print the hint for a level after applying some moves."""
    board = Board.from_level(load_level(args))
    for coord in args.flag:
        board.toggle_flag(coord)
    for coord in args.reveal:
        board.reveal_cell(coord)

    print_board(board)
    result = find_hint(board)
    print(result.explain() if result else "No hint available")


def make_agent(name: str, level: LevelConfig, seed: Optional[int]):
    """Create an agent by name."""
    if name == "random":
        return RandomAgent(level.rows, level.cols, seed=seed)
    return HintAgent(level.rows, level.cols, seed=seed)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    level = load_level(args)
    agent = make_agent(args.agent, level, args.seed)
    evaluator = Evaluator(level, num_episodes=args.games)

    print(f"\nEvaluating {args.agent} over {args.games} games on {level.name}...")
    results = evaluator.evaluate(agent)

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    print(f"  Avg guesses: {results['avg_guesses']:.1f}")

    if args.output:
        print(f"Saved to {save_results(results, args.output)}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    level = load_level(args)
    agents = {
        "Random": make_agent("random", level, args.seed),
        "Hint": make_agent("hint", level, args.seed),
    }

    evaluator = Evaluator(level, num_episodes=args.games)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print(f"Agent Comparison Results ({level.name})")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Hexcells - hex grid deduction puzzle"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a level")
    play_parser.add_argument("--level", type=int, default=1, help="Level number")

    hint_parser = subparsers.add_parser("hint", help="Show a hint for a position")
    hint_parser.add_argument("--level", type=int, default=1, help="Level number")
    hint_parser.add_argument(
        "--reveal", type=parse_coord, nargs="*", default=[], help="Cells to reveal"
    )
    hint_parser.add_argument(
        "--flag", type=parse_coord, nargs="*", default=[], help="Cells to flag"
    )

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--agent", choices=["random", "hint"], default="hint", help="Agent to evaluate"
    )
    eval_parser.add_argument("--level", type=int, default=1, help="Level number")
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    eval_parser.add_argument("--output", default=None, help="Write results as JSON")

    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    compare_parser.add_argument("--level", type=int, default=1, help="Level number")
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )
    compare_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "play": play,
        "hint": hint,
        "evaluate": evaluate,
        "compare": compare,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        command(args)
    except (ConfigurationError, KeyError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
