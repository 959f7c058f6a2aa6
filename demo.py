#!/usr/bin/env python3
"""Watch the Hint agent play a hex puzzle level."""
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from hexcells import HexcellsEnv, get_level  # noqa: E402
from agents import HintAgent  # noqa: E402


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.5, games: int = 3, level_number: int = 1):
    """Run demo games with visualization."""
    level = get_level(level_number)
    env = HexcellsEnv(level=level, render_mode="ansi")
    agent = HintAgent(level.rows, level.cols)

    print(f"Level: {level.name} ({level.cols}x{level.rows}, {len(level.mine_set)} mines)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset()
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(env.board, env.get_action_mask())
            coord, is_flag = env.decode_action(action)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {'flag' if is_flag else 'reveal'} {coord}")
            print(f"Guesses: {agent.guesses_made}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.5, help="Delay between moves")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--level", type=int, default=1, help="Level number")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, level_number=args.level)
