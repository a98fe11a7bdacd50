#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mine-percent P] [--easy-start]
    python main.py demo [--games N] [--delay S]
"""
import argparse
import logging
import os
import random
import time

from src.minesweeper import Board, BoardConfig, MinesweeperEnv, MinesweeperError


HELP_TEXT = "Commands: u ROW COL (uncover), f ROW COL (toggle flag), q (quit)"


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least one."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, was: {value}")
    return number


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Create a board configuration from command line options."""
    return BoardConfig(
        rows=args.rows,
        cols=args.cols,
        mine_percent=args.mine_percent,
        easy_start=args.easy_start,
    )


def print_board(board: Board) -> None:
    """Print the board with column and row indices."""
    header = "    " + " ".join(str(col % 10) for col in range(board.columns))
    print(header)
    for row, line in enumerate(board.render().split("\n")):
        print(f"{row:>3} {line}")
    print(f"Flags remaining: {board.flags_remaining}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board(build_config(args), rng=rng)

    print(HELP_TEXT)
    while not board.is_ended:
        print_board(board)
        try:
            command = input("> ").split()
        except EOFError:
            return
        if not command:
            continue
        if command[0] == "q":
            return
        if len(command) != 3 or command[0] not in ("u", "f"):
            print(HELP_TEXT)
            continue

        try:
            row, col = int(command[1]), int(command[2])
            if command[0] == "u":
                board.uncover(row, col)
            elif not board.toggle_flag(row, col):
                print("Cannot flag that tile")
        except MinesweeperError as error:
            print(f"Error: {error}")
        except ValueError:
            print("Row and column must be integers")

    print_board(board)
    if board.is_ended_with_win:
        print("\n*** WIN! ***")
    else:
        print(f"\n*** LOST (hit mine at {board.exploded_tile}) ***")


def demo(args: argparse.Namespace) -> None:
    """Watch random moves play Minesweeper."""
    config = build_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")

    print(f"Board: {config.rows}x{config.cols} with {config.mine_count} mines")
    wins = 0

    for game in range(args.games):
        obs, _ = env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}\n")
            print(env.render())
            time.sleep(args.delay)

        if info.get("game_state") == "WIN":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{args.games} wins ({100*wins/args.games:.0f}%) ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board configuration options to a sub-command."""
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument(
        "--mine-percent", type=float, default=0.15, help="Fraction of mines"
    )
    parser.add_argument(
        "--easy-start", action="store_true", help="Open onto a zero tile"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", action="store_true", help="Log board events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random moves play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s"
        )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except MinesweeperError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
