import argparse
import logging

import flet as ft

from reversi.cli.terminal import TerminalGame
from reversi.engine.othello import BOARD_SIZE, Othello
from reversi.ui.app import ReversiApp


def run_play(args: argparse.Namespace) -> None:
    game = TerminalGame(Othello(args.size))
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")


def run_ui(args: argparse.Namespace) -> None:
    print(f"Starting UI with board size {args.size}...")
    app = ReversiApp(board_size=args.size)
    ft.app(target=app.main)


def main() -> None:
    parser = argparse.ArgumentParser(description="Reversi Game CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Play a two-player game in the terminal")
    play_parser.add_argument("--size", type=int, default=BOARD_SIZE, help="Board size (default: 8)")
    play_parser.set_defaults(func=run_play)

    ui_parser = subparsers.add_parser("ui", help="Start the GUI")
    ui_parser.add_argument("--size", type=int, default=BOARD_SIZE, help="Board size (default: 8)")
    ui_parser.set_defaults(func=run_ui)

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
