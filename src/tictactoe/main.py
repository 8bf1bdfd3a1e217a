from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from tictactoe import config
from tictactoe.game.controller import GameController
from tictactoe.game.state import GameSession, default_players
from tictactoe.ui.prompts import PROMPT, parse_command
from tictactoe.ui.render import render


def build_controller() -> GameController:
    human, computer = default_players()
    session = GameSession(current=human)
    return GameController(session, human, computer, on_render=render)


def run_game(controller: GameController) -> None:
    human = controller.human
    render(controller.cells(), status=f"{human.name} play {human.mark}. You move first.")

    while True:
        try:
            raw = input(PROMPT)
        except EOFError:
            return

        try:
            cmd, index = parse_command(raw)
        except ValueError as e:
            render(controller.cells(), status=str(e))
            continue

        if cmd == "quit":
            render(controller.cells(), status="Game quit.")
            return

        if cmd == "reset":
            controller.reset_game()
            continue

        if controller.is_over:
            render(controller.cells(), controller.session.last_status, status="Press r to play again.")
            continue

        if not controller.play_turn(index):
            render(controller.cells(), status=f"Cell {index + 1} is taken.")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-tac-toe against a computer that never loses.")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen between moves")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    run_game(build_controller())


if __name__ == "__main__":
    main()
