from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from tictactoe.ai.minimax_agent import MinimaxAgent, other
from tictactoe.core.board import Board
from tictactoe.core.rules import Result, check_result
from tictactoe.game.state import GameSession, Player
from tictactoe.types import Cell, Mark, Move

logger = logging.getLogger(__name__)


def play_single_game(ai_x: MinimaxAgent, ai_o: MinimaxAgent, opening: Optional[Move] = None) -> Result:
    """Headless game, X first. `opening` forces X's first move."""
    x, o = Player(ai_x.name, "X"), Player(ai_o.name, "O")
    state = GameSession(current=x)

    if opening is not None:
        state.board.place_marker(opening, "X")
        state.current = o

    while True:
        result = check_result(state.board)
        if result.is_terminal:
            return result

        agent = ai_x if state.current == x else ai_o
        move = agent.choose_move(state)
        state.board.place_marker(move, state.current.mark)
        state.current = o if state.current == x else x


def audit_engine(engine: MinimaxAgent, human_mark: Optional[Mark] = None) -> Dict[str, int]:
    """
    Play the engine against every possible human move sequence (human first).
    Returns outcome counts from the engine's side: win / draw / loss.
    """
    human: Mark = human_mark or other(engine.mark)
    tally = {"win": 0, "draw": 0, "loss": 0}
    replies: Dict[Tuple[Cell, ...], Optional[Move]] = {}

    def count(result: Result) -> None:
        if result.draw:
            tally["draw"] += 1
        elif result.winner == engine.mark:
            tally["win"] += 1
        else:
            tally["loss"] += 1

    def human_turn(board: Board) -> None:
        for m in board.empty_indices():
            b = board.copy()
            b.place_marker(m, human)
            result = check_result(b)
            if result.is_terminal:
                count(result)
                continue

            key = b.cells()
            if key not in replies:
                replies[key] = engine.get_best_move(b, engine.mark)
            b.place_marker(replies[key], engine.mark)
            result = check_result(b)
            if result.is_terminal:
                count(result)
                continue

            human_turn(b)

    human_turn(Board())
    logger.info("Audit of %s: %s over %d distinct replies", engine.name, tally, len(replies))
    return tally


def _outcome(result: Result) -> str:
    return "draw" if result.draw else result.winner or "?"


def tournament() -> None:
    ai_x = MinimaxAgent(mark="X", name="Minimax X")
    ai_o = MinimaxAgent(mark="O", name="Minimax O")

    print("Perfect vs perfect from the empty board...")
    print(f"  result: {_outcome(play_single_game(ai_x, ai_o))}")

    print("\nEvery opening for X, perfect play afterwards:")
    for opening in range(9):
        result = play_single_game(ai_x, ai_o, opening=Move(opening))
        print(f"  X opens {opening + 1}: {_outcome(result)}")

    print("\nComputer (O) against every human line:")
    tally = audit_engine(ai_o)

    print("\n=== AUDIT RESULTS ===")
    print(f"Computer wins: {tally['win']}")
    print(f"Draws:         {tally['draw']}")
    print(f"Computer loss: {tally['loss']}")


if __name__ == "__main__":
    tournament()
