from __future__ import annotations

from enum import Enum
import logging
from typing import Callable, Optional, Tuple

from tictactoe.ai.base import Agent
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.core.rules import Result, check_result
from tictactoe.errors import InvalidIndexError, PreconditionError
from tictactoe.game.results import result_message
from tictactoe.game.state import GameSession, Player, default_players
from tictactoe.types import Cell

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Tuple[Cell, ...], Optional[str]], None]


class Phase(Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_COMPUTER = "awaiting_computer"  # transient, resolved inside play_turn
    TERMINAL = "terminal"


class GameController:
    """
    Turn order for one human vs. computer game.

    The UI only needs play_turn() and reset_game(). Every board change is
    pushed back through `on_render(cells, message)`; message is the
    end-of-game text or None.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        human: Optional[Player] = None,
        computer: Optional[Player] = None,
        engine: Optional[Agent] = None,
        on_render: Optional[RenderCallback] = None,
    ) -> None:
        default_human, default_computer = default_players()
        self.human = human or default_human
        self.computer = computer or default_computer
        if self.human.mark == self.computer.mark:
            raise ValueError("Human and computer must use different marks.")

        self.session = session or GameSession(current=self.human)
        self.engine: Agent = engine or MinimaxAgent(mark=self.computer.mark, name=self.computer.name)
        self.on_render = on_render

    # --- queries ---

    @property
    def current_player(self) -> Player:
        p = self.session.current
        if p != self.human and p != self.computer:
            raise PreconditionError(f"Current player {p!r} is not part of this game.")
        return p

    @property
    def phase(self) -> Phase:
        if self.session.terminal:
            return Phase.TERMINAL
        if self.current_player == self.computer:
            return Phase.AWAITING_COMPUTER
        return Phase.AWAITING_HUMAN

    @property
    def is_over(self) -> bool:
        return self.session.terminal

    def cells(self) -> Tuple[Cell, ...]:
        return self.session.board.cells()

    def result(self) -> Result:
        return check_result(self.session.board)

    # --- operations ---

    def play_turn(self, index: int) -> bool:
        """
        Apply the human's move at `index`, then the computer's reply.
        Returns False (and changes nothing) if the game is over or the cell
        is occupied or out of range.
        """
        if self.session.terminal:
            logger.debug("Move %s ignored: game is over.", index)
            return False
        return self._take_turn(index)

    def reset_game(self) -> None:
        s = self.session
        s.board.reset()
        s.current = self.human
        s.terminal = False
        s.last_status = None
        logger.info("Game reset.")
        self._render(None)

    # --- internals ---

    def _other(self, player: Player) -> Player:
        return self.computer if player == self.human else self.human

    def _render(self, message: Optional[str]) -> None:
        if self.on_render is not None:
            self.on_render(self.session.board.cells(), message)

    def _take_turn(self, index: int) -> bool:
        s = self.session
        player = self.current_player

        try:
            placed = s.board.place_marker(index, player.mark)
        except InvalidIndexError as e:
            logger.debug("Move rejected: %s", e)
            return False
        if not placed:
            logger.debug("Move rejected: cell %s is occupied.", index)
            return False

        logger.debug("%s (%s) played %s", player.name, player.mark, index)

        result = check_result(s.board)
        if result.is_terminal:
            s.terminal = True
            s.last_status = result_message(result, self.human, self.computer)
            logger.info("Game over: %s", s.last_status)
            self._render(s.last_status)
            return True

        nxt = self._other(player)
        move = None
        if nxt == self.computer:
            # ask before switching so a failure leaves the human to move
            move = self.engine.get_best_move(s.board, self.computer.mark)
            if move is None or move not in s.board.empty_indices():
                s.board.clear(index)
                if move is None:
                    raise PreconditionError("Computer to move on a board with no empty cell.")
                raise PreconditionError(f"Computer chose an illegal cell {move}.")

        s.current = nxt
        self._render(None)

        if move is not None:
            self._take_turn(move)

        return True
