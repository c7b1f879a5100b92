"""Game loop: turn order, move validation and outcome reporting."""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from ttt.board import Board
from ttt.encode import Cell, Mark, Outcome
from ttt.logging_config import get_logger
from ttt.players import HumanCLI, MoveSource

logger = get_logger(__name__)

RESULT_MESSAGES = {
    Outcome.X_Won: "X won!",
    Outcome.O_Won: "O won!",
    Outcome.Tied: "It's a tie.",
}


class Game:
    """
    One session of N×N tic-tac-toe.

    X moves first. Each turn the current mark's move source is asked for
    coordinates until it produces a legal move, then the board is
    evaluated and the game either passes the turn or finishes.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        player_x: Optional[MoveSource] = None,
        player_o: Optional[MoveSource] = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.board = Board(size)
        self.players: Dict[Mark, MoveSource] = {
            Mark.X: player_x if player_x is not None else HumanCLI(),
            Mark.O: player_o if player_o is not None else HumanCLI(),
        }
        self.output = output
        self.current_turn = Mark.X
        self.human_player = Mark.X
        self.outcome = Outcome.Running

    @property
    def is_finished(self) -> bool:
        return self.outcome.is_over

    def reset(self) -> None:
        self.board.clear()
        self.current_turn = Mark.X
        self.outcome = Outcome.Running

    def switch_current_player(self) -> None:
        self.current_turn = self.current_turn.opposite()

    def show_board(self) -> None:
        for line in self.board.render():
            self.output(line)

    def request_move(self, current_turn: Mark) -> Optional[Tuple[int, int]]:
        """Prompt for and return the next move of current_turn, or None if unparseable."""
        self.output(f"{current_turn.symbol}'s turn!")
        self.show_board()
        return self.players[current_turn].act(self.board, current_turn)

    def play_move(self, coords: Tuple[int, int]) -> bool:
        """
        Place the current mark at coords if that cell is on the board and empty.

        Returns:
            True if the move was applied, False if it was rejected.
        """
        if self.is_finished:
            logger.warning(f"Move {coords} rejected: game is already over")
            return False

        if not self.board.is_empty(coords):
            logger.debug(f"Move {coords} rejected for {self.current_turn.symbol}")
            return False

        self.board.set_cell(coords, Cell.occupied(self.current_turn))
        logger.info(f"{self.current_turn.symbol} played {coords}")

        outcome = self.board.evaluate()
        if outcome.is_over:
            self.outcome = outcome
            logger.info(f"Game finished: {outcome.name}")
        else:
            self.switch_current_player()
        return True

    def run(self) -> Outcome:
        logger.info(f"Starting {self.board.size}x{self.board.size} game, "
                    f"human plays {self.human_player.symbol}")

        while not self.is_finished:
            while True:
                move = self.request_move(self.current_turn)
                if move is not None and self.play_move(move):
                    break
                self.output("Invalid input.")
                self.output("")

        self.output(RESULT_MESSAGES[self.outcome])
        self.show_board()
        return self.outcome
