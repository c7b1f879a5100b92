"""Move sources: anything that can choose a move for a mark."""
from __future__ import annotations

import re
from typing import Callable, Optional, Protocol, Tuple

from ttt.board import Board
from ttt.encode import Mark
from ttt.logging_config import get_logger

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")
_NUMBER = re.compile(r"\+?[0-9]+")


class MoveSource(Protocol):
    def act(self, board: Board, mark: Mark) -> Optional[Tuple[int, int]]: ...


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row col" (or "row,col") into 1-based coordinates.

    Tokens that are not non-negative integers (an optional leading "+" is
    allowed) are skipped and anything after the first two numbers is
    ignored. Returns None when fewer than two numbers are present.
    """
    numbers = [int(token) for token in _SEPARATORS.split(text.strip())
               if _NUMBER.fullmatch(token)]
    if len(numbers) < 2:
        return None
    return numbers[0], numbers[1]


class HumanCLI:
    """Human player reading moves from a line-oriented input stream."""

    def __init__(self, read_line: Optional[Callable[[], str]] = None) -> None:
        self.read_line = read_line if read_line is not None else input

    def act(self, board: Board, mark: Mark) -> Optional[Tuple[int, int]]:
        # EOFError from read_line is fatal and propagates to the caller
        line = self.read_line()
        move = parse_move(line)
        if move is None:
            logger.debug(f"Could not parse move for {mark.symbol} from {line!r}")
        return move
