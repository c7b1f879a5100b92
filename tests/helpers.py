"""Test doubles for the console collaborators and a board loader."""

from typing import Iterable, List

from ttt.board import Board
from ttt.encode import Cell


class ScriptedInput:
    """Input collaborator that replays lines, then reports end of stream."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if self.reads >= len(self.lines):
            raise EOFError("no more input")
        line = self.lines[self.reads]
        self.reads += 1
        return line


class CapturedOutput:
    """Output collaborator that records every line written."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    def count(self, text: str) -> int:
        return self.lines.count(text)


def fill(board: Board, rows: List[str]) -> Board:
    """Load a board from strings like "XO." (one per row, '.' for empty)."""
    cells = {"X": Cell.X, "O": Cell.O, ".": Cell.Empty}
    for r, row in enumerate(rows, start=1):
        for c, symbol in enumerate(row, start=1):
            board.set_cell((r, c), cells[symbol])
    return board
