"""Value types shared by the board and the game loop.

Mark and Cell are IntEnums because cells live in an integer numpy grid:
Cell.X and Cell.O share their value with Mark.X and Mark.O, so
``Cell.X == Mark.X`` holds. Outcome is a plain Enum and never compares
equal to a cell or a mark.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


class Mark(IntEnum):
    """The symbol a player places; also identifies the player."""
    X = +1
    O = -1

    def opposite(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.name


class Cell(IntEnum):
    # Occupied variants share their value with the matching Mark
    Empty = 0
    X = +1
    O = -1

    @classmethod
    def occupied(cls, mark: Mark) -> Cell:
        return cls(int(mark))

    @property
    def mark(self) -> Optional[Mark]:
        if self is Cell.Empty:
            return None
        return Mark(int(self))

    @property
    def symbol(self) -> str:
        return " " if self is Cell.Empty else self.name


class Outcome(Enum):
    """Aggregate evaluation of a board: running, tied, or won by a mark."""
    X_Won = +1
    O_Won = -1
    Tied = 0
    Running = 2

    @classmethod
    def won_by(cls, mark: Mark) -> Outcome:
        return cls(int(mark))

    @property
    def winner(self) -> Optional[Mark]:
        if self in (Outcome.X_Won, Outcome.O_Won):
            return Mark(self.value)
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.Running
