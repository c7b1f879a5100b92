"""N×N board: cell storage, coordinate validation and win/tie evaluation."""
from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from ttt import config
from ttt.encode import Cell, Mark, Outcome
from ttt.logging_config import get_logger

logger = get_logger(__name__)

Coords = Tuple[int, int]


class Board:
    """
    Square grid of cells addressed with 1-based (row, col) coordinates.

    Cells are stored 0-based in a numpy array holding Cell values
    (Empty = 0, X = +1, O = -1), so a line belongs to a mark exactly when
    it sums to size * mark.
    """

    def __init__(self, size: Optional[int] = None):
        if size is None:
            size = config.BOARD_SIZE
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"Board size must be an integer, got {size!r}")
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self._size = int(size)
        self.grid = self._empty_grid()

    @property
    def size(self) -> int:
        return self._size

    def _empty_grid(self) -> np.ndarray:
        return np.full((self._size, self._size), Cell.Empty, dtype=np.int8)

    def in_range(self, coords: Coords) -> bool:
        row, col = coords
        return 1 <= row <= self._size and 1 <= col <= self._size

    def get_cell(self, coords: Coords) -> Optional[Cell]:
        """Return the cell at 1-based coords, or None if they are off the board."""
        if not self.in_range(coords):
            return None
        row, col = coords
        return Cell(int(self.grid[row - 1, col - 1]))

    def set_cell(self, coords: Coords, value: Cell) -> None:
        """Write value at 1-based coords; off-board coords are ignored."""
        if not self.in_range(coords):
            logger.debug(f"Ignoring write of {value!r} to off-board cell {coords}")
            return
        row, col = coords
        self.grid[row - 1, col - 1] = Cell(value)

    def is_empty(self, coords: Coords) -> bool:
        return self.get_cell(coords) == Cell.Empty

    def clear(self) -> None:
        self.grid = self._empty_grid()

    def empty_cells(self) -> List[Coords]:
        rows, cols = np.nonzero(self.grid == Cell.Empty)
        return [(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]

    def get_rows_cols_and_diagonals(self) -> List[int]:
        """Sums of every row, every column and both full-length diagonals."""
        sequences = []
        sequences.extend(int(s) for s in self.grid.sum(axis=1))
        sequences.extend(int(s) for s in self.grid.sum(axis=0))
        sequences.append(int(np.trace(self.grid)))
        sequences.append(int(np.trace(np.fliplr(self.grid))))
        return sequences

    def check_win(self, mark: Mark) -> bool:
        target = self._size * int(mark)
        return any(total == target for total in self.get_rows_cols_and_diagonals())

    def evaluate(self) -> Outcome:
        # X is checked first, so a board where both marks hold a line reports X
        for mark in (Mark.X, Mark.O):
            if self.check_win(mark):
                return Outcome.won_by(mark)

        if np.any(self.grid == Cell.Empty):
            return Outcome.Running

        return Outcome.Tied

    def render(self) -> List[str]:
        """Display rows: column header, numbered rows, separators between rows."""
        lines = ["  " + "".join(f"{col} " for col in range(1, self._size + 1))]
        separator = "  " + "-" * (2 * self._size - 1)

        for row in range(self._size):
            symbols = [Cell(int(value)).symbol for value in self.grid[row]]
            lines.append(f"{row + 1} " + "|".join(symbols))
            if row < self._size - 1:
                lines.append(separator)

        return lines

    def __str__(self) -> str:
        return "\n".join(self.render())
