"""Grid representation and placement helpers shared by both generators."""

from __future__ import annotations

import copy
from typing import Callable, List, Optional

from ..core.constants import Bounds, Direction, PlacementMode
from ..core.models import LetterRows, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square letter matrix where ``None`` marks an empty cell."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: LetterRows = [[None for _ in range(size)] for _ in range(size)]

    @classmethod
    def create(cls, size: int) -> "LetterGrid":
        return cls(size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def letter(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is None

    @staticmethod
    def positions(length: int, row: int, col: int, direction: Direction) -> List[Position]:
        d_row, d_col = direction.step
        return [(row + d_row * i, col + d_col * i) for i in range(length)]

    def rows(self) -> LetterRows:
        return copy.deepcopy(self.cells)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction,
        mode: PlacementMode = PlacementMode.OVERLAP,
    ) -> bool:
        """Return True when ``word`` fits at ``(row, col)`` running ``direction``.

        ``OVERLAP`` only requires every covered cell to be empty or to hold
        the same letter. ``CROSSWORD`` additionally keeps the word from
        running alongside another one or touching one end to end.
        """

        if not word:
            return False
        cells = self.positions(len(word), row, col, direction)
        end_row, end_col = cells[-1]
        if not (self.in_bounds(row, col) and self.in_bounds(end_row, end_col)):
            return False

        for index, (r, c) in enumerate(cells):
            existing = self.cells[r][c]
            if existing is not None and existing != word[index]:
                return False

        if mode == PlacementMode.CROSSWORD:
            return self._respects_crossword_spacing(cells, direction)
        return True

    def _respects_crossword_spacing(self, cells: List[Position], direction: Direction) -> bool:
        d_row, d_col = direction.step
        side_row, side_col = d_col, d_row
        for r, c in cells:
            if not self.is_empty(r, c):
                continue
            for sign in (-1, 1):
                nr, nc = r + sign * side_row, c + sign * side_col
                if self.in_bounds(nr, nc) and not self.is_empty(nr, nc):
                    return False

        start_row, start_col = cells[0]
        end_row, end_col = cells[-1]
        for r, c in ((start_row - d_row, start_col - d_col), (end_row + d_row, end_col + d_col)):
            if self.in_bounds(r, c) and not self.is_empty(r, c):
                return False
        return True

    def commit(self, word: str, row: int, col: int, direction: Direction, word_id: str) -> List[Position]:
        """Write ``word`` and return the exact cells it now covers.

        Callers check :meth:`can_place` first; committing over a conflicting
        letter is a programming error.
        """

        cells = self.positions(len(word), row, col, direction)
        for index, (r, c) in enumerate(cells):
            existing = self.cells[r][c]
            if existing is not None and existing != word[index]:
                raise ValueError(f"Letter conflict committing {word!r} at {(r, c)}")
            self.cells[r][c] = word[index]
        LOGGER.debug("Committed %s %s at (%s,%s) %s", word_id, word, row, col, direction.value)
        return cells

    def fill_empty(self, letter_factory: Callable[[], str]) -> int:
        """Fill every empty cell with ``letter_factory()``; return how many were filled."""

        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] is None:
                    self.cells[r][c] = letter_factory()
                    filled += 1
        return filled
