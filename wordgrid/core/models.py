"""Data models shared by the generators, the sessions and the snapshot layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import Direction, PuzzleKind


Position = Tuple[int, int]
LetterRows = List[List[Optional[str]]]


@dataclass(frozen=True)
class VocabEntry:
    """A vocabulary term as handed over by the host."""

    word: str
    clue: str = ""


@dataclass
class PlacedWord:
    """A word committed to the grid together with the cells it covers."""

    id: str
    text: str
    clue: str
    start_row: int
    start_col: int
    direction: Direction
    length: int
    positions: List[Position] = field(default_factory=list)
    number: Optional[int] = None

    @property
    def reversed_text(self) -> str:
        return self.text[::-1]


@dataclass(frozen=True)
class ClueEntry:
    """One line of a crossword clue list."""

    number: int
    clue: str
    answer: str


@dataclass
class Puzzle:
    """A generated grid plus the words that made it onto it.

    Word-search grids hold a letter in every cell. Crossword grids hold
    ``None`` for blocked cells.
    """

    grid: LetterRows
    size: int
    placed_words: List[PlacedWord] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)
    kind: PuzzleKind = PuzzleKind.WORD_SEARCH

    @property
    def word_count(self) -> int:
        return len(self.placed_words) + len(self.unplaced)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def letter(self, row: int, col: int) -> Optional[str]:
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def read(self, positions: List[Position]) -> str:
        return "".join(self.grid[row][col] or "" for row, col in positions)


@dataclass
class CrosswordPuzzle(Puzzle):
    """Crossword layout with across/down clue lists and start-cell numbers."""

    kind: PuzzleKind = PuzzleKind.CROSSWORD
    across: List[ClueEntry] = field(default_factory=list)
    down: List[ClueEntry] = field(default_factory=list)
    cell_numbers: Dict[Position, int] = field(default_factory=dict)

    def is_blocked(self, row: int, col: int) -> bool:
        return self.letter(row, col) is None

    def grid_label(self, number: int) -> Optional[int]:
        """Number printed in the start cell of clue ``number``.

        Differs from ``number`` when an earlier word already starts on that
        cell, because each cell shows only the first number given to it.
        """

        for word in self.placed_words:
            if word.number == number:
                return self.cell_numbers.get((word.start_row, word.start_col))
        return None

    def open_cells(self) -> List[Position]:
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.grid[row][col] is not None
        ]


@dataclass(frozen=True)
class Score:
    """Progress report handed to the host after each session change.

    ``is_replay`` marks the report sent right after a restart, so hosts can
    start a fresh attempt instead of updating the previous one.
    """

    score: int
    details: str
    is_complete: bool
    is_replay: bool = False


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 100 only when ``part == whole``."""

    if whole <= 0:
        return 0
    value = (200 * part + whole) // (2 * whole)
    if part < whole:
        return min(value, 99)
    return value
