"""Interactive crossword solving driven by abstract key events."""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Callable, Optional

from ..core.events import BACKSPACE, InputEvent, KeyPress, PointerDown
from ..core.exceptions import RestartError
from ..core.models import CrosswordPuzzle, LetterRows, Position, Score, percentage
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

ScoreListener = Callable[[Score], None]
PuzzleFactory = Callable[[], CrosswordPuzzle]


class CrosswordSession:
    """Holds typed values in a grid parallel to the puzzle's letter grid.

    Blocked cells hold ``None`` in both grids; open cells start as ``""``.
    """

    def __init__(
        self,
        puzzle: CrosswordPuzzle,
        entries: Optional[LetterRows] = None,
        on_progress: Optional[ScoreListener] = None,
        on_complete: Optional[ScoreListener] = None,
        regenerate: Optional[PuzzleFactory] = None,
    ) -> None:
        self.puzzle = puzzle
        self.regenerate = regenerate
        self.entries: LetterRows = self._blank_entries()
        if entries is not None:
            self._load_entries(entries)
        self.focus: Optional[Position] = None
        self.on_progress = on_progress
        self.on_complete = on_complete
        self._completion_reported = self.get_score().is_complete

    def _blank_entries(self) -> LetterRows:
        return [
            [None if letter is None else "" for letter in row]
            for row in self.puzzle.grid
        ]

    def _load_entries(self, entries: LetterRows) -> None:
        for row, values in enumerate(entries[: self.puzzle.size]):
            for col, value in enumerate(values[: self.puzzle.size]):
                if self.is_open(row, col):
                    self.entries[row][col] = (value or "")[:1]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_open(self, row: int, col: int) -> bool:
        return self.puzzle.in_bounds(row, col) and not self.puzzle.is_blocked(row, col)

    def value(self, row: int, col: int) -> Optional[str]:
        if not self.is_open(row, col):
            return None
        return self.entries[row][col]

    def snapshot_entries(self) -> LetterRows:
        return copy.deepcopy(self.entries)

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------
    def handle(self, event: InputEvent) -> Optional[Position]:
        if isinstance(event, PointerDown):
            self.focus_cell(event.row, event.col)
        elif isinstance(event, KeyPress):
            if event.key == BACKSPACE:
                self.backspace(event.row, event.col)
            elif len(event.key) == 1 and event.key.isprintable() and not event.key.isspace():
                self.enter(event.row, event.col, event.key)
        return self.focus

    def focus_cell(self, row: int, col: int) -> Optional[Position]:
        if self.is_open(row, col):
            self.focus = (row, col)
        return self.focus

    def enter(self, row: int, col: int, value: str) -> Optional[Position]:
        """Store ``value`` at an open cell and advance focus right, then down."""

        if not self.is_open(row, col):
            return self.focus
        stored = (value or "")[:1]
        self.entries[row][col] = stored
        self.focus = (row, col)
        if stored:
            # Right-then-down regardless of which word the cell belongs to.
            for next_row, next_col in ((row, col + 1), (row + 1, col)):
                if self.is_open(next_row, next_col):
                    self.focus = (next_row, next_col)
                    break
        self._report()
        return self.focus

    def backspace(self, row: int, col: int) -> Optional[Position]:
        if not self.is_open(row, col):
            return self.focus
        self.focus = (row, col)
        if self.entries[row][col]:
            self.entries[row][col] = ""
            self._report()
            return self.focus
        for prev_row, prev_col in ((row, col - 1), (row - 1, col)):
            if self.is_open(prev_row, prev_col):
                self.focus = (prev_row, prev_col)
                break
        return self.focus

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    @property
    def is_complete(self) -> bool:
        return self.get_score().is_complete

    def get_score(self) -> Score:
        correct = 0
        total = 0
        for row, col in self.puzzle.open_cells():
            total += 1
            expected = self.puzzle.grid[row][col] or ""
            if (self.entries[row][col] or "").upper() == expected.upper():
                correct += 1
        score = percentage(correct, total)
        return Score(
            score=score,
            details=f"{correct}/{total} letters correct",
            is_complete=score == 100,
        )

    def restart(self) -> Score:
        """Regenerate the layout, clear every typed letter and report a replay."""

        if self.regenerate is None:
            raise RestartError("Crossword session was created without a puzzle factory")
        self.puzzle = self.regenerate()
        self.entries = self._blank_entries()
        self.focus = None
        self._completion_reported = False
        score = replace(self.get_score(), is_replay=True)
        LOGGER.info("Crossword restarted with %s words", len(self.puzzle.placed_words))
        if self.on_progress:
            self.on_progress(score)
        return score

    def _report(self) -> None:
        score = self.get_score()
        if self.on_progress:
            self.on_progress(score)
        if score.is_complete and not self._completion_reported:
            self._completion_reported = True
            LOGGER.info("Crossword complete: %s", score.details)
            if self.on_complete:
                self.on_complete(score)
