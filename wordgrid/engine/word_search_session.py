"""Interactive word-search solving driven by abstract pointer events."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Set

from ..core.events import InputEvent, PointerDown, PointerMove, PointerUp
from ..core.exceptions import RestartError
from ..core.models import PlacedWord, Position, Puzzle, Score, percentage
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

ScoreListener = Callable[[Score], None]
PuzzleFactory = Callable[[], Puzzle]


class WordSearchSession:
    """Tracks one solver's drag selections and found words."""

    def __init__(
        self,
        puzzle: Puzzle,
        found_word_ids: Iterable[str] = (),
        on_progress: Optional[ScoreListener] = None,
        on_complete: Optional[ScoreListener] = None,
        regenerate: Optional[PuzzleFactory] = None,
    ) -> None:
        self.puzzle = puzzle
        self.regenerate = regenerate
        known_ids = {word.id for word in puzzle.placed_words}
        self.found_word_ids: Set[str] = {word_id for word_id in found_word_ids if word_id in known_ids}
        self.selection_path: List[Position] = []
        self.selecting = False
        self.on_progress = on_progress
        self.on_complete = on_complete
        self._completion_reported = self.get_score().is_complete

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------
    def handle(self, event: InputEvent) -> Optional[PlacedWord]:
        if isinstance(event, PointerDown):
            self.pointer_down(event.row, event.col)
        elif isinstance(event, PointerMove):
            self.pointer_move(event.row, event.col)
        elif isinstance(event, PointerUp):
            return self.pointer_up()
        return None

    def pointer_down(self, row: int, col: int) -> None:
        if not self.puzzle.in_bounds(row, col):
            return
        self.selecting = True
        self.selection_path = [(row, col)]

    def pointer_move(self, row: int, col: int) -> None:
        if not self.selecting or not self.puzzle.in_bounds(row, col):
            return
        cell = (row, col)
        if cell in self.selection_path:
            return
        if self._extends_line(cell):
            self.selection_path.append(cell)

    def pointer_up(self) -> Optional[PlacedWord]:
        if not self.selecting:
            return None
        self.selecting = False
        path = self.selection_path
        self.selection_path = []

        match = self._match(path)
        if match is None:
            return None

        self.found_word_ids.add(match.id)
        LOGGER.debug("Found %s (%s/%s)", match.text, len(self.found_word_ids), len(self.puzzle.placed_words))
        self._report()
        return match

    def _extends_line(self, cell: Position) -> bool:
        first = self.selection_path[0]
        last = self.selection_path[-1]
        if len(self.selection_path) == 1:
            d_row, d_col = cell[0] - first[0], cell[1] - first[1]
            return max(abs(d_row), abs(d_col)) == 1
        step_row = self.selection_path[1][0] - first[0]
        step_col = self.selection_path[1][1] - first[1]
        return cell == (last[0] + step_row, last[1] + step_col)

    def _match(self, path: List[Position]) -> Optional[PlacedWord]:
        if not path:
            return None
        candidate = self.puzzle.read(path)
        unfound = [word for word in self.puzzle.placed_words if word.id not in self.found_word_ids]
        for word in unfound:
            if word.positions == path or word.positions == path[::-1]:
                return word
        for word in unfound:
            if candidate in (word.text, word.reversed_text):
                return word
        return None

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    def highlighted_cells(self) -> Set[Position]:
        cells: Set[Position] = set()
        for word in self.puzzle.placed_words:
            if word.id in self.found_word_ids:
                cells.update(word.positions)
        return cells

    @property
    def is_complete(self) -> bool:
        return self.get_score().is_complete

    def get_score(self) -> Score:
        found = len(self.found_word_ids)
        total = len(self.puzzle.placed_words)
        score = percentage(found, total)
        return Score(
            score=score,
            details=f"Found {found} of {total} words",
            is_complete=total > 0 and found == total,
        )

    # ------------------------------------------------------------------
    # Replay
    # ------------------------------------------------------------------
    def restart(self) -> Score:
        """Swap in a freshly generated puzzle and forget all progress.

        The host receives a zero score flagged ``is_replay`` through
        ``on_progress``; completion can be reported again afterwards.
        """

        if self.regenerate is None:
            raise RestartError("Word search session was created without a puzzle factory")
        self.puzzle = self.regenerate()
        self.found_word_ids = set()
        self.selection_path = []
        self.selecting = False
        self._completion_reported = False
        score = replace(self.get_score(), is_replay=True)
        LOGGER.info("Word search restarted with %s words", len(self.puzzle.placed_words))
        if self.on_progress:
            self.on_progress(score)
        return score

    def _report(self) -> None:
        score = self.get_score()
        if self.on_progress:
            self.on_progress(score)
        if score.is_complete and not self._completion_reported:
            self._completion_reported = True
            LOGGER.info("Word search complete: %s", score.details)
            if self.on_complete:
                self.on_complete(score)
