"""Greedy crossword layout.

The longest word is centred across the middle row; every other word, longest
first, is hung perpendicular off the first already-placed word it shares a
letter with and fits against. There is no backtracking: a word with no valid
crossing is reported in ``CrosswordPuzzle.unplaced``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..core.constants import DEFAULT_GRID_SIZE, Direction, PlacementMode
from ..core.models import ClueEntry, CrosswordPuzzle, PlacedWord, Position, VocabEntry
from ..data.normalization import has_letters, normalize_word
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)

ClueInput = Union[VocabEntry, Tuple[str, str]]


@dataclass
class CrosswordConfig:
    size: int = DEFAULT_GRID_SIZE
    strict_adjacency: bool = True
    max_words: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Grid size must be at least 1")
        if self.max_words is not None and self.max_words < 0:
            raise ValueError("max_words cannot be negative")

    @classmethod
    def printable(cls, size: int = DEFAULT_GRID_SIZE) -> "CrosswordConfig":
        """Settings used for printed quizzes: letter agreement only, at most 8 words."""
        return cls(size=size, strict_adjacency=False, max_words=8)

    @property
    def placement_mode(self) -> PlacementMode:
        return PlacementMode.CROSSWORD if self.strict_adjacency else PlacementMode.OVERLAP


@dataclass
class _Candidate:
    raw: str
    word: str
    clue: str


def _as_entry(item: ClueInput) -> VocabEntry:
    if isinstance(item, VocabEntry):
        return item
    word, clue = item
    return VocabEntry(word=word, clue=clue)


class CrosswordGenerator:
    """Lays out crossword entries on a square grid."""

    def __init__(self, config: Optional[CrosswordConfig] = None) -> None:
        self.config = config or CrosswordConfig()

    def generate(self, word_clues: Iterable[ClueInput]) -> CrosswordPuzzle:
        grid = LetterGrid.create(self.config.size)
        placed: List[PlacedWord] = []
        unplaced: List[str] = []
        across: List[ClueEntry] = []
        down: List[ClueEntry] = []
        cell_numbers = {}

        candidates: List[_Candidate] = []
        for item in word_clues:
            entry = _as_entry(item)
            word = normalize_word(entry.word)
            if not has_letters(word):
                LOGGER.debug("Skipping entry without letters: %r", entry.word)
                unplaced.append(entry.word)
                continue
            candidates.append(_Candidate(raw=entry.word, word=word, clue=entry.clue))

        ordered = sorted(candidates, key=lambda candidate: len(candidate.word), reverse=True)
        if self.config.max_words is not None:
            for skipped in ordered[self.config.max_words:]:
                unplaced.append(skipped.raw)
            ordered = ordered[: self.config.max_words]

        for candidate in ordered:
            if placed:
                spot = self._find_crossing(grid, placed, candidate.word)
            else:
                spot = self._centre(grid, candidate.word)
            if spot is None:
                LOGGER.debug("No valid position for %s", candidate.word)
                unplaced.append(candidate.raw)
                continue

            row, col, direction = spot
            number = len(placed) + 1
            word_id = f"{number}{'A' if direction is Direction.ACROSS else 'D'}"
            positions = grid.commit(candidate.word, row, col, direction, word_id)
            placed.append(
                PlacedWord(
                    id=word_id,
                    text=candidate.word,
                    clue=candidate.clue,
                    start_row=row,
                    start_col=col,
                    direction=direction,
                    length=len(candidate.word),
                    positions=positions,
                    number=number,
                )
            )
            cell_numbers.setdefault((row, col), number)
            clue_entry = ClueEntry(number=number, clue=candidate.clue, answer=candidate.raw)
            if direction is Direction.ACROSS:
                across.append(clue_entry)
            else:
                down.append(clue_entry)

        LOGGER.info(
            "Crossword generated with %s words (%s across, %s down, %s unplaced)",
            len(placed),
            len(across),
            len(down),
            len(unplaced),
        )
        return CrosswordPuzzle(
            grid=grid.rows(),
            size=grid.size,
            placed_words=placed,
            unplaced=unplaced,
            across=across,
            down=down,
            cell_numbers=cell_numbers,
        )

    def _centre(self, grid: LetterGrid, word: str) -> Optional[Tuple[int, int, Direction]]:
        row = grid.size // 2
        col = (grid.size - len(word)) // 2
        if grid.can_place(word, row, col, Direction.ACROSS, self.config.placement_mode):
            return row, col, Direction.ACROSS
        return None

    def _find_crossing(
        self,
        grid: LetterGrid,
        placed: List[PlacedWord],
        word: str,
    ) -> Optional[Tuple[int, int, Direction]]:
        mode = self.config.placement_mode
        for anchor in placed:
            direction = anchor.direction.perpendicular
            for i, letter in enumerate(word):
                for j, anchor_letter in enumerate(anchor.text):
                    if letter != anchor_letter:
                        continue
                    cross_row, cross_col = anchor.positions[j]
                    row, col = self._start_through(cross_row, cross_col, i, direction)
                    if grid.can_place(word, row, col, direction, mode):
                        return row, col, direction
        return None

    @staticmethod
    def _start_through(row: int, col: int, offset: int, direction: Direction) -> Position:
        d_row, d_col = direction.step
        return row - d_row * offset, col - d_col * offset
