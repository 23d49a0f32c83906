"""Word-search generation.

Words are dropped onto the grid one at a time, in input order, at random
starts and directions. Placement is purely additive and best effort: a word
that does not fit within the attempt budget is reported in
``Puzzle.unplaced`` and never revisited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..core.constants import (
    ALL_DIRECTIONS,
    ALPHABET,
    DEFAULT_GRID_SIZE,
    PRINTABLE_DIRECTIONS,
    Direction,
    PlacementMode,
    PuzzleKind,
)
from ..core.models import PlacedWord, Puzzle, VocabEntry
from ..data.normalization import has_letters, normalize_word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .rng import RandomSource, SeededRandom, pick, pick_index


LOGGER = get_logger(__name__)

WordInput = Union[str, VocabEntry]


@dataclass
class WordSearchConfig:
    size: int = DEFAULT_GRID_SIZE
    directions: Tuple[Direction, ...] = ALL_DIRECTIONS
    max_attempts: int = 100

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Grid size must be at least 1")
        if not self.directions:
            raise ValueError("At least one placement direction is required")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.directions = tuple(self.directions)

    @classmethod
    def printable(cls, size: int = DEFAULT_GRID_SIZE) -> "WordSearchConfig":
        """Settings used for printed quizzes: forward-reading directions only."""
        return cls(size=size, directions=PRINTABLE_DIRECTIONS, max_attempts=50)


def _split_entry(entry: WordInput) -> Tuple[str, str]:
    if isinstance(entry, VocabEntry):
        return entry.word, entry.clue
    return entry, ""


class WordSearchGenerator:
    """Builds word-search puzzles from an ordered word list."""

    def __init__(
        self,
        config: Optional[WordSearchConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or WordSearchConfig()
        self.rng = rng or SeededRandom()

    def generate(self, words: Iterable[WordInput]) -> Puzzle:
        grid = LetterGrid.create(self.config.size)
        placed: List[PlacedWord] = []
        unplaced: List[str] = []

        for entry in words:
            raw, clue = _split_entry(entry)
            word = normalize_word(raw)
            if not has_letters(word):
                LOGGER.debug("Skipping entry without letters: %r", raw)
                unplaced.append(raw)
                continue
            placed_word = self._place(grid, word, clue, word_id=f"W{len(placed) + 1}")
            if placed_word is None:
                LOGGER.debug("Could not place %s after %s attempts", word, self.config.max_attempts)
                unplaced.append(raw)
                continue
            placed.append(placed_word)

        grid.fill_empty(self._random_letter)
        if unplaced:
            LOGGER.info("Word search left %s of %s words unplaced", len(unplaced), len(placed) + len(unplaced))
        LOGGER.info("Word search generated with %s words on a %sx%s grid", len(placed), grid.size, grid.size)
        return Puzzle(
            grid=grid.rows(),
            size=grid.size,
            placed_words=placed,
            unplaced=unplaced,
            kind=PuzzleKind.WORD_SEARCH,
        )

    def _place(self, grid: LetterGrid, word: str, clue: str, word_id: str) -> Optional[PlacedWord]:
        for _ in range(self.config.max_attempts):
            direction = pick(self.rng, self.config.directions)
            row = pick_index(self.rng, grid.size)
            col = pick_index(self.rng, grid.size)
            if not grid.can_place(word, row, col, direction, PlacementMode.OVERLAP):
                continue
            positions = grid.commit(word, row, col, direction, word_id)
            return PlacedWord(
                id=word_id,
                text=word,
                clue=clue,
                start_row=row,
                start_col=col,
                direction=direction,
                length=len(word),
                positions=positions,
            )
        return None

    def _random_letter(self) -> str:
        return ALPHABET[pick_index(self.rng, len(ALPHABET))]


def generate_word_search(
    words: Sequence[WordInput],
    size: int = DEFAULT_GRID_SIZE,
    seed: Optional[int] = None,
) -> Puzzle:
    """Convenience wrapper for one-off generation with a seed."""

    generator = WordSearchGenerator(WordSearchConfig(size=size), SeededRandom(seed))
    return generator.generate(words)
