"""Snapshot payloads for persisting a puzzle together with its solve state.

The host stores these documents in whatever key-value store it uses and
overwrites them whole on every change. Documents are plain JSON-able dicts:
``kind``, ``size``, ``grid``, ``placed_words``, ``unplaced``, ``word_count``
plus ``found_word_ids`` (word search) or ``entries``, ``clues`` and
``cell_numbers`` (crossword).
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.constants import Direction, PuzzleKind
from ..core.exceptions import RestoreMismatchError, SnapshotError
from ..core.models import ClueEntry, CrosswordPuzzle, LetterRows, PlacedWord, Puzzle
from ..engine.crossword_session import CrosswordSession
from ..engine.word_search_session import WordSearchSession
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Session = Union[WordSearchSession, CrosswordSession]


# ----------------------------------------------------------------------
# Serialization
# ----------------------------------------------------------------------
def _serialize_words(words: List[PlacedWord]) -> list:
    return [
        {
            "id": word.id,
            "text": word.text,
            "clue": word.clue,
            "start": [word.start_row, word.start_col],
            "direction": word.direction.value,
            "length": word.length,
            "number": word.number,
            "positions": [[row, col] for row, col in word.positions],
        }
        for word in words
    ]


def _serialize_puzzle(puzzle: Puzzle) -> Dict[str, Any]:
    return {
        "kind": puzzle.kind.value,
        "size": puzzle.size,
        "grid": [list(row) for row in puzzle.grid],
        "placed_words": _serialize_words(puzzle.placed_words),
        "unplaced": list(puzzle.unplaced),
        "word_count": puzzle.word_count,
    }


def snapshot_word_search(session: WordSearchSession) -> Dict[str, Any]:
    doc = _serialize_puzzle(session.puzzle)
    doc["found_word_ids"] = sorted(session.found_word_ids)
    return doc


def snapshot_crossword(session: CrosswordSession) -> Dict[str, Any]:
    puzzle = session.puzzle
    doc = _serialize_puzzle(puzzle)
    doc["clues"] = {
        "across": [asdict(entry) for entry in puzzle.across],
        "down": [asdict(entry) for entry in puzzle.down],
    }
    doc["cell_numbers"] = [
        [row, col, number] for (row, col), number in sorted(puzzle.cell_numbers.items())
    ]
    doc["entries"] = session.snapshot_entries()
    return doc


def snapshot_session(session: Session) -> Dict[str, Any]:
    if isinstance(session, CrosswordSession):
        return snapshot_crossword(session)
    return snapshot_word_search(session)


def dumps(doc: Dict[str, Any]) -> str:
    return json.dumps(doc, ensure_ascii=False)


def loads(text: str) -> Dict[str, Any]:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    return doc


# ----------------------------------------------------------------------
# Restore
# ----------------------------------------------------------------------
def snapshot_matches(doc: Dict[str, Any], words: Sequence[Any]) -> bool:
    """Return True when ``doc`` was generated from as many words as ``words``."""

    return doc.get("word_count") == len(words)


def ensure_snapshot_matches(doc: Dict[str, Any], words: Sequence[Any]) -> None:
    if not snapshot_matches(doc, words):
        LOGGER.warning(
            "Discarding stale snapshot: built from %s words, vocabulary has %s",
            doc.get("word_count"),
            len(words),
        )
        raise RestoreMismatchError(
            f"Snapshot word count {doc.get('word_count')} does not match vocabulary size {len(words)}"
        )


def restore_session(doc: Dict[str, Any], **session_options: Any) -> Session:
    """Rebuild the session described by ``doc``.

    ``session_options`` (``on_progress``, ``on_complete``, ``regenerate``) are
    passed through to the session constructor.
    """

    if not isinstance(doc, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    try:
        kind = PuzzleKind(doc["kind"])
    except (KeyError, ValueError) as exc:
        raise SnapshotError(f"Unknown snapshot kind: {doc.get('kind')!r}") from exc
    if kind == PuzzleKind.CROSSWORD:
        return restore_crossword(doc, **session_options)
    return restore_word_search(doc, **session_options)


def restore_word_search(doc: Dict[str, Any], **session_options: Any) -> WordSearchSession:
    try:
        size, grid, words, unplaced = _parse_common(doc)
        found = [str(word_id) for word_id in doc.get("found_word_ids", [])]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed word search snapshot: {exc}") from exc
    if any(not _is_letter(letter) for row in grid for letter in row):
        raise SnapshotError("Word search grid cells must each hold one letter")
    puzzle = Puzzle(
        grid=grid,
        size=size,
        placed_words=words,
        unplaced=unplaced,
        kind=PuzzleKind.WORD_SEARCH,
    )
    _check_words(puzzle)
    return WordSearchSession(puzzle, found_word_ids=found, **session_options)


def restore_crossword(doc: Dict[str, Any], **session_options: Any) -> CrosswordSession:
    try:
        size, grid, words, unplaced = _parse_common(doc)
        clues = doc.get("clues", {})
        across = [_parse_clue(entry) for entry in clues.get("across", [])]
        down = [_parse_clue(entry) for entry in clues.get("down", [])]
        cell_numbers = {
            (int(row), int(col)): int(number) for row, col, number in doc.get("cell_numbers", [])
        }
        entries = _parse_entries(doc.get("entries"))
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed crossword snapshot: {exc}") from exc
    puzzle = CrosswordPuzzle(
        grid=grid,
        size=size,
        placed_words=words,
        unplaced=unplaced,
        across=across,
        down=down,
        cell_numbers=cell_numbers,
    )
    covered = {cell for word in words for cell in word.positions}
    for row in range(size):
        for col in range(size):
            letter = grid[row][col]
            if (row, col) in covered and not _is_letter(letter):
                raise SnapshotError(f"Crossword cell {(row, col)} must hold one letter")
            if (row, col) not in covered and letter is not None:
                raise SnapshotError(f"Crossword cell {(row, col)} holds a letter no word covers")
    _check_words(puzzle)
    return CrosswordSession(puzzle, entries=entries, **session_options)


def _is_letter(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def _parse_entries(raw: Any) -> Optional[LetterRows]:
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise TypeError("entries must be a list of rows")
    for row in raw:
        for value in row:
            if value is not None and not isinstance(value, str):
                raise TypeError(f"entry {value!r} is not text")
    return raw


def _parse_common(doc: Dict[str, Any]):
    size = int(doc["size"])
    grid = [list(row) for row in doc["grid"]]
    if len(grid) != size or any(len(row) != size for row in grid):
        raise ValueError(f"grid is not {size}x{size}")
    words = [_parse_word(entry) for entry in doc.get("placed_words", [])]
    unplaced = [str(word) for word in doc.get("unplaced", [])]
    return size, grid, words, unplaced


def _parse_word(entry: Dict[str, Any]) -> PlacedWord:
    start_row, start_col = entry["start"]
    return PlacedWord(
        id=str(entry["id"]),
        text=entry["text"],
        clue=entry.get("clue", ""),
        start_row=int(start_row),
        start_col=int(start_col),
        direction=Direction(entry["direction"]),
        length=int(entry["length"]),
        positions=[(int(row), int(col)) for row, col in entry["positions"]],
        number=entry.get("number"),
    )


def _parse_clue(entry: Dict[str, Any]) -> ClueEntry:
    return ClueEntry(number=int(entry["number"]), clue=entry.get("clue", ""), answer=entry["answer"])


def _check_words(puzzle: Puzzle) -> None:
    for word in puzzle.placed_words:
        if any(not puzzle.in_bounds(row, col) for row, col in word.positions):
            raise SnapshotError(f"Word {word.id} runs outside the grid")
        if puzzle.read(word.positions) != word.text:
            raise SnapshotError(f"Grid letters disagree with word {word.id}")
