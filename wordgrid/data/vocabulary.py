"""Vocabulary input helpers used by hosts before calling a generator.

Generators never filter their input; any screening (alphabetic only,
minimum length) happens here, on the host side.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..core.models import VocabEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SEPARATORS = ("\t", ":")


def parse_entry(text: str) -> VocabEntry:
    """Parse ``WORD``, ``WORD:Clue`` or ``WORD<TAB>Clue``."""

    for separator in SEPARATORS:
        if separator in text:
            word, clue = text.split(separator, 1)
            return VocabEntry(word=word.strip(), clue=clue.strip())
    return VocabEntry(word=text.strip())


def parse_entries(items: Iterable[str]) -> List[VocabEntry]:
    return [parse_entry(item) for item in items if item.strip()]


def parse_vocabulary_file(path: Path) -> List[VocabEntry]:
    """Read one entry per line. Blank lines and # comments are skipped."""

    entries: List[VocabEntry] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(parse_entry(line))
    LOGGER.info("Loaded %s vocabulary entries from %s", len(entries), path)
    return entries


def filter_for_crossword(entries: Iterable[VocabEntry], min_length: int = 2) -> List[VocabEntry]:
    """Keep single-token alphabetic words of at least ``min_length`` letters."""

    kept = [
        entry
        for entry in entries
        if len(entry.word) >= min_length and entry.word.isascii() and entry.word.isalpha()
    ]
    return kept
