"""Word-search and crossword generation with interactive solve sessions.

This package exposes the public API surface via:

- ``wordgrid.engine.word_search.WordSearchGenerator``: random word-search placement.
- ``wordgrid.engine.crossword.CrosswordGenerator``: greedy crossword layout.
- ``wordgrid.engine.word_search_session.WordSearchSession`` and
  ``wordgrid.engine.crossword_session.CrosswordSession``: scoring solve state.
- ``wordgrid.io.snapshot`` helpers: persistable snapshots of a session.
"""

from .core.models import CrosswordPuzzle, PlacedWord, Puzzle, Score, VocabEntry
from .engine.crossword import CrosswordConfig, CrosswordGenerator
from .engine.crossword_session import CrosswordSession
from .engine.rng import RandomSource, SeededRandom
from .engine.word_search import WordSearchConfig, WordSearchGenerator
from .engine.word_search_session import WordSearchSession

__all__ = [
    "CrosswordConfig",
    "CrosswordGenerator",
    "CrosswordPuzzle",
    "CrosswordSession",
    "PlacedWord",
    "Puzzle",
    "RandomSource",
    "Score",
    "SeededRandom",
    "VocabEntry",
    "WordSearchConfig",
    "WordSearchGenerator",
    "WordSearchSession",
]

__version__ = "0.1.0"
