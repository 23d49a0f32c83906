"""Exception hierarchy for the puzzle engine.

Placement problems are never raised: a word that cannot be placed ends up in
``Puzzle.unplaced``. Exceptions are reserved for payloads coming back from a
host's storage and for restarts a session cannot honour.
"""


class WordGridError(Exception):
    """Base exception for engine failures."""


class SnapshotError(WordGridError):
    """Raised when a persisted puzzle snapshot cannot be restored."""


class RestoreMismatchError(SnapshotError):
    """Raised when a snapshot was built from a different vocabulary selection."""


class RestartError(WordGridError):
    """Raised when a session is asked to restart without a way to regenerate."""
