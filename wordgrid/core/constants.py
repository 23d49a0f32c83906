"""Shared constants and enumerations for the puzzle engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


DEFAULT_GRID_SIZE = 15
ALPHABET = string.ascii_uppercase


class Direction(str, Enum):
    """Compass directions a word can run in.

    ``ACROSS`` and ``DOWN`` are aliases of ``E`` and ``S`` so crossword code
    can speak in crossword terms while sharing the same step table.
    """

    E = "E"
    S = "S"
    SE = "SE"
    SW = "SW"
    W = "W"
    N = "N"
    NW = "NW"
    NE = "NE"

    ACROSS = "E"
    DOWN = "S"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]

    @property
    def perpendicular(self) -> "Direction":
        """Crossword perpendicular; only defined for ACROSS and DOWN."""
        if self is Direction.ACROSS:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.ACROSS
        raise ValueError(f"No crossword perpendicular for {self.value}")


class PlacementMode(str, Enum):
    """How strictly a word may touch letters already on the grid."""

    OVERLAP = "OVERLAP"
    CROSSWORD = "CROSSWORD"


class PuzzleKind(str, Enum):
    WORD_SEARCH = "word_search"
    CROSSWORD = "crossword"


# (row delta, col delta)
DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.SE: (1, 1),
    Direction.SW: (1, -1),
    Direction.W: (0, -1),
    Direction.N: (-1, 0),
    Direction.NW: (-1, -1),
    Direction.NE: (-1, 1),
}

ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.E,
    Direction.S,
    Direction.SE,
    Direction.SW,
    Direction.W,
    Direction.N,
    Direction.NW,
    Direction.NE,
)
PRINTABLE_DIRECTIONS: Tuple[Direction, ...] = (Direction.E, Direction.S, Direction.SE)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
