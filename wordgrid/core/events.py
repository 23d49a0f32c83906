"""Toolkit-neutral input events consumed by the solve sessions.

A host translates its real mouse, touch or keyboard events into these and
feeds them to ``session.handle``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


BACKSPACE = "Backspace"


@dataclass(frozen=True)
class PointerDown:
    row: int
    col: int


@dataclass(frozen=True)
class PointerMove:
    row: int
    col: int


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class KeyPress:
    row: int
    col: int
    key: str


InputEvent = Union[PointerDown, PointerMove, PointerUp, KeyPress]
