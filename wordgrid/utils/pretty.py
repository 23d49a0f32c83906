"""Pretty-print helpers for generated puzzles."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Set

from ..core.models import ClueEntry, CrosswordPuzzle, Position, Puzzle


BLOCKED_SYMBOL = "#"
OPEN_SYMBOL = "."


def format_grid(
    puzzle: Puzzle,
    *,
    show_letters: bool = True,
    highlight: Optional[Set[Position]] = None,
) -> str:
    """Render the grid with row/column headers.

    Crossword cells render as ``#`` when blocked and, with ``show_letters``
    off, as ``.`` or their clue number when open. Highlighted cells are
    lowercased.
    """

    width = puzzle.size
    highlight = highlight or set()
    numbers = puzzle.cell_numbers if isinstance(puzzle, CrosswordPuzzle) else {}
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(width):
        row_cells = [_cell_symbol(puzzle, r, c, show_letters, highlight, numbers) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def _cell_symbol(puzzle, row, col, show_letters, highlight, numbers) -> str:
    letter = puzzle.grid[row][col]
    if letter is None:
        return BLOCKED_SYMBOL
    if not show_letters:
        number = numbers.get((row, col))
        return str(number) if number is not None else OPEN_SYMBOL
    if (row, col) in highlight:
        return letter.lower()
    return letter


def format_clues(
    title: str,
    clues: Iterable[ClueEntry],
    puzzle: Optional[CrosswordPuzzle] = None,
) -> List[str]:
    """One line per clue; notes the grid number when the start cell shows another."""

    lines = [title]
    for entry in clues:
        line = f"  {entry.number:>2}. {entry.clue or entry.answer}"
        label = puzzle.grid_label(entry.number) if puzzle is not None else None
        if label is not None and label != entry.number:
            line += f" (starts at {label})"
        lines.append(line)
    return lines


def print_puzzle(
    puzzle: Puzzle,
    *,
    show_letters: bool = True,
    highlight: Optional[Set[Position]] = None,
    stream=None,
) -> None:
    """Print the grid followed by the word list or the clue lists."""

    stream = stream or sys.stdout
    print(format_grid(puzzle, show_letters=show_letters, highlight=highlight), file=stream)
    print(file=stream)
    if isinstance(puzzle, CrosswordPuzzle):
        for line in format_clues("Across", puzzle.across, puzzle):
            print(line, file=stream)
        for line in format_clues("Down", puzzle.down, puzzle):
            print(line, file=stream)
    else:
        print("Words to find:", file=stream)
        for word in puzzle.placed_words:
            print(f"  {word.text}", file=stream)

    if puzzle.unplaced:
        print(file=stream)
        print(f"Unplaced ({len(puzzle.unplaced)}): {', '.join(puzzle.unplaced)}", file=stream)
