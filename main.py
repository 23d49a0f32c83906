"""CLI entrypoint for generating word-search and crossword puzzles."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from wordgrid.core.constants import DEFAULT_GRID_SIZE
from wordgrid.core.models import VocabEntry
from wordgrid.data.vocabulary import filter_for_crossword, parse_entries, parse_vocabulary_file
from wordgrid.engine.crossword import CrosswordConfig, CrosswordGenerator
from wordgrid.engine.crossword_session import CrosswordSession
from wordgrid.engine.rng import SeededRandom
from wordgrid.engine.word_search import WordSearchConfig, WordSearchGenerator
from wordgrid.engine.word_search_session import WordSearchSession
from wordgrid.io.snapshot import dumps, snapshot_session
from wordgrid.utils.logger import configure_logging, get_logger, parse_log_level
from wordgrid.utils.pretty import print_puzzle


LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate vocabulary word-search and crossword puzzles",
    )
    subparsers = parser.add_subparsers(dest="kind", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Vocabulary entries (format: WORD or WORD:Clue)",
    )
    common.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    common.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    common.add_argument(
        "--printable",
        action="store_true",
        help="Use the printed-quiz settings instead of the interactive ones",
    )
    common.add_argument(
        "--show-answers",
        action="store_true",
        help="Mark hidden words in lowercase (word search) or fill in the letters (crossword)",
    )
    common.add_argument("--output", type=Path, help="Optional path for the JSON snapshot")
    common.add_argument(
        "--log-level",
        type=parse_log_level,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    word_search = subparsers.add_parser("wordsearch", parents=[common], help="Generate a word search")
    word_search.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    word_search.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Placement attempts per word",
    )

    subparsers.add_parser("crossword", parents=[common], help="Generate a crossword")
    return parser


def collect_entries(args: argparse.Namespace) -> List[VocabEntry]:
    entries: List[VocabEntry] = []
    if args.words:
        entries.extend(parse_entries(args.words))
    if args.words_file:
        entries.extend(parse_vocabulary_file(args.words_file))
    return entries


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    entries = collect_entries(args)
    if not entries:
        parser.error("provide at least --words or --words-file")

    try:
        if args.kind == "wordsearch":
            config = WordSearchConfig.printable(args.size) if args.printable else WordSearchConfig(size=args.size)
            if args.max_attempts is not None:
                config = WordSearchConfig(
                    size=config.size,
                    directions=config.directions,
                    max_attempts=args.max_attempts,
                )
            puzzle = WordSearchGenerator(config, SeededRandom(args.seed)).generate(entries)
            session = WordSearchSession(puzzle)
            answers = {cell for word in puzzle.placed_words for cell in word.positions}
            print_puzzle(puzzle, highlight=answers if args.show_answers else None)
        else:
            config = CrosswordConfig.printable(args.size) if args.printable else CrosswordConfig(size=args.size)
            usable = filter_for_crossword(entries)
            if len(usable) < len(entries):
                LOGGER.info("Dropped %s entries that are not single alphabetic words", len(entries) - len(usable))
            puzzle = CrosswordGenerator(config).generate(usable)
            session = CrosswordSession(puzzle)
            print_puzzle(puzzle, show_letters=args.show_answers)
    except ValueError as exc:
        parser.error(str(exc))

    if args.output:
        args.output.write_text(dumps(snapshot_session(session)), encoding="utf-8")
        LOGGER.info("Snapshot written to %s", args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
