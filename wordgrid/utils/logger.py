"""Logging utilities shared by the puzzle engine and the CLI."""

from __future__ import annotations

import logging
from typing import Optional, TextIO


ROOT_LOGGER_NAME = "wordgrid"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def parse_log_level(value: str) -> int:
    """Map ``"debug"``, ``"WARNING"`` or a numeric string onto a logging level.

    Raises ``ValueError`` for anything else, so argparse reports it as a
    usage error.
    """

    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging with a compact formatter.

    Hosts embedding the engine usually configure logging themselves; the CLI
    calls this once with the level given on the command line. Placement
    attempts log at DEBUG, so anything above that keeps generation quiet.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordgrid`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
