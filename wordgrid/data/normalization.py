"""Shared helpers for turning vocabulary terms into grid tokens."""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Uppercase ``text`` and drop whitespace so multi-word terms become one token.

    >>> normalize_word("sound sensor")
    'SOUNDSENSOR'
    """

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text).upper()


def has_letters(token: str) -> bool:
    return any(char.isalpha() for char in token)


__all__ = ["normalize_word", "has_letters"]
