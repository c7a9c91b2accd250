"""Word list loading and browsing."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger("wordgrid")

WILDCARD = "_"
FILTER_MODES = ("startswith", "endswith", "contains")


def load_words(path: str | Path) -> list[str]:
    """Read one word per line, lower-cased, skipping blank lines.

    Raises FileNotFoundError when the file is missing.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    words: list[str] = []
    with word_list_path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)
    logger.debug("Read %d words from %s", len(words), word_list_path)
    return words


def filter_words(
    words: Iterable[str],
    query: str = "",
    mode: str = "startswith",
    min_len: int = 1,
    max_len: int | None = None,
) -> list[str]:
    """Filter a word list by length and query, preserving input order.

    ``mode`` picks how a plain query matches: ``startswith``, ``endswith`` or
    ``contains``. A query containing ``_`` is instead matched against the whole
    word, with each ``_`` standing for exactly one character.
    """
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode {mode!r}, expected one of {FILTER_MODES}")

    query = query.strip().lower()
    pattern = None
    if WILDCARD in query:
        pattern = re.compile(".".join(re.escape(part) for part in query.split(WILDCARD)))

    result = []
    for word in words:
        if len(word) < min_len or (max_len is not None and len(word) > max_len):
            continue
        if not query:
            result.append(word)
        elif pattern is not None:
            if pattern.fullmatch(word):
                result.append(word)
        elif mode == "startswith":
            if word.startswith(query):
                result.append(word)
        elif mode == "endswith":
            if word.endswith(query):
                result.append(word)
        elif query in word:
            result.append(word)
    return result
