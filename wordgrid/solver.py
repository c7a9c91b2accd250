from __future__ import annotations

import logging
from typing import Iterable

from wordgrid.board import Board
from wordgrid.errors import NotReady
from wordgrid.trie import ROOT, DictionaryIndex

logger = logging.getLogger("wordgrid")

DEFAULT_MIN_WORD_LENGTH = 4


def solve(board: Board, index: DictionaryIndex | None, min_word_len: int = DEFAULT_MIN_WORD_LENGTH) -> set[str]:
    """Find every dictionary word traceable on the board.

    DFS from every cell with trie prefix pruning; a cell is never reused
    within one path. Returns lower-case words of at least ``min_word_len``
    characters.
    """
    if index is None or not index.ready:
        raise NotReady("Dictionary index not built. Call DictionaryIndex.build() first.")

    found: set[str] = set()
    tiles = board.lowered()
    neighbors = board.neighbors
    visited = bytearray(board.size)

    def dfs(idx: int, node: int, prefix: str):
        # Walk trie through all characters in this tile (handles "qu")
        current = node
        for ch in tiles[idx]:
            current = index.descend(current, ch)
            if current is None:
                return

        word = prefix + tiles[idx]
        if len(word) >= min_word_len and index.is_word(current):
            found.add(word)

        if index.has_children(current):  # prune if no further prefixes
            visited[idx] = 1
            for nidx in neighbors[idx]:
                if not visited[nidx]:
                    dfs(nidx, current, word)
            visited[idx] = 0

    for start in range(board.size):
        dfs(start, ROOT, "")

    logger.debug("Solved %dx%d board %s: %d words", board.rows, board.cols, board, len(found))
    return found


def rank_words(words: Iterable[str], max_results: int = 0) -> list[str]:
    """Sort longest first, then alphabetical; keep the top ``max_results`` when positive.

    Plain length order, not score tiers: 3- and 4-letter words are not merged.
    """
    result = sorted(words, key=lambda w: (-len(w), w))
    return result[:max_results] if max_results > 0 else result
