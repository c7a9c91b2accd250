from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from wordgrid.wordlist import load_words

logger = logging.getLogger("wordgrid")

INDEX_MIN_LENGTH = 3
ROOT = 0


class DictionaryIndex:
    """Prefix tree over a word list, stored as an arena of numbered nodes.

    Node 0 is the root. After ``build`` the edges live in a dense
    ``(node_count, alphabet_size)`` table where 0 means "no child", which is
    unambiguous because the root is never anyone's child. An index created
    directly with ``DictionaryIndex()`` is empty and not ready.
    """

    def __init__(self):
        self._alphabet: dict[str, int] = {}
        self._children: np.ndarray | None = None
        self._terminal: np.ndarray | None = None
        self._fanout: np.ndarray | None = None
        self._word_count = 0
        self.min_length = INDEX_MIN_LENGTH

    @classmethod
    def build(cls, words: Iterable[str], min_length: int = INDEX_MIN_LENGTH) -> DictionaryIndex:
        index = cls()
        index._populate(words, min_length)
        return index

    def _populate(self, words: Iterable[str], min_length: int):
        self.min_length = min_length
        edges: list[dict[str, int]] = [{}]
        terminal: list[bool] = [False]
        count = 0

        for raw in words:
            word = raw.strip().lower()
            if not word or len(word) < min_length:
                continue
            node = ROOT
            for ch in word:
                child = edges[node].get(ch)
                if child is None:
                    child = len(edges)
                    edges[node][ch] = child
                    edges.append({})
                    terminal.append(False)
                node = child
            if not terminal[node]:
                terminal[node] = True
                count += 1

        alphabet = sorted({ch for kids in edges for ch in kids})
        self._alphabet = {ch: col for col, ch in enumerate(alphabet)}

        table = np.zeros((len(edges), max(len(alphabet), 1)), dtype=np.int32)
        for parent, kids in enumerate(edges):
            for ch, child in kids.items():
                table[parent, self._alphabet[ch]] = child

        self._children = table
        self._terminal = np.array(terminal, dtype=bool)
        self._fanout = np.count_nonzero(table, axis=1)
        self._word_count = count

    @property
    def ready(self) -> bool:
        return self._children is not None

    @property
    def node_count(self) -> int:
        return 0 if self._children is None else int(self._children.shape[0])

    def __len__(self):
        return self._word_count

    def descend(self, node: int, ch: str) -> int | None:
        col = self._alphabet.get(ch)
        if col is None:
            return None
        child = int(self._children[node, col])
        return child or None

    def is_word(self, node: int) -> bool:
        return bool(self._terminal[node])

    def has_children(self, node: int) -> bool:
        return bool(self._fanout[node])

    def contains(self, word: str) -> bool:
        """Dictionary membership of ``word`` (case-insensitive)."""
        if not self.ready:
            return False
        node = ROOT
        for ch in word.lower():
            node = self.descend(node, ch)
            if node is None:
                return False
        return node != ROOT and self.is_word(node)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)


def load_index(path: str | Path, min_length: int = INDEX_MIN_LENGTH) -> DictionaryIndex:
    index = DictionaryIndex.build(load_words(path), min_length)
    logger.info("Indexed %d words (%d nodes) from %s", len(index), index.node_count, path)
    return index
