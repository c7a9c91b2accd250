from __future__ import annotations

from wordgrid.board import Board


def find_word_paths(word: str, board: Board) -> list[list[int]]:
    """Return every path of cell indices that spells ``word``, for highlighting."""
    target = word.lower()
    if not target:
        return []

    tiles = board.lowered()
    neighbors = board.neighbors
    visited = bytearray(board.size)
    path: list[int] = []
    paths: list[list[int]] = []

    def walk(idx: int, pos: int):
        tile = tiles[idx]
        if not target.startswith(tile, pos):
            return

        new_pos = pos + len(tile)
        visited[idx] = 1
        path.append(idx)

        if new_pos == len(target):
            paths.append(list(path))
        else:
            for nidx in neighbors[idx]:
                if not visited[nidx]:
                    walk(nidx, new_pos)

        visited[idx] = 0
        path.pop()

    for start in range(board.size):
        walk(start, 0)
    return paths
