from __future__ import annotations

from wordgrid.errors import InvalidShape

Graph = tuple[tuple[int, ...], ...]

_cache: dict[tuple[int, int], Graph] = {}


def build_adjacency(rows: int, cols: int) -> Graph:
    """Return the 8-directional neighbor indices of every cell of a rows x cols grid.

    Entry ``i`` lists the neighbors of cell ``i = r * cols + c`` in row-major
    scan order. Graphs are cached per shape.
    """
    if rows <= 0 or cols <= 0:
        raise InvalidShape(f"Grid shape must be positive, got {rows}x{cols}")

    key = (rows, cols)
    graph = _cache.get(key)
    if graph is not None:
        return graph

    neighbors: list[tuple[int, ...]] = []
    for idx in range(rows * cols):
        r, c = divmod(idx, cols)
        adj = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols:
                    adj.append(nr * cols + nc)
        neighbors.append(tuple(adj))

    graph = tuple(neighbors)
    _cache[key] = graph
    return graph


def clear_adjacency_cache():
    _cache.clear()
