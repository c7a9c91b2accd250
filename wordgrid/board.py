from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from wordgrid.adjacency import Graph, build_adjacency
from wordgrid.errors import InvalidShape

# Letter that never appears on a die alone; its tile always carries the "u".
DIGRAPH_LEAD = "q"
DIGRAPH_TILE = "qu"


@dataclass(frozen=True)
class Board:
    """Immutable rows x cols grid of tiles, stored flat in row-major order."""

    rows: int
    cols: int
    tiles: tuple[str, ...]

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidShape(f"Board shape must be positive, got {self.rows}x{self.cols}")
        tiles = tuple(self.tiles)
        if len(tiles) != self.rows * self.cols:
            raise InvalidShape(
                f"Board {self.rows}x{self.cols} needs {self.rows * self.cols} tiles, got {len(tiles)}"
            )
        object.__setattr__(self, "tiles", tiles)

    @classmethod
    def from_rows(cls, grid: Sequence[Sequence[str]]) -> Board:
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        for r, row in enumerate(grid):
            if len(row) != cols:
                raise InvalidShape(f"Row {r} has {len(row)} tiles, expected {cols}")
        return cls(rows, cols, tuple(tile for row in grid for tile in row))

    @classmethod
    def from_letters(cls, text: str, rows: int | None = None, cols: int | None = None) -> Board:
        """Build a board from one letter per tile, e.g. ``"CATS REPO BONE DIGS"``.

        Whitespace and commas are ignored. A lone ``q`` becomes the ``qu`` tile.
        Without ``rows``/``cols`` the letters must fill a square.
        """
        letters = [ch for ch in text if not ch.isspace() and ch != ","]
        tiles = tuple(
            DIGRAPH_TILE.capitalize() if ch.lower() == DIGRAPH_LEAD else ch.upper()
            for ch in letters
        )

        if rows is None and cols is None:
            side = math.isqrt(len(tiles))
            if side * side != len(tiles):
                raise InvalidShape(f"{len(tiles)} letters do not form a square board")
            rows = cols = side
        elif rows is None:
            rows = len(tiles) // cols if cols > 0 else 0
        elif cols is None:
            cols = len(tiles) // rows if rows > 0 else 0
        return cls(rows, cols, tiles)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def neighbors(self) -> Graph:
        return build_adjacency(self.rows, self.cols)

    def lowered(self) -> list[str]:
        return [tile.lower() for tile in self.tiles]

    def spell(self, path: Sequence[int]) -> str:
        return "".join(self.tiles[idx] for idx in path).lower()

    def as_rows(self) -> list[list[str]]:
        return [list(self.tiles[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    def __str__(self):
        return " / ".join(" ".join(row) for row in self.as_rows())
