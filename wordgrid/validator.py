"""Real-time validation of typed input against the board.

Status is ``valid`` only when the full typed string can be traced as a
connected path through the board (no cell reuse, 8-directional adjacency).
A "Qu" tile matches two typed characters at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from wordgrid.board import Board


class ValidationStatus(str, Enum):
    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


@dataclass
class ValidationResult:
    """Outcome of tracing typed text on a board.

    ``complete_paths`` consumed every typed character. ``partial_paths`` are
    branches that matched so far but could not be extended, used to highlight
    where the text stopped being traceable.
    """

    status: ValidationStatus
    complete_paths: list[list[int]] = field(default_factory=list)
    partial_paths: list[list[int]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    def deepest_partial(self) -> list[int]:
        return max(self.partial_paths, key=len, default=[])


def validate_input(typed: str, board: Board) -> ValidationResult:
    if not typed:
        return ValidationResult(ValidationStatus.EMPTY)

    text = typed.lower()
    tiles = board.lowered()
    neighbors = board.neighbors
    visited = bytearray(board.size)
    path: list[int] = []
    complete_paths: list[list[int]] = []
    partial_paths: list[list[int]] = []

    def explore(idx: int, pos: int):
        tile = tiles[idx]
        if not text.startswith(tile, pos):
            return

        new_pos = pos + len(tile)
        visited[idx] = 1
        path.append(idx)

        if new_pos == len(text):
            complete_paths.append(list(path))
        else:
            extended = False
            for nidx in neighbors[idx]:
                if not visited[nidx]:
                    before = len(complete_paths) + len(partial_paths)
                    explore(nidx, new_pos)
                    if len(complete_paths) + len(partial_paths) > before:
                        extended = True
            # Dead end: nothing deeper was recorded from here
            if not extended:
                partial_paths.append(list(path))

        visited[idx] = 0
        path.pop()

    for start in range(board.size):
        explore(start, 0)

    status = ValidationStatus.VALID if complete_paths else ValidationStatus.INVALID
    return ValidationResult(status, complete_paths, partial_paths)
