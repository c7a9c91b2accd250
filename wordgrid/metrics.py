"""Timing for the stages of one solve run (dictionary load, solve, validate)."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from wordgrid.board import Board

logger = logging.getLogger("wordgrid")


class SolveTimer:
    """Times named stages of a run against one board.

    Each stage yields a dict the caller fills with what the stage produced
    (word count, path count, ...). Elapsed ms and those facts are logged
    together, tagged with the board shape.
    """

    def __init__(self, board: Board):
        self.shape = f"{board.rows}x{board.cols}"
        self.timings: dict[str, float] = {}
        self.facts: dict[str, dict] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str) -> Iterator[dict]:
        facts: dict = {}
        t0 = time.perf_counter()
        try:
            yield facts
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)
            self.facts[name] = facts
            detail = " ".join(f"{k}={v}" for k, v in facts.items())
            logger.info("board=%s stage=%s elapsed=%.1fms %s", self.shape, name, self.timings[name], detail)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        """Per-stage ms plus the facts each stage reported, and the run total."""
        return {
            "board": self.shape,
            "stages": {name: {"ms": ms, **self.facts.get(name, {})} for name, ms in self.timings.items()},
            "total_ms": self.total_ms,
        }
