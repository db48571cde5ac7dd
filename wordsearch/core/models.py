"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Placement:
    """A word variant committed to the grid at ``origin`` along ``direction``."""

    word: Tuple[str, ...]
    origin: Coordinate
    direction: Tuple[int, int]
    cells: Tuple[Coordinate, ...]

    @property
    def text(self) -> str:
        return "".join(self.word)


@dataclass
class WordSession:
    """Remembers the active word list between regenerations.

    The session belongs to the caller. The builder only replaces ``words``
    after a successful generation, so a failed run keeps the previous list.
    """

    words: List[str] = field(default_factory=list)

    def has_words(self) -> bool:
        return bool(self.words)


@dataclass(frozen=True)
class PuzzleResult:
    grid: Tuple[Tuple[str, ...], ...]
    words: Tuple[str, ...]
    placements: Tuple[Placement, ...]
    solution_cells: FrozenSet[Coordinate]
    attempts: int

    @property
    def size(self) -> int:
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        return self.grid[y][x]

    def is_solution(self, x: int, y: int) -> bool:
        return (x, y) in self.solution_cells

    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "grid": [list(row) for row in self.grid],
            "words": list(self.words),
            "placements": [
                {
                    "word": p.text,
                    "origin": list(p.origin),
                    "direction": list(p.direction),
                    "cells": [list(c) for c in p.cells],
                }
                for p in self.placements
            ],
            "solution_cells": [list(c) for c in sorted(self.solution_cells)],
            "attempts": self.attempts,
        }
