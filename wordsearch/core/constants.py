"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Difficulty(str, Enum):
    """Puzzle difficulty levels, each mapped to a square grid size."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def grid_size(self) -> int:
        return GRID_SIZES[self]


GRID_SIZES = {
    Difficulty.EASY: 6,
    Difficulty.MEDIUM: 8,
    Difficulty.HARD: 10,
}

# (dx, dy) unit vectors: four axis directions, then four diagonals.
AXIS_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
DIRECTIONS: Tuple[Tuple[int, int], ...] = AXIS_DIRECTIONS + DIAGONAL_DIRECTIONS

# Common Hangul syllables. Repeated syllables are intentional: they weight the draw.
FILLER_ALPHABET: Tuple[str, ...] = tuple(
    "가나다라마바사아자차카타파하바다라마사아자카타라바사아라다마나"
)

EMPTY_CELL = ""

# Retry budgets
ORIGIN_TRIALS_PER_DIRECTION = 200
MAX_GENERATION_ATTEMPTS = 200
REVERSE_PROBABILITY = 0.4

# Word selection
MAX_LENGTH_RATIO = 0.8
MIN_MAX_LENGTH = 3
MIN_WORD_COUNT = 4
MAX_WORD_COUNT = 20
DEFAULT_WORD_COUNT = 8

