"""Puzzle generation orchestration.

Each attempt starts from a fresh empty grid and places every active word in
turn. A single failed word discards the whole attempt. When all words fit, the
remaining cells are filled and the attempt becomes the puzzle.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from ..core.constants import (
    DEFAULT_WORD_COUNT,
    MAX_GENERATION_ATTEMPTS,
    MAX_LENGTH_RATIO,
    MIN_MAX_LENGTH,
    ORIGIN_TRIALS_PER_DIRECTION,
    REVERSE_PROBABILITY,
)
from ..core.exceptions import GenerationError, PlacementError
from ..core.models import Coordinate, Placement, PuzzleResult, WordSession
from ..data.normalization import split_characters
from ..utils.logger import get_logger
from .filler import fill_empty_cells
from .grid import WordGrid
from .placer import WordPlacer


LOGGER = get_logger(__name__)


@dataclass
class BuilderConfig:
    size: int
    word_count: int = DEFAULT_WORD_COUNT
    max_attempts: int = MAX_GENERATION_ATTEMPTS
    origin_trials: int = ORIGIN_TRIALS_PER_DIRECTION
    reverse_probability: float = REVERSE_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if self.word_count < 0:
            raise ValueError("word_count must be non-negative")
        if self.max_attempts < 0 or self.origin_trials < 0:
            raise ValueError("Retry budgets must be non-negative")
        if not 0.0 <= self.reverse_probability <= 1.0:
            raise ValueError("reverse_probability must lie in [0, 1]")

    @property
    def max_word_length(self) -> int:
        return max(MIN_MAX_LENGTH, math.floor(self.size * MAX_LENGTH_RATIO))


def select_words(
    pool: Sequence[str],
    max_length: int,
    count: int,
    rng: random.Random,
) -> List[str]:
    """Shuffle the words that fit ``max_length`` and keep the first ``count``."""

    candidates = [word for word in pool if len(split_characters(word)) <= max_length]
    rng.shuffle(candidates)
    return candidates[:count]


def reuse_words(previous: Sequence[str], count: int) -> List[str]:
    """Clamp a prior selection to ``count``, keeping it whole if that empties it."""

    trimmed = list(previous[:count])
    return trimmed if trimmed else list(previous)


class PuzzleBuilder:
    """Selects the active words and drives generation attempts."""

    def __init__(self, config: BuilderConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.placer = WordPlacer(self.rng, origin_trials=config.origin_trials)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def build(
        self,
        pool: Sequence[str],
        session: Optional[WordSession] = None,
        select_new: bool = True,
    ) -> PuzzleResult:
        """Resolve the active words from ``pool`` or ``session`` and generate.

        A fresh selection is stored in the session once it generates
        successfully. Reusing only clamps a copy, so the stored selection is
        never shrunk. On :class:`GenerationError` the session is untouched.
        """

        fresh = select_new or session is None or not session.has_words()
        words = self.resolve_words(pool, session, select_new)
        result = self.generate(words)
        if session is not None and fresh:
            session.words = list(result.words)
        return result

    def resolve_words(
        self,
        pool: Sequence[str],
        session: Optional[WordSession] = None,
        select_new: bool = True,
    ) -> List[str]:
        if select_new or session is None or not session.has_words():
            words = select_words(
                pool, self.config.max_word_length, self.config.word_count, self.rng
            )
            LOGGER.debug(
                "Selected %s of %s words (max length %s)",
                len(words),
                len(pool),
                self.config.max_word_length,
            )
            return words
        LOGGER.debug("Reusing %s session words", len(session.words))
        return reuse_words(session.words, self.config.word_count)

    def generate(self, words: Sequence[str]) -> PuzzleResult:
        """Place exactly ``words`` on a fresh grid, retrying whole attempts."""

        size = self.config.size
        char_words = [split_characters(word) for word in words]
        for attempt in range(1, self.config.max_attempts + 1):
            grid = WordGrid.create(size)
            try:
                placements = self._place_all(grid, char_words)
            except PlacementError as exc:
                LOGGER.debug("Attempt %s/%s failed: %s", attempt, self.config.max_attempts, exc)
                continue
            fill_empty_cells(grid, self.rng)
            solution: Set[Coordinate] = set()
            for placement in placements:
                solution.update(placement.cells)
            LOGGER.info(
                "Puzzle generated on attempt %s with %s words (%s solution cells)",
                attempt,
                len(words),
                len(solution),
            )
            return PuzzleResult(
                grid=grid.freeze(),
                words=tuple(words),
                placements=tuple(placements),
                solution_cells=frozenset(solution),
                attempts=attempt,
            )
        LOGGER.warning(
            "Generation failed after %s attempts on %sx%s grid",
            self.config.max_attempts,
            size,
            size,
        )
        raise GenerationError(self.config.max_attempts, size, words)

    # ------------------------------------------------------------------
    # Attempt helpers
    # ------------------------------------------------------------------
    def _place_all(self, grid: WordGrid, char_words: Sequence[List[str]]) -> List[Placement]:
        placements: List[Placement] = []
        for chars in char_words:
            # Re-rolled on every attempt.
            if self.rng.random() < self.config.reverse_probability:
                chars = chars[::-1]
            placement = self.placer.place(chars, grid)
            if placement is None:
                raise PlacementError(chars, grid.size)
            placements.append(placement)
        return placements


def generate_puzzle(
    pool: Sequence[str],
    size: int,
    word_count: int = DEFAULT_WORD_COUNT,
    session: Optional[WordSession] = None,
    select_new: bool = True,
    seed: Optional[int] = None,
) -> PuzzleResult:
    config = BuilderConfig(size=size, word_count=word_count, seed=seed)
    return PuzzleBuilder(config).build(pool, session=session, select_new=select_new)
