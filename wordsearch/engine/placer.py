"""Randomized placement of a single word onto a grid."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..core.constants import DIRECTIONS, ORIGIN_TRIALS_PER_DIRECTION
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import WordGrid, footprint


LOGGER = get_logger(__name__)


class WordPlacer:
    """Tries random origins along shuffled directions until a word fits.

    Each direction gets ``origin_trials`` uniformly drawn origins. The first
    origin that passes :meth:`WordGrid.can_place` is committed. Nothing is
    written to the grid unless a placement is found.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        origin_trials: int = ORIGIN_TRIALS_PER_DIRECTION,
    ) -> None:
        if origin_trials < 0:
            raise ValueError("origin_trials must be non-negative")
        self.rng = rng or random.Random()
        self.origin_trials = origin_trials

    def place(self, word: Sequence[str], grid: WordGrid) -> Optional[Placement]:
        directions = list(DIRECTIONS)
        self.rng.shuffle(directions)
        size = grid.size
        for dx, dy in directions:
            for _ in range(self.origin_trials):
                x = self.rng.randrange(size)
                y = self.rng.randrange(size)
                if not grid.can_place(word, x, y, dx, dy):
                    continue
                cells = footprint(len(word), x, y, dx, dy)
                grid.write(cells, word)
                return Placement(
                    word=tuple(word),
                    origin=(x, y),
                    direction=(dx, dy),
                    cells=tuple(cells),
                )
        LOGGER.debug("No placement for %r on %sx%s grid", "".join(word), size, size)
        return None

