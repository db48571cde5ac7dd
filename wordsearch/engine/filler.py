"""Filler completion for grid cells left empty after placement."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..core.constants import FILLER_ALPHABET
from .grid import WordGrid


def fill_empty_cells(
    grid: WordGrid,
    rng: Optional[random.Random] = None,
    alphabet: Sequence[str] = FILLER_ALPHABET,
) -> int:
    """Fill every empty cell with a random filler character.

    Cells that already hold a character are left untouched. Returns the
    number of cells that were filled.
    """

    if not alphabet:
        raise ValueError("Filler alphabet must not be empty")
    rng = rng or random.Random()
    filled = 0
    for x, y in list(grid.empty_cells()):
        grid.cells[y][x] = rng.choice(alphabet)
        filled += 1
    return filled
