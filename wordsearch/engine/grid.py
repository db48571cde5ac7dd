"""Grid representation and bounds helpers."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..core.constants import EMPTY_CELL
from ..core.models import Coordinate


def in_bounds(x: int, y: int, size: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def footprint(length: int, x: int, y: int, dx: int, dy: int) -> List[Coordinate]:
    """Coordinates covered by ``length`` characters starting at ``(x, y)``."""

    return [(x + dx * i, y + dy * i) for i in range(length)]


class WordGrid:
    """Square character grid indexed ``cells[row][col]``, i.e. ``cells[y][x]``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: List[List[str]] = [[EMPTY_CELL for _ in range(size)] for _ in range(size)]

    @classmethod
    def create(cls, size: int) -> "WordGrid":
        return cls(size)

    def cell(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[y][x] == EMPTY_CELL

    def empty_cells(self) -> Iterator[Coordinate]:
        for y in range(self.size):
            for x in range(self.size):
                if self.is_empty(x, y):
                    yield (x, y)

    def is_complete(self) -> bool:
        return next(self.empty_cells(), None) is None

    # ------------------------------------------------------------------
    # Placement checks
    # ------------------------------------------------------------------
    def can_place(self, word: Sequence[str], x: int, y: int, dx: int, dy: int) -> bool:
        """Return whether ``word`` fits from ``(x, y)`` along ``(dx, dy)``.

        Every position must be in bounds and hold either nothing or the exact
        character that would be written there.
        """

        for index, char in enumerate(word):
            nx, ny = x + dx * index, y + dy * index
            if not in_bounds(nx, ny, self.size):
                return False
            if not self.is_empty(nx, ny) and self.cells[ny][nx] != char:
                return False
        return True

    def write(self, cells: Iterable[Coordinate], word: Sequence[str]) -> None:
        for (x, y), char in zip(cells, word):
            self.cells[y][x] = char

    def freeze(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self.cells)
