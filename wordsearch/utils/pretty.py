"""Pretty-print helpers for word search puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List, Sequence

if TYPE_CHECKING:
    from ..core.models import PuzzleResult
    from ..data.datasets import DatasetStat


MASK_SYMBOL = "\uff3f"  # full-width, same column width as Hangul
WORD_LIST_TITLE = "찾을 단어"
LOAD_FAILED = "로드 실패"


def format_grid(result: PuzzleResult, *, reveal: bool = False) -> str:
    """Render the grid with headers; ``reveal`` masks non-solution cells."""

    size = result.size
    header_cells = [f"{c:>2}" for c in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * size - 1))
    for y in range(size):
        symbols: List[str] = []
        for x in range(size):
            if reveal and not result.is_solution(x, y):
                symbols.append(MASK_SYMBOL)
            else:
                symbols.append(result.cell(x, y))
        lines.append(f"{y:>2} | " + " ".join(symbols))
    return "\n".join(lines)


def format_word_list(words: Sequence[str]) -> str:
    lines = [WORD_LIST_TITLE]
    lines.extend(f"• {word}" for word in words)
    return "\n".join(lines)


def format_stats(stats: Iterable[DatasetStat]) -> str:
    lines = []
    for stat in stats:
        value = f"{stat.count}개" if stat.ok else LOAD_FAILED
        lines.append(f"{stat.label}: {value}")
    return "\n".join(lines)


def pretty_print_puzzle(result: PuzzleResult, *, reveal: bool = False, stream=None) -> None:
    """Print the grid followed by the word list."""

    stream = stream or sys.stdout
    print(format_grid(result), file=stream)
    print(file=stream)
    print(format_word_list(result.words), file=stream)
    if reveal:
        print(file=stream)
        print(format_grid(result, reveal=True), file=stream)
