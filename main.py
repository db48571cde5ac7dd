"""CLI entrypoint for the Korean word search generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordsearch.core.constants import (
    DEFAULT_WORD_COUNT,
    MAX_WORD_COUNT,
    MIN_WORD_COUNT,
    Difficulty,
)
from wordsearch.core.exceptions import DatasetLoadError, GenerationError
from wordsearch.data.datasets import DATASETS, DatasetCatalog
from wordsearch.data.normalization import clean_word
from wordsearch.engine.builder import BuilderConfig, PuzzleBuilder
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import format_stats, pretty_print_puzzle

FAILURE_MESSAGE = "퍼즐 생성에 실패했어요. 단어 수를 줄이거나 난이도를 바꿔보세요."


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def clamp_word_count(value: int) -> int:
    return max(MIN_WORD_COUNT, min(MAX_WORD_COUNT, value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Korean word search puzzles")
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="Grid size: easy 6x6, medium 8x8, hard 10x10",
    )
    parser.add_argument(
        "--category",
        type=str,
        choices=list(DATASETS),
        default="animals",
        help="Word dataset category",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=".",
        help="Directory or base URL containing the data/<category>.json files",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit word pool instead of a dataset category",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_WORD_COUNT,
        help=f"Number of words to hide (clamped to {MIN_WORD_COUNT}-{MAX_WORD_COUNT})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--reveal", action="store_true", help="Also print the solution cells")
    parser.add_argument("--stats", action="store_true", help="Print dataset word counts and exit")
    parser.add_argument("--json", action="store_true", help="Emit the puzzle as JSON")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    catalog = DatasetCatalog(args.data_dir)
    if args.stats:
        print(format_stats(catalog.stats()))
        return 0

    try:
        if args.words or args.words_file:
            pool = [clean_word(w) for w in (args.words or [])]
            if args.words_file:
                pool.extend(clean_word(w) for w in parse_words_file(args.words_file))
            pool = [w for w in pool if w]
        else:
            pool = catalog.load(args.category)
    except (DatasetLoadError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    config = BuilderConfig(
        size=Difficulty(args.difficulty).grid_size,
        word_count=clamp_word_count(args.count),
        seed=args.seed,
    )
    try:
        result = PuzzleBuilder(config).build(pool)
    except GenerationError:
        print(FAILURE_MESSAGE, file=sys.stderr)
        return 1

    if args.json or args.output:
        output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
        if args.output:
            try:
                args.output.write_text(output_text, encoding="utf-8")
            except OSError as exc:
                print(f"error: {exc}", file=sys.stderr)
                return 2
        else:
            print(output_text)
    else:
        pretty_print_puzzle(result, reveal=args.reveal)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
