"""Word search puzzle generator for Korean (Hangul) word lists.

This package exposes the public API surface via:

- ``wordsearch.engine.builder.PuzzleBuilder``: orchestrates puzzle generation.
- ``wordsearch.data.datasets.DatasetCatalog``: loads word pools by category.
- ``wordsearch.core.models.WordSession``: remembers the last word selection.
"""

from .core.exceptions import GenerationError, WordSearchError
from .core.models import Placement, PuzzleResult, WordSession
from .data.datasets import DatasetCatalog, load_word_pool
from .engine.builder import BuilderConfig, PuzzleBuilder, generate_puzzle

__all__ = [
    "BuilderConfig",
    "DatasetCatalog",
    "GenerationError",
    "Placement",
    "PuzzleBuilder",
    "PuzzleResult",
    "WordSearchError",
    "WordSession",
    "generate_puzzle",
    "load_word_pool",
]

__version__ = "0.1.0"
