"""Custom exception hierarchy for word search generation."""

from __future__ import annotations

from typing import Sequence


class WordSearchError(Exception):
    """Base exception for generator failures."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be placed on the current attempt's grid."""

    def __init__(self, word: Sequence[str], size: int) -> None:
        self.word = "".join(word)
        self.size = size
        super().__init__(f"Could not place {self.word!r} on a {size}x{size} grid")


class GenerationError(WordSearchError):
    """Raised when every generation attempt failed."""

    def __init__(self, attempts: int, size: int, words: Sequence[str]) -> None:
        self.attempts = attempts
        self.size = size
        self.words = list(words)
        super().__init__(
            f"Unable to place {len(self.words)} words on a {size}x{size} grid "
            f"after {attempts} attempts"
        )


class DatasetLoadError(WordSearchError):
    """Raised when a word dataset cannot be fetched or parsed."""
