"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata
from typing import List

# Zero-width space, non-joiner, joiner and BOM.
INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff]")
WHITESPACE_RE = re.compile(r"\s+")


def clean_word(text: str) -> str:
    """Return ``text`` in NFC form with whitespace and invisible marks removed.

    NFC composes decomposed Hangul jamo back into single syllables, so each
    syllable counts as one grid character.
    """

    if not text:
        return ""
    composed = unicodedata.normalize("NFC", text)
    composed = INVISIBLE_RE.sub("", composed)
    return WHITESPACE_RE.sub("", composed)


def split_characters(word: str) -> List[str]:
    return list(word)


__all__ = ["clean_word", "split_characters"]
