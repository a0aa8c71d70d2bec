"""
Word tokenizer for dream narratives.
"""
from __future__ import annotations

from typing import List
import re

_TOKEN_RE = re.compile(r"[a-z']{2,}")


def tokenize(text: str) -> List[str]:
    """Lowercase text and return runs of ASCII letters/apostrophes of length >= 2."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def tokenize_batch(texts: List[str]) -> List[List[str]]:
    """Tokenize a batch of texts."""
    return [tokenize(t) for t in texts]


def count_substring(text: str, word: str) -> int:
    """Count non-overlapping occurrences of word inside text."""
    if not text or not word:
        return 0
    return text.count(word)
