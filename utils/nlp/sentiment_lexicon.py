"""
Rule-based sentiment scoring with a tiny lexicon.
"""
from __future__ import annotations

from typing import Iterable

from utils.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.tokenizer import tokenize

# Texts up to this many tokens are not diluted.
TOKENS_PER_UNIT = 12


def raw_sentiment_score(tokens: Iterable[str], lexicon: Lexicon = DEFAULT_LEXICON) -> float:
    """Sum word polarities and modifier deltas over tokens."""
    score = 0.0
    for token in tokens:
        if token in lexicon.positive:
            score += 1
        if token in lexicon.negative:
            score -= 1
        delta = lexicon.modifiers.get(token)
        if delta:
            score += delta
    return score


def score_sentiment(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> float:
    """
    Return a sentiment score in [-1, 1].

    The raw score is divided by max(1, tokens / 12) so short entries saturate
    quickly, then clamped.
    """
    tokens = tokenize(text)
    if not tokens:
        return 0.0
    score = raw_sentiment_score(tokens, lexicon)
    normalized = score / max(1.0, len(tokens) / TOKENS_PER_UNIT)
    return max(-1.0, min(1.0, normalized))
