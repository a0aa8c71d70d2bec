"""
Nightmare index: a 0-100 distress score for a dream narrative.
"""
from __future__ import annotations

import math

from utils.nlp.lexicon import DEFAULT_LEXICON, Emotion, Lexicon
from utils.nlp.tokenizer import count_substring

NEGATIVITY_WEIGHT = 40
FEAR_HIT_WEIGHT = 10
EXCLAMATION_WEIGHT = 5
CAPS_RATIO_WEIGHT = 30

MAX_INDEX = 100


def _caps_count(text: str) -> int:
    return sum(1 for ch in text if "A" <= ch <= "Z")


def compute_nightmare_index(
    text: str,
    sentiment: float,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> int:
    """
    Blend negative sentiment, fear words, exclamation marks and shouting.

    `sentiment` must be score_sentiment() of the same text; it is not
    re-derived or validated here.
    """
    text = text or ""
    lowered = text.lower()
    fear_hits = sum(count_substring(lowered, w) for w in lexicon.words_for(Emotion.FEAR))
    exclam = text.count("!")
    caps_ratio = _caps_count(text) / max(1, len(text))

    sentiment = float(sentiment)
    negativity = 0.0 if math.isnan(sentiment) else max(0.0, -sentiment)

    raw = (
        NEGATIVITY_WEIGHT * negativity
        + FEAR_HIT_WEIGHT * fear_hits
        + EXCLAMATION_WEIGHT * exclam
        + CAPS_RATIO_WEIGHT * caps_ratio
    )
    raw = min(float(MAX_INDEX), raw)
    # Half-up rounding; raw is never negative here.
    return max(0, min(MAX_INDEX, int(math.floor(raw + 0.5))))
