"""
Primary emotion classification by substring counts.
"""
from __future__ import annotations

from typing import Dict

from utils.nlp.lexicon import DEFAULT_LEXICON, EMOTION_ORDER, Emotion, Lexicon
from utils.nlp.tokenizer import count_substring


def emotion_counts(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[Emotion, int]:
    """Count lexicon hits per category as substrings of the lowercased text."""
    lowered = (text or "").lower()
    return {
        emotion: sum(count_substring(lowered, word) for word in lexicon.words_for(emotion))
        for emotion in EMOTION_ORDER
    }


def classify_emotion(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Emotion:
    """Return the category with the strictly highest count, else neutral."""
    counts = emotion_counts(text, lexicon)
    primary = Emotion.NEUTRAL
    best = 0
    for emotion in EMOTION_ORDER:
        if counts[emotion] > best:
            best = counts[emotion]
            primary = emotion
    return primary
