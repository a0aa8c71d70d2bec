"""
Combined text scoring: sentiment, primary emotion and nightmare index.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from utils.nlp.emotion import classify_emotion
from utils.nlp.lexicon import DEFAULT_LEXICON, Emotion, Lexicon
from utils.nlp.nightmare import compute_nightmare_index
from utils.nlp.sentiment_lexicon import score_sentiment


@dataclass(frozen=True)
class ScoreResult:
    sentiment: float
    emotion: Emotion
    nightmare_index: int

    def to_record(self) -> Dict[str, Any]:
        """Columns persisted alongside an entry."""
        return {
            "sentiment": self.sentiment,
            "emotion_primary": self.emotion.value,
            "nightmare_index": self.nightmare_index,
        }


def score_text(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ScoreResult:
    """Score a narrative once; sentiment is computed once and fed to the nightmare index."""
    sentiment = score_sentiment(text, lexicon)
    return ScoreResult(
        sentiment=sentiment,
        emotion=classify_emotion(text, lexicon),
        nightmare_index=compute_nightmare_index(text, sentiment, lexicon),
    )
