"""
Rule-based bedtime recommendations for a scored dream entry.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from config import RecommendationConfig
from utils.nlp.lexicon import Emotion

SCREEN_FILTER_TIP = "Use grayscale and blue light filter 45 minutes before bed"
BREATHING_TIP = "Two minute box breathing before sleep"
WORRY_JOURNAL_TIP = "Write three lines about tomorrow's biggest worry, then close notebook"
STEADY_ROUTINE_TIP = "Keep routine steady tonight"


def build_recommendations(
    entry: Dict[str, Any],
    config: Optional[RecommendationConfig] = None,
) -> List[str]:
    """Return recommendations for an entry carrying the derived score fields."""
    cfg = config or RecommendationConfig()
    nightmare_index = int(entry.get("nightmare_index", 0) or 0)
    screen = int(entry.get("screen_min_last_hr", 0) or 0)
    emotion = str(entry.get("emotion_primary", Emotion.NEUTRAL.value))
    sentiment = float(entry.get("sentiment", 0.0) or 0.0)

    recs = []
    if nightmare_index >= cfg.nightmare_threshold and screen >= cfg.screen_minutes_threshold:
        recs.append(SCREEN_FILTER_TIP)
    if emotion == Emotion.FEAR.value:
        recs.append(BREATHING_TIP)
    if sentiment <= cfg.sentiment_threshold:
        recs.append(WORRY_JOURNAL_TIP)
    if not recs:
        recs.append(STEADY_ROUTINE_TIP)
    return recs
