"""
Lexicon-based dream text scoring (sentiment, emotion, nightmare index).
"""
from utils.nlp.lexicon import (
    DEFAULT_LEXICON,
    EMOTION_ORDER,
    Emotion,
    Lexicon,
    lexicon_from_dict,
    load_lexicon,
)
from utils.nlp.tokenizer import tokenize, tokenize_batch, count_substring
from utils.nlp.sentiment_lexicon import raw_sentiment_score, score_sentiment
from utils.nlp.emotion import classify_emotion, emotion_counts
from utils.nlp.nightmare import compute_nightmare_index
from utils.nlp.scoring import ScoreResult, score_text

__all__ = [
    "DEFAULT_LEXICON",
    "EMOTION_ORDER",
    "Emotion",
    "Lexicon",
    "lexicon_from_dict",
    "load_lexicon",
    "tokenize",
    "tokenize_batch",
    "count_substring",
    "raw_sentiment_score",
    "score_sentiment",
    "classify_emotion",
    "emotion_counts",
    "compute_nightmare_index",
    "ScoreResult",
    "score_text",
]
