"""
test_scoring.py - combined ScoreResult
"""
import dataclasses

import pytest

from utils.nlp import Emotion, ScoreResult, score_text, score_sentiment, compute_nightmare_index


def test_score_text_happy():
    result = score_text("I am happy and calm")
    assert result == ScoreResult(sentiment=1.0, emotion=Emotion.JOY, nightmare_index=2)


def test_nightmare_uses_sentiment_of_same_text():
    text = "A monster would chase me and I could not scream!"
    result = score_text(text)
    assert result.sentiment == score_sentiment(text) == -1.0
    assert result.emotion is Emotion.FEAR
    assert result.nightmare_index == compute_nightmare_index(text, result.sentiment) == 76


def test_empty_text():
    assert score_text("") == ScoreResult(0.0, Emotion.NEUTRAL, 0)


def test_to_record_columns():
    record = score_text("cry cry cry").to_record()
    assert set(record) == {"sentiment", "emotion_primary", "nightmare_index"}
    assert record["emotion_primary"] == "sad"
    assert isinstance(record["emotion_primary"], str)


def test_result_is_immutable():
    result = score_text("calm")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.sentiment = 0.0


def test_idempotent():
    text = "RUN! the rage and the tears"
    assert score_text(text) == score_text(text)
