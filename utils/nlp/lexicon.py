"""
Lexicon tables for dream text scoring.

A Lexicon is built once (default tables or a YAML override) and shared
read-only by every scoring call.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple

import yaml

logger = logging.getLogger(__name__)


class Emotion(str, Enum):
    """Primary emotion labels."""
    FEAR = "fear"
    ANGER = "anger"
    SAD = "sad"
    JOY = "joy"
    NEUTRAL = "neutral"


# Tie-break order: an earlier category keeps its lead on equal counts.
EMOTION_ORDER: Tuple[Emotion, ...] = (Emotion.FEAR, Emotion.ANGER, Emotion.SAD, Emotion.JOY)

_WORD_RE = re.compile(r"[a-z']{2,}")


def _check_words(words: Iterable[str], table: str) -> None:
    for word in words:
        if not isinstance(word, str) or not _WORD_RE.fullmatch(word):
            raise ValueError(f"Invalid lexicon word in {table}: {word!r}")


@dataclass(frozen=True)
class Lexicon:
    positive: FrozenSet[str]
    negative: FrozenSet[str]
    modifiers: Mapping[str, float] = field(default_factory=dict)
    emotions: Mapping[Emotion, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        positive = frozenset(self.positive)
        negative = frozenset(self.negative)
        modifiers = {str(k): float(v) for k, v in dict(self.modifiers).items()}
        emotions = {}
        for key, words in dict(self.emotions).items():
            try:
                emotion = Emotion(key)
            except ValueError:
                raise ValueError(f"Unknown emotion category: {key!r}")
            if emotion is Emotion.NEUTRAL:
                raise ValueError("neutral is not a lexicon category")
            emotions[emotion] = tuple(words)

        missing = [e.value for e in EMOTION_ORDER if e not in emotions]
        if missing:
            raise ValueError(f"Lexicon is missing emotion categories: {missing}")

        _check_words(positive, "positive")
        _check_words(negative, "negative")
        _check_words(modifiers, "modifiers")
        for emotion in EMOTION_ORDER:
            _check_words(emotions[emotion], emotion.value)

        object.__setattr__(self, "positive", positive)
        object.__setattr__(self, "negative", negative)
        object.__setattr__(self, "modifiers", MappingProxyType(modifiers))
        object.__setattr__(
            self,
            "emotions",
            MappingProxyType({e: emotions[e] for e in EMOTION_ORDER}),
        )

    def words_for(self, emotion: Emotion) -> Tuple[str, ...]:
        return self.emotions.get(emotion, ())


_FEAR = ("fear", "afraid", "scared", "chase", "monster", "die", "doom", "panic", "scream", "nightmare")
_ANGER = ("angry", "rage", "yell", "fight", "furious", "mad")
_SAD = ("cry", "alone", "loss", "breakup", "funeral", "grief", "tears")
_JOY = ("happy", "laugh", "love", "kiss", "win", "sunny", "peace", "safe", "calm")

DEFAULT_LEXICON = Lexicon(
    positive=frozenset(_JOY),
    negative=frozenset(_FEAR + _ANGER + _SAD),
    modifiers={"not": -0.5, "never": -0.5},
    emotions={
        Emotion.FEAR: _FEAR,
        Emotion.ANGER: _ANGER,
        Emotion.SAD: _SAD,
        Emotion.JOY: _JOY,
    },
)


def lexicon_from_dict(raw: Dict[str, Any]) -> Lexicon:
    """
    Build a Lexicon from a plain dict; missing tables fall back to the defaults.

    Expected keys: positive, negative, modifiers, emotions.
    """
    raw = raw or {}
    emotions = dict(DEFAULT_LEXICON.emotions)
    for key, words in (raw.get("emotions") or {}).items():
        try:
            emotion = Emotion(str(key).lower())
        except ValueError:
            raise ValueError(f"Unknown emotion category: {key!r}")
        if emotion is Emotion.NEUTRAL:
            raise ValueError("neutral is not a lexicon category")
        emotions[emotion] = tuple(str(w).lower() for w in (words or []))

    positive = raw.get("positive")
    negative = raw.get("negative")
    modifiers = raw.get("modifiers")
    return Lexicon(
        positive=frozenset(str(w).lower() for w in positive) if positive is not None else DEFAULT_LEXICON.positive,
        negative=frozenset(str(w).lower() for w in negative) if negative is not None else DEFAULT_LEXICON.negative,
        modifiers=modifiers if modifiers is not None else DEFAULT_LEXICON.modifiers,
        emotions=emotions,
    )


def load_lexicon(path: str) -> Lexicon:
    """Load a lexicon from a YAML file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Lexicon file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Lexicon file must contain a mapping: {path}")

    lexicon = lexicon_from_dict(raw)
    logger.info(
        "Loaded lexicon from %s (%d positive, %d negative, %d modifiers)",
        path, len(lexicon.positive), len(lexicon.negative), len(lexicon.modifiers),
    )
    return lexicon
