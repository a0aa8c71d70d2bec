"""
Configuration loader and shared-store builder.

Uses a YAML file as the single source of truth for runtime settings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os

import yaml

from utils.nlp.lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon


@dataclass
class DataConfig:
    input_path: str = "data/dreams.json"
    export_path: str = ""


@dataclass
class LexiconConfig:
    path: str = ""


@dataclass
class RecommendationConfig:
    nightmare_threshold: int = 60
    screen_minutes_threshold: int = 30
    sentiment_threshold: float = -0.3


@dataclass
class SearchConfig:
    query: str = ""
    tag: str = ""


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    data: DataConfig = field(default_factory=DataConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    recommendations: RecommendationConfig = field(default_factory=RecommendationConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str) -> AppConfig:
    """Load YAML configuration into AppConfig."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(
        data=DataConfig(**(raw.get("data", {}) or {})),
        lexicon=LexiconConfig(**(raw.get("lexicon", {}) or {})),
        recommendations=RecommendationConfig(**(raw.get("recommendations", {}) or {})),
        search=SearchConfig(**(raw.get("search", {}) or {})),
        logging=LoggingConfig(**(raw.get("logging", {}) or {})),
    )


def validate_config(config: AppConfig) -> None:
    """Validate configuration constraints and prerequisites."""
    if not config.data.input_path:
        raise ValueError("data.input_path is required")
    if not os.path.exists(config.data.input_path):
        raise FileNotFoundError(f"Dream entries file not found: {config.data.input_path}")
    if config.lexicon.path and not os.path.exists(config.lexicon.path):
        raise FileNotFoundError(f"Lexicon file not found: {config.lexicon.path}")

    rec = config.recommendations
    try:
        nightmare_threshold = int(rec.nightmare_threshold)
        screen_threshold = int(rec.screen_minutes_threshold)
        sentiment_threshold = float(rec.sentiment_threshold)
    except (TypeError, ValueError):
        raise ValueError("recommendations thresholds must be numeric")
    if not 0 <= nightmare_threshold <= 100:
        raise ValueError(f"recommendations.nightmare_threshold must be in [0, 100], got {nightmare_threshold}")
    if screen_threshold < 0:
        raise ValueError("recommendations.screen_minutes_threshold must be >= 0")
    if not -1.0 <= sentiment_threshold <= 1.0:
        raise ValueError(f"recommendations.sentiment_threshold must be in [-1, 1], got {sentiment_threshold}")

    level = str(config.logging.level or "").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"Invalid logging level: {config.logging.level}")


def build_lexicon(config: AppConfig) -> Lexicon:
    """Return the configured lexicon, or the built-in tables when no path is set."""
    path = (config.lexicon.path or "").strip()
    if not path:
        return DEFAULT_LEXICON
    return load_lexicon(path)


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, str(config.logging.level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def config_to_shared(config: AppConfig) -> dict:
    """Convert AppConfig into the shared store structure used by nodes."""
    rec = config.recommendations
    return {
        "data": {
            "entries": [],
            "filtered_entries": [],
            "data_paths": {
                "input_path": config.data.input_path,
                "export_path": config.data.export_path,
            },
        },
        "config": {
            "lexicon": build_lexicon(config),
            "recommendations": RecommendationConfig(
                nightmare_threshold=int(rec.nightmare_threshold),
                screen_minutes_threshold=int(rec.screen_minutes_threshold),
                sentiment_threshold=float(rec.sentiment_threshold),
            ),
            "search": {
                "query": config.search.query or "",
                "tag": config.search.tag or "",
            },
        },
        "results": {
            "statistics": {
                "total_entries": 0,
                "scored_entries": 0,
                "matched_entries": 0,
                "emotion_distribution": {},
                "avg_nightmare_index": 0.0,
                "avg_sentiment": 0.0,
            },
            "export": {
                "exported": False,
                "output_path": "",
                "row_count": 0,
            },
        },
    }
