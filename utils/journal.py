"""
Dream journal entries: normalization, search and ordering.

An entry is a plain dict with the narrative, lifestyle covariates and the
three derived score fields.
"""
from __future__ import annotations

from datetime import datetime
import math
from typing import Any, Dict, List, Optional

from utils.nlp.lexicon import DEFAULT_LEXICON, Lexicon
from utils.nlp.scoring import score_text

DEFAULT_TITLE = "Untitled"
DT_FORMAT = "%Y-%m-%dT%H:%M"

COVARIATE_DEFAULTS = {
    "screen_min_last_hr": 0,
    "caffeine_mg": 0,
    "last_meal_min_before_sleep": 0,
    "workout_min": 0,
    "stress_1_5": 3,
}


def _to_int(value: Any, default: int) -> int:
    """Parse a form-style integer; blanks and junk fall back to default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    text = str(value).strip()
    if not text:
        return default
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return default


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def build_entry(
    text: str,
    title: str = "",
    tags: str = "",
    screen_min_last_hr: Any = 0,
    caffeine_mg: Any = 0,
    last_meal_min_before_sleep: Any = 0,
    workout_min: Any = 0,
    stress_1_5: Any = 3,
    lucid: Any = False,
    dt: Optional[str] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> Dict[str, Any]:
    """Create a scored entry from form values."""
    text = (text or "").strip()
    entry = {
        "dt": dt or datetime.now().strftime(DT_FORMAT),
        "title": (title or "").strip() or DEFAULT_TITLE,
        "text": text,
        "tags": (tags or "").strip(),
        "caffeine_mg": _to_int(caffeine_mg, COVARIATE_DEFAULTS["caffeine_mg"]),
        "last_meal_min_before_sleep": _to_int(
            last_meal_min_before_sleep, COVARIATE_DEFAULTS["last_meal_min_before_sleep"]
        ),
        "screen_min_last_hr": _to_int(screen_min_last_hr, COVARIATE_DEFAULTS["screen_min_last_hr"]),
        "workout_min": _to_int(workout_min, COVARIATE_DEFAULTS["workout_min"]),
        "stress_1_5": _to_int(stress_1_5, COVARIATE_DEFAULTS["stress_1_5"]),
        "lucid": _to_bool(lucid),
    }
    entry.update(score_text(text, lexicon).to_record())
    return entry


def normalize_entry(raw: Dict[str, Any], lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, Any]:
    """Normalize a stored entry; score fields are always recomputed from text."""
    entry = build_entry(
        text=raw.get("text", ""),
        title=raw.get("title", ""),
        tags=raw.get("tags", ""),
        dt=raw.get("dt") or None,
        lucid=raw.get("lucid", False),
        lexicon=lexicon,
        **{key: raw.get(key, default) for key, default in COVARIATE_DEFAULTS.items()},
    )
    if "id" in raw:
        entry["id"] = raw["id"]
    return entry


def sort_entries(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Newest first by dt."""
    return sorted(entries, key=lambda e: str(e.get("dt", "")), reverse=True)


def filter_entries(
    entries: List[Dict[str, Any]],
    query: str = "",
    tag: str = "",
) -> List[Dict[str, Any]]:
    """Case-insensitive match of query against title/text and tag against tags."""
    q = (query or "").lower()
    t = (tag or "").lower()

    matched = []
    for entry in entries:
        hit_q = True
        if q:
            hit_q = q in str(entry.get("title", "")).lower() or q in str(entry.get("text", "")).lower()
        hit_t = t in str(entry.get("tags") or "").lower() if t else True
        if hit_q and hit_t:
            matched.append(entry)
    return matched
