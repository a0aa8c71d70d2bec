import json
import os
from typing import List, Dict, Any
import logging

import pandas as pd

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "id",
    "dt",
    "title",
    "text",
    "sentiment",
    "emotion_primary",
    "nightmare_index",
    "tags",
    "lucid",
    "caffeine_mg",
    "last_meal_min_before_sleep",
    "screen_min_last_hr",
    "workout_min",
    "stress_1_5",
]


def load_entries(data_file_path: str) -> List[Dict[str, Any]]:
    """
    Load dream entries from a JSON file.

    Args:
        data_file_path: path to a JSON array of entry objects

    Returns:
        List[Dict[str, Any]]: raw entry dicts
    """
    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of entries in {data_file_path}")
        bad = [i for i, item in enumerate(data) if not isinstance(item, dict)]
        if bad:
            raise ValueError(f"Entries at positions {bad} are not objects")

        logger.info(f"Loaded {len(data)} dream entries from {data_file_path}")
        return data

    except Exception as e:
        logger.error(f"Failed to load dream entries: {e}")
        raise


def entries_to_frame(entries: List[Dict[str, Any]]) -> pd.DataFrame:
    """Build the export table; id is the 1-based row number."""
    rows = []
    for i, e in enumerate(entries):
        rows.append({
            "id": i + 1,
            "dt": e.get("dt", ""),
            "title": e.get("title", "") or "",
            "text": e.get("text", "") or "",
            "sentiment": f"{float(e.get('sentiment', 0.0)):.3f}",
            "emotion_primary": e.get("emotion_primary", "neutral"),
            "nightmare_index": int(e.get("nightmare_index", 0)),
            "tags": e.get("tags", "") or "",
            "lucid": 1 if e.get("lucid") else 0,
            "caffeine_mg": e.get("caffeine_mg", 0),
            "last_meal_min_before_sleep": e.get("last_meal_min_before_sleep", 0),
            "screen_min_last_hr": e.get("screen_min_last_hr", 0),
            "workout_min": e.get("workout_min", 0),
            "stress_1_5": e.get("stress_1_5", 3),
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_entries_csv(entries: List[Dict[str, Any]], output_path: str) -> bool:
    """
    Export scored entries as CSV.

    Args:
        entries: scored entry dicts
        output_path: destination CSV path

    Returns:
        bool: whether the export succeeded
    """
    try:
        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir, exist_ok=True)

        df = entries_to_frame(entries)
        df.to_csv(output_path, index=False, encoding='utf-8')

        logger.info(f"Exported {len(df)} dream entries to {output_path}")
        return True

    except Exception as e:
        logger.error(f"Failed to export dream entries: {e}")
        return False
