"""
Dream journal analysis - entry point

================================================================================
Usage
================================================================================

1. Edit config.yaml (input file, optional export path, search, thresholds)
2. Run ``python main.py`` or ``python main.py path/to/config.yaml``
3. Score a single narrative: ``python main.py --text "I was chased by a monster!"``

================================================================================
"""

import sys
from typing import Any, Dict, List, Optional

from config import configure_logging, load_config, validate_config, config_to_shared, AppConfig
from flow import create_journal_flow, create_score_flow

DEFAULT_CONFIG_PATH = "config.yaml"


def run(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load config, run the journal flow and return the shared store."""
    config = load_config(config_path)
    configure_logging(config)
    validate_config(config)

    shared = config_to_shared(config)
    create_journal_flow().run(shared)
    return shared


def score_once(text: str, config_path: Optional[str] = None) -> Dict[str, Any]:
    """Score one narrative with the configured (or built-in) lexicon."""
    config = load_config(config_path) if config_path else AppConfig()
    shared = config_to_shared(config)
    shared["input"] = {"text": text}
    create_score_flow().run(shared)
    return shared["score"].to_record()


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] == "--text":
        if len(args) < 2:
            print("usage: main.py --text \"dream narrative\" [config.yaml]")
            return 2
        record = score_once(args[1], args[2] if len(args) > 2 else None)
        print(f"sentiment: {record['sentiment']:.3f}")
        print(f"emotion_primary: {record['emotion_primary']}")
        print(f"nightmare_index: {record['nightmare_index']}")
        return 0

    config_path = args[0] if args else DEFAULT_CONFIG_PATH
    try:
        run(config_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"[X] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
