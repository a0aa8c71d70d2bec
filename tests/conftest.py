"""
conftest.py - shared pytest fixtures
"""
import json
from pathlib import Path

import pytest
import yaml


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# =============================================================================
# Data fixtures
# =============================================================================

@pytest.fixture
def sample_entries():
    """Three raw journal entries (fear, joy, sad narratives)."""
    with open(FIXTURES_DIR / "sample_dreams.json", "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def entries_file(tmp_path, sample_entries):
    path = tmp_path / "dreams.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write a config.yaml into tmp_path and return its path."""
    def _write(data):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path
    return _write
