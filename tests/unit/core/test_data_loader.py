"""
test_data_loader.py - entry files and CSV export
"""
import csv
import json

import pytest

from utils.data_loader import EXPORT_COLUMNS, load_entries, export_entries_csv
from utils.journal import normalize_entry


def _read_csv(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def test_load_entries(entries_file):
    entries = load_entries(str(entries_file))
    assert len(entries) == 3
    assert entries[0]["title"] == "Chase"


def test_load_entries_rejects_non_list(tmp_path):
    path = tmp_path / "dreams.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_entries(str(path))


def test_load_entries_rejects_non_object_items(tmp_path):
    path = tmp_path / "dreams.json"
    path.write_text(json.dumps([{"text": "ok"}, "nope"]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_entries(str(path))


def test_load_entries_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_entries(str(tmp_path / "missing.json"))


def test_export_entries_csv(tmp_path, sample_entries):
    entries = [normalize_entry(e) for e in sample_entries]
    entries[0]["text"] = 'He said "run", then screamed'
    out = tmp_path / "export" / "dreams.csv"

    assert export_entries_csv(entries, str(out)) is True

    rows = _read_csv(out)
    with open(out, "r", encoding="utf-8", newline="") as f:
        header = next(csv.reader(f))
    assert header == EXPORT_COLUMNS
    assert [r["id"] for r in rows] == ["1", "2", "3"]
    assert rows[0]["text"] == 'He said "run", then screamed'
    assert rows[0]["tags"] == "nightmare, work"
    assert rows[0]["sentiment"] == "-1.000"
    assert rows[0]["emotion_primary"] == "fear"
    assert rows[0]["lucid"] == "0"
    assert rows[1]["sentiment"] == "1.000"
    assert rows[1]["lucid"] == "1"
    assert rows[2]["nightmare_index"] == "41"
    assert rows[2]["caffeine_mg"] == "95"


def test_export_no_entries_writes_header_only(tmp_path):
    out = tmp_path / "empty.csv"
    assert export_entries_csv([], str(out)) is True
    with open(out, "r", encoding="utf-8", newline="") as f:
        lines = list(csv.reader(f))
    assert lines == [EXPORT_COLUMNS]
