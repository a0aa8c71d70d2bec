"""
test_flow.py - journal flow end to end over a temp entries file
"""
import os

from config import AppConfig, DataConfig, SearchConfig, config_to_shared
from flow import create_journal_flow, create_score_flow
from nodes import FilterEntriesNode, ScoreEntriesNode
from utils.recommendations import BREATHING_TIP, STEADY_ROUTINE_TIP


def _shared(entries_file, export_path="", query="", tag=""):
    config = AppConfig(
        data=DataConfig(input_path=str(entries_file), export_path=export_path),
        search=SearchConfig(query=query, tag=tag),
    )
    return config_to_shared(config)


def test_journal_flow_scores_and_exports(entries_file, tmp_path):
    out = tmp_path / "dreams.csv"
    shared = _shared(entries_file, export_path=str(out))

    create_journal_flow().run(shared)

    entries = shared["data"]["entries"]
    assert [e["title"] for e in entries] == ["Beach", "Old house", "Chase"]
    assert [e["emotion_primary"] for e in entries] == ["joy", "sad", "fear"]
    assert entries[0]["recommendations"] == [STEADY_ROUTINE_TIP]
    assert BREATHING_TIP in entries[2]["recommendations"]

    stats = shared["results"]["statistics"]
    assert stats["total_entries"] == 3
    assert stats["scored_entries"] == 3
    assert stats["matched_entries"] == 3
    assert stats["emotion_distribution"] == {"fear": 1, "anger": 0, "sad": 1, "joy": 1, "neutral": 0}
    assert stats["avg_nightmare_index"] == 39.67
    assert stats["avg_sentiment"] == -0.333

    assert os.path.exists(out)
    assert shared["results"]["export"] == {"exported": True, "output_path": str(out), "row_count": 3}
    assert shared["final_summary"]["exported"] is True


def test_journal_flow_without_export(entries_file):
    shared = _shared(entries_file)
    create_journal_flow().run(shared)

    assert shared["results"]["export"]["exported"] is False
    assert shared["final_summary"]["status"] == "completed"


def test_journal_flow_with_search(entries_file, tmp_path):
    out = tmp_path / "travel.csv"
    shared = _shared(entries_file, export_path=str(out), tag="travel")
    create_journal_flow().run(shared)

    assert [e["title"] for e in shared["data"]["filtered_entries"]] == ["Beach"]
    assert shared["results"]["export"]["row_count"] == 1


def test_filter_node_routes_on_export_path():
    node = FilterEntriesNode()
    shared = {"data": {"entries": [], "data_paths": {"export_path": "x.csv"}}, "config": {}}
    assert node.run(shared) == "export"

    shared = {"data": {"entries": [], "data_paths": {}}, "config": {}}
    assert node.run(shared) == "default"


def test_score_node_handles_no_entries():
    shared = {"data": {"entries": []}, "config": {}}
    ScoreEntriesNode().run(shared)
    assert shared["data"]["entries"] == []
    assert shared["results"]["statistics"]["avg_nightmare_index"] == 0.0


def test_score_flow():
    shared = config_to_shared(AppConfig())
    shared["input"] = {"text": "cry cry cry"}
    create_score_flow().run(shared)
    assert shared["score"].to_record() == {"sentiment": -1.0, "emotion_primary": "sad", "nightmare_index": 40}
