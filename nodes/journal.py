"""
Dream journal pipeline nodes: load, score, recommend, filter and export.
"""
from __future__ import annotations

from collections import Counter

from pocketflow import BatchNode

from config import RecommendationConfig
from nodes.base import MonitoredNode
from utils.data_loader import export_entries_csv, load_entries
from utils.journal import filter_entries, normalize_entry, sort_entries
from utils.nlp import DEFAULT_LEXICON, EMOTION_ORDER, Emotion, score_text
from utils.recommendations import build_recommendations


def _ensure_results(shared):
    results = shared.setdefault("results", {})
    results.setdefault("statistics", {})
    results.setdefault("export", {})
    return results


class LoadEntriesNode(MonitoredNode):
    """
    Load raw entries from the configured JSON file.
    """

    def prep(self, shared):
        data_paths = shared.get("data", {}).get("data_paths", {})
        return data_paths.get("input_path", "data/dreams.json")

    def exec(self, prep_res):
        return load_entries(prep_res)

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("data", {})["entries"] = exec_res
        _ensure_results(shared)["statistics"]["total_entries"] = len(exec_res)
        print(f"[LoadEntries] loaded {len(exec_res)} entries from {prep_res}")
        return "default"


class ScoreEntriesNode(MonitoredNode, BatchNode):
    """
    Normalize each entry and recompute sentiment, emotion and nightmare index.
    """

    def prep(self, shared):
        lexicon = shared.get("config", {}).get("lexicon") or DEFAULT_LEXICON
        entries = shared.get("data", {}).get("entries", [])
        return [(entry, lexicon) for entry in entries]

    def exec(self, prep_res):
        entry, lexicon = prep_res
        return normalize_entry(entry, lexicon)

    def post(self, shared, prep_res, exec_res):
        entries = sort_entries(exec_res)
        shared.setdefault("data", {})["entries"] = entries

        stats = _ensure_results(shared)["statistics"]
        stats["scored_entries"] = len(entries)
        counts = Counter(e["emotion_primary"] for e in entries)
        stats["emotion_distribution"] = {
            e.value: counts.get(e.value, 0) for e in EMOTION_ORDER + (Emotion.NEUTRAL,)
        }
        if entries:
            stats["avg_nightmare_index"] = round(
                sum(e["nightmare_index"] for e in entries) / len(entries), 2
            )
            stats["avg_sentiment"] = round(sum(e["sentiment"] for e in entries) / len(entries), 3)
        else:
            stats["avg_nightmare_index"] = 0.0
            stats["avg_sentiment"] = 0.0

        print(f"[ScoreEntries] scored {len(entries)} entries")
        return "default"


class ScoreTextNode(MonitoredNode):
    """
    Score a single narrative placed in shared["input"]["text"].
    """

    def prep(self, shared):
        lexicon = shared.get("config", {}).get("lexicon") or DEFAULT_LEXICON
        return shared.get("input", {}).get("text", ""), lexicon

    def exec(self, prep_res):
        text, lexicon = prep_res
        return score_text(text, lexicon)

    def post(self, shared, prep_res, exec_res):
        shared["score"] = exec_res
        return "default"


class RecommendationNode(MonitoredNode):
    """
    Attach rule-based recommendations to every scored entry.
    """

    def prep(self, shared):
        cfg = shared.get("config", {}).get("recommendations") or RecommendationConfig()
        return shared.get("data", {}).get("entries", []), cfg

    def exec(self, prep_res):
        entries, cfg = prep_res
        return [build_recommendations(entry, cfg) for entry in entries]

    def post(self, shared, prep_res, exec_res):
        entries, _ = prep_res
        for entry, recs in zip(entries, exec_res):
            entry["recommendations"] = recs
        return "default"


class FilterEntriesNode(MonitoredNode):
    """
    Apply the configured search; routes to "export" when an export path is set.
    """

    def prep(self, shared):
        search = shared.get("config", {}).get("search", {}) or {}
        data = shared.get("data", {})
        return {
            "entries": data.get("entries", []),
            "query": search.get("query", ""),
            "tag": search.get("tag", ""),
            "export_path": data.get("data_paths", {}).get("export_path", ""),
        }

    def exec(self, prep_res):
        return filter_entries(prep_res["entries"], prep_res["query"], prep_res["tag"])

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("data", {})["filtered_entries"] = exec_res
        _ensure_results(shared)["statistics"]["matched_entries"] = len(exec_res)
        if prep_res["query"] or prep_res["tag"]:
            print(f"[FilterEntries] {len(exec_res)}/{len(prep_res['entries'])} entries matched")
        return "export" if prep_res["export_path"] else "default"


class ExportCsvNode(MonitoredNode):
    """
    Write the filtered entries to CSV.
    """

    def prep(self, shared):
        data = shared.get("data", {})
        return {
            "entries": data.get("filtered_entries", []),
            "output_path": data.get("data_paths", {}).get("export_path", ""),
        }

    def exec(self, prep_res):
        success = export_entries_csv(prep_res["entries"], prep_res["output_path"])
        return {
            "success": success,
            "output_path": prep_res["output_path"],
            "row_count": len(prep_res["entries"]),
        }

    def post(self, shared, prep_res, exec_res):
        results = _ensure_results(shared)
        if exec_res["success"]:
            print(f"[ExportCsv] [OK] wrote {exec_res['row_count']} rows to {exec_res['output_path']}")
            results["export"] = {
                "exported": True,
                "output_path": exec_res["output_path"],
                "row_count": exec_res["row_count"],
            }
        else:
            print(f"[ExportCsv] [X] export failed: {exec_res['output_path']}")
            results["export"] = {
                "exported": False,
                "output_path": exec_res["output_path"],
                "error": "export failed",
            }
        return "default"
