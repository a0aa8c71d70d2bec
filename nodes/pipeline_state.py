"""
pipeline_state.py - terminal node of the journal pipeline.
"""

from nodes.base import MonitoredNode


class TerminalNode(MonitoredNode):
    """Announce the end of the run and print a summary."""

    def prep(self, shared):
        results = shared.get("results", {})
        return {
            "statistics": results.get("statistics", {}),
            "export": results.get("export", {}),
        }

    def exec(self, prep_res):
        statistics = prep_res["statistics"]
        export = prep_res["export"]
        return {
            "status": "completed",
            "total_entries": statistics.get("total_entries", 0),
            "matched_entries": statistics.get("matched_entries", 0),
            "emotion_distribution": statistics.get("emotion_distribution", {}),
            "avg_nightmare_index": statistics.get("avg_nightmare_index", 0.0),
            "avg_sentiment": statistics.get("avg_sentiment", 0.0),
            "exported": export.get("exported", False),
            "output_path": export.get("output_path", ""),
        }

    def post(self, shared, prep_res, exec_res):
        print("\n" + "=" * 60)
        print("Dream journal analysis - done")
        print("=" * 60)
        print(f"Status: {exec_res['status']}")
        print(f"Entries: {exec_res['total_entries']} (matched {exec_res['matched_entries']})")
        print(f"Emotions: {exec_res['emotion_distribution']}")
        print(f"Avg nightmare index: {exec_res['avg_nightmare_index']}, avg sentiment: {exec_res['avg_sentiment']}")
        if exec_res["exported"]:
            print(f"CSV written to: {exec_res['output_path']}")
        print("=" * 60 + "\n")
        shared["final_summary"] = exec_res
        return "default"
