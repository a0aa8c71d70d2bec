"""
Dream journal analysis - Flow definitions

================================================================================
Journal flow
================================================================================

LoadEntriesNode
    → ScoreEntriesNode (sentiment / emotion / nightmare index per entry)
    → RecommendationNode
    → FilterEntriesNode
        ├─ export  → ExportCsvNode → TerminalNode
        └─ default → TerminalNode

================================================================================
"""

from pocketflow import Flow

from nodes import (
    LoadEntriesNode,
    ScoreEntriesNode,
    ScoreTextNode,
    RecommendationNode,
    FilterEntriesNode,
    ExportCsvNode,
    TerminalNode,
)


def create_journal_flow() -> Flow:
    """
    Create the batch journal flow over a JSON file of entries.

    Export is taken only when data.export_path is configured.
    """
    load_node = LoadEntriesNode()
    score_node = ScoreEntriesNode()
    recommend_node = RecommendationNode()
    filter_node = FilterEntriesNode()
    export_node = ExportCsvNode()
    terminal_node = TerminalNode()

    load_node >> score_node
    score_node >> recommend_node
    recommend_node >> filter_node
    filter_node - "export" >> export_node
    filter_node >> terminal_node
    export_node >> terminal_node

    return Flow(start=load_node)


def create_score_flow() -> Flow:
    """Single-node flow scoring shared["input"]["text"] into shared["score"]."""
    return Flow(start=ScoreTextNode())
