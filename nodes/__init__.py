"""
nodes/ package - pocketflow nodes of the dream journal pipeline.

All public symbols are registered here so ``from nodes import XXX`` works.
"""

# ── Base class ───────────────────────────────────────────────
from nodes.base import MonitoredNode

# ── Terminal node ────────────────────────────────────────────
from nodes.pipeline_state import TerminalNode

# ── Journal nodes ────────────────────────────────────────────
from nodes.journal import (
    LoadEntriesNode,
    ScoreEntriesNode,
    ScoreTextNode,
    RecommendationNode,
    FilterEntriesNode,
    ExportCsvNode,
)

__all__ = [
    "MonitoredNode",
    "TerminalNode",
    "LoadEntriesNode",
    "ScoreEntriesNode",
    "ScoreTextNode",
    "RecommendationNode",
    "FilterEntriesNode",
    "ExportCsvNode",
]
