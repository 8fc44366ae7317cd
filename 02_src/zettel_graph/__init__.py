"""Note-linking and knowledge-graph engine for issue-backed wikis."""

from .config import ZettelConfig, load_config
from .graph_model import (
    BacklinkEntry,
    Document,
    GraphData,
    GraphEdge,
    GraphNode,
    Label,
    ResolvedLink,
    ZettelNote,
)
from .graph_orchestrator import LinkOrchestrator
from .pipeline import PipelinePhase, PipelineRunner
from .service import ZettelGraphService

__all__ = [
    "BacklinkEntry",
    "Document",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "Label",
    "LinkOrchestrator",
    "PipelinePhase",
    "PipelineRunner",
    "ResolvedLink",
    "ZettelConfig",
    "ZettelGraphService",
    "ZettelNote",
    "load_config",
]
