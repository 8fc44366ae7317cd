"""Validation and QA phase: counts plus graph invariant checks."""

import logging
from typing import Any, Dict, List

from ..graph_model import GraphData
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class ValidationAndQAPhase(PipelinePhase):
    phase_name = "validation"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph: GraphData = context.get("graph") or GraphData()
        bidirectional: Dict[int, List[int]] = context.get("bidirectional", {})
        warnings = check_graph(graph) + check_symmetry(bidirectional)
        for warning in warnings:
            logger.warning("Graph validation: %s", warning)

        qa_report = {
            "document_count": len(context.get("documents", [])),
            "node_count": len(graph.nodes),
            "edge_count": len(graph.edges),
            "bidirectional_edge_count": sum(1 for edge in graph.edges if edge.bidirectional),
            "unresolved_count": len(context.get("unresolved", [])),
            "backlink_target_count": len(context.get("backlinks", {})),
            "warnings": warnings,
        }
        return {"validation_report": qa_report}


def check_graph(graph: GraphData) -> List[str]:
    warnings: List[str] = []
    node_ids = set(graph.node_ids())
    flags = {(edge.source, edge.target): edge.bidirectional for edge in graph.edges}
    for edge in graph.edges:
        if edge.source not in node_ids or edge.target not in node_ids:
            warnings.append(f"dangling edge {edge.source}->{edge.target}")
        if edge.source == edge.target:
            warnings.append(f"self loop on {edge.source}")
        reverse = flags.get((edge.target, edge.source))
        if reverse is not None and reverse != edge.bidirectional:
            warnings.append(f"bidirectional flag mismatch {edge.source}<->{edge.target}")
    return warnings


def check_symmetry(bidirectional: Dict[int, List[int]]) -> List[str]:
    return [
        f"asymmetric partners {source}->{partner}"
        for source, partners in bidirectional.items()
        for partner in partners
        if source not in bidirectional.get(partner, [])
    ]
