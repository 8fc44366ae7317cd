"""Graph build phase."""

from typing import Any, Dict

from ..config import ZettelConfig
from ..graph_builder import build_graph
from ..pipeline import PipelinePhase


class GraphBuildPhase(PipelinePhase):
    phase_name = "graph"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        config: ZettelConfig = context["config"]
        graph = build_graph(
            context.get("documents", []),
            context.get("resolved_links", []),
            context.get("bidirectional", {}),
            focus_id=context.get("focus_id"),
            threshold=config.graph_node_threshold,
            base_path=config.base_path,
        )
        return {"graph": graph}
