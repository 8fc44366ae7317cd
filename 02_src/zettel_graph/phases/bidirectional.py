"""Mention map and bidirectional partner phase."""

from typing import Any, Dict

from ..bidirectional import build_mention_map, detect_bidirectional
from ..config import ZettelConfig
from ..pipeline import PipelinePhase


class BidirectionalPhase(PipelinePhase):
    phase_name = "bidirectional"

    def is_enabled(self, config: ZettelConfig) -> bool:
        return config.enabled

    def disabled_result(self) -> Dict[str, Any]:
        return {"mention_map": {}, "bidirectional": {}}

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        config: ZettelConfig = context["config"]
        mention_map = build_mention_map(context.get("resolved_links", []))
        # Highlighting off still exposes mentions, but no pair is flagged.
        bidirectional = detect_bidirectional(mention_map) if config.highlight_bidirectional else {}
        return {"mention_map": mention_map, "bidirectional": bidirectional}
