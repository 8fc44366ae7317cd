"""Backlink phase."""

from typing import Any, Dict

from ..backlinks import build_backlinks
from ..config import ZettelConfig
from ..pipeline import PipelinePhase


class BacklinkPhase(PipelinePhase):
    phase_name = "backlinks"

    def is_enabled(self, config: ZettelConfig) -> bool:
        return config.enabled and config.show_backlinks

    def disabled_result(self) -> Dict[str, Any]:
        return {"backlinks": {}}

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        backlinks = build_backlinks(
            context.get("documents", []),
            context.get("resolved_links", []),
            bodies=context.get("bodies") or {},
        )
        return {"backlinks": backlinks}
