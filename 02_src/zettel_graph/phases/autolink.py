"""Keyword auto-link pre-pass over document bodies."""

import logging
import re
from typing import Any, Dict

from ..autolink import auto_link, build_keyword_index
from ..config import ZettelConfig
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class KeywordAutoLinkPhase(PipelinePhase):
    phase_name = "autolink"

    def is_enabled(self, config: ZettelConfig) -> bool:
        return config.enabled and config.auto_link_keywords

    def disabled_result(self) -> Dict[str, Any]:
        return {"bodies": {}}

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        config: ZettelConfig = context["config"]
        documents = context.get("documents", [])
        keyword_index = build_keyword_index(
            documents, context["note_index"], min_length=config.keyword_min_length
        )

        bodies: Dict[int, str] = {}
        for document in documents:
            try:
                rewritten = auto_link(document.body, keyword_index, document.number, config)
            except (re.error, RecursionError) as error:
                logger.warning("Auto-linking failed for issue #%s: %s", document.number, error)
                continue
            if rewritten != document.body:
                bodies[document.number] = rewritten
        logger.debug("Auto-linked keywords in %s documents", len(bodies))
        return {"bodies": bodies, "keyword_index": keyword_index}
