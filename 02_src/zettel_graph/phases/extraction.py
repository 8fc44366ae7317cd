"""Link extraction phase: tokenize bodies and resolve tokens, wired as a LangGraph workflow."""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..config import ZettelConfig
from ..graph_model import EXPLICIT, NUMERIC, Document, ExtractionResult
from ..graph_orchestrator import LinkOrchestrator
from ..note_index import NoteIndex, resolve_explicit, resolve_numeric
from ..pipeline import PipelinePhase
from ..tokenizer import extract

logger = logging.getLogger(__name__)

# (source, target, kind, literal)
LinkCandidate = Tuple[int, int, str, Optional[str]]


class ExtractionState(TypedDict):
    documents: List[Document]
    bodies: Dict[int, str]
    note_index: NoteIndex
    extractions: Dict[int, ExtractionResult]
    failures: List[Dict[str, Any]]
    candidates: List[LinkCandidate]
    unresolved: List[Dict[str, Any]]


class LinkExtractionPhase(PipelinePhase):
    phase_name = "extraction"

    def is_enabled(self, config: ZettelConfig) -> bool:
        return config.enabled

    def disabled_result(self) -> Dict[str, Any]:
        return {
            "resolved_links": [],
            "hashtags": {},
            "unresolved": [],
            "extraction_report": {"documents": 0, "failures": [], "candidates": 0},
        }

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        documents: List[Document] = list(context.get("documents", []))
        orchestrator = LinkOrchestrator(document.number for document in documents)

        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {
                "documents": documents,
                "bodies": dict(context.get("bodies") or {}),
                "note_index": context["note_index"],
                "extractions": {},
                "failures": [],
                "candidates": [],
                "unresolved": [],
            }
        )

        self._apply_to_orchestrator(orchestrator, result_state)
        failures = result_state.get("failures", [])
        return {
            "orchestrator": orchestrator,
            "resolved_links": orchestrator.links(),
            "hashtags": dict(orchestrator.hashtags),
            "unresolved": list(orchestrator.unresolved),
            "extraction_report": {
                "documents": len(documents),
                "failures": failures,
                "candidates": len(result_state.get("candidates", [])),
            },
        }

    def _build_workflow(self):
        graph = StateGraph(ExtractionState)
        graph.add_node("tokenize", self._tokenize)
        graph.add_node("resolve", self._resolve)
        graph.add_edge(START, "tokenize")
        graph.add_edge("tokenize", "resolve")
        graph.add_edge("resolve", END)
        return graph.compile()

    @staticmethod
    def _tokenize(state: ExtractionState) -> Dict[str, Any]:
        bodies = state.get("bodies", {})
        extractions: Dict[int, ExtractionResult] = {}
        failures: List[Dict[str, Any]] = []

        for document in state.get("documents", []):
            body = bodies.get(document.number, document.body)
            try:
                extractions[document.number] = extract(body)
            except (re.error, RecursionError, ValueError) as error:
                # The document stays in the graph as plain text.
                logger.warning("Link extraction failed for issue #%s: %s", document.number, error)
                failures.append({"document": document.number, "error": str(error)})
                extractions[document.number] = ExtractionResult()

        return {"extractions": extractions, "failures": failures}

    @staticmethod
    def _resolve(state: ExtractionState) -> Dict[str, Any]:
        index = state["note_index"]
        bodies = state.get("bodies", {})
        candidates: List[LinkCandidate] = []
        unresolved: List[Dict[str, Any]] = []

        for document in state.get("documents", []):
            extraction = state["extractions"].get(document.number, ExtractionResult())
            body = bodies.get(document.number, document.body) or ""
            for span in extraction.spans:
                if span.kind == EXPLICIT:
                    target = resolve_explicit(span.text, document.number, index)
                    if target is not None:
                        candidates.append(
                            (document.number, target, EXPLICIT, body[span.start:span.end])
                        )
                        continue
                    reason = LinkExtractionPhase._unresolved_reason(span.text, document.number, index)
                    if reason:
                        unresolved.append(
                            {
                                "source_id": document.number,
                                "token": span.text,
                                "kind": EXPLICIT,
                                "reason": reason,
                            }
                        )
                elif span.kind == NUMERIC:
                    target = resolve_numeric(int(span.text), document.number, index)
                    if target is not None:
                        candidates.append((document.number, target, NUMERIC, None))

        return {"candidates": candidates, "unresolved": unresolved}

    @staticmethod
    def _unresolved_reason(token: str, source_id: int, index: NoteIndex) -> str:
        if not token.strip():
            return "empty_token"
        if resolve_explicit(token, None, index) == source_id:
            # Self references are dropped, not reported.
            return ""
        return "no_candidate_match"

    @staticmethod
    def _apply_to_orchestrator(orchestrator: LinkOrchestrator, state: Dict[str, Any]) -> None:
        for source_id, target_id, kind, literal in state.get("candidates", []):
            orchestrator.add_link(source_id, target_id, kind, literal)
        for ref in state.get("unresolved", []):
            orchestrator.add_unresolved(ref["source_id"], ref["token"], ref["kind"], ref["reason"])
        for document_id, extraction in state.get("extractions", {}).items():
            if extraction.hashtags:
                orchestrator.set_hashtags(document_id, extraction.hashtags)
