"""Document ingestion from in-memory issues or a JSON issue snapshot."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..graph_model import Document, Label
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class DocumentIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raw_documents = context.get("documents")
        input_path = context.get("input_path")
        if raw_documents is None and input_path:
            raw_documents = load_snapshot(Path(str(input_path)))
        documents = normalize_documents(raw_documents or [])
        return {"documents": documents}


def load_snapshot(input_path: Path) -> List[Any]:
    """Read a pre-fetched issue list (the issue tracker's JSON shape)."""
    if not input_path.exists():
        raise FileNotFoundError(f"Issue snapshot not found: {input_path}")
    payload = json.loads(input_path.read_text(encoding="utf-8"))
    if isinstance(payload, dict) and isinstance(payload.get("issues"), list):
        payload = payload["issues"]
    if not isinstance(payload, list):
        raise ValueError(f"Issue snapshot must hold a JSON list: {input_path}")
    return payload


def normalize_documents(raw_documents: Iterable[Any]) -> List[Document]:
    documents: List[Document] = []
    seen: set[int] = set()
    for position, raw in enumerate(raw_documents):
        document = raw if isinstance(raw, Document) else document_from_payload(raw)
        if document is None:
            logger.warning("Skipping malformed issue entry at position %s", position)
            continue
        if document.number in seen:
            logger.warning("Skipping duplicate issue #%s", document.number)
            continue
        seen.add(document.number)
        documents.append(document)
    return documents


def document_from_payload(payload: Any) -> Optional[Document]:
    if not isinstance(payload, dict):
        return None
    try:
        number = int(payload.get("number", payload.get("id")))
    except (TypeError, ValueError):
        return None
    try:
        comments = int(payload.get("comments") or 0)
    except (TypeError, ValueError):
        comments = 0

    return Document(
        number=number,
        title=str(payload.get("title") or ""),
        body=str(payload.get("body") or ""),
        created_at=str(payload.get("created_at") or ""),
        updated_at=str(payload.get("updated_at") or ""),
        labels=tuple(normalize_labels(payload.get("labels"))),
        state=str(payload.get("state") or "open"),
        comments=comments,
        html_url=str(payload.get("html_url") or ""),
    )


def normalize_labels(raw_labels: Any) -> List[Label]:
    """Labels arrive as plain names or as ``{"name", "color"}`` objects."""
    labels: List[Label] = []
    for raw in raw_labels or []:
        if isinstance(raw, Label):
            labels.append(raw)
        elif isinstance(raw, str) and raw.strip():
            labels.append(Label(name=raw.strip()))
        elif isinstance(raw, dict) and str(raw.get("name") or "").strip():
            labels.append(Label(name=str(raw["name"]).strip(), color=str(raw.get("color") or "")))
    return labels
