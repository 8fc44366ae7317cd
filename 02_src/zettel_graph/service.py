"""Cached access to the linking pipeline for page and graph rendering."""

import json
import logging
from hashlib import sha1
from typing import Any, Dict, Iterable, List, Optional

from .cache import TTLCache
from .cli import run_linking
from .config import ZettelConfig
from .graph_builder import filter_graph_for_node, node_details
from .graph_model import BacklinkEntry, Document, GraphData, ZettelNote
from .note_index import generate_slug
from .phases.ingestion import normalize_documents
from .rendering import render_markup
from .tokenizer import explicit_spans

logger = logging.getLogger(__name__)


class ZettelGraphService:
    """Front door for rendering collaborators.

    Builds are keyed by focus id and a fingerprint of documents and settings,
    so a changed corpus never reads a stale entry.
    """

    def __init__(
        self,
        documents: Iterable[Any],
        config: Optional[ZettelConfig] = None,
        cache: Optional[TTLCache] = None,
    ) -> None:
        self.config = config or ZettelConfig()
        self.documents: List[Document] = normalize_documents(documents)
        self.cache = cache if cache is not None else TTLCache(self.config.cache_ttl_seconds)
        self.fingerprint = corpus_fingerprint(self.documents, self.config)

    def context(self, focus_id: Optional[int] = None) -> Dict[str, Any]:
        key = f"context:{focus_id if focus_id is not None else 'full'}:{self.fingerprint}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached
        logger.debug("Cache miss for %s", key)
        context = run_linking(self.documents, config=self.config, focus_id=focus_id)
        self.cache.set(key, context)
        return context

    def graph(self, focus_id: Optional[int] = None) -> GraphData:
        return self.context(focus_id)["graph"]

    def local_graph(self, focus_id: int) -> GraphData:
        return filter_graph_for_node(self.graph(focus_id), focus_id)

    def details(self, document_id: int) -> Optional[Dict[str, Any]]:
        return node_details(self.graph(), document_id)

    def backlinks(self, document_id: int) -> List[BacklinkEntry]:
        return list(self.context().get("backlinks", {}).get(document_id, []))

    def bidirectional_partners(self, document_id: int) -> List[int]:
        return list(self.context().get("bidirectional", {}).get(document_id, []))

    def notes(self) -> List[ZettelNote]:
        context = self.context()
        return build_notes(context)

    def render(self, document_id: int) -> str:
        """Body of one document with wiki links and hashtags turned into markup."""
        context = self.context()
        document = context["note_index"].by_id.get(document_id)
        if document is None:
            return ""
        body = (context.get("bodies") or {}).get(document_id, document.body)
        if not self.config.enabled:
            return body
        return render_markup(body, context["note_index"])


def build_notes(context: Dict[str, Any]) -> List[ZettelNote]:
    mention_map: Dict[int, List[int]] = context.get("mention_map", {})
    incoming: Dict[int, List[int]] = {}
    for source, targets in mention_map.items():
        for target in targets:
            incoming.setdefault(target, []).append(source)

    extraction_tags: Dict[int, List[str]] = context.get("hashtags", {})
    bodies: Dict[int, str] = context.get("bodies") or {}

    notes: List[ZettelNote] = []
    for document in context.get("documents", []):
        body = bodies.get(document.number, document.body)
        tags = list(extraction_tags.get(document.number, []))
        tags.extend(name for name in document.label_names if name not in tags)
        notes.append(
            ZettelNote(
                document=document,
                slug=generate_slug(document.title),
                links=[span.text for span in explicit_spans(body)],
                tags=tags,
                backlinks=list(context.get("backlinks", {}).get(document.number, [])),
                outgoing=list(mention_map.get(document.number, [])),
                incoming=incoming.get(document.number, []),
                bidirectional=list(context.get("bidirectional", {}).get(document.number, [])),
            )
        )
    return notes


def corpus_fingerprint(documents: Iterable[Document], config: ZettelConfig) -> str:
    payload = json.dumps(
        {
            "documents": [
                [
                    document.number,
                    document.title,
                    document.body,
                    document.created_at,
                    document.updated_at,
                    [[label.name, label.color] for label in document.labels],
                    document.state,
                    document.comments,
                    document.html_url,
                ]
                for document in documents
            ],
            "config": config.to_dict(),
        },
        ensure_ascii=False,
        sort_keys=True,
    )
    return sha1(payload.encode("utf-8")).hexdigest()[:12]
