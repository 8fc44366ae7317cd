"""Per-build owner of resolved links and unresolved references."""

from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .graph_model import EXPLICIT, NUMERIC, ResolvedLink


class LinkOrchestrator:
    """Registers links with one entry per ordered document pair.

    An explicit link replaces a numeric one recorded earlier for the same pair;
    the pair keeps its original position.
    """

    def __init__(self, document_ids: Iterable[int]) -> None:
        self._document_ids = set(document_ids)
        self._links: Dict[Tuple[int, int], ResolvedLink] = {}
        self.unresolved: List[Dict[str, Any]] = []
        self.hashtags: Dict[int, List[str]] = {}

    def add_link(
        self, source_id: int, target_id: int, kind: str, literal: Optional[str] = None
    ) -> ResolvedLink:
        if source_id not in self._document_ids:
            raise ValueError(f"Unknown source document: {source_id}")
        if target_id not in self._document_ids:
            raise ValueError(f"Unknown target document: {target_id}")
        if source_id == target_id:
            raise ValueError(f"Self link on document {source_id}")
        if kind not in (EXPLICIT, NUMERIC):
            raise ValueError(f"Unknown link kind: {kind}")

        key = (source_id, target_id)
        literals: Tuple[str, ...] = (literal,) if literal else ()
        existing = self._links.get(key)
        if existing is None:
            link = ResolvedLink(source_id, target_id, kind, literals)
        else:
            merged = existing.literals + tuple(
                item for item in literals if item not in existing.literals
            )
            merged_kind = EXPLICIT if EXPLICIT in (existing.kind, kind) else NUMERIC
            link = ResolvedLink(source_id, target_id, merged_kind, merged)
        self._links[key] = link
        return link

    def add_unresolved(self, source_id: int, token: str, kind: str, reason: str) -> None:
        self.unresolved.append(
            {"source_id": source_id, "token": token, "kind": kind, "reason": reason}
        )

    def set_hashtags(self, document_id: int, tags: List[str]) -> None:
        self.hashtags[document_id] = list(tags)

    def links(self) -> List[ResolvedLink]:
        return list(self._links.values())

    def to_json(self) -> Dict[str, Any]:
        return {
            "links": [asdict(link) for link in self._links.values()],
            "unresolved": [dict(ref) for ref in self.unresolved],
            "hashtags": {str(key): list(tags) for key, tags in self.hashtags.items()},
        }
