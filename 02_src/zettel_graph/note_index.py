"""Lookup structures over the full document set and link resolution."""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .graph_model import Document


def generate_slug(title: str | None) -> str:
    if not title:
        return ""
    slug = re.sub(r"[^\w\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    return slug.strip("-")


def normalize_title(text: str | None) -> str:
    return (text or "").strip().lower()


@dataclass
class NoteIndex:
    """Title, slug and id maps.

    Duplicate titles or slugs: the last document in input order wins.
    Documents with an empty title are left out of ``by_title`` and of the fuzzy
    candidates; they enter ``by_slug`` only when a slug can be generated.
    """

    by_title: Dict[str, int] = field(default_factory=dict)
    by_slug: Dict[str, int] = field(default_factory=dict)
    by_id: Dict[int, Document] = field(default_factory=dict)
    # (normalized title, id) sorted by id for the containment fallback.
    fuzzy_candidates: List[Tuple[str, int]] = field(default_factory=list)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self.by_id

    def slug_of(self, document_id: int) -> str:
        document = self.by_id.get(document_id)
        return generate_slug(document.title) if document else ""


def build_note_index(documents: Iterable[Document]) -> NoteIndex:
    index = NoteIndex()
    for document in documents:
        index.by_id[document.number] = document
        title = normalize_title(document.title)
        if title:
            index.by_title[title] = document.number
        slug = generate_slug(document.title)
        if slug:
            index.by_slug[slug] = document.number

    index.fuzzy_candidates = sorted(
        (
            (normalize_title(document.title), number)
            for number, document in index.by_id.items()
            if normalize_title(document.title)
        ),
        key=lambda candidate: candidate[1],
    )
    return index


def resolve_explicit(token: str, source_id: Optional[int], index: NoteIndex) -> Optional[int]:
    """Map ``[[token]]`` text to a document id.

    Exact title first, then slug, then the lowest-id document whose title
    contains the token. A match on the source document itself yields None.
    """
    needle = normalize_title(token)
    if not needle:
        return None

    target = index.by_title.get(needle)
    if target is None:
        target = index.by_slug.get(needle)
    if target is None:
        for title, number in index.fuzzy_candidates:
            if needle in title:
                target = number
                break

    if target is None or target == source_id:
        return None
    return target


def resolve_numeric(number: int, source_id: Optional[int], index: NoteIndex) -> Optional[int]:
    if number not in index.by_id or number == source_id:
        return None
    return number
