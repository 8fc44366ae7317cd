"""Backlink lists with context excerpts taken from the linking document."""

import re
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .graph_model import EXPLICIT, BacklinkEntry, Document, ResolvedLink
from .note_index import generate_slug

CONTEXT_LIMIT = 150

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BREAK = re.compile(r"(?<=[.!?。！？])\s+")


def truncate_context(text: str, limit: int = CONTEXT_LIMIT) -> str:
    text = text.strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def split_paragraphs(body: str) -> List[str]:
    return [paragraph for paragraph in PARAGRAPH_BREAK.split(body) if paragraph.strip()]


def split_sentences(body: str) -> List[str]:
    return [sentence for sentence in SENTENCE_BREAK.split(body) if sentence.strip()]


def extract_contexts(body: str, literal: str) -> List[Tuple[Optional[int], str]]:
    """Return ``(paragraph_no, excerpt)`` pairs for one link literal.

    Every paragraph containing the literal yields an excerpt. Without a
    paragraph hit the first matching sentence is used (paragraph_no None).
    """
    paragraphs = split_paragraphs(body)
    hits = [
        (number, truncate_context(paragraph))
        for number, paragraph in enumerate(paragraphs)
        if literal in paragraph
    ]
    if hits:
        return hits
    for sentence in split_sentences(body):
        if literal in sentence:
            return [(None, truncate_context(sentence))]
    return []


def fallback_context(document: Document) -> str:
    return f"Referenced in {document.title or f'#{document.number}'}"


def build_backlinks(
    documents: Iterable[Document],
    resolved_links: Iterable[ResolvedLink],
    bodies: Mapping[int, str] | None = None,
) -> Dict[int, List[BacklinkEntry]]:
    """Invert explicit links into per-target backlink entries.

    ``bodies`` overrides document bodies (for example after auto-linking).
    Entries are appended in link order; one source yields several entries for
    the same target only when the link appears in distinct paragraphs.
    """
    by_id = {document.number: document for document in documents}
    bodies = bodies or {}
    backlinks: Dict[int, List[BacklinkEntry]] = {}

    for link in resolved_links:
        if link.kind != EXPLICIT:
            continue
        source = by_id.get(link.source)
        if source is None or link.target not in by_id:
            continue
        body = bodies.get(source.number, source.body) or ""
        slug = generate_slug(source.title)

        seen: Set[Optional[int]] = set()
        contexts: List[str] = []
        for literal in link.literals:
            for paragraph_no, excerpt in extract_contexts(body, literal):
                if paragraph_no in seen:
                    continue
                seen.add(paragraph_no)
                contexts.append(excerpt)
        if not contexts:
            contexts.append(fallback_context(source))

        entries = backlinks.setdefault(link.target, [])
        for context in contexts:
            entries.append(
                BacklinkEntry(
                    source_id=source.number,
                    source_title=source.title,
                    source_slug=slug,
                    context=context,
                )
            )
    return backlinks
