"""Keyword auto-linking: turn bare mentions of other notes into `[[...]]` links."""

import re
from typing import Dict, Iterable, List, Optional, Tuple

from .config import ZettelConfig
from .graph_model import Document
from .note_index import NoteIndex, normalize_title, resolve_explicit
from .tokenizer import split_segments


def build_keyword_index(
    documents: Iterable[Document], index: NoteIndex, min_length: int = 3
) -> Dict[str, int]:
    """Map keyword text to the document a ``[[keyword]]`` link would reach.

    Titles map to the document their exact title resolves to. A label becomes a
    keyword only when it resolves to a document through the note index.
    """
    keywords: Dict[str, int] = {}
    seen: Dict[str, str] = {}
    documents = list(documents)

    for document in documents:
        keyword = (document.title or "").strip()
        normalized = normalize_title(keyword)
        if len(normalized) < max(1, min_length):
            continue
        if normalized in seen:
            # Same title in another casing: keep one keyword per title.
            keywords.pop(seen[normalized], None)
        target = index.by_title.get(normalized, document.number)
        keywords[keyword] = target
        seen[normalized] = keyword

    for document in documents:
        for name in document.label_names:
            keyword = name.strip()
            normalized = normalize_title(keyword)
            if len(normalized) < max(1, min_length) or normalized in seen:
                continue
            target = resolve_explicit(keyword, None, index)
            if target is None:
                continue
            keywords[keyword] = target
            seen[normalized] = keyword

    return keywords


def auto_link(
    body: str | None,
    keyword_index: Dict[str, int],
    self_id: Optional[int],
    config: ZettelConfig,
) -> str:
    """Wrap the first bare occurrence of each keyword in ``[[...]]``.

    Longer keywords are placed first. Text already inside a link is never
    touched, and keywords pointing at ``self_id`` are skipped.
    """
    if not body:
        return body or ""
    if not (config.enabled and config.auto_link_keywords):
        return body

    candidates = sorted(
        (
            keyword
            for keyword, target in keyword_index.items()
            if target != self_id and len(keyword.strip()) >= max(1, config.keyword_min_length)
        ),
        key=lambda keyword: (-len(keyword), keyword.lower()),
    )
    segments = split_segments(body)
    for keyword in candidates:
        segments = _link_first_occurrence(segments, keyword)
    return "".join(text for _, text in segments)


def _link_first_occurrence(
    segments: List[Tuple[bool, str]], keyword: str
) -> List[Tuple[bool, str]]:
    pattern = re.compile(
        r"(?<![\w\[])" + re.escape(keyword.strip()) + r"(?![\w\]])", re.IGNORECASE
    )
    for position, (is_link, text) in enumerate(segments):
        if is_link:
            continue
        match = pattern.search(text)
        if match is None:
            continue
        replacement: List[Tuple[bool, str]] = []
        if match.start() > 0:
            replacement.append((False, text[: match.start()]))
        replacement.append((True, f"[[{match.group(0)}]]"))
        if match.end() < len(text):
            replacement.append((False, text[match.end():]))
        return segments[:position] + replacement + segments[position + 1:]
    return segments
