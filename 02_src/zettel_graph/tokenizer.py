"""Stateless scanner for wiki links, numeric references and hashtags."""

import re
from typing import List, Tuple

from .graph_model import EXPLICIT, NUMERIC, ExtractionResult, TokenSpan

HASHTAG = "hashtag"

EXPLICIT_LINK_PATTERN = re.compile(r"\[\[(.*?)\]\]")
# `##12` and `&#12;` are not references; a trailing word char makes it a tag.
NUMERIC_REF_PATTERN = re.compile(r"(?<![\w#&])#(\d+)(?![\w-])")
HASHTAG_PATTERN = re.compile(
    r"(?<![\w#&])#([A-Za-z0-9_\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF-]+)"
)


def explicit_spans(body: str | None) -> List[TokenSpan]:
    if not body:
        return []
    return [
        TokenSpan(EXPLICIT, match.start(), match.end(), match.group(1).strip())
        for match in EXPLICIT_LINK_PATTERN.finditer(body)
    ]


def tokenize(body: str | None) -> List[TokenSpan]:
    """Return every link, reference and hashtag span in body order.

    Numeric references and hashtags inside an explicit link are ignored.
    """
    if not body:
        return []
    links = explicit_spans(body)
    occupied = [(span.start, span.end) for span in links]
    spans: List[TokenSpan] = list(links)

    for match in NUMERIC_REF_PATTERN.finditer(body):
        if _inside(match.start(), occupied):
            continue
        spans.append(TokenSpan(NUMERIC, match.start(), match.end(), match.group(1)))

    for match in HASHTAG_PATTERN.finditer(body):
        tag = match.group(1)
        if not tag.strip("-") or tag.strip("-").isdigit() or _inside(match.start(), occupied):
            continue
        spans.append(TokenSpan(HASHTAG, match.start(), match.end(), tag))

    spans.sort(key=lambda span: (span.start, span.end))
    return spans


def extract(body: str | None) -> ExtractionResult:
    result = ExtractionResult()
    for span in tokenize(body):
        result.spans.append(span)
        if span.kind == EXPLICIT:
            result.explicit_tokens.append(span.text)
        elif span.kind == NUMERIC:
            result.numeric_tokens.append(int(span.text))
        elif span.text not in result.hashtags:
            result.hashtags.append(span.text)
    return result


def split_segments(body: str | None) -> List[Tuple[bool, str]]:
    """Split body into ``(is_explicit_link, text)`` segments covering it exactly."""
    if not body:
        return []
    segments: List[Tuple[bool, str]] = []
    cursor = 0
    for span in explicit_spans(body):
        if span.start > cursor:
            segments.append((False, body[cursor:span.start]))
        segments.append((True, body[span.start:span.end]))
        cursor = span.end
    if cursor < len(body):
        segments.append((False, body[cursor:]))
    return segments


def _inside(position: int, occupied: List[Tuple[int, int]]) -> bool:
    return any(start <= position < end for start, end in occupied)
