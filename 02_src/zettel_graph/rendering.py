"""Markup for wiki links and hashtags inside a document body."""

from html import escape
from typing import Iterable, List

from .graph_model import EXPLICIT
from .note_index import NoteIndex, generate_slug, resolve_explicit
from .tokenizer import HASHTAG, tokenize


def render_markup(body: str | None, index: NoteIndex) -> str:
    """Wiki links and hashtags in one pass, so tags inside link text stay plain."""
    return _render(body, index, (EXPLICIT, HASHTAG))


def render_wiki_links(body: str | None, index: NoteIndex) -> str:
    """Replace ``[[...]]`` with anchors; unresolved links get the ``wiki-link-new`` marker."""
    return _render(body, index, (EXPLICIT,))


def render_hashtags(body: str | None) -> str:
    return _render(body, None, (HASHTAG,))


def _render(body: str | None, index: NoteIndex | None, kinds: Iterable[str]) -> str:
    if not body:
        return ""
    kinds = tuple(kinds)
    parts: List[str] = []
    cursor = 0
    for span in tokenize(body):
        if span.kind not in kinds:
            continue
        parts.append(body[cursor:span.start])
        if span.kind == EXPLICIT:
            parts.append(_wiki_anchor(span.text, index))
        else:
            parts.append(_tag_anchor(span.text))
        cursor = span.end
    parts.append(body[cursor:])
    return "".join(parts)


def _tag_anchor(text: str) -> str:
    tag = escape(text)
    return f'<a href="/category/{tag}" class="tag-link">#{tag}</a>'


def _wiki_anchor(text: str, index: NoteIndex) -> str:
    label = escape(text)
    # A page linking to itself still points at an existing note.
    target = resolve_explicit(text, None, index)
    if target is None:
        return f'<a href="#" class="wiki-link wiki-link-new" data-title="{label}">{label}</a>'
    slug = escape(generate_slug(index.by_id[target].title))
    return (
        f'<a href="{slug}" class="wiki-link" data-note-id="zettel-{target}">{label}</a>'
    )
