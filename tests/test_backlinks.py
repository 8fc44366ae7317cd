"""Tests for backlink construction and context excerpts."""

from zettel_graph.backlinks import build_backlinks, extract_contexts
from zettel_graph.graph_model import ResolvedLink


class TestBuildBacklinks:
    def test_one_entry_per_distinct_paragraph(self, make_document):
        documents = [
            make_document(1, "Setup Guide", "See [[Install]] first.\n\nThen read [[Install]] again."),
            make_document(2, "Install"),
        ]
        links = [ResolvedLink(1, 2, "explicit", ("[[Install]]",))]
        backlinks = build_backlinks(documents, links)
        assert [entry.context for entry in backlinks[2]] == [
            "See [[Install]] first.",
            "Then read [[Install]] again.",
        ]
        assert backlinks[2][0].source_id == 1
        assert backlinks[2][0].source_title == "Setup Guide"
        assert backlinks[2][0].source_slug == "setup-guide"

    def test_same_paragraph_is_not_duplicated(self, make_document):
        documents = [make_document(1, "A", "[[B]] and [[B]]"), make_document(2, "B")]
        backlinks = build_backlinks(documents, [ResolvedLink(1, 2, "explicit", ("[[B]]",))])
        assert len(backlinks[2]) == 1

    def test_long_paragraph_is_truncated(self, make_document):
        documents = [make_document(3, "FAQ", "x" * 200 + " [[Install]]"), make_document(2, "Install")]
        backlinks = build_backlinks(documents, [ResolvedLink(3, 2, "explicit", ("[[Install]]",))])
        assert backlinks[2][0].context == "x" * 150 + "..."

    def test_generated_fallback(self, make_document):
        documents = [make_document(1, "Setup Guide", "nothing"), make_document(7, "", "nothing"), make_document(2, "B")]
        links = [
            ResolvedLink(1, 2, "explicit", ("[[Gone]]",)),
            ResolvedLink(7, 2, "explicit", ()),
        ]
        backlinks = build_backlinks(documents, links)
        assert [entry.context for entry in backlinks[2]] == ["Referenced in Setup Guide", "Referenced in #7"]

    def test_numeric_links_have_no_backlinks(self, make_document):
        documents = [make_document(1, "A", "#2"), make_document(2, "B")]
        assert build_backlinks(documents, [ResolvedLink(1, 2, "numeric")]) == {}

    def test_body_override(self, make_document):
        documents = [make_document(1, "A", "mentions B"), make_document(2, "B")]
        backlinks = build_backlinks(
            documents,
            [ResolvedLink(1, 2, "explicit", ("[[B]]",))],
            bodies={1: "mentions [[B]]"},
        )
        assert backlinks[2][0].context == "mentions [[B]]"
        assert documents[0].body == "mentions B"


class TestExtractContexts:
    def test_sentence_fallback(self):
        body = "First. Second [[A\n\nB]] end."
        assert extract_contexts(body, "[[A\n\nB]]") == [(None, "Second [[A\n\nB]] end.")]

    def test_no_match(self):
        assert extract_contexts("plain text", "[[A]]") == []
