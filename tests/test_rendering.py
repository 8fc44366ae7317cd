"""Tests for wiki-link and hashtag markup."""

import pytest

from zettel_graph.note_index import build_note_index
from zettel_graph.rendering import render_hashtags, render_markup, render_wiki_links


@pytest.fixture
def index(scenario_documents):
    return build_note_index(scenario_documents)


class TestRenderWikiLinks:
    def test_resolved_link(self, index):
        html = render_wiki_links("See [[Install]]", index)
        assert html == 'See <a href="install" class="wiki-link" data-note-id="zettel-2">Install</a>'

    def test_unresolved_link_is_marked(self, index):
        html = render_wiki_links("See [[Missing]]", index)
        assert 'class="wiki-link wiki-link-new"' in html
        assert 'data-title="Missing"' in html

    def test_link_to_own_page_resolves(self, make_document):
        index = build_note_index([make_document(1, "Solo")])
        html = render_wiki_links("I am [[Solo]]", index)
        assert html == 'I am <a href="solo" class="wiki-link" data-note-id="zettel-1">Solo</a>'
        assert "wiki-link-new" not in html

    def test_escapes_link_text(self, index):
        html = render_wiki_links("[[<b>]]", index)
        assert "&lt;b&gt;" in html
        assert "<b>" not in html

    def test_empty(self, index):
        assert render_wiki_links("", index) == ""


class TestRenderHashtags:
    def test_tag_anchor(self):
        assert render_hashtags("tag #python here") == (
            'tag <a href="/category/python" class="tag-link">#python</a> here'
        )

    def test_numeric_references_untouched(self):
        assert render_hashtags("see #12") == "see #12"


class TestRenderMarkup:
    def test_links_and_tags_together(self, index):
        html = render_markup("See [[Install]] #setup", index)
        assert html == (
            'See <a href="install" class="wiki-link" data-note-id="zettel-2">Install</a> '
            '<a href="/category/setup" class="tag-link">#setup</a>'
        )

    def test_tag_inside_link_text_stays_plain(self, index):
        html = render_markup("[[Notes #draft]] and #draft", index)
        assert html.count('class="tag-link"') == 1
        assert 'data-title="Notes #draft">Notes #draft</a>' in html
        assert html.endswith(' and <a href="/category/draft" class="tag-link">#draft</a>')
        assert html.count("<a ") == 2

    def test_empty(self, index):
        assert render_markup(None, index) == ""
