"""Tests for the link/reference/hashtag scanner."""

from zettel_graph.tokenizer import extract, split_segments, tokenize


class TestExtract:
    def test_explicit_and_numeric(self):
        result = extract("See [[Install]] and #3")
        assert result.explicit_tokens == ["Install"]
        assert result.numeric_tokens == [3]

    def test_empty_body(self):
        for body in (None, ""):
            result = extract(body)
            assert result.explicit_tokens == []
            assert result.numeric_tokens == []
            assert result.hashtags == []

    def test_link_text_is_trimmed(self):
        assert extract("[[  Spaced Title ]]").explicit_tokens == ["Spaced Title"]

    def test_heading_markers_are_not_references(self):
        body = "# 1. Intro\n## 12 steps\n##12\nSee #7"
        assert extract(body).numeric_tokens == [7]

    def test_reference_inside_explicit_link_is_ignored(self):
        result = extract("Read [[Issue #4 notes]] then #5")
        assert result.explicit_tokens == ["Issue #4 notes"]
        assert result.numeric_tokens == [5]

    def test_html_entity_is_not_a_reference(self):
        assert extract("&#123; and x#9").numeric_tokens == []

    def test_hashtags(self):
        result = extract("Tagged #python and #ml-ops, see #12 and #python again")
        assert result.hashtags == ["python", "ml-ops"]
        assert result.numeric_tokens == [12]

    def test_digits_with_trailing_dash_are_not_tags(self):
        assert extract("see #3- here").hashtags == []
        assert extract("see #-12- here").hashtags == []

    def test_cjk_hashtag(self):
        assert extract("メモ #日本語 です").hashtags == ["日本語"]

    def test_repeated_links_are_all_reported(self):
        assert extract("[[A]] [[B]] [[A]]").explicit_tokens == ["A", "B", "A"]


class TestTokenize:
    def test_spans_are_ordered_and_positioned(self):
        body = "#2 before [[Target]]"
        spans = tokenize(body)
        assert [span.kind for span in spans] == ["numeric", "explicit"]
        assert body[spans[1].start:spans[1].end] == "[[Target]]"

    def test_no_state_between_calls(self):
        body = "[[One]] #1 [[Two]]"
        assert tokenize(body) == tokenize(body)


class TestSplitSegments:
    def test_segments_cover_body(self):
        body = "[[A]] b [[C]]"
        assert split_segments(body) == [(True, "[[A]]"), (False, " b "), (True, "[[C]]")]
        assert "".join(text for _, text in split_segments(body)) == body

    def test_plain_text(self):
        assert split_segments("plain") == [(False, "plain")]
        assert split_segments("") == []
