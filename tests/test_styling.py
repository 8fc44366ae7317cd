"""Tests for node colour and size selection."""

from zettel_graph.graph_model import GraphNode
from zettel_graph.styling import (
    CURRENT_COLOR,
    DEFAULT_COLOR,
    node_color,
    node_size,
    style_of,
    truncate_label,
)


def _node(labels=(), comments=0, current=False):
    return GraphNode(
        id=1,
        title="Note",
        url="/wiki/1",
        is_current=current,
        labels=tuple(labels),
        state="open",
        comment_count=comments,
        created_at="",
        updated_at="",
    )


class TestNodeColor:
    def test_label_precedence(self):
        assert node_color(_node(["Documentation"])) == "#0075ca"
        assert node_color(_node(["bug-report"])) == "#d73a4a"
        assert node_color(_node(["feature", "bug"])) == "#d73a4a"
        assert node_color(_node(["wiki", "bug"])) == "#0075ca"
        assert node_color(_node(["enhancement"])) == "#84b6eb"

    def test_comment_bands_then_default(self):
        assert node_color(_node(comments=12)) == "#7057ff"
        assert node_color(_node(comments=0)) == DEFAULT_COLOR
        assert node_color(_node(["question"], comments=0)) == DEFAULT_COLOR

    def test_current_node(self):
        assert node_color(_node(["bug"], current=True)) == CURRENT_COLOR


class TestNodeSize:
    def test_monotonic_in_comments(self):
        sizes = [node_size(_node(comments=count)) for count in (0, 1, 6, 11)]
        assert sizes == sorted(sizes)
        assert len(set(sizes)) == 4

    def test_labels_increase_size(self):
        assert node_size(_node(["a", "b"])) > node_size(_node(["a"])) > node_size(_node())

    def test_style_of(self):
        style = style_of(_node(["feature"], comments=1))
        assert style.color == "#a2eeef"
        assert style.size == 8


def test_truncate_label():
    assert truncate_label("A very long title here") == "A very long tit..."
    assert truncate_label("Short") == "Short"
