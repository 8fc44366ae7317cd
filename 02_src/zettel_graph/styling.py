"""Colour and size of graph nodes, derived from node data only."""

from dataclasses import dataclass
from typing import Tuple

from .graph_model import GraphNode

CURRENT_COLOR = "#f04050"
DEFAULT_COLOR = "#4f6df5"
BASE_SIZE = 6

# First matching group wins; a label matches when it contains any substring.
LABEL_COLORS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("documentation", "wiki"), "#0075ca"),
    (("bug", "error"), "#d73a4a"),
    (("feature",), "#a2eeef"),
    (("enhancement",), "#84b6eb"),
)

# (minimum comments, colour), checked from the top.
COMMENT_BANDS: Tuple[Tuple[int, str], ...] = (
    (11, "#7057ff"),
    (6, "#8a7dff"),
    (1, "#6f8cf7"),
)


@dataclass(frozen=True)
class NodeStyle:
    color: str
    size: int


def node_color(node: GraphNode) -> str:
    if node.is_current:
        return CURRENT_COLOR
    lowered = [label.lower() for label in node.labels]
    for substrings, color in LABEL_COLORS:
        if any(part in label for label in lowered for part in substrings):
            return color
    for minimum, color in COMMENT_BANDS:
        if node.comment_count >= minimum:
            return color
    return DEFAULT_COLOR


def node_size(node: GraphNode) -> int:
    size = BASE_SIZE
    if node.comment_count > 10:
        size += 4
    elif node.comment_count > 5:
        size += 2
    elif node.comment_count > 0:
        size += 1
    return size + min(len(node.labels), 4)


def style_of(node: GraphNode) -> NodeStyle:
    return NodeStyle(color=node_color(node), size=node_size(node))


def truncate_label(text: str, limit: int = 15) -> str:
    return text[:limit] + "..." if len(text) > limit else text
