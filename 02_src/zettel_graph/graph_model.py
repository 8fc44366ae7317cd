"""Data model primitives for documents, links and the knowledge graph."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

EXPLICIT = "explicit"
NUMERIC = "numeric"


@dataclass(frozen=True)
class Label:
    name: str
    color: str = ""


@dataclass(frozen=True)
class Document:
    """One issue as supplied by the issue source. Never mutated by the core."""

    number: int
    title: str = ""
    body: str = ""
    created_at: str = ""
    updated_at: str = ""
    labels: Tuple[Label, ...] = ()
    state: str = "open"
    comments: int = 0
    html_url: str = ""

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels]


@dataclass(frozen=True)
class TokenSpan:
    kind: str
    start: int
    end: int
    text: str


@dataclass
class ExtractionResult:
    explicit_tokens: List[str] = field(default_factory=list)
    numeric_tokens: List[int] = field(default_factory=list)
    hashtags: List[str] = field(default_factory=list)
    spans: List[TokenSpan] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedLink:
    source: int
    target: int
    kind: str
    # Raw `[[...]]` literals in the source body that produced this link.
    literals: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BacklinkEntry:
    source_id: int
    source_title: str
    source_slug: str
    context: str


@dataclass(frozen=True)
class GraphNode:
    id: int
    title: str
    url: str
    is_current: bool
    labels: Tuple[str, ...]
    state: str
    comment_count: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class GraphEdge:
    source: int
    target: int
    kind: str
    bidirectional: bool


@dataclass
class GraphData:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    def node_ids(self) -> List[int]:
        return [node.id for node in self.nodes]

    def find_node(self, node_id: int) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_json(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {
                    "id": node.id,
                    "title": node.title,
                    "url": node.url,
                    "isCurrent": node.is_current,
                    "labels": list(node.labels),
                    "state": node.state,
                    "commentCount": node.comment_count,
                    "createdAt": node.created_at,
                    "updatedAt": node.updated_at,
                }
                for node in self.nodes
            ],
            "edges": [
                {
                    "source": edge.source,
                    "target": edge.target,
                    "kind": edge.kind,
                    "bidirectional": edge.bidirectional,
                }
                for edge in self.edges
            ],
        }


@dataclass
class ZettelNote:
    """Page-level view of one document after the linking pipeline ran."""

    document: Document
    slug: str
    links: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    backlinks: List[BacklinkEntry] = field(default_factory=list)
    outgoing: List[int] = field(default_factory=list)
    incoming: List[int] = field(default_factory=list)
    bidirectional: List[int] = field(default_factory=list)

    @property
    def zettel_id(self) -> str:
        return f"zettel-{self.document.number}"
