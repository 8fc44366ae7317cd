"""Node/edge graph construction and neighbourhood pruning."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from .graph_model import Document, GraphData, GraphEdge, GraphNode, ResolvedLink
from .bidirectional import is_bidirectional

logger = logging.getLogger(__name__)

DEFAULT_NODE_THRESHOLD = 50


def node_url(number: int, base_path: str = "") -> str:
    return f"{base_path.rstrip('/')}/wiki/{number}"


def create_nodes(
    documents: Iterable[Document], focus_id: Optional[int] = None, base_path: str = ""
) -> List[GraphNode]:
    return [
        GraphNode(
            id=document.number,
            title=document.title or "",
            url=node_url(document.number, base_path),
            is_current=document.number == focus_id,
            labels=tuple(document.label_names),
            state=document.state or "open",
            comment_count=document.comments or 0,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )
        for document in documents
    ]


def create_edges(
    resolved_links: Iterable[ResolvedLink],
    bidirectional: Mapping[int, Iterable[int]],
    node_ids: Set[int],
) -> List[GraphEdge]:
    edges: List[GraphEdge] = []
    seen: Set[tuple] = set()
    for link in resolved_links:
        pair = (link.source, link.target)
        if link.source == link.target or pair in seen:
            continue
        if link.source not in node_ids or link.target not in node_ids:
            continue
        seen.add(pair)
        edges.append(
            GraphEdge(
                source=link.source,
                target=link.target,
                kind=link.kind,
                bidirectional=is_bidirectional(bidirectional, link.source, link.target),
            )
        )
    return edges


def build_graph(
    documents: Sequence[Document],
    resolved_links: Iterable[ResolvedLink],
    bidirectional: Mapping[int, Iterable[int]],
    focus_id: Optional[int] = None,
    threshold: int = DEFAULT_NODE_THRESHOLD,
    base_path: str = "",
) -> GraphData:
    nodes = create_nodes(documents, focus_id=focus_id, base_path=base_path)
    edges = create_edges(resolved_links, bidirectional, {node.id for node in nodes})
    graph = GraphData(nodes=nodes, edges=edges)

    if focus_id is None or len(nodes) <= threshold:
        return graph
    if graph.find_node(focus_id) is None:
        logger.warning("Focus document %s is not in the corpus; returning full graph", focus_id)
        return graph
    return prune_graph(graph, focus_id, threshold)


def relevance_scores(graph: GraphData) -> Dict[int, int]:
    """``comment_count + 2 * degree`` for every node of the graph."""
    degree: Dict[int, int] = {node.id: 0 for node in graph.nodes}
    for edge in graph.edges:
        degree[edge.source] = degree.get(edge.source, 0) + 1
        degree[edge.target] = degree.get(edge.target, 0) + 1
    return {node.id: node.comment_count + 2 * degree[node.id] for node in graph.nodes}


def neighbours_of(graph: GraphData, node_id: int) -> List[int]:
    found: List[int] = []
    for edge in graph.edges:
        other = None
        if edge.source == node_id:
            other = edge.target
        elif edge.target == node_id:
            other = edge.source
        if other is not None and other != node_id and other not in found:
            found.append(other)
    return found


def prune_graph(graph: GraphData, focus_id: int, threshold: int) -> GraphData:
    """Keep the focus node and its most relevant direct neighbours."""
    neighbours = neighbours_of(graph, focus_id)
    limit = max(threshold - 1, 0)
    if len(neighbours) > limit:
        scores = relevance_scores(graph)
        ranked = sorted(neighbours, key=lambda node_id: (-scores[node_id], node_id))
        neighbours = ranked[:limit]
        logger.debug(
            "Pruned neighbourhood of %s to %s of %s nodes", focus_id, limit, len(ranked)
        )
    return restrict_graph(graph, {focus_id, *neighbours})


def restrict_graph(graph: GraphData, keep: Set[int]) -> GraphData:
    return GraphData(
        nodes=[node for node in graph.nodes if node.id in keep],
        edges=[edge for edge in graph.edges if edge.source in keep and edge.target in keep],
    )


def filter_graph_for_node(graph: GraphData, node_id: Optional[int]) -> GraphData:
    """Focus node plus every direct neighbour, regardless of graph size."""
    if node_id is None:
        return graph
    return restrict_graph(graph, {node_id, *neighbours_of(graph, node_id)})


def node_details(graph: GraphData, node_id: int) -> Optional[Dict[str, Any]]:
    node = graph.find_node(node_id)
    if node is None:
        return None
    by_id = {item.id: item for item in graph.nodes}
    incoming = [by_id[edge.source] for edge in graph.edges if edge.target == node_id]
    outgoing = [by_id[edge.target] for edge in graph.edges if edge.source == node_id]
    return {"node": node, "incoming": incoming, "outgoing": outgoing}
