"""Mention map and mutual-link detection."""

from typing import Dict, Iterable, List, Mapping, Set

from .graph_model import ResolvedLink


def build_mention_map(resolved_links: Iterable[ResolvedLink]) -> Dict[int, List[int]]:
    """Distinct targets per source, in first-mention order.

    Documents without outgoing mentions have no entry.
    """
    mentions: Dict[int, List[int]] = {}
    for link in resolved_links:
        if link.source == link.target:
            continue
        targets = mentions.setdefault(link.source, [])
        if link.target not in targets:
            targets.append(link.target)
    return mentions


def detect_bidirectional(mention_map: Mapping[int, Iterable[int]]) -> Dict[int, List[int]]:
    """Partners ``b`` of each ``a`` such that ``a -> b`` and ``b -> a`` both exist.

    The result is symmetric; ids with no partner have no entry.
    """
    outgoing: Dict[int, Set[int]] = {
        source: set(targets) for source, targets in mention_map.items()
    }
    partners: Dict[int, Set[int]] = {}
    for source, targets in outgoing.items():
        for target in targets:
            if target == source:
                continue
            if source in outgoing.get(target, ()):
                partners.setdefault(source, set()).add(target)
                partners.setdefault(target, set()).add(source)
    return {source: sorted(found) for source, found in sorted(partners.items())}


def is_bidirectional(bidirectional: Mapping[int, Iterable[int]], source: int, target: int) -> bool:
    return target in bidirectional.get(source, ())
