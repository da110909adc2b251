"""Graph reachability over a precomputed adjacency relation.

Nodes are opaque identifiers; edges come from the caller. No distances here.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping


def _reachable(start: str, adjacency: Mapping[str, Iterable[str]], allowed: set[str]) -> list[str]:
    """BFS from ``start``, restricted to ``allowed`` nodes. Visit order is deterministic."""
    seen = {start}
    order = [start]
    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        for nxt in adjacency.get(current, ()):
            if nxt not in allowed or nxt in seen:
                continue
            seen.add(nxt)
            order.append(nxt)
            frontier.append(nxt)
    return order


def is_single_connected_component(
    ids: list[str],
    adjacency: Mapping[str, Iterable[str]],
) -> bool:
    """True iff every id is reachable from the first. 0 or 1 ids are trivially connected."""
    if len(ids) <= 1:
        return True
    allowed = set(ids)
    return len(_reachable(ids[0], adjacency, allowed)) == len(allowed)


def connected_components(
    ids: list[str],
    adjacency: Mapping[str, Iterable[str]],
) -> list[list[str]]:
    """Partition ids into components, ordered by first appearance in ``ids``."""
    allowed = set(ids)
    assigned: set[str] = set()
    components: list[list[str]] = []
    for node in ids:
        if node in assigned:
            continue
        members = _reachable(node, adjacency, allowed)
        assigned.update(members)
        components.append(members)
    return components
