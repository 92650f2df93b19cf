"""Shortest relation paths between two people."""

from collections import deque

from loguru import logger

from danhxung.graph import RelationGraph
from danhxung.models import RelationType


def find_relation_path(graph: RelationGraph, from_id: str, to_id: str) -> list[str] | None:
    """
    Find the shortest sequence of relation ids leading from `from_id` to `to_id`.

    Every relation is walked in both directions regardless of its type.
    Neighbours are explored in the order their relations were given, so among
    equally short paths the one using the earliest relations wins.

    Returns:
        [] when both ids are the same person, None when `to_id` is unreachable.
    """
    if from_id == to_id:
        return []
    if from_id not in graph or to_id not in graph:
        logger.debug(f"No path {from_id} -> {to_id}: endpoint not in graph")
        return None

    G = graph.G
    visited = {from_id}
    queue: deque[tuple[str, list[str]]] = deque([(from_id, [])])

    while queue:
        person_id, path = queue.popleft()
        for neighbor, edges in G.adj[person_id].items():
            if neighbor in visited:
                continue
            # First relation inserted between the two people
            relation_id = next(iter(edges))
            next_path = path + [relation_id]
            if neighbor == to_id:
                return next_path
            visited.add(neighbor)
            queue.append((neighbor, next_path))

    logger.debug(f"No path {from_id} -> {to_id}: unreachable")
    return None


def describe_path(
    graph: RelationGraph, path: list[str], from_id: str
) -> list[tuple[str, RelationType, str]]:
    """Expand a relation path into (from person, relation type, to person) hops."""
    hops = []
    current = from_id
    for relation_id in path:
        relation = graph.relations[relation_id]
        nxt = relation.other(current)
        hops.append((current, relation.type, nxt))
        current = nxt
    return hops
