"""Consistency checks for family tree snapshots. Reports, never blocks."""

from collections.abc import Iterable

import networkx as nx

from danhxung.graph import build_graph
from danhxung.models import Person, Relation, RelationType


def validate_snapshot(persons: Iterable[Person], relations: Iterable[Relation]) -> list[str]:
    """
    Validate a snapshot for:
    - Relations pointing at unknown people, or at the same person twice
    - Duplicate relations (same pair and type, in either order)
    - People with more than one spouse
    - Cycles in parent-child relationships
    - Impossible ages (child born before parent)
    - Death before birth

    Returns a list of warning messages.
    """
    persons = list(persons)
    relations = list(relations)
    person_ids = {p.id for p in persons}
    warnings: list[str] = []

    seen: set[tuple[frozenset[str], RelationType]] = set()
    for r in relations:
        for pid in (r.person_a_id, r.person_b_id):
            if pid not in person_ids:
                warnings.append(f"Relation {r.id} references unknown person {pid}")
        if r.person_a_id == r.person_b_id:
            warnings.append(f"Relation {r.id} relates {r.person_a_id} to themselves")

        key = (frozenset((r.person_a_id, r.person_b_id)), r.type)
        if key in seen:
            warnings.append(f"Duplicate {r.type.value} relation {r.id}")
        seen.add(key)

    graph = build_graph(persons, relations)
    names = {p.id: p.name for p in persons}

    for pid, kin in graph.kin.items():
        if len(kin.spouses) > 1:
            warnings.append(f"{names.get(pid, pid)} has multiple spouses")

    D = graph.lineage_digraph()

    # Create a subgraph with only PARENT_OF edges for cycle detection
    parent_edges = [(u, v) for u, v, d in D.edges(data=True) if d.get("relationship_type") == "PARENT_OF"]
    parent_graph = nx.DiGraph(parent_edges)

    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent, child in parent_edges:
        parent_data = D.nodes[parent]
        child_data = D.nodes[child]
        parent_birth = parent_data.get("birth_year")
        child_birth = child_data.get("birth_year")

        if parent_birth is None or child_birth is None:
            continue
        if child_birth < parent_birth:
            warnings.append(
                f"Impossible: {child_data.get('person_name')} born before parent "
                f"{parent_data.get('person_name')}"
            )
        elif child_birth - parent_birth < 12:
            warnings.append(
                f"Suspicious: {parent_data.get('person_name')} was less than 12 years "
                f"old when {child_data.get('person_name')} was born"
            )

    for p in persons:
        if p.birth_year is not None and p.death_year is not None and p.death_year < p.birth_year:
            warnings.append(f"Impossible: {p.name} died before being born")

    return warnings
