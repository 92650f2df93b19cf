"""NetworkX graph building for the addressing engine."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import networkx as nx
from loguru import logger

from danhxung.models import Person, Relation, RelationType


@dataclass
class Kin:
    parents: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    spouses: list[str] = field(default_factory=list)


@dataclass
class RelationGraph:
    """
    Derived view over one (persons, relations) snapshot.

    `kin` holds the parents/children/spouses record of every known id.
    `G` is an undirected multigraph with one edge per traversable relation,
    keyed by relation id in the order the relations were given. PARENT edges
    carry the resolved `parent_id`/`child_id`.
    """

    persons: dict[str, Person]
    relations: dict[str, Relation]
    kin: dict[str, Kin]
    G: nx.MultiGraph

    def __getitem__(self, person_id: str) -> Kin:
        return self.kin.get(person_id) or Kin()

    def __contains__(self, person_id: str) -> bool:
        return person_id in self.G

    def person(self, person_id: str) -> Person | None:
        return self.persons.get(person_id)

    def parent_and_child(self, relation: Relation) -> tuple[str, str] | None:
        """Return the (parent, child) pair a PARENT relation was resolved to."""
        if relation.type != RelationType.PARENT:
            return None
        a, b = relation.person_a_id, relation.person_b_id
        if not self.G.has_edge(a, b, key=relation.id):
            return infer_parent_and_child(relation, self.persons)
        data = self.G.edges[a, b, relation.id]
        return data["parent_id"], data["child_id"]

    def lineage_digraph(self) -> nx.DiGraph:
        """Directed PARENT_OF (parent -> child) / SPOUSE_OF view of the graph."""
        D = nx.DiGraph()
        for n, data in self.G.nodes(data=True):
            D.add_node(n, **data)
        for u, v, data in self.G.edges(data=True):
            if data["relation_type"] == RelationType.PARENT:
                D.add_edge(data["parent_id"], data["child_id"], relationship_type="PARENT_OF")
            elif data["relation_type"] == RelationType.SPOUSE:
                # A parent link between the same pair outranks the marriage
                if D.has_edge(u, v) and D.edges[u, v]["relationship_type"] == "PARENT_OF":
                    continue
                D.add_edge(u, v, relationship_type="SPOUSE_OF")
        return D

    @staticmethod
    def clusters_of(person_id: str, cluster_map: dict[str, list[str]]) -> list[str]:
        return [fid for fid, members in cluster_map.items() if person_id in members]


def infer_parent_and_child(relation: Relation, persons: dict[str, Person]) -> tuple[str, str]:
    """
    Decide which endpoint of a PARENT relation is the parent.

    Explicit parent_id/child_id win; when only one of them names an endpoint,
    the other endpoint takes the other role. Otherwise the person born earlier is the
    parent when both birth years are known, and person A is the parent when
    they aren't.
    """
    if relation.parent_id and relation.child_id:
        return relation.parent_id, relation.child_id

    endpoints = (relation.person_a_id, relation.person_b_id)
    if relation.child_id in endpoints:
        return relation.other(relation.child_id), relation.child_id
    if relation.parent_id in endpoints:
        return relation.parent_id, relation.other(relation.parent_id)

    a = persons.get(relation.person_a_id)
    b = persons.get(relation.person_b_id)
    if a and b and a.birth_year is not None and b.birth_year is not None:
        if a.birth_year < b.birth_year:
            return a.id, b.id
        return b.id, a.id

    return relation.person_a_id, relation.person_b_id


def build_graph(persons: Iterable[Person], relations: Iterable[Relation]) -> RelationGraph:
    """Build the relation graph for a snapshot. Unknown ids become isolated nodes."""
    person_map = {p.id: p for p in persons}
    relation_map: dict[str, Relation] = {}
    kin: dict[str, Kin] = {pid: Kin() for pid in person_map}
    G = nx.MultiGraph()

    for p in person_map.values():
        G.add_node(
            p.id,
            person_name=p.name,
            sex=p.gender.value,
            birth_year=p.birth_year,
            death_year=p.death_year,
        )

    for r in relations:
        relation_map[r.id] = r
        dangling = [pid for pid in (r.person_a_id, r.person_b_id) if pid not in person_map]
        if dangling:
            logger.debug(f"Relation {r.id} references unknown person(s) {dangling}; skipping")
            for pid in dangling:
                kin.setdefault(pid, Kin())
            continue

        if r.type == RelationType.PARENT:
            parent_id, child_id = infer_parent_and_child(r, person_map)
            kin.setdefault(parent_id, Kin()).children.append(child_id)
            kin.setdefault(child_id, Kin()).parents.append(parent_id)
            G.add_edge(
                r.person_a_id,
                r.person_b_id,
                key=r.id,
                relation_type=r.type,
                parent_id=parent_id,
                child_id=child_id,
            )
        elif r.type == RelationType.SPOUSE:
            kin[r.person_a_id].spouses.append(r.person_b_id)
            kin[r.person_b_id].spouses.append(r.person_a_id)
            G.add_edge(r.person_a_id, r.person_b_id, key=r.id, relation_type=r.type)
        else:
            # SIBLING and CUSTOM are traversable but leave kin untouched
            G.add_edge(r.person_a_id, r.person_b_id, key=r.id, relation_type=r.type)

    return RelationGraph(persons=person_map, relations=relation_map, kin=kin, G=G)


def build_cluster_map(persons: Iterable[Person], relations: Iterable[Relation]) -> dict[str, list[str]]:
    """Map family cluster id -> member ids, from person tags and relation tags."""
    clusters: dict[str, list[str]] = {}

    for p in persons:
        for fid in p.families:
            members = clusters.setdefault(fid, [])
            if p.id not in members:
                members.append(p.id)

    for r in relations:
        if not r.family_id:
            continue
        members = clusters.setdefault(r.family_id, [])
        for pid in (r.person_a_id, r.person_b_id):
            if pid not in members:
                members.append(pid)

    return clusters
