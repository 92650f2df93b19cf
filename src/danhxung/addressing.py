"""
Addressing engine: which Vietnamese title the reference person uses for
everyone else in the family graph.

The graph and cluster map are derived from one (persons, relations) snapshot
and may be built once and shared by any number of queries.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from danhxung.graph import RelationGraph, build_cluster_map, build_graph
from danhxung.greetings import confidence, greeting_examples
from danhxung.models import (
    AddressingInfo,
    AddressTitle,
    Certainty,
    FamilyMember,
    Person,
    Relation,
)
from danhxung.paths import find_relation_path
from danhxung.steps import classify_path
from danhxung.titles import UNKNOWN_EXPLANATION, Resolution, resolve_title


def _self_addressing() -> AddressingInfo:
    return AddressingInfo(
        title=AddressTitle.SELF,
        explanation="Bạn",
        greeting_examples=(),
        lineage=None,
        generation=0,
        confidence=1.0,
        certainty=Certainty.CERTAIN,
    )


def _unreachable_addressing() -> AddressingInfo:
    return AddressingInfo(
        title=AddressTitle.UNKNOWN,
        explanation=UNKNOWN_EXPLANATION,
        greeting_examples=(),
        lineage=None,
        generation=0,
        confidence=0.0,
        certainty=Certainty.UNKNOWN,
    )


def _annotate(resolution: Resolution, lineage, generation: int) -> AddressingInfo:
    return AddressingInfo(
        title=resolution.title,
        explanation=resolution.explanation,
        greeting_examples=greeting_examples(resolution.title),
        lineage=lineage,
        generation=generation,
        confidence=confidence(resolution.title, resolution.certainty),
        certainty=resolution.certainty,
    )


def addressing_for_path(graph: RelationGraph, path: list[str] | None, reference_id: str) -> AddressingInfo:
    """Resolve an already-found relation path from `reference_id`."""
    if path is None:
        return _unreachable_addressing()
    if not path:
        return _self_addressing()

    classification = classify_path(graph, path, reference_id)
    resolution = resolve_title(graph, classification)
    return _annotate(resolution, classification.lineage, classification.generation)


def calculate_addressing(
    persons: Iterable[Person],
    relations: Iterable[Relation],
    reference_id: str,
    target_id: str,
    graph: RelationGraph | None = None,
    cluster_map: dict[str, list[str]] | None = None,
) -> AddressingInfo:
    """
    Work out how the reference person addresses the target person.

    Pass a prebuilt `graph` (and `cluster_map`) to skip rebuilding them for
    every query against the same snapshot. Clusters do not affect the title.
    """
    if reference_id == target_id:
        return _self_addressing()
    if graph is None:
        graph = build_graph(persons, relations)

    path = find_relation_path(graph, reference_id, target_id)
    return addressing_for_path(graph, path, reference_id)


class AddressingEngine:
    """Caches the derived structures of one snapshot for repeated queries."""

    def __init__(
        self,
        persons: Iterable[Person],
        relations: Iterable[Relation],
        reference_id: str,
        graph: RelationGraph | None = None,
        cluster_map: dict[str, list[str]] | None = None,
    ):
        self.persons = list(persons)
        self.relations = list(relations)
        self.reference_id = reference_id
        self.graph = graph if graph is not None else build_graph(self.persons, self.relations)
        self.cluster_map = (
            cluster_map if cluster_map is not None else build_cluster_map(self.persons, self.relations)
        )

    def addressing(self, target_id: str) -> AddressingInfo:
        return calculate_addressing(
            self.persons,
            self.relations,
            self.reference_id,
            target_id,
            graph=self.graph,
            cluster_map=self.cluster_map,
        )

    def relation_path(self, from_id: str, to_id: str) -> list[str] | None:
        return find_relation_path(self.graph, from_id, to_id)

    def family_member(self, person: Person) -> FamilyMember:
        path = self.relation_path(self.reference_id, person.id)
        addressing = addressing_for_path(self.graph, path, self.reference_id)

        direct = None
        if path is not None and len(path) == 1:
            direct = self.graph.relations[path[0]]

        return FamilyMember(
            person=person,
            addressing=addressing,
            relation_path=path,
            direct_relation=direct.type if direct else None,
            direct_relation_label=direct.label if direct else None,
            relation_family_id=direct.family_id if direct else None,
            families=RelationGraph.clusters_of(person.id, self.cluster_map),
        )

    def family_members(self) -> list[FamilyMember]:
        """Every person in the snapshot, addressed from the reference person."""
        members = [self.family_member(p) for p in self.persons]
        unresolved = sum(1 for m in members if m.addressing.title == AddressTitle.UNKNOWN)
        logger.debug(f"Addressed {len(members)} people from {self.reference_id}, {unresolved} unresolved")
        return members


def family_members(
    persons: Iterable[Person], relations: Iterable[Relation], reference_id: str | None
) -> list[FamilyMember]:
    if not reference_id:
        return []
    return AddressingEngine(persons, relations, reference_id).family_members()


def search_members(members: Sequence[FamilyMember], query: str) -> list[FamilyMember]:
    """Case-insensitive match on name, title, explanation and notes."""
    needle = query.strip().lower()
    if not needle:
        return list(members)

    def matches(member: FamilyMember) -> bool:
        title = member.addressing.title
        fields = [
            member.person.name,
            title.value if isinstance(title, AddressTitle) else title,
            member.addressing.explanation,
            member.person.notes or "",
        ]
        return any(needle in f.lower() for f in fields)

    return [m for m in members if matches(m)]
