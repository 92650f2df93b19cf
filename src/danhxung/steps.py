"""Classify a relation path into generation offset, lineage and step types."""

from dataclasses import dataclass

from danhxung.graph import RelationGraph
from danhxung.models import Gender, Lineage, RelationType


@dataclass(frozen=True)
class Step:
    relation_id: str
    type: RelationType
    from_id: str
    to_id: str
    is_older: bool | None = None  # SIBLING only: True if to_id was born before from_id


@dataclass(frozen=True)
class Classification:
    steps: tuple[Step, ...]
    generation: int
    lineage: Lineage | None
    target_id: str

    @property
    def types(self) -> tuple[RelationType, ...]:
        return tuple(s.type for s in self.steps)


def classify_path(graph: RelationGraph, path: list[str], reference_id: str) -> Classification:
    """
    Walk `path` from `reference_id`, one relation at a time.

    Going from child to parent adds one generation, parent to child removes
    one. Lineage is only decided when the very first step goes up to a
    parent: paternal through a father, maternal otherwise.
    """
    steps: list[Step] = []
    generation = 0
    lineage: Lineage | None = None
    current_id = reference_id

    for i, relation_id in enumerate(path):
        relation = graph.relations[relation_id]
        next_id = relation.other(current_id)
        is_older = None

        if relation.type == RelationType.PARENT:
            _, child_id = graph.parent_and_child(relation)
            going_up = child_id == current_id
            generation += 1 if going_up else -1

            if i == 0 and going_up:
                parent = graph.person(next_id)
                if parent is not None:
                    lineage = Lineage.PATERNAL if parent.gender == Gender.MALE else Lineage.MATERNAL

        elif relation.type == RelationType.SIBLING:
            current = graph.person(current_id)
            nxt = graph.person(next_id)
            if current and nxt and current.birth_year is not None and nxt.birth_year is not None:
                is_older = nxt.birth_year < current.birth_year

        steps.append(Step(relation_id, relation.type, current_id, next_id, is_older))
        current_id = next_id

    return Classification(tuple(steps), generation, lineage, current_id)
