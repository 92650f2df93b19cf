"""Resolve a classified relation path into a Vietnamese address title."""

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from danhxung.graph import RelationGraph
from danhxung.models import AddressTitle, Certainty, Gender, Lineage, Person, Relation, RelationType
from danhxung.steps import Classification

PARENT = RelationType.PARENT
SPOUSE = RelationType.SPOUSE
SIBLING = RelationType.SIBLING

UNKNOWN_EXPLANATION = "Không xác định được quan hệ"


@dataclass(frozen=True)
class Resolution:
    title: AddressTitle | str
    explanation: str
    certainty: Certainty = Certainty.INFERRED


def as_title(label: str) -> AddressTitle | str:
    """Return the vocabulary member spelled `label`, or `label` itself."""
    try:
        return AddressTitle(label)
    except ValueError:
        return label


def _stored_label(relation: Relation, target_id: str) -> Resolution | None:
    if not relation.label:
        return None
    # A label anchored to someone else describes the other endpoint
    if relation.subject_id and relation.subject_id != target_id:
        return None
    certainty = Certainty.UNCERTAIN if "?" in relation.label else Certainty.INFERRED
    return Resolution(as_title(relation.label), f"Quan hệ trực tiếp: {relation.label}", certainty)


def _direct(step_type: RelationType, generation: int, gender: Gender) -> Resolution | None:
    if step_type == PARENT:
        if generation > 0:
            if gender == Gender.MALE:
                return Resolution(AddressTitle.BA, "Cha của bạn")
            return Resolution(AddressTitle.ME, "Mẹ của bạn")
        return Resolution(AddressTitle.CON, "Con của bạn")

    if step_type == SPOUSE:
        if gender == Gender.MALE:
            return Resolution(AddressTitle.ANH, "Chồng của bạn")
        return Resolution(AddressTitle.CHI, "Vợ của bạn")

    if step_type == SIBLING:
        # TODO: pick Anh/Chị/Em from Step.is_older once the product rules for seniority are settled
        return Resolution(AddressTitle.ANH, "Anh/chị/em của bạn")

    return None


def _parents_sibling(lineage: Lineage | None, gender: Gender) -> Resolution:
    if lineage == Lineage.PATERNAL:
        if gender == Gender.MALE:
            return Resolution(AddressTitle.CHU, "Em trai của Ba")
        return Resolution(AddressTitle.CO, "Em gái của Ba")
    if gender == Gender.MALE:
        return Resolution(AddressTitle.CAU, "Em trai của Mẹ")
    return Resolution(AddressTitle.DI, "Em gái của Mẹ")


def _parents_sibling_spouse(lineage: Lineage | None, gender: Gender) -> Resolution:
    if lineage == Lineage.PATERNAL:
        if gender == Gender.FEMALE:
            return Resolution(AddressTitle.THIM, "Vợ của Chú")
        return Resolution(AddressTitle.DUONG, "Chồng của Cô")
    if gender == Gender.FEMALE:
        return Resolution(AddressTitle.MO, "Vợ của Cậu")
    return Resolution(AddressTitle.DUONG, "Chồng của Dì")


def _cousin(lineage: Lineage | None, gender: Gender) -> Resolution:
    # Anh họ / Chị họ / Em họ are not told apart yet
    return Resolution(AddressTitle.ANH_HO, "Anh/chị/em họ")


def _grandchild(lineage: Lineage | None, gender: Gender) -> Resolution:
    return Resolution(AddressTitle.CHAU, "Cháu")


# (generation, exact step types or None for any, resolver); first match wins
MULTI_STEP_RULES: list[
    tuple[int, tuple[RelationType, ...] | None, Callable[[Lineage | None, Gender], Resolution]]
] = [
    (1, (PARENT, SIBLING), _parents_sibling),
    (1, (PARENT, SIBLING, SPOUSE), _parents_sibling_spouse),
    (0, (PARENT, SIBLING, PARENT), _cousin),
    (-1, None, _grandchild),
]


def resolve_title(graph: RelationGraph, classification: Classification) -> Resolution:
    """
    Turn a non-empty classified path into a title, using in order:

    1. the label stored on the last relation, when it describes the target;
    2. the single-relation rules (parent, child, spouse, sibling);
    3. the multi-step pattern table;
    4. UNKNOWN.
    """
    target: Person | None = graph.person(classification.target_id)
    gender = target.gender if target else Gender.UNKNOWN
    last = graph.relations[classification.steps[-1].relation_id]

    stored = _stored_label(last, classification.target_id)
    if stored is not None:
        return stored

    if len(classification.steps) == 1:
        direct = _direct(classification.steps[0].type, classification.generation, gender)
        if direct is not None:
            return direct

    types = classification.types
    for generation, pattern, resolver in MULTI_STEP_RULES:
        if classification.generation != generation:
            continue
        if pattern is not None and types != pattern:
            continue
        return resolver(classification.lineage, gender)

    logger.debug(
        f"No title rule for steps={[t.value for t in types]} generation={classification.generation} "
        f"lineage={classification.lineage}"
    )
    return Resolution(AddressTitle.UNKNOWN, UNKNOWN_EXPLANATION, Certainty.UNKNOWN)
