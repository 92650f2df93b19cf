"""Data classes and closed vocabularies for family graph entities."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"


class RelationType(str, Enum):
    PARENT = "parent"
    SPOUSE = "spouse"
    SIBLING = "sibling"
    CUSTOM = "custom"  # free-form, described by the relation's label


class Lineage(str, Enum):
    PATERNAL = "paternal"  # nội
    MATERNAL = "maternal"  # ngoại


class AddressTitle(str, Enum):
    # Parents and parents' siblings
    BA = "Ba"
    ME = "Mẹ"
    BAC_TRAI = "Bác trai"
    BAC_GAI = "Bác gái"
    CHU = "Chú"
    CO = "Cô"
    CAU = "Cậu"
    DI = "Dì"

    # Spouses of parents' siblings
    THIM = "Thím"
    DUONG = "Dượng"
    MO = "Mợ"

    # Same generation
    ANH_HO = "Anh họ"
    CHI_HO = "Chị họ"
    EM_HO = "Em họ"
    ANH = "Anh"
    CHI = "Chị"
    EM = "Em"

    # Younger generations
    CON = "Con"
    CHAU = "Cháu"

    # Grandparents
    ONG_NOI = "Ông nội"
    BA_NOI = "Bà nội"
    ONG_NGOAI = "Ông ngoại"
    BA_NGOAI = "Bà ngoại"

    SELF = "Bạn"
    UNKNOWN = "?"


class Certainty(str, Enum):
    """How sure a resolution is. Mapped to a numeric confidence at the boundary."""

    CERTAIN = "certain"
    INFERRED = "inferred"
    UNCERTAIN = "uncertain"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    gender: Gender = Gender.UNKNOWN
    birth_year: int | None = None
    death_year: int | None = None
    families: tuple[str, ...] = ()  # family cluster ids
    notes: str | None = None


@dataclass(frozen=True)
class Relation:
    id: str
    type: RelationType
    person_a_id: str
    person_b_id: str
    parent_id: str | None = None  # explicit direction for PARENT relations
    child_id: str | None = None
    subject_id: str | None = None  # person the label describes
    label: str | None = None  # stored address title, overrides inference
    family_id: str | None = None
    notes: str | None = None

    def other(self, person_id: str) -> str:
        """Return the endpoint that isn't `person_id`."""
        return self.person_b_id if self.person_a_id == person_id else self.person_a_id


@dataclass(frozen=True)
class AddressingInfo:
    title: AddressTitle | str
    explanation: str
    greeting_examples: tuple[str, ...]
    lineage: Lineage | None
    generation: int  # > 0 ancestor-ward, < 0 descendant-ward
    confidence: float
    certainty: Certainty = Certainty.INFERRED


@dataclass(frozen=True)
class FamilyMember:
    person: Person
    addressing: AddressingInfo
    relation_path: list[str] | None
    direct_relation: RelationType | None = None
    direct_relation_label: str | None = None
    relation_family_id: str | None = None
    families: list[str] = field(default_factory=list)
