"""Vietnamese kinship addressing engine."""

from loguru import logger

from danhxung.addressing import AddressingEngine, calculate_addressing, family_members, search_members
from danhxung.graph import build_cluster_map, build_graph
from danhxung.models import AddressingInfo, AddressTitle, Gender, Lineage, Person, Relation, RelationType
from danhxung.paths import find_relation_path

logger.disable("danhxung")

__all__ = [
    "AddressTitle",
    "AddressingEngine",
    "AddressingInfo",
    "Gender",
    "Lineage",
    "Person",
    "Relation",
    "RelationType",
    "build_cluster_map",
    "build_graph",
    "calculate_addressing",
    "family_members",
    "find_relation_path",
    "search_members",
]
