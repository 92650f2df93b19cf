"""JSON snapshot of a family tree: persons, relations and the reference person."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from danhxung.config import Settings, settings as default_settings
from danhxung.models import Gender, Person, Relation, RelationType


class SnapshotError(ValueError):
    """Raised when a snapshot payload is structurally unusable."""


# Python attribute -> wire key
PERSON_KEYS = {
    "id": "id",
    "name": "name",
    "gender": "gender",
    "birth_year": "birthYear",
    "death_year": "deathYear",
    "families": "families",
    "notes": "notes",
}

RELATION_KEYS = {
    "id": "id",
    "type": "type",
    "person_a_id": "personAId",
    "person_b_id": "personBId",
    "parent_id": "parentId",
    "child_id": "childId",
    "subject_id": "subjectId",
    "label": "label",
    "family_id": "familyId",
    "notes": "notes",
}
_RELATION_REQUIRED = {"id", "type", "person_a_id", "person_b_id"}


@dataclass
class Snapshot:
    persons: list[Person]
    relations: list[Relation]
    user_id: str | None = None
    version: str = "1.0.0"
    export_date: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "exportDate": self.export_date,
            "persons": [person_to_dict(p) for p in self.persons],
            "relations": [relation_to_dict(r) for r in self.relations],
            "userId": self.user_id,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Snapshot":
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object")
        persons = data.get("persons")
        relations = data.get("relations")
        if not isinstance(persons, list):
            raise SnapshotError("Invalid snapshot: missing person list")
        if not isinstance(relations, list):
            raise SnapshotError("Invalid snapshot: missing relation list")

        return cls(
            persons=[person_from_dict(p) for p in persons],
            relations=[relation_from_dict(r) for r in relations],
            user_id=data.get("userId"),
            version=data.get("version", "1.0.0"),
            export_date=data.get("exportDate"),
            metadata=dict(data.get("metadata") or {}),
        )


def _require_id(record: Any, kind: str) -> str:
    if not isinstance(record, dict) or not record.get("id"):
        raise SnapshotError(f"Invalid {kind} record: {record!r}")
    return str(record["id"])


def _year(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def person_to_dict(p: Person) -> dict[str, Any]:
    values = {
        "id": p.id,
        "name": p.name,
        "gender": p.gender.value,
        "birth_year": p.birth_year,
        "death_year": p.death_year,
        "families": list(p.families) or None,
        "notes": p.notes,
    }
    return {PERSON_KEYS[k]: v for k, v in values.items() if v is not None}


def person_from_dict(data: Any) -> Person:
    person_id = _require_id(data, "person")
    try:
        gender = Gender(data.get("gender"))
    except ValueError:
        gender = Gender.UNKNOWN
    return Person(
        id=person_id,
        name=data.get("name") or "",
        gender=gender,
        birth_year=_year(data.get("birthYear")),
        death_year=_year(data.get("deathYear")),
        families=tuple(data.get("families") or ()),
        notes=data.get("notes"),
    )


def relation_to_dict(r: Relation) -> dict[str, Any]:
    values = {attr: getattr(r, attr) for attr in RELATION_KEYS}
    values["type"] = r.type.value
    return {RELATION_KEYS[k]: v for k, v in values.items() if v is not None}


def relation_from_dict(data: Any) -> Relation:
    relation_id = _require_id(data, "relation")
    try:
        relation_type = RelationType(data.get("type"))
    except ValueError as e:
        raise SnapshotError(f"Relation {relation_id} has unknown type {data.get('type')!r}") from e
    return Relation(
        id=relation_id,
        type=relation_type,
        person_a_id=str(data.get("personAId", "")),
        person_b_id=str(data.get("personBId", "")),
        **{attr: data.get(key) for attr, key in RELATION_KEYS.items() if attr not in _RELATION_REQUIRED},
    )


def export_snapshot(
    persons: list[Person],
    relations: list[Relation],
    user_id: str | None,
    config: Settings | None = None,
) -> Snapshot:
    """Stamp a snapshot with the export version, current time and app metadata."""
    config = config or default_settings
    return Snapshot(
        persons=list(persons),
        relations=list(relations),
        user_id=user_id,
        version=config.export_version,
        export_date=datetime.now(timezone.utc).isoformat(),
        metadata={"appName": config.app_name, "appVersion": config.app_version},
    )


def dumps(snapshot: Snapshot) -> str:
    return json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)


def loads(text: str) -> Snapshot:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Snapshot is not valid JSON: {e}") from e
    return Snapshot.from_dict(data)


def save(snapshot: Snapshot, path: Path) -> None:
    Path(path).write_text(dumps(snapshot), encoding="utf-8")


def load(path: Path) -> Snapshot:
    return loads(Path(path).read_text(encoding="utf-8"))
