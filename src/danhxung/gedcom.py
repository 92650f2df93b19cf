"""GEDCOM import: turn a .ged file into a family tree snapshot."""

from itertools import combinations
from pathlib import Path
import re

from ged4py import GedcomReader
from loguru import logger

from danhxung.models import Gender, Person, Relation, RelationType
from danhxung.snapshot import Snapshot

SEX_MAP = {"M": Gender.MALE, "F": Gender.FEMALE}


def extract_person_id(xref_id: str) -> str:
    """Turn a GEDCOM xref_id like '@I_347421849@' or 'I674624289' into 'I347421849'."""
    # Keep the record letter, drop @ symbols and separators
    digits = re.sub(r"[^0-9]", "", xref_id)
    if not digits:
        raise ValueError(f"No numeric ID found in: {xref_id}")
    prefix = re.sub(r"[^A-Za-z]", "", xref_id)[:1].upper() or "I"
    return f"{prefix}{digits}"


def parse_year(date_str: str | None) -> int | None:
    """
    Pull the year out of a GEDCOM date string.
    Returns None if no plausible year can be found.

    Handles formats like:
    - "25 NOV 1954"
    - "ABOUT 1905"
    - "(01-27-1920)"
    - "(Oct.12,1929)"
    - "(1789?)"
    - "(About:1746-00-00)"
    - "BET 1850 AND 1860" (first year wins)
    """
    if not date_str:
        return None

    s = date_str.strip().strip("()").rstrip("?")
    # Remove qualifiers (ABT, ABOUT, BEF, AFT, EST, CAL, AROUND, etc.) - with optional colon
    s = re.sub(
        r"^(ABT\.?|ABOUT|BEF\.?|BEFORE|AFT\.?|AFTER|EST\.?|CAL\.?|FROM|TO|BET\.?|CIRCA|CA\.?|AROUND):?\s*",
        "",
        s,
        flags=re.IGNORECASE,
    )

    match = re.search(r"(?<!\d)(\d{4})(?!\d)", s)
    if match:
        return int(match.group(1))
    return None


def extract_name(indi) -> str:
    """Extract the full name from an individual record."""
    name_rec = indi.sub_tag("NAME")
    if name_rec is None or name_rec.value is None:
        return "Unknown"

    name_value = name_rec.value
    # ged4py returns NAME as tuple: (given, surname, suffix)
    if isinstance(name_value, tuple):
        parts = [p for p in name_value if p]
        return " ".join(parts) if parts else "Unknown"

    # Fallback: string format "Given /Surname/"
    return str(name_value).replace("/", "").strip() or "Unknown"


def extract_year(indi, tag: str) -> int | None:
    """Extract the year of an event tag (BIRT, DEAT)."""
    event = indi.sub_tag(tag)
    if event is None:
        return None
    date_rec = event.sub_tag("DATE")
    # ged4py may return DateValue objects
    if date_rec and date_rec.value:
        return parse_year(str(date_rec.value))
    return None


def extract_gender(indi) -> Gender:
    sex_rec = indi.sub_tag("SEX")
    return SEX_MAP.get(sex_rec.value if sex_rec else None, Gender.UNKNOWN)


def read_gedcom(filepath: Path, user_id: str | None = None) -> Snapshot:
    """
    Extract persons and relations from a GEDCOM file.

    Each FAM record yields a spouse relation, explicit parent -> child
    relations, and sibling relations between its children, all tagged with
    the family's id. Ignores non-standard Ancestry-specific tags.
    """
    reader = GedcomReader(str(filepath))
    persons: list[Person] = []
    relations: list[Relation] = []

    def add(relation_type: RelationType, a: str, b: str, family_id: str, **direction) -> None:
        relations.append(
            Relation(
                id=f"R{len(relations) + 1}",
                type=relation_type,
                person_a_id=a,
                person_b_id=b,
                family_id=family_id,
                **direction,
            )
        )

    # First pass: extract all individuals
    for rec in reader.records0("INDI"):
        if rec.xref_id is None:
            continue
        persons.append(
            Person(
                id=extract_person_id(rec.xref_id),
                name=extract_name(rec),
                gender=extract_gender(rec),
                birth_year=extract_year(rec, "BIRT"),
                death_year=extract_year(rec, "DEAT"),
            )
        )

    # Second pass: family records
    for rec in reader.records0("FAM"):
        if rec.xref_id is None:
            continue
        family_id = extract_person_id(rec.xref_id)

        husb = rec.sub_tag("HUSB")
        wife = rec.sub_tag("WIFE")
        husb_id = extract_person_id(husb.xref_id) if husb and husb.xref_id else None
        wife_id = extract_person_id(wife.xref_id) if wife and wife.xref_id else None
        child_ids = [extract_person_id(c.xref_id) for c in rec.sub_tags("CHIL") if c.xref_id]

        if husb_id and wife_id:
            add(RelationType.SPOUSE, husb_id, wife_id, family_id)

        for child_id in child_ids:
            for parent_id in (husb_id, wife_id):
                if parent_id:
                    add(RelationType.PARENT, parent_id, child_id, family_id, parent_id=parent_id, child_id=child_id)

        for a, b in combinations(child_ids, 2):
            add(RelationType.SIBLING, a, b, family_id)

    logger.info(f"Read {len(persons)} persons and {len(relations)} relations from {filepath}")

    if user_id is None and persons:
        user_id = persons[0].id
    return Snapshot(persons=persons, relations=relations, user_id=user_id)
