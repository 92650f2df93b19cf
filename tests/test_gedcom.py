import pytest

from danhxung.addressing import calculate_addressing
from danhxung.gedcom import extract_person_id, parse_year, read_gedcom
from danhxung.models import AddressTitle, Gender, Lineage, RelationType

GEDCOM = """\
0 HEAD
1 SOUR TEST
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @I1@ INDI
1 NAME Văn Bình /Nguyễn/
1 SEX M
1 BIRT
2 DATE 1965
0 @I2@ INDI
1 NAME Thị Cúc /Trần/
1 SEX F
1 BIRT
2 DATE ABT 1968
0 @I3@ INDI
1 NAME Văn An /Nguyễn/
1 SEX M
1 BIRT
2 DATE 12 MAR 1995
0 @I4@ INDI
1 NAME Văn Dũng /Nguyễn/
1 SEX M
0 @I5@ INDI
1 NAME Văn Giáp /Nguyễn/
1 SEX M
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
0 @F2@ FAM
1 HUSB @I5@
1 CHIL @I1@
1 CHIL @I4@
0 TRLR
"""


@pytest.fixture()
def gedcom_file(tmp_path):
    path = tmp_path / "family.ged"
    path.write_text(GEDCOM, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "raw, year",
    [
        ("25 NOV 1954", 1954),
        ("ABOUT 1905", 1905),
        ("(01-27-1920)", 1920),
        ("(Oct.12,1929)", 1929),
        ("(1789?)", 1789),
        ("(About:1746-00-00)", 1746),
        ("BET 1850 AND 1860", 1850),
        ("unknown", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_year(raw, year):
    assert parse_year(raw) == year


def test_extract_person_id():
    assert extract_person_id("@I_347421849@") == "I347421849"
    assert extract_person_id("@F12@") == "F12"
    with pytest.raises(ValueError):
        extract_person_id("@ABC@")


def test_read_gedcom(gedcom_file):
    tree = read_gedcom(gedcom_file)
    persons = {p.id: p for p in tree.persons}

    assert set(persons) == {"I1", "I2", "I3", "I4", "I5"}
    assert tree.user_id == "I1"
    assert persons["I2"].gender == Gender.FEMALE
    assert persons["I2"].birth_year == 1968
    assert persons["I3"].birth_year == 1995
    assert persons["I4"].birth_year is None

    kinds = [(r.type, r.person_a_id, r.person_b_id, r.family_id) for r in tree.relations]
    assert kinds == [
        (RelationType.SPOUSE, "I1", "I2", "F1"),
        (RelationType.PARENT, "I1", "I3", "F1"),
        (RelationType.PARENT, "I2", "I3", "F1"),
        (RelationType.PARENT, "I5", "I1", "F2"),
        (RelationType.PARENT, "I5", "I4", "F2"),
        (RelationType.SIBLING, "I1", "I4", "F2"),
    ]
    assert all(r.parent_id == r.person_a_id for r in tree.relations if r.type == RelationType.PARENT)


def test_imported_tree_resolves_titles(gedcom_file):
    tree = read_gedcom(gedcom_file, user_id="I3")
    info = calculate_addressing(tree.persons, tree.relations, tree.user_id, "I4")
    assert info.title == AddressTitle.CHU
    assert info.lineage == Lineage.PATERNAL
