from builders import link, parent, person

from danhxung.graph import build_cluster_map, build_graph
from danhxung.models import Gender, RelationType


def test_explicit_direction_links_parent_and_child():
    g = build_graph([person("A"), person("B")], [parent("r1", "A", "B")])
    assert g["A"].children == ["B"]
    assert g["B"].parents == ["A"]


def test_direction_inferred_from_birth_years():
    # Listed child-first, but B was born earlier
    persons = [person("A", birth_year=1990), person("B", birth_year=1960)]
    g = build_graph(persons, [parent("r1", "A", "B", explicit=False)])
    assert g["B"].children == ["A"]
    assert g["A"].parents == ["B"]


def test_direction_defaults_to_person_a_as_parent():
    g = build_graph([person("A"), person("B", birth_year=1990)], [parent("r1", "A", "B", explicit=False)])
    assert g["A"].children == ["B"]
    assert g.parent_and_child(g.relations["r1"]) == ("A", "B")


def test_child_id_alone_decides_direction():
    # Listed child-first with only childId set
    relation = link("r1", RelationType.PARENT, "U", "F", child_id="U")
    g = build_graph([person("U"), person("F")], [relation])
    assert g["F"].children == ["U"]
    assert g["U"].parents == ["F"]
    assert g.parent_and_child(relation) == ("F", "U")


def test_parent_id_alone_decides_direction():
    # Birth years point the other way; the explicit field still wins
    persons = [person("A", birth_year=1960), person("B", birth_year=1990)]
    relation = link("r1", RelationType.PARENT, "A", "B", parent_id="B")
    g = build_graph(persons, [relation])
    assert g.parent_and_child(relation) == ("B", "A")


def test_spouses_are_linked_both_ways():
    g = build_graph([person("A"), person("B")], [link("r1", RelationType.SPOUSE, "A", "B")])
    assert g["A"].spouses == ["B"]
    assert g["B"].spouses == ["A"]


def test_sibling_and_custom_only_traversable():
    relations = [
        link("r1", RelationType.SIBLING, "A", "B"),
        link("r2", RelationType.CUSTOM, "A", "C", label="Bạn"),
    ]
    g = build_graph([person("A"), person("B"), person("C")], relations)
    assert g["A"].parents == g["A"].children == g["A"].spouses == []
    assert set(g.G.adj["A"]) == {"B", "C"}


def test_dangling_reference_becomes_isolated_node():
    relations = [parent("r1", "A", "ghost"), link("r2", RelationType.SPOUSE, "ghost", "A")]
    g = build_graph([person("A")], relations)
    assert g["ghost"].parents == [] and g["ghost"].spouses == []
    assert g["A"].children == [] and g["A"].spouses == []
    assert "ghost" not in g


def test_lineage_digraph_points_parent_to_child(family_graph):
    D = family_graph.lineage_digraph()
    assert D.edges["GP", "F"]["relationship_type"] == "PARENT_OF"
    assert D.edges["C", "Q"]["relationship_type"] == "PARENT_OF"  # inferred from birth years
    assert D.has_edge("F", "M")
    assert D.nodes["F"]["person_name"] == "Nguyễn Văn Bình"


def test_cluster_map_merges_person_and_relation_tags(family):
    clusters = build_cluster_map(family.persons, family.relations)
    assert clusters == {"nha-noi": ["F", "U", "C"], "nha-ngoai": ["M", "D"]}


def test_cluster_map_deduplicates_members():
    persons = [person("A", families=("f1",)), person("B", Gender.FEMALE)]
    relations = [link("r1", RelationType.SPOUSE, "A", "B", family_id="f1")]
    assert build_cluster_map(persons, relations) == {"f1": ["A", "B"]}


def test_lineage_digraph_keeps_parent_edge_over_spouse_edge():
    relations = [parent("r1", "A", "B"), link("r2", RelationType.SPOUSE, "A", "B")]
    D = build_graph([person("A"), person("B")], relations).lineage_digraph()
    assert D.edges["A", "B"]["relationship_type"] == "PARENT_OF"
