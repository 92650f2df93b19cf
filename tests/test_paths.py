import random

import networkx as nx
import pytest
from builders import link, parent, person

from danhxung.graph import build_graph
from danhxung.models import RelationType
from danhxung.paths import describe_path, find_relation_path


def test_same_person_gives_empty_path(family_graph):
    assert find_relation_path(family_graph, "U", "U") == []


def test_unreachable_gives_none(family_graph):
    assert find_relation_path(family_graph, "U", "Z") is None


def test_dangling_id_never_appears(family_graph):
    assert find_relation_path(family_graph, "U", "ghost") is None
    for target in family_graph.persons:
        path = find_relation_path(family_graph, "U", target) or []
        assert "r16" not in path


@pytest.mark.parametrize(
    "target, expected",
    [
        ("F", ["r1"]),
        ("C", ["r1", "r4"]),
        ("T", ["r1", "r4", "r5"]),
        ("MO", ["r2", "r8", "r15"]),
        ("Q", ["r1", "r4", "r9"]),
        ("N", ["r10", "r13"]),
    ],
)
def test_family_paths(family_graph, target, expected):
    assert find_relation_path(family_graph, "U", target) == expected


def test_earliest_relation_wins_among_equal_paths():
    # A-B-D and A-C-D are equally short; r1 comes first
    relations = [
        link("r1", RelationType.SIBLING, "A", "B"),
        link("r2", RelationType.SIBLING, "A", "C"),
        link("r3", RelationType.SIBLING, "C", "D"),
        link("r4", RelationType.SIBLING, "B", "D"),
    ]
    g = build_graph([person(p) for p in "ABCD"], relations)
    assert find_relation_path(g, "A", "D") == ["r1", "r4"]


def test_parallel_relations_use_first_inserted():
    relations = [
        link("r1", RelationType.CUSTOM, "A", "B", label="Bạn"),
        link("r2", RelationType.SIBLING, "A", "B"),
    ]
    g = build_graph([person("A"), person("B")], relations)
    assert find_relation_path(g, "A", "B") == ["r1"]


def test_cycle_terminates():
    # A parent of B and B parent of A, entered by mistake
    relations = [parent("r1", "A", "B"), parent("r2", "B", "A"), parent("r3", "B", "C")]
    g = build_graph([person(p) for p in "ABCD"], relations)
    assert find_relation_path(g, "A", "C") == ["r1", "r3"]
    assert find_relation_path(g, "A", "D") is None


def test_shortest_length_matches_networkx_on_random_graphs():
    rng = random.Random(7)
    for _ in range(25):
        ids = [f"P{i}" for i in range(15)]
        types = list(RelationType)
        relations = []
        for n in range(rng.randint(5, 30)):
            a, b = rng.sample(ids, 2)
            relations.append(link(f"r{n}", rng.choice(types), a, b))
        g = build_graph([person(p) for p in ids], relations)

        reference = nx.Graph()
        reference.add_nodes_from(ids)
        reference.add_edges_from((r.person_a_id, r.person_b_id) for r in relations)

        for target in ids:
            path = find_relation_path(g, "P0", target)
            if nx.has_path(reference, "P0", target):
                assert len(path) == nx.shortest_path_length(reference, "P0", target)
            else:
                assert path is None


def test_describe_path(family_graph):
    hops = describe_path(family_graph, ["r1", "r4", "r5"], "U")
    assert hops == [
        ("U", RelationType.PARENT, "F"),
        ("F", RelationType.SIBLING, "C"),
        ("C", RelationType.SPOUSE, "T"),
    ]
