from pathlib import Path

import pytest

from danhxung import snapshot as snapshot_io
from danhxung.graph import build_graph

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def family_path() -> Path:
    return FIXTURES / "family.json"


@pytest.fixture()
def family(family_path):
    return snapshot_io.load(family_path)


@pytest.fixture()
def family_graph(family):
    return build_graph(family.persons, family.relations)
