"""Store fixtures — one fresh store per test, shared contract run against both variants.

Invariants:
    - memory_store / json_store are isolated per test (json_store writes under tmp_path)
    - `store` is parametrized: contract tests run once per variant
"""

import pytest

from ogiri.infrastructure.json_store import JSONStore
from ogiri.infrastructure.memory_store import InMemoryStore
from ogiri.schemas.answer import Answer
from ogiri.schemas.theme import Theme


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "ogiri.json"


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def json_store(data_file):
    return JSONStore(data_file)


@pytest.fixture(params=["memory", "json"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def new_theme():
    def _make(title: str = "お題A", **fields) -> Theme:
        return Theme(title=title, **fields)
    return _make


@pytest.fixture
def new_answer():
    def _make(theme_id: str, content: str = "回答1", **fields) -> Answer:
        return Answer(theme_id=theme_id, content=content, **fields)
    return _make
