"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from doclite.core.collection import Collection
from doclite.db import InMemoryDocumentEngine

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def in_memory_engine() -> InMemoryDocumentEngine:
    return InMemoryDocumentEngine()


@pytest.fixture
def collection(in_memory_engine: InMemoryDocumentEngine) -> Collection:
    return Collection(in_memory_engine, name="users", scope_name="people", database_name="testdb")
