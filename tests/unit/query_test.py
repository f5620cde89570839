"""Unit tests for query forwarding."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from doclite.core.parameters import Parameters
from doclite.core.query import Query
from doclite.db import InMemoryDocumentEngine
from doclite.errors import DatabaseError, ErrorCode


@pytest.mark.asyncio
async def test_execute_forwards_string_and_parameters() -> None:
    engine = AsyncMock()
    engine.execute_query.return_value = [{"name": "Scott"}]
    params = Parameters().set_string("name", "Scott")
    query = Query(engine, "SELECT * FROM _ WHERE name = $name", database_name="testdb", parameters=params)

    rows = await query.execute()

    assert rows == [{"name": "Scott"}]
    engine.execute_query.assert_awaited_once_with(
        "testdb",
        "SELECT * FROM _ WHERE name = $name",
        {"name": {"value": "Scott", "type": "string"}},
    )


@pytest.mark.asyncio
async def test_explain_forwards_to_engine() -> None:
    engine = AsyncMock()
    engine.explain_query.return_value = "SCAN _default"
    query = Query(engine, "SELECT 1", database_name="testdb")

    assert await query.explain() == "SCAN _default"
    engine.explain_query.assert_awaited_once_with("testdb", "SELECT 1", {})


@pytest.mark.asyncio
async def test_engine_error_is_not_wrapped() -> None:
    engine = AsyncMock()
    engine.execute_query.side_effect = DatabaseError("syntax error", code=ErrorCode.INVALID_PARAMETER)

    with pytest.raises(DatabaseError, match="syntax error"):
        await Query(engine, "SELEC").execute()


def test_in_memory_engine_records_queries() -> None:
    engine = InMemoryDocumentEngine()
    query = Query(engine, "SELECT COUNT(*) FROM users", database_name="testdb")
    query.set_parameters(Parameters().set_int("n", 1))

    rows = asyncio.run(query.execute())

    assert rows == []
    assert len(engine.queries) == 1
    assert engine.queries[0].database_name == "testdb"
    assert engine.queries[0].parameters == {"n": {"value": 1, "type": "int"}}


def test_query_accessors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCLITE_DATABASE_NAME", "inventory")
    query = Query(AsyncMock(), "SELECT * FROM items")

    assert str(query) == "SELECT * FROM items"
    assert query.get_database_name() == "inventory"
    assert len(query.get_parameters()) == 0
