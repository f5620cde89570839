import asyncio

import pytest

from doclite.db import InMemoryDocumentEngine, compute_digest, make_revision_id
from doclite.errors import DatabaseError, ErrorCode
from doclite.models import CollectionArgs, ConcurrencyControl

USERS = CollectionArgs(name="testdb", scope_name="people", collection_name="users")
ORDERS = CollectionArgs(name="testdb", scope_name="sales", collection_name="orders")


def test_in_memory_engine_assigns_increasing_sequences(in_memory_engine: InMemoryDocumentEngine) -> None:
    first = asyncio.run(in_memory_engine.save(USERS, "a", {"n": 1}))
    second = asyncio.run(in_memory_engine.save(ORDERS, "b", {"n": 2}))
    third = asyncio.run(in_memory_engine.save(USERS, "a", {"n": 3}))

    assert [first.sequence, second.sequence, third.sequence] == [1, 2, 3]
    assert first.revision_id.startswith("1-")
    assert third.revision_id.startswith("2-")


def test_in_memory_engine_separates_collections(in_memory_engine: InMemoryDocumentEngine) -> None:
    asyncio.run(in_memory_engine.save(USERS, "a", {"n": 1}))

    assert asyncio.run(in_memory_engine.get_document(ORDERS, "a")) is None
    assert asyncio.run(in_memory_engine.get_count(USERS)) == 1
    assert asyncio.run(in_memory_engine.get_count(ORDERS)) == 0


def test_in_memory_engine_copies_on_save_and_read(in_memory_engine: InMemoryDocumentEngine) -> None:
    shared = {"city": "Boston"}
    data = {"home": shared, "work": shared}
    asyncio.run(in_memory_engine.save(USERS, "a", data))
    shared["city"] = "Paris"

    record = asyncio.run(in_memory_engine.get_document(USERS, "a"))
    assert record is not None
    assert record.data == {"home": {"city": "Boston"}, "work": {"city": "Boston"}}
    assert record.data["home"] is not record.data["work"]

    record.data["home"]["city"] = "Rome"
    again = asyncio.run(in_memory_engine.get_document(USERS, "a"))
    assert again is not None
    assert again.data["home"] == {"city": "Boston"}


def test_in_memory_engine_moves_blobs_to_content_store(in_memory_engine: InMemoryDocumentEngine) -> None:
    tagged = {"_type": "blob", "data": {"contentType": "text/plain", "data": [104, 105]}}
    asyncio.run(in_memory_engine.save(USERS, "a", {"files": [tagged], "cover": tagged}))

    record = asyncio.run(in_memory_engine.get_document(USERS, "a"))
    assert record is not None
    metadata = {"@type": "blob", "content_type": "text/plain", "digest": compute_digest(b"hi"), "length": 2}
    assert record.data == {"files": [metadata], "cover": metadata}
    assert in_memory_engine.blobs == {compute_digest(b"hi"): b"hi"}
    assert asyncio.run(in_memory_engine.get_blob_content(USERS, "a", "cover")) == b"hi"


def test_digest_and_revision_formats() -> None:
    assert compute_digest(b"") == "sha1-2jmj7l5rSw0yVb/vlWAYkK/YBwk="
    assert make_revision_id(4, {"a": 1}) == make_revision_id(4, {"a": 1})
    assert make_revision_id(4, {"a": 1}) != make_revision_id(4, {"a": 2})
    assert make_revision_id(4, {"a": 1}).startswith("4-")


def test_in_memory_engine_conflict_on_stale_delete(in_memory_engine: InMemoryDocumentEngine) -> None:
    saved = asyncio.run(in_memory_engine.save(USERS, "a", {}))
    asyncio.run(in_memory_engine.save(USERS, "a", {"v": 2}))

    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(
            in_memory_engine.delete_document(USERS, "a", ConcurrencyControl.FAIL_ON_CONFLICT, saved.sequence)
        )
    assert exc_info.value.code == ErrorCode.CONFLICT

    asyncio.run(in_memory_engine.delete_document(USERS, "a", ConcurrencyControl.LAST_WRITE_WINS, saved.sequence))
    assert asyncio.run(in_memory_engine.get_document(USERS, "a")) is None


def test_fail_on_conflict_allows_new_documents(in_memory_engine: InMemoryDocumentEngine) -> None:
    result = asyncio.run(in_memory_engine.save(USERS, "fresh", {}, ConcurrencyControl.FAIL_ON_CONFLICT, 0))

    assert result.sequence == 1


@pytest.mark.parametrize("operation", ["delete_document", "purge_document"])
def test_in_memory_engine_missing_document_raises(in_memory_engine: InMemoryDocumentEngine, operation: str) -> None:
    with pytest.raises(DatabaseError) as exc_info:
        asyncio.run(getattr(in_memory_engine, operation)(USERS, "ghost"))

    assert exc_info.value.code == ErrorCode.NOT_FOUND


def test_in_memory_engine_expiration_requires_document(in_memory_engine: InMemoryDocumentEngine) -> None:
    with pytest.raises(DatabaseError):
        asyncio.run(in_memory_engine.set_document_expiration(USERS, "ghost", "2030-01-01T00:00:00.000Z"))


def test_purge_clears_expiration(in_memory_engine: InMemoryDocumentEngine) -> None:
    asyncio.run(in_memory_engine.save(USERS, "a", {}))
    asyncio.run(in_memory_engine.set_document_expiration(USERS, "a", "2030-01-01T00:00:00.000Z"))

    asyncio.run(in_memory_engine.purge_document(USERS, "a"))

    assert asyncio.run(in_memory_engine.get_document_expiration(USERS, "a")) is None


def test_delete_clears_expiration(in_memory_engine: InMemoryDocumentEngine) -> None:
    asyncio.run(in_memory_engine.save(USERS, "a", {}))
    asyncio.run(in_memory_engine.set_document_expiration(USERS, "a", "2030-01-01T00:00:00.000Z"))

    asyncio.run(in_memory_engine.delete_document(USERS, "a"))
    asyncio.run(in_memory_engine.save(USERS, "a", {}))

    assert asyncio.run(in_memory_engine.get_document_expiration(USERS, "a")) is None
    assert in_memory_engine.expirations[("testdb", "people", "users")] == {}


def test_in_memory_engine_replaces_index_with_same_name(in_memory_engine: InMemoryDocumentEngine) -> None:
    asyncio.run(in_memory_engine.create_index(USERS, "idx", {"type": "value", "items": [[".a"]]}))
    asyncio.run(in_memory_engine.create_index(USERS, "idx", {"type": "value", "items": [[".b"]]}))
    asyncio.run(in_memory_engine.create_index(USERS, "another", {"type": "value", "items": [[".c"]]}))

    assert asyncio.run(in_memory_engine.get_indexes(USERS)) == ["another", "idx"]
    assert in_memory_engine.indexes[("testdb", "people", "users")]["idx"]["items"] == [[".b"]]
