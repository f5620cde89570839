import base64
import hashlib
import json
import logging
from dataclasses import dataclass
from typing import Any

from doclite.core.document import BLOB_METADATA_KEY, BLOB_TYPE, BLOB_TYPE_KEY, json_default
from doclite.core.helpers import json_copy
from doclite.errors import DatabaseError, ErrorCode
from doclite.models import CollectionArgs, ConcurrencyControl, DocumentRecord, SaveResult

logger = logging.getLogger(__name__)

CollectionKey = tuple[str, str, str]


@dataclass(frozen=True)
class InMemoryDocument:
    document_id: str
    sequence: int
    generation: int
    revision_id: str
    data: dict[str, Any]


@dataclass(frozen=True)
class InMemoryQuery:
    database_name: str
    query: str
    parameters: dict[str, Any]


def _collection_key(collection: CollectionArgs) -> CollectionKey:
    return (collection.name, collection.scope_name, collection.collection_name)


def compute_digest(content: bytes) -> str:
    return "sha1-" + base64.b64encode(hashlib.sha1(content).digest()).decode("ascii")


def make_revision_id(generation: int, data: dict[str, Any]) -> str:
    body = json.dumps(data, sort_keys=True).encode("utf-8")
    return f"{generation}-{hashlib.sha1(body).hexdigest()}"


class InMemoryDocumentEngine:
    """Document engine keeping everything in process memory.

    Saved property bags go through a JSON round trip, so containers shared
    between keys of the caller's document are stored as independent copies.
    Unsaved blobs are moved into a content store keyed by digest and replaced
    in the stored bag by their metadata.
    """

    def __init__(self) -> None:
        self.documents: dict[CollectionKey, dict[str, InMemoryDocument]] = {}
        self.blobs: dict[str, bytes] = {}
        self.indexes: dict[CollectionKey, dict[str, dict[str, Any]]] = {}
        self.expirations: dict[CollectionKey, dict[str, str]] = {}
        self.queries: list[InMemoryQuery] = []
        self._next_sequence = 1

    def _documents(self, collection: CollectionArgs) -> dict[str, InMemoryDocument]:
        return self.documents.setdefault(_collection_key(collection), {})

    def _check_conflict(
        self,
        existing: InMemoryDocument | None,
        document_id: str,
        concurrency_control: ConcurrencyControl | None,
        sequence: int,
    ) -> None:
        if concurrency_control != ConcurrencyControl.FAIL_ON_CONFLICT or existing is None:
            return
        if existing.sequence != sequence:
            raise DatabaseError(f"Document {document_id} was modified concurrently", code=ErrorCode.CONFLICT)

    def _store_blobs(self, node: Any) -> Any:
        if isinstance(node, list):
            return [self._store_blobs(item) for item in node]
        if not isinstance(node, dict):
            return node
        if node.get(BLOB_TYPE_KEY) == BLOB_TYPE and isinstance(node.get("data"), dict):
            content = bytes(node["data"].get("data") or [])
            digest = compute_digest(content)
            self.blobs[digest] = content
            return {
                BLOB_METADATA_KEY: BLOB_TYPE,
                "content_type": node["data"].get("contentType"),
                "digest": digest,
                "length": len(content),
            }
        return {key: self._store_blobs(value) for key, value in node.items()}

    async def save(
        self,
        collection: CollectionArgs,
        document_id: str,
        data: dict[str, Any],
        concurrency_control: ConcurrencyControl | None = None,
        sequence: int = 0,
    ) -> SaveResult:
        documents = self._documents(collection)
        existing = documents.get(document_id)
        self._check_conflict(existing, document_id, concurrency_control, sequence)

        stored_data = self._store_blobs(json_copy(data, default=json_default))
        generation = existing.generation + 1 if existing else 1
        record = InMemoryDocument(
            document_id=document_id,
            sequence=self._next_sequence,
            generation=generation,
            revision_id=make_revision_id(generation, stored_data),
            data=stored_data,
        )
        self._next_sequence += 1
        documents[document_id] = record
        return SaveResult(id=record.document_id, revision_id=record.revision_id, sequence=record.sequence)

    async def get_document(self, collection: CollectionArgs, document_id: str) -> DocumentRecord | None:
        record = self._documents(collection).get(document_id)
        if record is None:
            return None
        return DocumentRecord(
            id=record.document_id,
            sequence=record.sequence,
            revision_id=record.revision_id,
            data=json_copy(record.data),
        )

    async def delete_document(
        self,
        collection: CollectionArgs,
        document_id: str,
        concurrency_control: ConcurrencyControl | None = None,
        sequence: int = 0,
    ) -> None:
        documents = self._documents(collection)
        existing = documents.get(document_id)
        if existing is None:
            raise DatabaseError(f"Document {document_id} not found", code=ErrorCode.NOT_FOUND)
        self._check_conflict(existing, document_id, concurrency_control, sequence)
        self._forget(collection, document_id)

    async def purge_document(self, collection: CollectionArgs, document_id: str) -> None:
        if document_id not in self._documents(collection):
            raise DatabaseError(f"Document {document_id} not found", code=ErrorCode.NOT_FOUND)
        self._forget(collection, document_id)

    def _forget(self, collection: CollectionArgs, document_id: str) -> None:
        del self._documents(collection)[document_id]
        self.expirations.get(_collection_key(collection), {}).pop(document_id, None)

    async def get_blob_content(self, collection: CollectionArgs, document_id: str, key: str) -> bytes:
        record = self._documents(collection).get(document_id)
        metadata = record.data.get(key) if record is not None else None
        digest = metadata.get("digest") if isinstance(metadata, dict) else None
        if digest is None or digest not in self.blobs:
            raise DatabaseError(f"No blob stored under {key!r} in document {document_id}", code=ErrorCode.NOT_FOUND)
        return self.blobs[digest]

    async def create_index(self, collection: CollectionArgs, index_name: str, index: dict[str, Any]) -> None:
        self.indexes.setdefault(_collection_key(collection), {})[index_name] = json_copy(index)
        logger.info("Registered index %s on %s", index_name, collection.full_name)

    async def delete_index(self, collection: CollectionArgs, index_name: str) -> None:
        self.indexes.get(_collection_key(collection), {}).pop(index_name, None)

    async def get_indexes(self, collection: CollectionArgs) -> list[str]:
        return sorted(self.indexes.get(_collection_key(collection), {}))

    async def get_count(self, collection: CollectionArgs) -> int:
        return len(self._documents(collection))

    async def set_document_expiration(
        self, collection: CollectionArgs, document_id: str, expiration: str | None
    ) -> None:
        if document_id not in self._documents(collection):
            raise DatabaseError(f"Document {document_id} not found", code=ErrorCode.NOT_FOUND)
        expirations = self.expirations.setdefault(_collection_key(collection), {})
        if expiration is None:
            expirations.pop(document_id, None)
        else:
            expirations[document_id] = expiration

    async def get_document_expiration(self, collection: CollectionArgs, document_id: str) -> str | None:
        return self.expirations.get(_collection_key(collection), {}).get(document_id)

    async def execute_query(
        self, database_name: str, query: str, parameters: dict[str, Any]
    ) -> list[dict[str, Any]]:
        self.queries.append(InMemoryQuery(database_name=database_name, query=query, parameters=parameters))
        return []

    async def explain_query(self, database_name: str, query: str, parameters: dict[str, Any]) -> str:
        return ""
