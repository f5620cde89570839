from __future__ import annotations

import json
import math
import uuid
import weakref
from datetime import datetime
from typing import TYPE_CHECKING, Any

from doclite.core.blob import Blob
from doclite.core.helpers import parse_iso8601, to_iso8601
from doclite.errors import DatabaseError, ErrorCode

if TYPE_CHECKING:
    from doclite.core.collection import Collection

BLOB_TYPE_KEY = "_type"
BLOB_METADATA_KEY = "@type"
BLOB_TYPE = "blob"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def blob_property(blob: Blob) -> dict[str, Any]:
    """Property-bag form of ``blob``.

    A blob holding bytes becomes the tagged object the engine stores on save.
    A metadata-only blob, read back from a persisted document, keeps its
    metadata so the engine links the existing content by digest.
    """
    if blob.get_bytes() is None and blob.get_digest() is not None:
        return {
            BLOB_METADATA_KEY: BLOB_TYPE,
            "content_type": blob.get_content_type(),
            "digest": blob.get_digest(),
            "length": blob.get_length(),
        }
    return {BLOB_TYPE_KEY: BLOB_TYPE, "data": blob.to_dictionary()}


def json_default(value: Any) -> Any:
    """``json.dumps`` hook serializing blobs left in a property bag."""
    if isinstance(value, Blob):
        return blob_property(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class Document:
    """Read-only snapshot of a document: id, sequence and property bag.

    The typed getters never raise. A value of the wrong type, or a missing key,
    yields the getter's default (None, False, 0 or 0.0).
    """

    def __init__(
        self,
        id: str | None = None,
        *,
        sequence: int | None = 0,
        data: dict[str, Any] | None = None,
        revision_id: str | None = None,
        collection: Collection | None = None,
    ) -> None:
        self._id = id if id else str(uuid.uuid4())
        self._sequence = sequence or 0
        self._revision_id = revision_id
        self._data: dict[str, Any] = data if data is not None else {}
        self._collection_ref: weakref.ref[Collection] | None = None
        if collection is not None:
            self._collection_ref = weakref.ref(collection)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, sequence={self._sequence}, keys={self.get_keys()!r})"

    def get_id(self) -> str:
        return self._id

    def get_sequence(self) -> int:
        return self._sequence

    def get_revision_id(self) -> str | None:
        return self._revision_id

    def get_collection(self) -> Collection | None:
        if self._collection_ref is None:
            return None
        return self._collection_ref()

    def get_data(self) -> dict[str, Any]:
        return self._data

    def to_dictionary(self) -> dict[str, Any]:
        return self._data

    def to_json_string(self) -> str:
        return json.dumps(self._data, default=json_default)

    def count(self) -> int:
        return len(self._data)

    def get_keys(self) -> list[str]:
        return list(self._data)

    def contains(self, key: str) -> bool:
        return key in self._data

    def get_value(self, key: str) -> Any:
        return self._data.get(key)

    def get_string(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def get_boolean(self, key: str) -> bool:
        value = self._data.get(key)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if _is_number(value):
            return value != 0
        if isinstance(value, str):
            return value not in ("", "0.0")
        return True

    def get_int(self, key: str) -> int:
        value = self._data.get(key)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return math.trunc(value)
        return 0

    def get_long(self, key: str) -> int | float:
        value = self._data.get(key)
        if isinstance(value, bool):
            return int(value)
        if _is_number(value):
            return value
        return 0

    def get_float(self, key: str) -> float:
        value = self._data.get(key)
        if isinstance(value, bool):
            return 1.0 if value else 0.0
        if _is_number(value):
            return float(value)
        return 0.0

    def get_double(self, key: str) -> float:
        return self.get_float(key)

    def get_date(self, key: str) -> datetime | None:
        value = self._data.get(key)
        if not isinstance(value, str):
            return None
        return parse_iso8601(value)

    def get_blob(self, key: str) -> Blob | None:
        value = self._data.get(key)
        if isinstance(value, Blob):
            return value
        if not isinstance(value, dict):
            return None
        if "content_type" in value:
            return Blob.from_metadata(value["content_type"], value.get("length", 0), value.get("digest"))
        if value.get(BLOB_TYPE_KEY) == BLOB_TYPE and isinstance(value.get("data"), dict):
            try:
                return Blob.from_dictionary(value["data"])
            except (KeyError, TypeError, ValueError):
                return None
        return None

    def get_array(self, key: str) -> list[Any] | None:
        value = self._data.get(key)
        return value if isinstance(value, list) else None

    def get_dictionary(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return value if isinstance(value, dict) else None

    async def get_blob_content(self, key: str) -> bytes:
        """Fetch the bytes of the blob stored under ``key`` from the owning collection."""
        collection = self.get_collection()
        if collection is None:
            raise DatabaseError(
                f"Document {self._id} is not associated with a collection",
                code=ErrorCode.NOT_OPEN,
            )
        return await collection.get_blob_content(self._id, key)


class MutableDocument(Document):
    """Document with setters. Values are stored as given, without copying."""

    def __init__(
        self,
        id: str | None = None,
        *,
        data: dict[str, Any] | None = None,
        sequence: int | None = 0,
        revision_id: str | None = None,
        collection: Collection | None = None,
    ) -> None:
        super().__init__(id, sequence=sequence, data=data, revision_id=revision_id, collection=collection)

    @classmethod
    def from_document(cls, document: Document) -> MutableDocument:
        """Create a mutable view sharing the id, sequence and property bag of ``document``."""
        return cls(
            document.get_id(),
            data=document.get_data(),
            sequence=document.get_sequence(),
            revision_id=document.get_revision_id(),
            collection=document.get_collection(),
        )

    @classmethod
    def from_json(cls, document_id: str | None, json_string: str) -> MutableDocument:
        try:
            data = json.loads(json_string)
        except ValueError as exc:
            raise ValueError(f"Failed to parse JSON string: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("Failed to parse JSON string: expected a JSON object")
        return cls(document_id, data=data)

    def _set(self, key: str, value: Any) -> MutableDocument:
        self._data[key] = value
        return self

    def set_id(self, id: str) -> None:
        self._id = id

    def set_sequence(self, sequence: int) -> None:
        self._sequence = sequence

    def set_revision_id(self, revision_id: str | None) -> None:
        self._revision_id = revision_id

    def set_collection(self, collection: Collection | None) -> None:
        self._collection_ref = weakref.ref(collection) if collection is not None else None

    def set_string(self, key: str, value: str | None) -> MutableDocument:
        return self._set(key, value)

    def set_boolean(self, key: str, value: bool | None) -> MutableDocument:
        return self._set(key, value)

    def set_int(self, key: str, value: int | None) -> MutableDocument:
        return self._set(key, value)

    def set_long(self, key: str, value: int | None) -> MutableDocument:
        return self._set(key, value)

    def set_float(self, key: str, value: float | None) -> MutableDocument:
        return self._set(key, value)

    def set_double(self, key: str, value: float | None) -> MutableDocument:
        return self._set(key, value)

    def set_number(self, key: str, value: int | float | None) -> MutableDocument:
        return self._set(key, value)

    def set_array(self, key: str, value: list[Any] | None) -> MutableDocument:
        return self._set(key, value)

    def set_dictionary(self, key: str, value: dict[str, Any] | None) -> MutableDocument:
        return self._set(key, value)

    def set_value(self, key: str, value: Any) -> MutableDocument:
        if isinstance(value, Blob):
            return self.set_blob(key, value)
        return self._set(key, value)

    def set_date(self, key: str, value: datetime | None) -> MutableDocument:
        """Store ``value`` as an ISO-8601 string (UTC, millisecond precision)."""
        return self._set(key, to_iso8601(value) if value is not None else None)

    def set_blob(self, key: str, value: Blob | None) -> MutableDocument:
        if value is None:
            return self._set(key, None)
        return self._set(key, blob_property(value))

    def set_data(self, data: dict[str, Any]) -> MutableDocument:
        """Replace the whole property bag. Top-level blobs are converted in place."""
        for key, value in data.items():
            if isinstance(value, Blob):
                data[key] = blob_property(value)
        self._data = data
        return self

    def remove(self, key: str) -> MutableDocument:
        # Dotted keys are literal top-level keys.
        self._data.pop(key, None)
        return self
