from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class Blob:
    """Binary attachment referenced from a document property.

    A blob created locally carries its bytes and no digest. Once the owning
    document has been persisted and fetched back, only the metadata (content
    type, length, digest) is available; the bytes are loaded on demand through
    ``Document.get_blob_content``.
    """

    def __init__(self, content_type: str, data: bytes | bytearray | memoryview | None = None) -> None:
        self._content_type = content_type
        self._bytes = bytes(data) if data is not None else None
        self.length = len(self._bytes) if self._bytes is not None else 0
        self.digest: str | None = None

    @classmethod
    def from_metadata(cls, content_type: str, length: int, digest: str | None) -> Blob:
        blob = cls(content_type)
        blob.length = length
        blob.digest = digest
        return blob

    @classmethod
    def from_dictionary(cls, data: Mapping[str, Any]) -> Blob:
        """Rebuild a blob from the ``to_dictionary`` form."""
        return cls(data["contentType"], bytes(data.get("data") or []))

    @classmethod
    def from_json(cls, json_string: str) -> Blob:
        """Parse ``{"contentType": str, "bytes": [int, ...]}``."""
        try:
            data = json.loads(json_string)
            if not isinstance(data, dict):
                raise ValueError("Expected a JSON object")
            content_type = data.get("contentType")
            if not content_type or not isinstance(content_type, str):
                raise ValueError("Invalid or missing contentType property")
            raw = data.get("bytes")
            if not isinstance(raw, list):
                raise ValueError("Invalid or missing bytes property")
            return cls(content_type, bytes(raw))
        except (ValueError, TypeError) as exc:
            raise ValueError(f"Failed to parse Blob JSON: {exc}") from exc

    def get_bytes(self) -> bytes | None:
        return self._bytes

    def get_content_type(self) -> str:
        return self._content_type

    def get_digest(self) -> str | None:
        return self.digest

    def get_length(self) -> int:
        return self.length

    def to_dictionary(self) -> dict[str, Any]:
        return {
            "contentType": self._content_type,
            "data": list(self._bytes or b""),
        }

    def __repr__(self) -> str:
        return f"Blob(content_type={self._content_type!r}, length={self.length}, digest={self.digest!r})"
