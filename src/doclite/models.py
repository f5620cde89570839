from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field


class ConcurrencyControl(IntEnum):
    """Conflict handling requested when saving or deleting a document."""

    LAST_WRITE_WINS = 0
    FAIL_ON_CONFLICT = 1


class CollectionArgs(BaseModel):
    """Identifies a collection on the engine side."""

    name: str
    scope_name: str
    collection_name: str

    @property
    def full_name(self) -> str:
        return f"{self.scope_name}.{self.collection_name}"


class SaveResult(BaseModel):
    id: str
    revision_id: str | None = None
    sequence: int = 0


class DocumentRecord(BaseModel):
    id: str
    sequence: int = 0
    revision_id: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
