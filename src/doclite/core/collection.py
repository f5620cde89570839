import logging
from datetime import datetime

from doclite.config import get_settings
from doclite.core.document import Document, MutableDocument
from doclite.core.helpers import parse_iso8601, to_iso8601
from doclite.core.indexes import AbstractIndex
from doclite.core.ports.engine import DocumentEngine
from doclite.models import CollectionArgs, ConcurrencyControl

logger = logging.getLogger(__name__)


class Collection:
    """Forwards document and index operations for one collection to the engine.

    Engine failures propagate to the caller unchanged.
    """

    def __init__(
        self,
        engine: DocumentEngine,
        name: str | None = None,
        scope_name: str | None = None,
        database_name: str | None = None,
    ) -> None:
        settings = get_settings()
        self._engine = engine
        self.name = name or settings.collection_name
        self.scope_name = scope_name or settings.scope_name
        self.database_name = database_name or settings.database_name

    @property
    def args(self) -> CollectionArgs:
        return CollectionArgs(name=self.database_name, scope_name=self.scope_name, collection_name=self.name)

    def get_engine(self) -> DocumentEngine:
        return self._engine

    def full_name(self) -> str:
        return f"{self.scope_name}.{self.name}"

    async def save(self, document: MutableDocument, concurrency_control: ConcurrencyControl | None = None) -> None:
        """Persist ``document`` and write the engine-assigned id, revision and sequence back into it."""
        logger.debug("Saving document %s in %s", document.get_id(), self.full_name())
        result = await self._engine.save(
            self.args,
            document.get_id(),
            document.get_data(),
            concurrency_control,
            document.get_sequence(),
        )
        document.set_id(result.id)
        document.set_revision_id(result.revision_id)
        document.set_sequence(result.sequence)
        document.set_collection(self)

    async def document(self, document_id: str) -> Document | None:
        record = await self._engine.get_document(self.args, document_id)
        if record is None:
            return None
        return Document(
            record.id, sequence=record.sequence, data=record.data, revision_id=record.revision_id, collection=self
        )

    async def get_document(self, document_id: str) -> Document | None:
        return await self.document(document_id)

    async def delete_document(
        self, document: Document, concurrency_control: ConcurrencyControl | None = None
    ) -> None:
        logger.debug("Deleting document %s in %s", document.get_id(), self.full_name())
        await self._engine.delete_document(
            self.args, document.get_id(), concurrency_control, document.get_sequence()
        )

    async def purge(self, document: Document) -> None:
        await self.purge_by_id(document.get_id())

    async def purge_by_id(self, document_id: str) -> None:
        logger.debug("Purging document %s in %s", document_id, self.full_name())
        await self._engine.purge_document(self.args, document_id)

    async def get_blob_content(self, document_id: str, key: str) -> bytes:
        return await self._engine.get_blob_content(self.args, document_id, key)

    async def create_index(self, index_name: str, index: AbstractIndex) -> None:
        logger.info("Creating %s index %s on %s", index.index_type().name.lower(), index_name, self.full_name())
        await self._engine.create_index(self.args, index_name, index.to_json())

    async def delete_index(self, index_name: str) -> None:
        logger.info("Deleting index %s on %s", index_name, self.full_name())
        await self._engine.delete_index(self.args, index_name)

    async def indexes(self) -> list[str]:
        return await self._engine.get_indexes(self.args)

    async def count(self) -> int:
        return await self._engine.get_count(self.args)

    async def set_document_expiration(self, document_id: str, expiration: datetime | None) -> None:
        await self._engine.set_document_expiration(
            self.args, document_id, to_iso8601(expiration) if expiration is not None else None
        )

    async def get_document_expiration(self, document_id: str) -> datetime | None:
        expiration = await self._engine.get_document_expiration(self.args, document_id)
        if expiration is None:
            return None
        return parse_iso8601(expiration)
