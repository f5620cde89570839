from typing import Any, Protocol

from doclite.models import CollectionArgs, ConcurrencyControl, DocumentRecord, SaveResult


class DocumentEngine(Protocol):
    async def save(
        self,
        collection: CollectionArgs,
        document_id: str,
        data: dict[str, Any],
        concurrency_control: ConcurrencyControl | None = None,
        sequence: int = 0,
    ) -> SaveResult: ...

    async def get_document(self, collection: CollectionArgs, document_id: str) -> DocumentRecord | None: ...

    async def delete_document(
        self,
        collection: CollectionArgs,
        document_id: str,
        concurrency_control: ConcurrencyControl | None = None,
        sequence: int = 0,
    ) -> None: ...

    async def purge_document(self, collection: CollectionArgs, document_id: str) -> None: ...

    async def get_blob_content(self, collection: CollectionArgs, document_id: str, key: str) -> bytes: ...

    async def create_index(self, collection: CollectionArgs, index_name: str, index: dict[str, Any]) -> None: ...

    async def delete_index(self, collection: CollectionArgs, index_name: str) -> None: ...

    async def get_indexes(self, collection: CollectionArgs) -> list[str]: ...

    async def get_count(self, collection: CollectionArgs) -> int: ...

    async def set_document_expiration(
        self, collection: CollectionArgs, document_id: str, expiration: str | None
    ) -> None: ...

    async def get_document_expiration(self, collection: CollectionArgs, document_id: str) -> str | None: ...

    async def execute_query(
        self, database_name: str, query: str, parameters: dict[str, Any]
    ) -> list[dict[str, Any]]: ...

    async def explain_query(self, database_name: str, query: str, parameters: dict[str, Any]) -> str: ...
