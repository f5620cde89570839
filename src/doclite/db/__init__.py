from doclite.db.memory import (
    InMemoryDocument,
    InMemoryDocumentEngine,
    InMemoryQuery,
    compute_digest,
    make_revision_id,
)

__all__ = [
    "InMemoryDocument",
    "InMemoryDocumentEngine",
    "InMemoryQuery",
    "compute_digest",
    "make_revision_id",
]
