from doclite.core.blob import Blob
from doclite.core.collation import ASCIICollation, Collation, UnicodeCollation
from doclite.core.collection import Collection
from doclite.core.document import Document, MutableDocument
from doclite.core.expression import (
    AggregateExpression,
    BinaryExpression,
    BinaryOp,
    CollationExpression,
    CompoundExpression,
    CompoundOp,
    Expression,
    FullTextMatchExpression,
    FunctionExpression,
    MetaExpression,
    ParameterExpression,
    PropertyExpression,
    UnaryExpression,
    UnaryOp,
    ValueExpression,
    VariableExpression,
    render,
)
from doclite.core.full_text import FullTextExpression
from doclite.core.function import Function
from doclite.core.indexes import (
    AbstractIndex,
    FullTextIndex,
    FullTextIndexItem,
    IndexBuilder,
    IndexType,
    ValueIndex,
    ValueIndexItem,
)
from doclite.core.meta import Meta
from doclite.core.ordering import Ordering, SortOrder
from doclite.core.parameters import Parameter, Parameters
from doclite.core.ports.engine import DocumentEngine
from doclite.core.query import Query
from doclite.errors import DatabaseError, ErrorCode
from doclite.models import CollectionArgs, ConcurrencyControl, DocumentRecord, SaveResult

__all__ = [
    "ASCIICollation",
    "AbstractIndex",
    "AggregateExpression",
    "BinaryExpression",
    "BinaryOp",
    "Blob",
    "Collation",
    "CollationExpression",
    "Collection",
    "CollectionArgs",
    "CompoundExpression",
    "CompoundOp",
    "ConcurrencyControl",
    "DatabaseError",
    "Document",
    "DocumentEngine",
    "DocumentRecord",
    "ErrorCode",
    "Expression",
    "FullTextExpression",
    "FullTextIndex",
    "FullTextIndexItem",
    "FullTextMatchExpression",
    "Function",
    "FunctionExpression",
    "IndexBuilder",
    "IndexType",
    "Meta",
    "MetaExpression",
    "MutableDocument",
    "Ordering",
    "Parameter",
    "ParameterExpression",
    "Parameters",
    "PropertyExpression",
    "Query",
    "SaveResult",
    "SortOrder",
    "UnaryExpression",
    "UnaryOp",
    "UnicodeCollation",
    "ValueExpression",
    "ValueIndex",
    "ValueIndexItem",
    "VariableExpression",
    "render",
]
