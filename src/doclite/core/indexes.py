from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from doclite.core.expression import Expression

DEFAULT_FULL_TEXT_LANGUAGE = "en"


class IndexType(Enum):
    VALUE = 0
    FULL_TEXT = 1


class AbstractIndex(ABC):
    """Index definition sent to the engine by ``Collection.create_index``."""

    @abstractmethod
    def index_type(self) -> IndexType: ...

    @abstractmethod
    def language(self) -> str | None: ...

    @abstractmethod
    def ignore_accents(self) -> bool: ...

    @abstractmethod
    def items(self) -> list[Any]: ...

    @abstractmethod
    def to_json(self) -> dict[str, Any]: ...


class ValueIndexItem:
    def __init__(self, expr: Expression) -> None:
        self.expr = expr

    @staticmethod
    def property(key_path: str) -> ValueIndexItem:
        return ValueIndexItem(Expression.property(key_path))

    @staticmethod
    def expression(expression: Expression) -> ValueIndexItem:
        return ValueIndexItem(expression)


class ValueIndex(AbstractIndex):
    def __init__(self, *index_items: ValueIndexItem) -> None:
        self._items = tuple(index_items)

    def index_type(self) -> IndexType:
        return IndexType.VALUE

    def language(self) -> str | None:
        return None

    def ignore_accents(self) -> bool:
        return False

    def items(self) -> list[Any]:
        return [item.expr.as_json() for item in self._items]

    def to_json(self) -> dict[str, Any]:
        return {"type": "value", "items": self.items()}


class FullTextIndexItem:
    def __init__(self, expression: Expression) -> None:
        self.expression = expression

    @staticmethod
    def property(key_path: str) -> FullTextIndexItem:
        return FullTextIndexItem(Expression.property(key_path))


class FullTextIndex(AbstractIndex):
    """Full-text index over one or more properties.

    ``language`` is an ISO-639 code such as ``"en"`` or ``"fr"``; it controls
    word breaking and stemming. An empty or None language disables the
    language-specific features. The setters return a new descriptor.
    """

    def __init__(
        self,
        *index_items: FullTextIndexItem,
        language: str | None = DEFAULT_FULL_TEXT_LANGUAGE,
        ignore_accents: bool = False,
    ) -> None:
        self._items = tuple(index_items)
        self._language = language
        self._ignore_accents = ignore_accents

    def set_language(self, language: str | None) -> FullTextIndex:
        return FullTextIndex(*self._items, language=language, ignore_accents=self._ignore_accents)

    def set_ignore_accents(self, ignore_accents: bool) -> FullTextIndex:
        return FullTextIndex(*self._items, language=self._language, ignore_accents=ignore_accents)

    def index_type(self) -> IndexType:
        return IndexType.FULL_TEXT

    def language(self) -> str | None:
        return self._language

    def ignore_accents(self) -> bool:
        return self._ignore_accents

    def items(self) -> list[Any]:
        return [item.expression.as_json() for item in self._items]

    def to_json(self) -> dict[str, Any]:
        return {
            "type": "full-text",
            "language": self._language,
            "ignoreAccents": self._ignore_accents,
            "items": self.items(),
        }


class IndexBuilder:
    @staticmethod
    def value_index(*items: ValueIndexItem) -> ValueIndex:
        return ValueIndex(*items)

    @staticmethod
    def full_text_index(*items: FullTextIndexItem) -> FullTextIndex:
        return FullTextIndex(*items)
