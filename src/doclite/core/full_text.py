from __future__ import annotations

from doclite.core.expression import FullTextMatchExpression


class FullTextExpression:
    """Entry point for matching against a named full-text index."""

    def __init__(self, name: str) -> None:
        self._name = name

    @staticmethod
    def index(name: str) -> FullTextExpression:
        return FullTextExpression(name)

    def match(self, query: str) -> FullTextMatchExpression:
        return FullTextMatchExpression(self._name, query)
