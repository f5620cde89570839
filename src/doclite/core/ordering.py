from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from doclite.core.expression import Expression


class Ordering:
    @staticmethod
    def property(key_path: str) -> SortOrder:
        return Ordering.expression(Expression.property(key_path))

    @staticmethod
    def expression(expression: Expression) -> SortOrder:
        return SortOrder(expression)


@dataclass(frozen=True)
class SortOrder(Ordering):
    """Sort clause: renders as the bare expression, or ``["DESC", expr]`` when descending."""

    sort_expression: Expression
    is_ascending: bool = True

    def ascending(self) -> SortOrder:
        return replace(self, is_ascending=True)

    def descending(self) -> SortOrder:
        return replace(self, is_ascending=False)

    def as_json(self) -> Any:
        if self.is_ascending:
            return self.sort_expression.as_json()
        return ["DESC", self.sort_expression.as_json()]
