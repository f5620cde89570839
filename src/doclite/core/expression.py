"""Predicate tree used for index keys, sort orders and query filters.

Every node is an immutable dataclass. Rendering to the engine's nested-array
JSON form happens in :func:`render`, which matches on the closed set of node
types defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from doclite.core.collation import Collation
from doclite.core.helpers import to_iso8601

ALL_PROPERTIES_NAME = ""


class UnaryOp(Enum):
    MISSING = "MISSING"
    NOT_MISSING = "NOT_MISSING"
    NULL = "NULL"
    NOT_NULL = "NOT_NULL"


class BinaryOp(Enum):
    ADD = "+"
    BETWEEN = "BETWEEN"
    DIVIDE = "/"
    EQUAL_TO = "="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL_TO = ">="
    IN = "IN"
    IS = "IS"
    IS_NOT = "IS NOT"
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL_TO = "<="
    LIKE = "LIKE"
    MODULUS = "%"
    MULTIPLY = "*"
    NOT_EQUAL_TO = "!="
    REGEX_LIKE = "regexp_like()"
    SUBTRACT = "-"


class CompoundOp(Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class Expression:
    """Base class of all predicate tree nodes, with the builder API."""

    def as_json(self) -> Any:
        return render(self)

    # -- factories ----------------------------------------------------------

    @staticmethod
    def value(value: Any) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def string(value: str | None) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def number(value: int | float) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def int_value(value: int) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def long_value(value: int) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def float_value(value: float) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def double_value(value: float) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def boolean_value(value: bool) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def date(value: datetime | None) -> ValueExpression:
        return ValueExpression(value)

    @staticmethod
    def all() -> PropertyExpression:
        return PropertyExpression("*")

    @staticmethod
    def property(key_path: str) -> PropertyExpression:
        return PropertyExpression(key_path)

    @staticmethod
    def parameter(name: str) -> ParameterExpression:
        return ParameterExpression(name)

    @staticmethod
    def variable(name: str) -> VariableExpression:
        return VariableExpression(name)

    @staticmethod
    def negated(expression: Expression) -> CompoundExpression:
        return CompoundExpression((expression,), CompoundOp.NOT)

    @staticmethod
    def not_(expression: Expression) -> CompoundExpression:
        return Expression.negated(expression)

    # -- arithmetic ---------------------------------------------------------

    def multiply(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.MULTIPLY)

    def divide(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.DIVIDE)

    def modulo(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.MODULUS)

    def add(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.ADD)

    def subtract(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.SUBTRACT)

    # -- comparison ---------------------------------------------------------

    def less_than(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.LESS_THAN)

    def less_than_or_equal_to(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.LESS_THAN_OR_EQUAL_TO)

    def greater_than(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.GREATER_THAN)

    def greater_than_or_equal_to(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.GREATER_THAN_OR_EQUAL_TO)

    def equal_to(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.EQUAL_TO)

    def not_equal_to(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.NOT_EQUAL_TO)

    def like(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.LIKE)

    def regex(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.REGEX_LIKE)

    def is_(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.IS)

    def is_not(self, expression: Expression) -> BinaryExpression:
        return BinaryExpression(self, expression, BinaryOp.IS_NOT)

    def between(self, lower: Expression, upper: Expression) -> BinaryExpression:
        return BinaryExpression(self, AggregateExpression((lower, upper)), BinaryOp.BETWEEN)

    def in_(self, *expressions: Expression) -> BinaryExpression:
        return BinaryExpression(self, AggregateExpression(expressions), BinaryOp.IN)

    def is_null_or_missing(self) -> CompoundExpression:
        return UnaryExpression(self, UnaryOp.NULL).or_(UnaryExpression(self, UnaryOp.MISSING))

    def not_null_or_missing(self) -> CompoundExpression:
        return Expression.negated(self.is_null_or_missing())

    # -- boolean ------------------------------------------------------------

    def and_(self, expression: Expression) -> CompoundExpression:
        return CompoundExpression((self, expression), CompoundOp.AND)

    def or_(self, expression: Expression) -> CompoundExpression:
        return CompoundExpression((self, expression), CompoundOp.OR)

    def collate(self, collation: Collation) -> CollationExpression:
        return CollationExpression(self, collation)


def _column_name(key_path: str) -> str:
    return key_path.split(".")[-1]


@dataclass(frozen=True)
class ValueExpression(Expression):
    literal: Any


@dataclass(frozen=True)
class PropertyExpression(Expression):
    key_path: str
    from_alias: str | None = ""
    column_name: str | None = ""

    @classmethod
    def all_from(cls, alias: str | None) -> PropertyExpression:
        return cls(ALL_PROPERTIES_NAME, alias, alias or ALL_PROPERTIES_NAME)

    def from_(self, alias: str | None) -> PropertyExpression:
        return PropertyExpression(self.key_path, alias)

    def get_column_name(self) -> str:
        return self.column_name or _column_name(self.key_path)


@dataclass(frozen=True)
class MetaExpression(Expression):
    key_path: str
    column_name: str | None = None
    from_alias: str | None = None

    def from_(self, alias: str | None) -> MetaExpression:
        return MetaExpression(self.key_path, None, alias)

    def get_column_name(self) -> str:
        return self.column_name or _column_name(self.key_path)


@dataclass(frozen=True)
class ParameterExpression(Expression):
    name: str


@dataclass(frozen=True)
class VariableExpression(Expression):
    name: str

    def get_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operand: Expression
    op: UnaryOp

    def __post_init__(self) -> None:
        if self.operand is None:
            raise ValueError("operand is null.")


@dataclass(frozen=True)
class AggregateExpression(Expression):
    """Ordered operand container for BETWEEN bounds and IN candidates."""

    expressions: tuple[Expression, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "expressions", tuple(self.expressions))

    def get_expressions(self) -> tuple[Expression, ...]:
        return self.expressions


@dataclass(frozen=True)
class BinaryExpression(Expression):
    lhs: Expression
    rhs: Expression
    op: BinaryOp

    def __post_init__(self) -> None:
        if self.op is BinaryOp.BETWEEN and not (
            isinstance(self.rhs, AggregateExpression) and len(self.rhs.expressions) == 2
        ):
            raise ValueError("BETWEEN requires an aggregate of exactly two expressions.")


@dataclass(frozen=True)
class CompoundExpression(Expression):
    subexpressions: tuple[Expression, ...]
    op: CompoundOp

    def __post_init__(self) -> None:
        object.__setattr__(self, "subexpressions", tuple(self.subexpressions))


@dataclass(frozen=True)
class CollationExpression(Expression):
    operand: Expression
    collation: Collation


@dataclass(frozen=True)
class FunctionExpression(Expression):
    name: str
    params: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True)
class FullTextMatchExpression(Expression):
    index_name: str
    text: str


def _key_path_json(key_path: str, alias: str | None) -> list[str]:
    if alias:
        return [f".{alias}.{key_path}"]
    return [f".{key_path}"]


def render(expr: Expression) -> Any:
    """Render an expression tree into its JSON predicate form."""
    match expr:
        case ValueExpression(literal=datetime() as moment):
            return to_iso8601(moment)
        case ValueExpression(literal=literal):
            return literal
        case PropertyExpression(key_path=key_path, from_alias=alias) | MetaExpression(
            key_path=key_path, from_alias=alias
        ):
            return _key_path_json(key_path, alias)
        case ParameterExpression(name=name):
            return [f"${name}"]
        case VariableExpression(name=name):
            return [f"?{name}"]
        case UnaryExpression(operand=operand, op=op):
            keyword = "IS" if op in (UnaryOp.MISSING, UnaryOp.NULL) else "IS NOT"
            target = ["MISSING"] if op in (UnaryOp.MISSING, UnaryOp.NOT_MISSING) else None
            return [keyword, render(operand), target]
        case BinaryExpression(lhs=lhs, rhs=AggregateExpression(expressions=(lower, upper)), op=BinaryOp.BETWEEN):
            return [BinaryOp.BETWEEN.value, render(lhs), render(lower), render(upper)]
        case BinaryExpression(lhs=lhs, rhs=rhs, op=op):
            return [op.value, render(lhs), render(rhs)]
        case CompoundExpression(subexpressions=subexpressions, op=op):
            return [op.value, *(render(sub) for sub in subexpressions)]
        case AggregateExpression(expressions=expressions):
            return ["[]", *(render(item) for item in expressions)]
        case CollationExpression(operand=operand, collation=collation):
            return ["COLLATE", collation.as_json(), render(operand)]
        case FunctionExpression(name=name, params=params):
            return [name, *(render(param) for param in params)]
        case FullTextMatchExpression(index_name=index_name, text=text):
            return ["MATCH()", index_name, text]
        case _:
            raise TypeError(f"Unsupported expression node: {type(expr).__name__}")