from doclite.core.expression import Expression, FunctionExpression


def _call(name: str, *params: Expression) -> FunctionExpression:
    return FunctionExpression(name, params)


class Function:
    """Builders for the engine's built-in functions."""

    # Aggregates
    @staticmethod
    def avg(expression: Expression) -> FunctionExpression:
        return _call("AVG()", expression)

    @staticmethod
    def count(expression: Expression) -> FunctionExpression:
        return _call("COUNT()", expression)

    @staticmethod
    def min(expression: Expression) -> FunctionExpression:
        return _call("MIN()", expression)

    @staticmethod
    def max(expression: Expression) -> FunctionExpression:
        return _call("MAX()", expression)

    @staticmethod
    def sum(expression: Expression) -> FunctionExpression:
        return _call("SUM()", expression)

    # Math
    @staticmethod
    def abs(expression: Expression) -> FunctionExpression:
        return _call("ABS()", expression)

    @staticmethod
    def ceil(expression: Expression) -> FunctionExpression:
        return _call("CEIL()", expression)

    @staticmethod
    def floor(expression: Expression) -> FunctionExpression:
        return _call("FLOOR()", expression)

    @staticmethod
    def round(expression: Expression, digits: Expression | None = None) -> FunctionExpression:
        if digits is None:
            return _call("ROUND()", expression)
        return _call("ROUND()", expression, digits)

    @staticmethod
    def sqrt(expression: Expression) -> FunctionExpression:
        return _call("SQRT()", expression)

    # Strings
    @staticmethod
    def lower(expression: Expression) -> FunctionExpression:
        return _call("LOWER()", expression)

    @staticmethod
    def upper(expression: Expression) -> FunctionExpression:
        return _call("UPPER()", expression)

    @staticmethod
    def length(expression: Expression) -> FunctionExpression:
        return _call("LENGTH()", expression)

    @staticmethod
    def trim(expression: Expression) -> FunctionExpression:
        return _call("TRIM()", expression)

    @staticmethod
    def contains(expression: Expression, substring: Expression) -> FunctionExpression:
        return _call("CONTAINS()", expression, substring)

    # Arrays
    @staticmethod
    def array_contains(expression: Expression, value: Expression) -> FunctionExpression:
        return _call("ARRAY_CONTAINS()", expression, value)

    @staticmethod
    def array_length(expression: Expression) -> FunctionExpression:
        return _call("ARRAY_LENGTH()", expression)
