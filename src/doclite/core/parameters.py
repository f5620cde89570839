from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel

from doclite.core.helpers import to_iso8601

ParameterType = Literal["value", "string", "boolean", "float", "double", "long", "int", "date"]


class Parameter(BaseModel):
    value: Any = None
    type: ParameterType = "value"


class Parameters:
    """Named values substituted into a query at execution time.

    Setting a name twice overwrites it. ``remove`` keeps the name with a None
    slot, which the engine reads as an unbound parameter.
    """

    def __init__(self, parameters: Parameters | None = None) -> None:
        self._parameters: dict[str, Parameter | None] = dict(parameters._parameters) if parameters is not None else {}

    def _set(self, name: str, value: Any, kind: ParameterType) -> Parameters:
        self._parameters[name] = Parameter(value=value, type=kind)
        return self

    def set_value(self, name: str, value: Any) -> Parameters:
        return self._set(name, value, "value")

    def set_string(self, name: str, value: str | None) -> Parameters:
        return self._set(name, value, "string")

    def set_boolean(self, name: str, value: bool | None) -> Parameters:
        return self._set(name, value, "boolean")

    def set_float(self, name: str, value: float | None) -> Parameters:
        return self._set(name, value, "float")

    def set_double(self, name: str, value: float | None) -> Parameters:
        return self._set(name, value, "double")

    def set_long(self, name: str, value: int | None) -> Parameters:
        return self._set(name, value, "long")

    def set_int(self, name: str, value: int | None) -> Parameters:
        return self._set(name, value, "int")

    def set_date(self, name: str, value: datetime | None) -> Parameters:
        return self._set(name, to_iso8601(value) if value is not None else None, "date")

    def remove(self, name: str) -> Parameters:
        self._parameters[name] = None
        return self

    def get(self, name: str) -> Parameter | None:
        return self._parameters.get(name)

    def names(self) -> list[str]:
        return list(self._parameters)

    def to_json(self) -> dict[str, dict[str, Any] | None]:
        return {
            name: parameter.model_dump() if parameter is not None else None
            for name, parameter in self._parameters.items()
        }

    def __len__(self) -> int:
        return len(self._parameters)
