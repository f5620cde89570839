import logging
from typing import Any

from doclite.config import get_settings
from doclite.core.parameters import Parameters
from doclite.core.ports.engine import DocumentEngine

logger = logging.getLogger(__name__)


class Query:
    """A raw query string plus its parameters, executed by the engine."""

    def __init__(
        self,
        engine: DocumentEngine,
        query_string: str,
        database_name: str | None = None,
        parameters: Parameters | None = None,
    ) -> None:
        self._engine = engine
        self._query_string = query_string
        self._database_name = database_name or get_settings().database_name
        self._parameters = parameters if parameters is not None else Parameters()

    def get_database_name(self) -> str:
        return self._database_name

    def get_parameters(self) -> Parameters:
        return self._parameters

    def set_parameters(self, parameters: Parameters) -> None:
        self._parameters = parameters

    async def execute(self) -> list[dict[str, Any]]:
        logger.debug("Executing query on %s: %s", self._database_name, self._query_string)
        return await self._engine.execute_query(self._database_name, self._query_string, self._parameters.to_json())

    async def explain(self) -> str:
        return await self._engine.explain_query(self._database_name, self._query_string, self._parameters.to_json())

    def __str__(self) -> str:
        return self._query_string
