from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Any, List

from ..data.extract import extract_column
from ..data.loader import TabularDataLoader
from ..data.tabular import TabularData


class ExecutionConnector(ABC):
    """
    Execution backend performing the computation behind a Tool.

    Architectural Role
    -------------------
    ToolExecutor enforces *policy* (lookup, envelope checks, output
    validation, failure wrapping). ExecutionConnector performs the
    *actual operation*.

    Connectors must:
        • Be deterministic given the same inputs and data
        • Parse the raw arguments into a strict shape before computing
        • Raise ToolError subclasses at the point of detection
        • Never mutate the provided arguments or loaded data
        • Return plain JSON-serializable dictionaries
    """

    @abstractmethod
    def execute(self, tool_name: str, args: Dict[str, Any]) -> Any:
        """
        Execute a tool call.

        Parameters
        ----------
        tool_name : str
            Name of the tool being invoked.

        args : Dict[str, Any]
            Raw arguments. MUST NOT be mutated.

        Returns
        -------
        Any
            Structured tool output matching the tool's declared output schema.

        Raises
        ------
        ToolError
            NotFound, InvalidInput or Computation failures.
        """
        raise NotImplementedError

    def health(self) -> bool:
        return True


class DataConnector(ExecutionConnector):
    """Connector that can read uploaded tables through a loader."""

    def __init__(self, loader: TabularDataLoader) -> None:
        self._loader = loader

    def _load(self, user_id: str, filename: str) -> TabularData:
        return self._loader.load(user_id, filename)

    def _column(self, table: TabularData, field: str) -> List[Any]:
        return extract_column(table, field)

    def health(self) -> bool:
        return self._loader.storage.health()
