from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Any
import logging

from .registry import ToolRegistry
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


class ArgumentValidationError(InvalidInputError):
    """Raised when tool arguments are not a usable mapping."""
    pass


class ArgumentValidator:
    """
    Boundary check on the raw argument object produced by the LLM.

    Only the envelope is checked here: the arguments must form a mapping,
    and keys the tool does not declare are dropped. Field-level checks
    stay with each connector, which parses the arguments into its own
    strict shape.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    def validate(self, tool_name: str, args: Any) -> Dict[str, Any]:

        schema = self._registry.get_input_schema(tool_name)

        if args is None:
            return {}

        if not isinstance(args, Mapping):
            raise ArgumentValidationError(
                f"Arguments must be an object, got {type(args).__name__}."
            )

        unknown = [k for k in args if k not in schema]
        if unknown:
            logger.warning(
                "[VALIDATOR] Dropping unknown arguments for %s: %s",
                tool_name,
                unknown,
            )

        return {k: v for k, v in args.items() if k in schema}
