from __future__ import annotations

import time
import logging
from typing import Dict, Any, Optional

from .registry import ToolRegistry
from ..connectors.manager import ConnectorManager
from ..errors import ToolError, ToolNotFoundError
from ..models import ToolCall, ToolResult
from .validator import ArgumentValidator
from .output_validator import OutputValidator

logger = logging.getLogger(__name__)

USER_ID_FIELD = "userId"


class ToolExecutor:
    """
    Dispatches a tool name and LLM arguments to the tool's connector.

    The executor owns name resolution, the argument envelope, user
    injection, output shape checks, and turning every failure into one
    uniform ToolResult. It never retries: a failed call is reported once
    and the orchestration layer decides what to do with it.
    """

    def __init__(self, registry: ToolRegistry, connectors: ConnectorManager) -> None:
        self._registry = registry
        self._connectors = connectors
        self._arg_validator = ArgumentValidator(registry)
        self._out_validator = OutputValidator(registry)

    # ============================================================
    # MAIN EXECUTION
    # ============================================================

    def execute(
        self,
        tool_name: str,
        args: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None,
    ) -> ToolResult:

        start = time.monotonic()

        try:
            tool = self._registry.get(tool_name)
            connector = self._connectors.get(tool.connector_name)
        except ToolNotFoundError as e:
            return self._blocked_result(tool_name, e)
        except KeyError as e:
            return self._blocked_result(tool_name, ToolNotFoundError(e.args[0]))

        try:
            args = self._arg_validator.validate(tool_name, args)

            if user_id is not None and USER_ID_FIELD in tool.input_schema:
                args[USER_ID_FIELD] = user_id

            logger.info(
                "[EXECUTOR] Executing %s | args=%s",
                tool.key,
                sorted(args),
            )

            raw_output = connector.execute(tool_name, args)
            output = self._out_validator.validate(tool_name, raw_output)

        except ToolError as e:
            logger.warning(
                "[EXECUTOR] %s failed | kind=%s | %s",
                tool_name,
                e.kind,
                e,
            )
            return self._failure_result(tool_name, tool.version, e, start)

        except Exception as e:
            logger.exception("[EXECUTOR] %s raised unexpectedly", tool_name)
            return self._failure_result(tool_name, tool.version, e, start)

        return self._success_result(tool_name, tool.version, output, start)

    def execute_call(self, call: ToolCall) -> ToolResult:
        logger.debug("[EXECUTOR] Dispatching %r", call)
        return self.execute(call.tool_name, call.arguments, user_id=call.user_id)

    # ============================================================
    # RESULT BUILDERS
    # ============================================================

    def _success_result(
        self,
        tool_name: str,
        tool_version: str,
        output: Any,
        start_time: float,
    ) -> ToolResult:

        return ToolResult(
            tool_name=tool_name,
            tool_version=tool_version,
            status="success",
            output=output,
            latency_ms=self._latency_ms(start_time),
        )

    def _failure_result(
        self,
        tool_name: str,
        tool_version: str,
        error: Exception,
        start_time: float,
    ) -> ToolResult:

        return ToolResult(
            tool_name=tool_name,
            tool_version=tool_version,
            status="failure",
            output=None,
            error=str(error),
            error_kind=getattr(error, "kind", "internal"),
            latency_ms=self._latency_ms(start_time),
            exception=error,
        )

    def _blocked_result(self, tool_name: str, error: ToolError) -> ToolResult:

        logger.warning("[EXECUTOR] Blocked %s | %s", tool_name, error)

        return ToolResult(
            tool_name=tool_name,
            tool_version="unknown",
            status="blocked",
            output=None,
            error=str(error),
            error_kind=error.kind,
            latency_ms=0,
            exception=error,
        )

    @staticmethod
    def _latency_ms(start_time: float) -> int:
        return int((time.monotonic() - start_time) * 1000)

    # ------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------

    @property
    def registry(self) -> ToolRegistry:
        return self._registry
