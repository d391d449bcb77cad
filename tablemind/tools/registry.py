from __future__ import annotations

from typing import Dict, List, Any, Iterable
from threading import RLock
from copy import deepcopy
import logging

from .schema import Tool
from ..errors import ToolNotFoundError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Authoritative registry of all tools available to the agent.

    This forms the capability boundary: if a tool is not registered here,
    it is not executable. One instance is built at process start and
    handed to the executor by reference.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}
        self._lock = RLock()
        logger.info("[TOOL REGISTRY] Initialized (empty)")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, tool: Tool) -> None:

        if not isinstance(tool, Tool):
            raise TypeError("Only Tool instances can be registered.")

        with self._lock:
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' is already registered.")

            self._tools[tool.name] = tool

            logger.info(
                "[TOOL REGISTRY] Tool registered | total=%d",
                len(self._tools)
            )

            logger.info(tool.to_debug_string())

    def register_many(self, tools: Iterable[Tool]) -> None:

        tools = list(tools)

        with self._lock:
            seen = set()
            for tool in tools:
                if not isinstance(tool, Tool):
                    raise TypeError("Only Tool instances can be registered.")
                if tool.name in self._tools or tool.name in seen:
                    raise ValueError(f"Tool '{tool.name}' is already registered.")
                seen.add(tool.name)

            for tool in tools:
                self._tools[tool.name] = tool
                logger.info("[TOOL REGISTRY] Bulk registered: %s", tool.name)

            logger.info(
                "[TOOL REGISTRY] Bulk registration complete | total=%d",
                len(self._tools)
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, tool_name: str) -> Tool:

        with self._lock:
            tool = self._tools.get(tool_name)

            if tool is None:
                logger.error(
                    "[TOOL REGISTRY] Lookup FAILED: %s | available=%s",
                    tool_name,
                    sorted(self._tools)
                )
                raise ToolNotFoundError(f"Tool '{tool_name}' is not registered.")

            logger.debug("[TOOL REGISTRY] Lookup success: %s", tool.key)
            return tool

    def has_tool(self, tool_name: str) -> bool:
        with self._lock:
            return tool_name in self._tools

    def list_tools(self) -> List[Tool]:
        with self._lock:
            return sorted(self._tools.values(), key=lambda t: t.name)

    def list_tool_names(self) -> List[str]:
        with self._lock:
            return sorted(self._tools.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._tools)

    def __contains__(self, tool_name: str) -> bool:
        return self.has_tool(tool_name)

    # ------------------------------------------------------------------
    # Schema Access
    # ------------------------------------------------------------------

    def get_input_schema(self, tool_name: str) -> Dict[str, Any]:
        return deepcopy(self.get(tool_name).input_schema)

    def get_output_schema(self, tool_name: str) -> Dict[str, Any]:
        return deepcopy(self.get(tool_name).output_schema)

    # ------------------------------------------------------------------
    # LLM Integration
    # ------------------------------------------------------------------

    def get_function_specs(self) -> List[Dict[str, Any]]:
        """Function-calling definitions for every tool, sorted by name."""

        specs = [tool.to_function_spec() for tool in self.list_tools()]

        logger.info(
            "[TOOL REGISTRY] Function specs generated | count=%d | names=%s",
            len(specs),
            [s["function"]["name"] for s in specs]
        )

        return specs
