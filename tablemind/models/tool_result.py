from dataclasses import dataclass, field
from typing import Any, Optional, Literal, Dict

from ..errors import ToolError


@dataclass(frozen=True)
class ToolResult:
    """
    Immutable record of one dispatched tool call.

    Attributes
    ----------
    tool_name : str
        Name of the tool that was requested.

    tool_version : str
        Version of the tool contract used, or "unknown" when the tool
        could not be resolved.

    status : {"success", "failure", "blocked"}
        success → tool produced a validated result
        failure → tool ran and rejected its input or data
        blocked → execution prevented (unknown tool or connector)

    output : Any
        Validated tool output. None unless status is success.

    error : Optional[str]
        Human and LLM readable failure message.

    error_kind : Optional[str]
        "not_found", "invalid_input", "computation" or "internal".

    latency_ms : int
        Execution time in milliseconds (monotonic).
    """

    tool_name: str
    tool_version: str
    status: Literal["success", "failure", "blocked"]
    output: Any
    error: Optional[str] = None
    error_kind: Optional[str] = None
    latency_ms: int = 0
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)

    # ------------------------------------------------------------------
    # Convenience Properties
    # ------------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_failure(self) -> bool:
        return self.status == "failure"

    @property
    def is_blocked(self) -> bool:
        return self.status == "blocked"

    def raise_for_error(self) -> None:
        """Re-raise the original failure, if any."""
        if self.is_success:
            return

        if self.exception is not None:
            raise self.exception

        raise ToolError(self.error or f"Tool '{self.tool_name}' failed.")

    # ------------------------------------------------------------------
    # Safe Serialization Boundary
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to JSON-safe dictionary.

        This is what the orchestration layer inserts back into the
        conversation.
        """

        return {
            "tool_name": self.tool_name,
            "tool_version": self.tool_version,
            "status": self.status,
            "output": self.output,
            "error": self.error,
            "error_kind": self.error_kind,
            "latency_ms": self.latency_ms,
        }
