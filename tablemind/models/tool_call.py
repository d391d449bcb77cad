from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import uuid


@dataclass(frozen=True)
class ToolCall:
    """
    A function call chosen by the LLM, as handed over by the
    orchestration layer.

    Architectural Role
    ------------------
    Chat loop → ToolCall → ToolExecutor → ToolResult

    ``arguments`` is whatever the model generated and is never trusted.
    ``user_id`` comes from the authenticated session, not from the model.
    """

    tool_name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    user_id: Optional[str] = None

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    """Unique identifier for tracing this tool call."""

    def __repr__(self) -> str:
        return f"ToolCall(id={self.id[:8]}, tool='{self.tool_name}')"
