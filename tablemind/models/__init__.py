"""
Runtime data models exchanged between the orchestration layer and the
toolkit's dispatcher.
"""

from .tool_call import ToolCall
from .tool_result import ToolResult

__all__ = ["ToolCall", "ToolResult"]
