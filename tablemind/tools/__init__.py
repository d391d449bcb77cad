from .schema import Tool
from .registry import ToolRegistry
from .executor import ToolExecutor

__all__ = ["Tool", "ToolRegistry", "ToolExecutor"]
