"""
tablemind: tool-dispatch and data-extraction engine that lets an LLM run
statistics, filters and charts over uploaded tables by name.
"""

from .app import TableMindApp
from .config import ToolkitConfig, configure_logging
from .errors import (
    ToolError,
    NotFoundError,
    InvalidInputError,
    ComputationError,
)

__all__ = [
    "TableMindApp",
    "ToolkitConfig",
    "configure_logging",
    "ToolError",
    "NotFoundError",
    "InvalidInputError",
    "ComputationError",
]

__version__ = "0.1.0"
