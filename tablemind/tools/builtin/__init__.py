from .statistics_tool import STATISTICS_TOOL
from .chart_tool import CHART_TOOL
from .filter_tool import FILTER_TOOL

__all__ = [
    "STATISTICS_TOOL",
    "CHART_TOOL",
    "FILTER_TOOL",
]
