"""
Built-in analytics registration helper.

This module wires together:
- Connectors (execution layer), all sharing one data loader
- Tool contracts (declarative layer)

Usage
-----
from tablemind.builtin.analytics import register_builtin_analytics

register_builtin_analytics(
    connectors=connector_manager,
    registry=tool_registry,
    loader=TabularDataLoader(storage),
)
"""

from tablemind.connectors.chart_connector import ChartConnector
from tablemind.connectors.filter_connector import FilterConnector
from tablemind.connectors.statistics_connector import StatisticsConnector

from tablemind.tools.builtin.chart_tool import CHART_TOOL
from tablemind.tools.builtin.filter_tool import FILTER_TOOL
from tablemind.tools.builtin.statistics_tool import STATISTICS_TOOL


def register_builtin_analytics(connectors, registry, loader) -> None:
    """
    Register built-in analytical connectors and tools.

    Parameters
    ----------
    connectors : ConnectorManager
        The connector manager instance.

    registry : ToolRegistry
        The tool registry instance.

    loader : TabularDataLoader
        Loader the connectors use to read uploaded files.
    """

    connectors.register("statistics", StatisticsConnector(loader))
    connectors.register("chart", ChartConnector(loader))
    connectors.register("filter", FilterConnector(loader))

    registry.register_many([STATISTICS_TOOL, CHART_TOOL, FILTER_TOOL])
