from .base import ExecutionConnector, DataConnector
from .manager import ConnectorManager
from .statistics_connector import StatisticsConnector
from .chart_connector import ChartConnector
from .filter_connector import FilterConnector

__all__ = [
    "ExecutionConnector",
    "DataConnector",
    "ConnectorManager",
    "StatisticsConnector",
    "ChartConnector",
    "FilterConnector",
]
