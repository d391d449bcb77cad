from .tabular import TabularData
from .extract import extract_column
from .loader import TabularDataLoader

__all__ = ["TabularData", "extract_column", "TabularDataLoader"]
