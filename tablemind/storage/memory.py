from __future__ import annotations

from typing import Any, Dict, Tuple
from threading import RLock
import logging

import pandas as pd

from .base import StorageBackend
from ..data.tabular import TabularData
from ..errors import DataNotFoundError

logger = logging.getLogger(__name__)


class InMemoryStorage(StorageBackend):
    """Process-local storage keyed by (user, filename)."""

    def __init__(self) -> None:
        self._tables: Dict[Tuple[str, str], TabularData] = {}
        self._lock = RLock()

    def put(self, user_id: str, filename: str, data: Any) -> TabularData:
        if isinstance(data, pd.DataFrame):
            table = TabularData.from_dataframe(data, source=filename)
        elif isinstance(data, TabularData):
            table = data
        else:
            table = TabularData.from_records(data, source=filename)

        with self._lock:
            self._tables[(user_id, filename)] = table

        logger.info(
            "[STORAGE] Stored '%s' for user %s | rows=%d",
            filename,
            user_id,
            table.row_count,
        )
        return table

    def remove(self, user_id: str, filename: str) -> bool:
        with self._lock:
            return self._tables.pop((user_id, filename), None) is not None

    def resolve(self, user_id: str, filename: str) -> TabularData:
        with self._lock:
            table = self._tables.get((user_id, filename))

        if table is None:
            raise DataNotFoundError(
                f"No data found for file '{filename}'. "
                "It may have expired or was never uploaded."
            )

        return table

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)
