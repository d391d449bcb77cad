from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import math

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class TabularData:
    """
    Immutable in-memory representation of one uploaded sheet.

    Rows are read-only mappings from column name to raw cell value and
    keep their original order. Produced once per upload by a storage
    backend and never written back by any tool, which is what makes
    concurrent dispatches over the same table safe.
    """

    rows: Tuple[Mapping[str, Any], ...]
    columns: Tuple[str, ...]
    source: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "rows",
            tuple(MappingProxyType(dict(row)) for row in self.rows),
        )
        object.__setattr__(self, "columns", tuple(str(c) for c in self.columns))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Optional[Iterable[str]] = None,
        source: str = "",
    ) -> "TabularData":

        records = [dict(r) for r in records]

        if columns is None:
            # Column order follows first appearance across rows
            seen: Dict[str, None] = {}
            for row in records:
                for key in row:
                    seen.setdefault(str(key), None)
            columns = list(seen)

        return cls(rows=tuple(records), columns=tuple(columns), source=source)

    @classmethod
    def from_dataframe(cls, frame: pd.DataFrame, source: str = "") -> "TabularData":
        columns = [str(c) for c in frame.columns]
        frame = frame.copy()
        frame.columns = columns

        records = [
            {key: _to_native(value) for key, value in row.items()}
            for row in frame.to_dict(orient="records")
        ]

        return cls(rows=tuple(records), columns=tuple(columns), source=source)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def to_records(self) -> List[Dict[str, Any]]:
        return [dict(row) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return (
            f"TabularData(source={self.source!r}, rows={len(self.rows)}, "
            f"columns={list(self.columns)})"
        )


def _to_native(value: Any) -> Any:
    """Convert pandas/numpy cell values into plain JSON-safe Python values."""

    if value is None:
        return None

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, float) and math.isnan(value):
        return None

    if value is pd.NaT:
        return None

    if hasattr(value, "isoformat"):
        return value.isoformat()

    return value
