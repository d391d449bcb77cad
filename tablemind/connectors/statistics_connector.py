from __future__ import annotations

from typing import Dict, Any, List, Union
import logging
import math

import numpy as np

from .base import DataConnector
from .sources import DirectSource, FileSource, as_list, is_present, missing
from ..data.coerce import numeric_values, strict_numbers, to_plain
from ..errors import ComputationError, InvalidInputError

logger = logging.getLogger(__name__)

FILE_FIELDS = ("userId", "filename", "field")


def median_of_sorted(arr) -> float:
    """Median of a sorted array without overflowing on large middles."""
    mid = arr.size // 2
    if arr.size % 2:
        return float(arr[mid])

    a, b = float(arr[mid - 1]), float(arr[mid])
    return a / 2 + b / 2


def describe(values: List[float]) -> Dict[str, Any]:
    """
    Summary statistics over one already-filtered numeric sequence.

    Every statistic is computed from the same array so the returned
    values are always mutually consistent.
    """

    if not values:
        raise ComputationError("Cannot compute statistics of an empty sequence.")

    arr = np.sort(np.asarray(values, dtype=float))

    lo = float(arr[0])
    hi = float(arr[-1])

    total = float(np.sum(np.asarray(values, dtype=float)))
    if not math.isfinite(total):
        raise ComputationError(
            f"Sum of {arr.size} values exceeds the floating point range."
        )

    # Float rounding can push the mean just outside [min, max]
    average = min(max(total / arr.size, lo), hi)

    return {
        "average": to_plain(average),
        "count": int(arr.size),
        "sum": to_plain(total),
        "min": to_plain(lo),
        "max": to_plain(hi),
        "median": to_plain(median_of_sorted(arr)),
    }


class StatisticsConnector(DataConnector):
    """
    Average, count, sum, min, max and median.

    File mode coerces column text to numbers; direct mode only keeps
    entries that already are numbers.
    """

    def execute(self, tool_name: str, args: Dict[str, Any]) -> Any:

        source = self._resolve_source(args)

        if isinstance(source, FileSource):
            table = self._load(source.user_id, source.filename)
            values = numeric_values(self._column(table, source.field))

            if not values:
                raise InvalidInputError(
                    f"Field '{source.field}' in '{source.filename}' has no usable "
                    f"numeric data ({table.row_count} rows checked)."
                )
        else:
            values = strict_numbers(source.values)

            if not values:
                raise InvalidInputError(
                    f"No valid numbers provided: none of the {len(source.values)} "
                    "entries in 'numbers' is numeric."
                )

        logger.debug(
            "[CONNECTOR] statistics | mode=%s | count=%d",
            type(source).__name__,
            len(values),
        )

        return describe(values)

    @staticmethod
    def _resolve_source(args: Dict[str, Any]) -> Union[FileSource, DirectSource]:

        file_missing = missing(args, FILE_FIELDS)

        if not file_missing:
            return FileSource(
                user_id=str(args["userId"]),
                filename=str(args["filename"]),
                field=str(args["field"]),
            )

        if "numbers" in args and args["numbers"] is not None:
            numbers = as_list(args["numbers"], "numbers")
            if not numbers:
                raise InvalidInputError("'numbers' must be a non-empty array.")
            return DirectSource(values=tuple(numbers))

        partial = [k for k in FILE_FIELDS if is_present(args, k)]
        hint = f" (missing: {', '.join(file_missing)})" if partial else ""

        raise InvalidInputError(
            "Provide either 'numbers' (a non-empty array) or all of "
            f"'filename' and 'field' to read a column{hint}."
        )
