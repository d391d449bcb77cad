from __future__ import annotations

from typing import Dict, Any, Callable
import logging
import math
import operator

from .base import DataConnector
from .sources import missing
from ..data.coerce import is_number, to_number, to_plain
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

FILE_FIELDS = ("userId", "filename", "field")

COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
    "=": operator.eq,
    "==": operator.eq,
    "!=": operator.ne,
    "<>": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}

OPERATORS = tuple(COMPARATORS) + ("between",)


class FilterConnector(DataConnector):
    """
    Selects the rows of an uploaded table whose numeric field satisfies
    a comparison. Rows whose field is not numeric never match.
    """

    def execute(self, tool_name: str, args: Dict[str, Any]) -> Any:

        absent = missing(args, FILE_FIELDS + ("operator",))
        if absent:
            raise InvalidInputError(
                f"Missing required arguments: {', '.join(absent)}."
            )

        field = str(args["field"])
        op = str(args["operator"]).strip().lower()

        if op not in OPERATORS:
            raise InvalidInputError(
                f"Unsupported operator: {args['operator']}. "
                "Use: =, !=, >, <, >=, <=, or BETWEEN"
            )

        value = args.get("value")
        if not is_number(value):
            raise InvalidInputError("'value' must be a number.")

        if op == "between":
            value2 = args.get("value2")
            if not is_number(value2):
                raise InvalidInputError("BETWEEN operator requires a numeric 'value2'.")

            lower, upper = min(value, value2), max(value, value2)
            matches = lambda n: lower <= n <= upper
            applied = f"{field} BETWEEN {to_plain(lower)} AND {to_plain(upper)}"
        else:
            compare = COMPARATORS[op]
            matches = lambda n: compare(n, value)
            applied = f"{field} {args['operator']} {to_plain(value)}"

        table = self._load(str(args["userId"]), str(args["filename"]))
        cells = self._column(table, field)

        filtered = []
        for row, cell in zip(table.rows, cells):
            number = to_number(cell)
            if not math.isnan(number) and matches(number):
                filtered.append(dict(row))

        total = table.row_count
        percentage = round(len(filtered) / total * 100, 1) if total else 0

        logger.debug(
            "[CONNECTOR] filter | %s | matched=%d/%d",
            applied,
            len(filtered),
            total,
        )

        return {
            "filteredData": filtered,
            "matchCount": len(filtered),
            "totalCount": total,
            "filterApplied": applied,
            "percentageMatched": percentage,
        }
