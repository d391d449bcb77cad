from __future__ import annotations

from typing import Any, List
import logging

from ..errors import ColumnNotFoundError, InvalidInputError
from .tabular import TabularData

logger = logging.getLogger(__name__)


def extract_column(data: TabularData, column_name: str) -> List[Any]:
    """
    Return the raw values of one column, one per row, in row order.

    No filtering or coercion happens here. Rows that lack the key
    contribute None so the result length always equals the row count.
    """

    if not isinstance(data, TabularData):
        raise InvalidInputError("Data must be a TabularData instance.")

    if not column_name or not isinstance(column_name, str):
        raise InvalidInputError("A non-empty column name is required.")

    if not data.has_column(column_name):
        suggestion = next(
            (c for c in data.columns if c.lower() == column_name.lower()),
            None,
        )

        logger.debug(
            "[EXTRACT] Missing column %s | available=%s",
            column_name,
            list(data.columns),
        )

        raise ColumnNotFoundError(column_name, data.columns, suggestion)

    values = [row.get(column_name) for row in data.rows]

    logger.debug(
        "[EXTRACT] %d values from field '%s'",
        len(values),
        column_name,
    )

    return values
