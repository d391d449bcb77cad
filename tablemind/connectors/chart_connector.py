from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Any, List, Optional, Tuple, Union
import logging

from .base import DataConnector
from .sources import (
    ColumnPairSource,
    InlinePointsSource,
    as_list,
    missing,
    require_string,
)
from ..data.coerce import to_label, to_number, to_number_or, to_plain
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

CHART_TYPES = ("bar", "xy")

COLUMN_FIELDS = ("userId", "filename", "xField", "yField")

# Output key -> accepted input keys, first match wins
BAR_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("name", "label"),
    "value": ("value", "y"),
}

XY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "x": ("x",),
    "y": ("y",),
}

DEFAULT_LABELS = {
    "bar": ("Category", "Value"),
    "xy": ("X", "Y"),
}


def pick(point: Mapping, aliases: Tuple[str, ...]) -> Any:
    """Value of the first alias present with a non-None value."""
    for key in aliases:
        if point.get(key) is not None:
            return point[key]
    return None


def bar_point(name: Any, value: Any) -> Dict[str, Any]:
    return {
        "name": to_label(name),
        "value": to_plain(to_number_or(value, 0.0)),
    }


def xy_point(x: Any, y: Any) -> Dict[str, Any]:
    # NaN marks an unplottable point, not a failed chart
    return {"x": to_plain(to_number(x)), "y": to_plain(to_number(y))}


class ChartConnector(DataConnector):
    """
    Builds bar and xy chart specifications for the frontend.

    Points come either inline from the caller or from two columns of an
    uploaded file, paired by row index.
    """

    def execute(self, tool_name: str, args: Dict[str, Any]) -> Any:

        chart_type = args.get("type")
        if chart_type not in CHART_TYPES:
            raise InvalidInputError(
                f"'type' must be either \"bar\" or \"xy\", got {chart_type!r}."
            )

        title = require_string(args, "title")

        source = self._resolve_source(args)

        if isinstance(source, InlinePointsSource):
            data = self._from_points(chart_type, source.points)
            x_default = y_default = None
        else:
            data = self._from_columns(chart_type, source)
            x_default, y_default = source.x_field, source.y_field

        x_label = self._label(args, "xLabel", x_default, DEFAULT_LABELS[chart_type][0])
        y_label = self._label(args, "yLabel", y_default, DEFAULT_LABELS[chart_type][1])

        logger.debug(
            "[CONNECTOR] chart | type=%s | points=%d | source=%s",
            chart_type,
            len(data),
            type(source).__name__,
        )

        return {
            "type": chart_type,
            "title": title,
            "data": data,
            "xLabel": x_label,
            "yLabel": y_label,
            "dataPoints": len(data),
        }

    # ------------------------------------------------------------------
    # Source Resolution
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_source(
        args: Dict[str, Any],
    ) -> Union[InlinePointsSource, ColumnPairSource]:

        if args.get("data") is not None:
            points = as_list(args["data"], "data")

            if not points:
                raise InvalidInputError("'data' must be a non-empty array of points.")

            for index, point in enumerate(points):
                if not isinstance(point, Mapping):
                    raise InvalidInputError(
                        f"'data[{index}]' must be an object, got {type(point).__name__}."
                    )

            return InlinePointsSource(points=tuple(points))

        absent = missing(args, COLUMN_FIELDS)
        if absent:
            raise InvalidInputError(
                "Provide either 'data' (a non-empty array of points) or "
                "'filename', 'xField' and 'yField' to chart file columns "
                f"(missing: {', '.join(absent)})."
            )

        return ColumnPairSource(
            user_id=str(args["userId"]),
            filename=str(args["filename"]),
            x_field=str(args["xField"]),
            y_field=str(args["yField"]),
        )

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    @staticmethod
    def _from_points(chart_type: str, points) -> List[Dict[str, Any]]:
        if chart_type == "bar":
            return [
                bar_point(pick(p, BAR_ALIASES["name"]), pick(p, BAR_ALIASES["value"]))
                for p in points
            ]

        return [
            xy_point(pick(p, XY_ALIASES["x"]), pick(p, XY_ALIASES["y"]))
            for p in points
        ]

    def _from_columns(
        self,
        chart_type: str,
        source: ColumnPairSource,
    ) -> List[Dict[str, Any]]:

        table = self._load(source.user_id, source.filename)
        xs = self._column(table, source.x_field)
        ys = self._column(table, source.y_field)

        if not xs or not ys:
            raise InvalidInputError(
                f"Columns '{source.x_field}' and '{source.y_field}' must contain data."
            )

        if len(xs) != len(ys):
            raise InvalidInputError(
                f"Column lengths don't match: '{source.x_field}' has {len(xs)} rows, "
                f"'{source.y_field}' has {len(ys)} rows."
            )

        make = bar_point if chart_type == "bar" else xy_point
        return [make(x, y) for x, y in zip(xs, ys)]

    @staticmethod
    def _label(
        args: Dict[str, Any],
        key: str,
        field_default: Optional[str],
        placeholder: str,
    ) -> str:
        value = args.get(key)
        if isinstance(value, str) and value.strip():
            return value
        return field_default or placeholder
