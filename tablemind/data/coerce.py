"""
Cell value coercion.

Extraction never filters or converts; each tool decides which notion of
"valid" it needs and uses these helpers to get there.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, List
import math


NAN = float("nan")


def is_number(value: Any) -> bool:
    """True for real, finite numbers that are not bools."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        # ints beyond float range
        return False


def to_number(value: Any) -> float:
    """
    Coerce a raw cell value to float.

    Numbers pass through, numeric strings are parsed after stripping
    whitespace. Everything else (None, empty strings, bools, text,
    infinities) becomes NaN.
    """
    if is_number(value):
        return float(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return NAN
        try:
            number = float(text)
        except ValueError:
            return NAN
        return number if math.isfinite(number) else NAN

    return NAN


def to_number_or(value: Any, default: float) -> float:
    number = to_number(value)
    return default if math.isnan(number) else number


def numeric_values(values: Iterable[Any]) -> List[float]:
    """Coerce every value and keep only those that produced a number."""
    result = []
    for value in values:
        number = to_number(value)
        if not math.isnan(number):
            result.append(number)
    return result


def strict_numbers(values: Iterable[Any]) -> List[float]:
    """Keep only values that already are numbers. Strings are not parsed."""
    return [float(v) for v in values if is_number(v)]


def to_label(value: Any, default: str = "Unknown") -> str:
    """Stringify a cell for use as a category label."""
    if value is None:
        return default

    if isinstance(value, float):
        if math.isnan(value):
            return default
        if value.is_integer():
            return str(int(value))

    return str(value)


def to_plain(number: float):
    """Return an int for integral floats so results serialize cleanly."""
    number = float(number)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number
