"""
Data-source shapes for tools that accept either inline values or a
reference to a column in an uploaded file.

Each tool resolves its raw arguments into exactly one of these once, at
the top of execution, and only works with the resolved shape afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from ..errors import InvalidInputError


@dataclass(frozen=True)
class FileSource:
    user_id: str
    filename: str
    field: str


@dataclass(frozen=True)
class DirectSource:
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class ColumnPairSource:
    user_id: str
    filename: str
    x_field: str
    y_field: str


@dataclass(frozen=True)
class InlinePointsSource:
    points: Tuple[Mapping, ...]


def is_present(args: Dict[str, Any], key: str) -> bool:
    value = args.get(key)
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def missing(args: Dict[str, Any], keys: Iterable[str]) -> List[str]:
    return [k for k in keys if not is_present(args, k)]


def require_string(args: Dict[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"'{key}' must be a non-empty string.")
    return value


def as_list(value: Any, name: str) -> List[Any]:
    """Accept any non-string sequence; reject everything else."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidInputError(
            f"'{name}' must be an array, got {type(value).__name__}."
        )
    return list(value)
