"""Value kinds for the JSON-like data walked by path resolution."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ["ValueKind", "kind_of", "is_container"]


class ValueKind(str, Enum):
    """Closed set of value kinds recognised during traversal."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    OBJECT = "object"
    OPAQUE = "opaque"


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    bool is checked before numbers since it subclasses int. Strings and bytes
    are scalars even though they are sequences to Python. Values that are not
    JSON-like (callables, arbitrary objects) are OPAQUE leaves.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return ValueKind.OPAQUE


def is_container(kind: ValueKind) -> bool:
    return kind in (ValueKind.SEQUENCE, ValueKind.OBJECT)
