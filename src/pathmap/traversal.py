"""Traversal of a store along a parsed dot path."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pathmap.errors import IndexOnNonContainerError, IndexOutOfBoundsError, ValueNotFoundError
from pathmap.grammar import parse_path
from pathmap.values import ValueKind, is_container, kind_of

__all__ = ["resolve"]

# Distinct from None, which is a legitimate resolved value.
_UNSET: Any = object()


def _element(items: Sequence[Any], index: int) -> Any:
    if index < 0 or index >= len(items):
        raise IndexOutOfBoundsError(index=index, length=len(items))
    return items[index]


def resolve(store: Mapping[str, Any], dot_path: Any) -> Any:
    """Resolve a dot path such as ``data#0.home_team.full_name`` against a store.

    A ``dot_path`` that is not a string yields None instead of failing.
    Resolving *to* None is valid; resolving *through* None is not.

    Raises:
        EmptyPathError: If ``dot_path`` is an empty string.
        InvalidSegmentError: If a segment does not match the grammar.
        ValueNotFoundError: If a key is missing or an intermediate value is None.
        IndexOutOfBoundsError: If a sequence index is out of range.
        IndexOnNonContainerError: If an index is applied to a scalar.
    """
    if not isinstance(dot_path, str):
        return None

    current: Any = _UNSET
    for segment in parse_path(dot_path):
        key_name, index = segment.key_name, segment.index

        if current is _UNSET and key_name in store:
            current = store[key_name]
            if index is not None and kind_of(current) is ValueKind.SEQUENCE:
                current = _element(current, index)
            continue

        if current is _UNSET or current is None:
            raise ValueNotFoundError(key_name=key_name, path=dot_path)

        if kind_of(current) is not ValueKind.OBJECT:
            raise ValueNotFoundError(
                key_name=key_name, path=dot_path, reason=f"{kind_of(current).value} has no keys"
            )
        if key_name not in current:
            raise ValueNotFoundError(key_name=key_name, path=dot_path, reason="key is missing")

        target = current[key_name]
        target_kind = kind_of(target)
        if index is not None and not is_container(target_kind):
            raise IndexOnNonContainerError(key_name=key_name, actual_kind=target_kind.value)

        if index is not None and target_kind is ValueKind.SEQUENCE:
            current = _element(target, index)
        else:
            current = target

    return current
