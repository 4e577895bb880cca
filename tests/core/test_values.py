"""Tests for value kind classification."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from pathmap.values import ValueKind, is_container, kind_of


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.OBJECT),
        (OrderedDict(), ValueKind.OBJECT),
        (print, ValueKind.OPAQUE),
        (b"raw", ValueKind.OPAQUE),
        ({1, 2}, ValueKind.OPAQUE),
    ],
)
def test_kind_of(value: Any, expected: ValueKind) -> None:
    assert kind_of(value) is expected


def test_kind_values_are_strings() -> None:
    assert ValueKind.SEQUENCE == "sequence"
    assert ValueKind.OBJECT.value == "object"


def test_is_container() -> None:
    assert is_container(ValueKind.SEQUENCE)
    assert is_container(ValueKind.OBJECT)
    assert not any(
        is_container(kind) for kind in ValueKind if kind not in (ValueKind.SEQUENCE, ValueKind.OBJECT)
    )
