"""Store construction with the reserved-key security gate."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pathmap.errors import ForbiddenKeyError, MalformedInputError

__all__ = ["RESERVED_KEYS", "construct"]

RESERVED_KEYS: tuple[str, ...] = ("__proto__", "constructor", "prototype")


def _decode(text: str | bytes | bytearray) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(reason=f"PathMap: Invalid JSON string: {e}", cause=e) from e


def construct(data: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """Build a store from JSON text or an already structured mapping.

    Only the top-level keys are checked against RESERVED_KEYS; nested
    mappings are stored untouched.

    Raises:
        MalformedInputError: If text is not valid JSON or the data has no
            key/value pairs to iterate.
        ForbiddenKeyError: If a top-level key is reserved.
    """
    source = _decode(data) if isinstance(data, (str, bytes, bytearray)) else data

    if not isinstance(source, Mapping):
        raise MalformedInputError(
            reason=f"PathMap: can't iterate over key/value pairs of {type(source).__name__}"
        )

    for key in RESERVED_KEYS:
        if key in source:
            raise ForbiddenKeyError(key=key)

    return {key: value for key, value in source.items()}
