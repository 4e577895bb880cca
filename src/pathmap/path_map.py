"""PathMap: a read-only, path-addressed view over nested data."""

from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping
from pathlib import Path
from typing import Any

from pathmap.content import load_document
from pathmap.store import construct
from pathmap.traversal import resolve

__all__ = ["PathMap"]


class PathMap:
    """Resolves dot paths like ``data#1.home_team.full_name`` over a store.

    The store is built once from JSON text or a mapping and never mutated,
    so a single instance can serve concurrent ``path()`` calls.

    Raises (on construction):
        MalformedInputError: If the data is not decodable JSON or a mapping.
        ForbiddenKeyError: If a top-level key is ``__proto__``,
            ``constructor`` or ``prototype``.
    """

    def __init__(self, data: str | bytes | Mapping[str, Any]) -> None:
        self._store: dict[str, Any] = construct(data)

    @classmethod
    def from_file(cls, file_path: str | Path) -> PathMap:
        """Build a PathMap from a JSON or YAML file."""
        return cls(load_document(file_path))

    def path(self, dot_path: str) -> Any:
        """Resolve a dot path against the store. See ``pathmap.traversal.resolve``."""
        return resolve(self._store, dot_path)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a top-level value without path parsing."""
        return self._store.get(key, default)

    def keys(self) -> KeysView[str]:
        return self._store.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"PathMap(keys={list(self._store)!r})"
