"""File-backed content provider for JSON and YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from pathmap.errors import ContentNotFoundError, MalformedInputError

__all__ = ["ContentProvider", "load_document"]

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _stringify_keys(node: Any) -> Any:
    """Convert YAML mapping keys such as ``200`` or ``true`` to strings, recursively."""
    if isinstance(node, dict):
        return {_key_text(k): _stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(item) for item in node]
    return node


def _parse(text: str, file_path: Path) -> Any:
    if not text.strip():
        return {}

    if file_path.suffix.lower() in _YAML_SUFFIXES:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedInputError(reason=f"Invalid YAML in {file_path}: {e}", cause=e) from e
        return {} if parsed is None else _stringify_keys(parsed)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(reason=f"Invalid JSON in {file_path}: {e}", cause=e) from e


def load_document(file_path: str | Path) -> Any:
    """Read and parse a JSON or YAML file, choosing the parser by suffix.

    Files that are not ``.yaml``/``.yml`` are parsed as JSON. An empty file
    loads as an empty mapping.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ContentNotFoundError(content_path=str(path))
    logger.debug("Loading document %s", path)
    return _parse(path.read_text(encoding="utf-8"), path)


class ContentProvider:
    """Looks up named documents under a base directory.

    ``ContentProvider("./fixtures")("nba")`` returns the text of
    ``./fixtures/nba.json``; ``load("nba")`` returns it parsed.
    """

    def __init__(self, base_path: str | Path = ".", file_extension: str = "json") -> None:
        self._base_path: Path = Path(base_path)
        self._file_extension: str = file_extension.lstrip(".")

    @property
    def base_path(self) -> Path:
        return self._base_path

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def locate(self, name: str) -> Path:
        """Return the file path a document name maps to."""
        return self._base_path / f"{name}.{self._file_extension}"

    def read(self, name: str) -> str:
        """Return the raw text of a named document."""
        file_path = self.locate(name)
        if not file_path.is_file():
            raise ContentNotFoundError(content_path=str(file_path))
        logger.debug("Reading content %s", file_path)
        return file_path.read_text(encoding="utf-8")

    def load(self, name: str) -> Any:
        """Return the parsed contents of a named document."""
        return load_document(self.locate(name))

    def __call__(self, name: str) -> str:
        return self.read(name)
