"""pathmap - Path-addressed, read-only access to nested JSON-like data."""

from __future__ import annotations

__version__ = "0.0.4"

# Core
from pathmap.path_map import PathMap
from pathmap.store import RESERVED_KEYS, construct
from pathmap.traversal import resolve
from pathmap.grammar import PathSegment, parse_path, parse_segment
from pathmap.values import ValueKind, kind_of

# Collaborators
from pathmap.config import Config
from pathmap.content import ContentProvider, load_document
from pathmap.migration import MigrationInfo, MigrationStatus, SecurityStatus, VersionInfo

# Errors
from pathmap.errors import (
    ConfigError,
    ConfigNotFoundError,
    ContentNotFoundError,
    EmptyPathError,
    ErrorCodes,
    ForbiddenKeyError,
    IndexOnNonContainerError,
    IndexOutOfBoundsError,
    InvalidSegmentError,
    MalformedInputError,
    PathMapError,
    ValueNotFoundError,
    VersionNotFoundError,
)

__all__ = [
    # Core
    "PathMap",
    "construct",
    "resolve",
    "RESERVED_KEYS",
    "PathSegment",
    "parse_path",
    "parse_segment",
    "ValueKind",
    "kind_of",
    # Collaborators
    "Config",
    "ContentProvider",
    "load_document",
    "MigrationStatus",
    "MigrationInfo",
    "SecurityStatus",
    "VersionInfo",
    # Errors
    "ErrorCodes",
    "PathMapError",
    "MalformedInputError",
    "ForbiddenKeyError",
    "EmptyPathError",
    "InvalidSegmentError",
    "ValueNotFoundError",
    "IndexOutOfBoundsError",
    "IndexOnNonContainerError",
    "ConfigError",
    "ConfigNotFoundError",
    "ContentNotFoundError",
    "VersionNotFoundError",
]
