"""Error hierarchy for pathmap."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PathMapError",
    "MalformedInputError",
    "ForbiddenKeyError",
    "EmptyPathError",
    "InvalidSegmentError",
    "ValueNotFoundError",
    "IndexOutOfBoundsError",
    "IndexOnNonContainerError",
    "ConfigNotFoundError",
    "ConfigError",
    "ContentNotFoundError",
    "VersionNotFoundError",
    "ErrorCodes",
]


class PathMapError(Exception):
    """Base error for all pathmap errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class MalformedInputError(PathMapError):
    """Raised when input is neither decodable JSON text nor a key/value mapping."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_INPUT",
            message=reason,
            details={"reason": reason},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        """Why the input was rejected."""
        return self.details["reason"]


class ForbiddenKeyError(PathMapError):
    """Raised when the top level of the input carries a reserved key."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="FORBIDDEN_KEY",
            message=f'Dangerous key "{key}" is not allowed',
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The reserved key that was found."""
        return self.details["key"]


class EmptyPathError(PathMapError):
    """Raised when an empty path string is resolved."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(code="EMPTY_PATH", message="PathMap: path cannot be empty", **kwargs)


class InvalidSegmentError(PathMapError):
    """Raised when a path segment does not match the segment grammar."""

    def __init__(self, segment: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_SEGMENT",
            message=f'Invalid path segment: "{segment}"',
            details={"segment": segment},
            **kwargs,
        )

    @property
    def segment(self) -> str:
        """The raw segment text that failed to parse."""
        return self.details["segment"]


class ValueNotFoundError(PathMapError):
    """Raised when traversal reaches a missing key or a null intermediate."""

    def __init__(self, key_name: str, path: str, reason: str = "no value to traverse", **kwargs: Any) -> None:
        super().__init__(
            code="VALUE_NOT_FOUND",
            message=f"PathMap: can't find '{key_name}' in '{path}': {reason}",
            details={"key_name": key_name, "path": path},
            **kwargs,
        )

    @property
    def key_name(self) -> str:
        """The segment key at which traversal stopped."""
        return self.details["key_name"]

    @property
    def path(self) -> str:
        """The full path being resolved."""
        return self.details["path"]


class IndexOutOfBoundsError(PathMapError):
    """Raised when a sequence index is negative or past the end."""

    def __init__(self, index: int, length: int, **kwargs: Any) -> None:
        super().__init__(
            code="INDEX_OUT_OF_BOUNDS",
            message=f"Index {index} out of bounds (length {length})",
            details={"index": index, "length": length},
            **kwargs,
        )

    @property
    def index(self) -> int:
        """The requested index."""
        return self.details["index"]

    @property
    def length(self) -> int:
        """The length of the indexed sequence."""
        return self.details["length"]


class IndexOnNonContainerError(PathMapError):
    """Raised when an index is requested on a value that is not a container."""

    def __init__(self, key_name: str, actual_kind: str, **kwargs: Any) -> None:
        super().__init__(
            code="INDEX_ON_NON_CONTAINER",
            message=f"PathMap: can't index '{key_name}', value is not a container: {actual_kind}",
            details={"key_name": key_name, "actual_kind": actual_kind},
            **kwargs,
        )

    @property
    def key_name(self) -> str:
        """The key whose value was indexed."""
        return self.details["key_name"]

    @property
    def actual_kind(self) -> str:
        """The kind of the value found at the key."""
        return self.details["actual_kind"]


class ConfigNotFoundError(PathMapError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PathMapError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ContentNotFoundError(PathMapError):
    """Raised when a content provider cannot find the requested document."""

    def __init__(self, content_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONTENT_NOT_FOUND",
            message=f"Content not found: {content_path}",
            details={"content_path": content_path},
            **kwargs,
        )


class VersionNotFoundError(PathMapError):
    """Raised when a version is missing from the version history."""

    def __init__(self, versions: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="VERSION_NOT_FOUND",
            message=f"Version information not found for {' or '.join(versions)}",
            details={"versions": versions},
            **kwargs,
        )


class ErrorCodes:
    """All pathmap error codes as constants.

    Example:
        if error.code == ErrorCodes.INDEX_OUT_OF_BOUNDS:
            handle_bounds()
    """

    MALFORMED_INPUT = "MALFORMED_INPUT"
    FORBIDDEN_KEY = "FORBIDDEN_KEY"
    EMPTY_PATH = "EMPTY_PATH"
    INVALID_SEGMENT = "INVALID_SEGMENT"
    VALUE_NOT_FOUND = "VALUE_NOT_FOUND"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    INDEX_ON_NON_CONTAINER = "INDEX_ON_NON_CONTAINER"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"
    VERSION_NOT_FOUND = "VERSION_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
