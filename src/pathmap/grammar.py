"""Dot path grammar: ``key.key#index.key``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pathmap.errors import EmptyPathError, InvalidSegmentError

__all__ = ["SEGMENT_PATTERN", "PathSegment", "parse_segment", "parse_path"]

# ASCII word characters only; a '#' without digits after it is consumed and ignored.
SEGMENT_PATTERN = re.compile(r"(?P<key_name>\w+)#?(?P<index>\d+)?", re.ASCII)


@dataclass(frozen=True)
class PathSegment:
    """One dot-delimited unit of a path.

    Attributes:
        key_name: The key to look up, a run of word characters.
        index: Sequence index following ``#``, or None for a bare key.
    """

    key_name: str
    index: int | None = None


def parse_segment(text: str) -> PathSegment:
    """Parse a raw segment into a PathSegment.

    The segment pattern is scanned across the whole text and the last match
    wins, so ``data#-1`` yields ``key_name="1"`` with no index.

    Raises:
        InvalidSegmentError: If the text contains no match at all.
    """
    match = None
    for match in SEGMENT_PATTERN.finditer(text):
        pass
    if match is None:
        raise InvalidSegmentError(segment=text)

    index = match.group("index")
    return PathSegment(
        key_name=match.group("key_name"),
        index=int(index) if index is not None else None,
    )


def parse_path(dot_path: str) -> list[PathSegment]:
    """Split a dot path and parse each segment.

    Raises:
        EmptyPathError: If ``dot_path`` is empty.
        InvalidSegmentError: If any segment fails to parse.
    """
    if not dot_path:
        raise EmptyPathError()
    return [parse_segment(raw) for raw in dot_path.split(".")]
