"""Shared test fixtures for the pathmap test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pathmap import PathMap

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON documents used across tests."""
    return FIXTURES_DIR


@pytest.fixture
def nba_text(fixtures_dir: Path) -> str:
    """Raw JSON text of a paginated games listing."""
    return (fixtures_dir / "nba.json").read_text(encoding="utf-8")


@pytest.fixture
def nba(nba_text: str) -> PathMap:
    """PathMap built from the games listing."""
    return PathMap(nba_text)


@pytest.fixture
def games_data() -> dict[str, Any]:
    """Small structured document with nested objects, sequences and nulls."""
    return {
        "data": [{"home_team": {"full_name": "Boston Celtics"}}],
        "meta": {"total_pages": 2050},
    }


@pytest.fixture
def write_file(tmp_path: Path) -> Any:
    """Factory writing text to a file under tmp_path and returning its path."""

    def factory(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return factory
