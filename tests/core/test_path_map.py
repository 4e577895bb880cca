"""Tests for the PathMap facade."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import pytest

from pathmap import PathMap
from pathmap.errors import (
    ContentNotFoundError,
    EmptyPathError,
    ForbiddenKeyError,
    IndexOutOfBoundsError,
    InvalidSegmentError,
    MalformedInputError,
    ValueNotFoundError,
)


class TestGamesListing:
    def test_simple_paths(self, nba: PathMap) -> None:
        assert nba.path("data#1.home_team.full_name") == "Boston Celtics"
        assert nba.path("meta.total_pages") == 2050

    def test_object_result(self, nba: PathMap) -> None:
        home_team = nba.path("data#2.home_team")
        assert isinstance(home_team, dict)
        assert "full_name" in home_team

    def test_first_level_values(self, nba: PathMap) -> None:
        assert isinstance(nba.path("data"), list)
        assert isinstance(nba.path("meta"), dict)

    def test_false_is_a_result(self, nba: PathMap) -> None:
        assert nba.path("data#2.postseason") is False

    def test_missing_top_level_key(self, nba: PathMap) -> None:
        with pytest.raises(ValueNotFoundError):
            nba.path("stuff#890.postseason")

    def test_out_of_bounds(self, nba: PathMap) -> None:
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            nba.path("data#9.home_team")
        assert exc_info.value.length == 3


class TestConstruction:
    def test_wrong_data(self) -> None:
        with pytest.raises(MalformedInputError):
            PathMap(' "abbreviation": "CHA"')

    def test_forbidden_key(self) -> None:
        with pytest.raises(ForbiddenKeyError) as exc_info:
            PathMap('{"__proto__": {"polluted": true}}')
        assert exc_info.value.key == "__proto__"

    def test_from_json_file(self, fixtures_dir: Path) -> None:
        pm = PathMap.from_file(fixtures_dir / "nba.json")
        assert pm.path("data#0.visitor_team.abbreviation") == "CHA"

    def test_from_yaml_file(self, write_file: Any) -> None:
        path = write_file("teams.yaml", "teams:\n  - name: Celtics\n    city: Boston\n")
        pm = PathMap.from_file(path)
        assert pm.path("teams#0.city") == "Boston"

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContentNotFoundError):
            PathMap.from_file(tmp_path / "missing.json")

    def test_from_yaml_file_with_reserved_key(self, write_file: Any) -> None:
        path = write_file("bad.yaml", "constructor:\n  polluted: true\n")
        with pytest.raises(ForbiddenKeyError):
            PathMap.from_file(path)


class TestPathArgument:
    def test_non_string(self) -> None:
        pm = PathMap({"data": "value"})
        assert pm.path(None) is None  # type: ignore[arg-type]

    def test_empty(self) -> None:
        with pytest.raises(EmptyPathError):
            PathMap({"data": "value"}).path("")

    def test_invalid_segment(self) -> None:
        with pytest.raises(InvalidSegmentError):
            PathMap({"data": "value"}).path("data.!@#$%")


class TestMappingView:
    def test_read_only_protocol(self) -> None:
        pm = PathMap({"a": 1, "b": [2]})
        assert "a" in pm
        assert "z" not in pm
        assert len(pm) == 2
        assert list(pm) == ["a", "b"]
        assert list(pm.keys()) == ["a", "b"]
        assert pm.get("b") == [2]
        assert pm.get("z", "default") == "default"

    def test_not_a_dict_subclass(self) -> None:
        assert not isinstance(PathMap({}), dict)
        assert not hasattr(PathMap({}), "__setitem__")

    def test_repr(self) -> None:
        assert repr(PathMap({"a": 1})) == "PathMap(keys=['a'])"


class TestConcurrentReads:
    def test_parallel_resolution(self, nba: PathMap) -> None:
        results: list[Any] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(100):
                value = nba.path("data#1.home_team.full_name")
                with lock:
                    results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 800
        assert set(results) == {"Boston Celtics"}
