"""Command line front end: migration/security reports and path lookups."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pathmap import __version__
from pathmap.config import Config
from pathmap.content import ContentProvider
from pathmap.errors import ConfigError, PathMapError
from pathmap.migration import MigrationStatus
from pathmap.path_map import PathMap

__all__ = ["main"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathmap",
        description="Resolve dot paths in JSON/YAML documents and report migration status",
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", metavar="FILE", help="YAML configuration file")
    p.add_argument("--current-version", help="version to report on (default: installed version)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="logging level (default: logging.level from config, else WARNING)",
    )
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("security", help="show security status of the current version")

    sp_check = sub.add_parser("check", help="check migration to a target version")
    sp_check.add_argument("version", help="target version, e.g. 0.0.4")

    sp_get = sub.add_parser("get", help="resolve a dot path in a document and print it as JSON")
    sp_get.add_argument("source", help="file path, or document name under content.base_path")
    sp_get.add_argument("path", help="dot path, e.g. data#0.home_team.full_name")

    return p


def _load_source(source: str, config: Config) -> PathMap:
    if Path(source).is_file():
        return PathMap.from_file(source)
    provider = ContentProvider(
        base_path=config.get("content.base_path", "."),
        file_extension=config.get("content.file_extension", "json"),
    )
    logger.debug("Looking up %r under %s", source, provider.base_path)
    return PathMap(provider.load(source))


def _run(ns: argparse.Namespace, config: Config) -> int:
    current_version = ns.current_version or config.get("migration.current_version", __version__)

    if ns.cmd == "security":
        MigrationStatus(current_version).print_security_report()
        return 0

    if ns.cmd == "check":
        MigrationStatus(current_version).print_migration_report(ns.version)
        return 0

    if ns.cmd == "get":
        value: Any = _load_source(ns.source, config).path(ns.path)
        sys.stdout.write(json.dumps(value, ensure_ascii=False, default=str) + "\n")
        return 0

    _build_parser().print_help()
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    try:
        config = Config.from_yaml(ns.config) if ns.config else Config()
        level = ns.log_level or str(config.get("logging.level", "WARNING")).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(message=f"Unknown logging level in configuration: {level}")
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        return _run(ns, config)
    except PathMapError as e:
        logger.debug("Command failed", exc_info=True)
        sys.stderr.write(f"error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
