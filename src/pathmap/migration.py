"""Migration and security status reporting across pathmap versions."""

from __future__ import annotations

import sys
from typing import IO, Literal

from pydantic import BaseModel, ConfigDict, Field

from pathmap.errors import VersionNotFoundError

__all__ = [
    "VersionInfo",
    "MigrationInfo",
    "SecurityStatus",
    "VERSION_HISTORY",
    "MigrationStatus",
    "latest_version",
]

CompatibilityStatus = Literal["compatible", "needs-migration", "incompatible"]

_RULE_WIDTH = 60

_ACTION_ITEMS = [
    "1. Ensure your code doesn't use dangerous keys (__proto__, constructor, prototype)",
    "2. Add error handling for empty paths",
    "3. Validate path segments before use",
    "4. Check array indices are within bounds before accessing",
    "5. Update tests to expect errors for invalid inputs",
]


class VersionInfo(BaseModel):
    """Breaking changes, security fixes and deprecations of one release."""

    model_config = ConfigDict(frozen=True)

    version: str
    breaking_changes: list[str] = Field(default_factory=list)
    security_fixes: list[str] = Field(default_factory=list)
    deprecated: list[str] = Field(default_factory=list)


class MigrationInfo(BaseModel):
    """Outcome of checking a migration from one version to another."""

    current_version: str
    target_version: str | None = None
    has_breaking_changes: bool
    security_improvements: list[str] = Field(default_factory=list)
    migration_steps: list[str] = Field(default_factory=list)
    compatibility_status: CompatibilityStatus


class SecurityStatus(BaseModel):
    """Security standing of a version relative to the latest release."""

    version: str
    has_security_issues: bool
    security_fixes: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


VERSION_HISTORY: dict[str, VersionInfo] = {
    "0.0.4": VersionInfo(
        version="0.0.4",
        breaking_changes=[
            "Dangerous keys (__proto__, constructor, prototype) are now rejected",
            "Empty paths now throw an error instead of returning null",
            "Invalid path segments now throw an error",
            "Array index bounds are now strictly checked",
        ],
        security_fixes=[
            "Added prototype pollution prevention",
            "Improved JSON parsing with proper error handling",
            "Added array bounds checking to prevent out-of-bounds access",
            "Added input validation for path segments",
        ],
    ),
    "0.0.3": VersionInfo(version="0.0.3"),
}


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split(".") if part.isdigit())


def latest_version(history: dict[str, VersionInfo] | None = None) -> str:
    """Return the highest version in the history by numeric ordering."""
    history = VERSION_HISTORY if history is None else history
    return max(history, key=_version_key)


class MigrationStatus:
    """Tracks migration and security status between versions.

    Args:
        current_version: The version currently in use.
        history: Version table to consult. Defaults to VERSION_HISTORY.
    """

    def __init__(self, current_version: str, history: dict[str, VersionInfo] | None = None) -> None:
        self._current_version = current_version
        self._history = VERSION_HISTORY if history is None else history

    @property
    def current_version(self) -> str:
        return self._current_version

    def check_migration_status(self, target_version: str) -> MigrationInfo:
        """Check the migration from the current version to ``target_version``.

        Raises:
            VersionNotFoundError: If either version is missing from the history.
        """
        current_info = self._history.get(self._current_version)
        target_info = self._history.get(target_version)
        if current_info is None or target_info is None:
            raise VersionNotFoundError(versions=[self._current_version, target_version])

        has_breaking_changes = len(target_info.breaking_changes) > 0
        migration_steps: list[str] = []
        compatibility_status: CompatibilityStatus = "compatible"

        if has_breaking_changes:
            compatibility_status = "needs-migration"
            migration_steps.append("Review breaking changes before upgrading")
            migration_steps.extend(f"- {change}" for change in target_info.breaking_changes)
            migration_steps.append("")
            migration_steps.append("Action items:")
            migration_steps.extend(_ACTION_ITEMS)

        return MigrationInfo(
            current_version=self._current_version,
            target_version=target_version,
            has_breaking_changes=has_breaking_changes,
            security_improvements=list(target_info.security_fixes),
            migration_steps=migration_steps,
            compatibility_status=compatibility_status,
        )

    def get_security_status(self) -> SecurityStatus:
        """Report security fixes of the current version and upgrade advice.

        Raises:
            VersionNotFoundError: If the current version is missing from the history.
        """
        current_info = self._history.get(self._current_version)
        if current_info is None:
            raise VersionNotFoundError(versions=[self._current_version])

        latest = latest_version(self._history)
        latest_info = self._history[latest]
        has_security_issues = self._current_version != latest and len(latest_info.security_fixes) > 0

        recommendations: list[str] = []
        if has_security_issues:
            recommendations.append(f"Upgrade to version {latest} for security improvements:")
            recommendations.extend(f"  - {fix}" for fix in latest_info.security_fixes)

        return SecurityStatus(
            version=self._current_version,
            has_security_issues=has_security_issues,
            security_fixes=list(current_info.security_fixes),
            recommendations=recommendations,
        )

    def format_migration_report(self, target_version: str) -> str:
        info = self.check_migration_status(target_version)
        lines = [
            "=" * _RULE_WIDTH,
            "PATHMAP MIGRATION STATUS REPORT",
            "=" * _RULE_WIDTH,
            f"Current Version: {info.current_version}",
            f"Target Version:  {info.target_version}",
            f"Compatibility:   {info.compatibility_status.upper()}",
            "",
        ]

        if info.has_breaking_changes:
            lines += ["⚠️  BREAKING CHANGES DETECTED", "-" * _RULE_WIDTH]
            lines += info.migration_steps
            lines.append("")

        if info.security_improvements:
            lines += ["🔒 SECURITY IMPROVEMENTS", "-" * _RULE_WIDTH]
            lines += [f"✓ {improvement}" for improvement in info.security_improvements]
            lines.append("")

        lines.append("=" * _RULE_WIDTH)
        return "\n".join(lines)

    def format_security_report(self) -> str:
        status = self.get_security_status()
        lines = [
            "=" * _RULE_WIDTH,
            "PATHMAP SECURITY STATUS REPORT",
            "=" * _RULE_WIDTH,
            f"Version: {status.version}",
            "",
        ]

        if status.security_fixes:
            lines += ["🔒 SECURITY FIXES IN THIS VERSION", "-" * _RULE_WIDTH]
            lines += [f"✓ {fix}" for fix in status.security_fixes]
            lines.append("")

        if status.has_security_issues:
            lines += ["⚠️  SECURITY RECOMMENDATIONS", "-" * _RULE_WIDTH]
            lines += status.recommendations
            lines.append("")
        else:
            lines += ["✅ No known security issues in current version", ""]

        lines.append("=" * _RULE_WIDTH)
        return "\n".join(lines)

    def print_migration_report(self, target_version: str, output: IO[str] | None = None) -> None:
        """Write the migration report to ``output`` (stdout by default)."""
        stream = output if output is not None else sys.stdout
        stream.write(self.format_migration_report(target_version) + "\n")

    def print_security_report(self, output: IO[str] | None = None) -> None:
        """Write the security report to ``output`` (stdout by default)."""
        stream = output if output is not None else sys.stdout
        stream.write(self.format_security_report() + "\n")
