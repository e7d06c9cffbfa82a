"""Helpers shared by the lock file parsers."""

from __future__ import annotations

from pathlib import Path

import structlog

from ..matching import matching_patterns
from ..models import UNKNOWN_VERSION, LockFileMatch, PackageManager

log = structlog.get_logger("npm_checker.parsers")


def build_matches(
    patterns: list[str],
    package: str,
    version: str | None,
    section: str,
    lock_file: Path | None = None,
) -> list[LockFileMatch]:
    """Return one LockFileMatch per pattern that matches ``package``."""
    return [
        LockFileMatch(
            pattern=pattern,
            package=package,
            version=version or UNKNOWN_VERSION,
            section=section,
            lock_file=lock_file,
        )
        for pattern in matching_patterns(patterns, package)
    ]


def log_failure(manager: PackageManager, path: Path, exc: BaseException) -> None:
    log.error("parser.failed", manager=manager.value, path=str(path), error=str(exc))
