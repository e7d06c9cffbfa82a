"""Core scanning entrypoints.

This module holds no CLI or network concerns: callers pass in the target
directory, the package names to look for and the check mode.
"""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterable

import structlog

from .discovery import find_lock_files
from .errors import EmptyPatternListError, NotADirectoryTargetError, TargetNotFoundError
from .models import CheckMode, LockFileMatch, TextMatch
from .parsers import get_parser
from .scanner import scan_directory

log = structlog.get_logger("npm_checker.core")


def validate_target(root: Path | str) -> Path:
    """Return the resolved scan root, or raise if it is not an existing directory."""
    if not str(root).strip():
        raise TargetNotFoundError("No directory specified.")
    path = Path(root)
    if not path.exists():
        raise TargetNotFoundError(f'Directory "{root}" does not exist.')
    if not path.is_dir():
        raise NotADirectoryTargetError(f'"{root}" is not a directory.')
    return path.resolve()


def validate_patterns(patterns: Iterable[str]) -> list[str]:
    """Strip package names and drop blanks; an empty result is fatal."""
    cleaned = [p.strip() for p in patterns if p and p.strip()]
    if not cleaned:
        raise EmptyPatternListError("No package names specified.")
    return cleaned


def shallow_check(root: Path, patterns: list[str]) -> list[LockFileMatch]:
    """Check every lock file under ``root`` for the given package names."""
    lock_files = find_lock_files(root)
    if not lock_files:
        log.warning(
            "core.no_lock_files",
            root=str(root),
            hint="cannot perform shallow check; try an exhaustive check instead",
        )
        return []

    log.info("core.lock_files_found", root=str(root), count=len(lock_files))

    results: list[LockFileMatch] = []
    for lock_file in lock_files:
        matches = get_parser(lock_file.manager)(lock_file.path, patterns)
        log.info(
            "core.lock_file_checked",
            path=str(lock_file.path),
            manager=lock_file.manager.value,
            matches=len(matches),
        )
        results.extend(matches)
    return results


def exhaustive_check(root: Path, patterns: list[str]) -> list[TextMatch]:
    """Search all recognised source/text files under ``root``."""
    log.info("core.exhaustive_scan", root=str(root), patterns=len(patterns))
    return scan_directory(root, patterns)


def scan_repository(
    root: Path | str,
    patterns: Iterable[str],
    mode: CheckMode = CheckMode.EXHAUSTIVE,
) -> list[LockFileMatch] | list[TextMatch]:
    """Validate inputs and run the selected check.

    Params:
        root: project directory to scan
        patterns: package names to look for, e.g. from a compromised list feed
        mode: shallow (lock files only) or exhaustive (all recognised files)

    Returns: a fresh list of match records; empty means no matches.

    Raises:
        ValidationError: when the directory or the package list is unusable.
    """
    target = validate_target(root)
    names = validate_patterns(patterns)
    mode = CheckMode(mode)

    log.info("core.scan_started", root=str(target), mode=mode.value, patterns=len(names))
    if mode is CheckMode.SHALLOW:
        return shallow_check(target, names)
    return exhaustive_check(target, names)
