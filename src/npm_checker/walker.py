"""Recursive directory traversal shared by the lock file locator and text scanner."""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Callable, Iterator

import structlog

log = structlog.get_logger("npm_checker.walker")

EXCLUDED_DIRS = frozenset({"node_modules"})


def is_excluded(name: str) -> bool:
    """Hidden entries and dependency caches are never visited."""
    return name in EXCLUDED_DIRS or name.startswith(".")


def walk(root: Path, accept: Callable[[Path], bool]) -> Iterator[Path]:
    """Yield files under ``root`` for which ``accept`` returns True.

    Depth-first; entries of a directory are visited in name order. Symlinked
    directories are not followed. A directory that cannot be listed is logged
    and contributes nothing, while its siblings are still visited.
    """
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        log.warning("walker.list_failed", path=str(root), error=str(exc))
        return

    for entry in entries:
        if is_excluded(entry.name):
            continue
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file(follow_symlinks=False)
        except OSError as exc:
            log.warning("walker.stat_failed", path=str(path), error=str(exc))
            continue
        if is_dir:
            yield from walk(path, accept)
        elif is_file and accept(path):
            yield path
