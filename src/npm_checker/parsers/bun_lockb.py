"""bun.lockb placeholder: the binary lockfile format is not parsed."""

from __future__ import annotations

from pathlib import Path

import structlog

from ..models import LockFileMatch, PackageManager

log = structlog.get_logger("npm_checker.parsers")


def parse(path: Path, patterns: list[str]) -> list[LockFileMatch]:
    log.warning(
        "parser.unsupported_format",
        manager=PackageManager.BUN.value,
        path=str(path),
        hint="bun lockfile format not yet supported; run an exhaustive check instead",
    )
    return []
