"""Parse pnpm-lock.yaml line by line and match package entries."""

from __future__ import annotations

import re
from pathlib import Path

from ..models import LockFileMatch, PackageManager
from .common import build_matches, log_failure

SECTION = "pnpm-lock.yaml"

_ENTRY = re.compile(r"""^\s*['"]?([/@\w.-]+)['"]?:(.*)$""")
_VALUE_VERSION = re.compile(r"^\s*(\d+\.\d+\.\d+\S*)")
# Keys look like "/name@1.2.3", "/@scope/name@1.2.3" or (lockfile v5) "/name/1.2.3"
_KEY_VERSION = re.compile(r"^(.+?)[@/](\d+\.\d+\.\d+\S*)$")


def split_entry(line: str) -> tuple[str, str | None] | None:
    """Return ``(package, version)`` for a package-like line, else None."""
    entry = _ENTRY.match(line)
    if not entry:
        return None
    key = entry.group(1)
    if key.startswith("/"):
        key = key[1:]

    value_version = _VALUE_VERSION.match(entry.group(2))
    if value_version:
        return key, value_version.group(1)

    keyed = _KEY_VERSION.match(key)
    if keyed:
        return keyed.group(1), keyed.group(2)
    return key, None


def parse(path: Path, patterns: list[str]) -> list[LockFileMatch]:
    """Return matches from a pnpm lock file."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, ValueError) as exc:
        log_failure(PackageManager.PNPM, path, exc)
        return []

    found: list[LockFileMatch] = []
    for line in lines:
        entry = split_entry(line)
        if entry is None:
            continue
        package, version = entry
        found.extend(build_matches(patterns, package, version, SECTION, path))
    return found
