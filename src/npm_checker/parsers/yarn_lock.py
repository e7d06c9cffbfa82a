"""Parse yarn.lock and match resolved dependencies."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from ..models import LockFileMatch, PackageManager
from .common import build_matches, log_failure

SECTION = "yarn.lock"

_VERSION_LINE = re.compile(r"""^version:?\s+["']?([^"'\s]+)["']?""")


class _State(Enum):
    AWAITING_KEY = "awaiting-key"
    AWAITING_VERSION = "awaiting-version"


def package_name_from_header(header: str) -> str | None:
    """Extract the package name from a block header such as ``"@a/b@^1", "@a/b@^2":``."""
    first = header.rstrip()[:-1].split(",", 1)[0].strip().strip("\"'")
    if not first:
        return None
    if first.startswith("@"):
        idx = first.find("@", 1)
        return first if idx == -1 else first[:idx]
    return first.split("@", 1)[0] or None


def parse(path: Path, patterns: list[str]) -> list[LockFileMatch]:
    """Return matches from a yarn (classic or berry) lock file.

    A block header selects the current package; its ``version`` line emits the
    matches. Blank lines and any other unindented line reset the state so that
    a malformed block cannot leak its package name into the next one.
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, ValueError) as exc:
        log_failure(PackageManager.YARN, path, exc)
        return []

    found: list[LockFileMatch] = []
    state = _State.AWAITING_KEY
    current: str | None = None

    for raw in lines:
        line = raw.rstrip()
        if not line or not line[0].isspace():
            state, current = _State.AWAITING_KEY, None
            if line and not line.startswith("#") and line.endswith(":"):
                current = package_name_from_header(line)
                if current:
                    state = _State.AWAITING_VERSION
            continue

        if state is not _State.AWAITING_VERSION or current is None:
            continue
        version = _VERSION_LINE.match(line.strip())
        if version:
            found.extend(build_matches(patterns, current, version.group(1), SECTION, path))
            state = _State.AWAITING_KEY

    return found
