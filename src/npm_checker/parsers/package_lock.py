"""Parse npm package-lock.json and match resolved dependencies."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models import LockFileMatch, PackageManager
from .common import build_matches, log_failure

NODE_MODULES_PREFIX = "node_modules/"
SECTIONS = ("dependencies", "packages")


def _version_of(meta: Any) -> str | None:
    if isinstance(meta, dict) and meta.get("version") is not None:
        return str(meta["version"])
    return None


def parse(path: Path, patterns: list[str]) -> list[LockFileMatch]:
    """Return matches from the lockfile's dependency maps.

    Supports npm v1 ("dependencies" tree) and v2+ ("packages" map); both are
    inspected when present, so a package listed in each yields two matches.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("lockfile root must be a JSON object")
    except (OSError, ValueError) as exc:
        log_failure(PackageManager.NPM, path, exc)
        return []

    found: list[LockFileMatch] = []
    for section in SECTIONS:
        deps = data.get(section)
        if not isinstance(deps, dict):
            continue
        for key, meta in deps.items():
            name = key[len(NODE_MODULES_PREFIX) :] if key.startswith(NODE_MODULES_PREFIX) else key
            found.extend(build_matches(patterns, name, _version_of(meta), section, path))
    return found
