"""Exhaustive scan: search recognised source/text files line by line."""

from __future__ import annotations

from pathlib import Path

import structlog

from .matching import compile_pattern
from .models import TextMatch
from .walker import walk

log = structlog.get_logger("npm_checker.scanner")

EXTENSIONS_TO_SEARCH = (".js", ".json", ".ts", ".jsx", ".tsx", ".vue", ".html", ".md")


def has_searchable_extension(path: Path) -> bool:
    return path.suffix in EXTENSIONS_TO_SEARCH


def search_file(path: Path, patterns: list[str]) -> list[TextMatch]:
    """Return one match per (pattern, line) pair found in ``path``.

    Patterns are applied in the order given; for each pattern every line is
    tested. A line is reported once per pattern however many times the pattern
    occurs on it. Read failures are logged and yield no matches.
    """
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.warning("scanner.read_failed", path=str(path), error=str(exc))
        return []

    lines = content.split("\n")
    found: list[TextMatch] = []
    for pattern in patterns:
        if not pattern:
            continue
        regex = compile_pattern(pattern)
        for index, line in enumerate(lines, start=1):
            if regex.search(line):
                found.append(
                    TextMatch(pattern=pattern, file=path, line=index, content=line.strip())
                )
    return found


def scan_directory(root: Path, patterns: list[str]) -> list[TextMatch]:
    """Search every file with a recognised extension under ``root``."""
    results: list[TextMatch] = []
    if not patterns:
        return results
    for path in walk(root, has_searchable_extension):
        results.extend(search_file(path, patterns))
    return results
