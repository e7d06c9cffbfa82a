"""Result grouping and schema-friendly report output."""

from __future__ import annotations

from typing import Any, TypeVar
from collections.abc import Iterable

from .models import CheckMode, LockFileMatch, TextMatch

MatchT = TypeVar("MatchT", LockFileMatch, TextMatch)


def group_by_pattern(matches: Iterable[MatchT]) -> dict[str, list[MatchT]]:
    """Group matches by their ``pattern`` field.

    Groups appear in first-seen order and keep insertion order internally.
    Nothing is filtered or deduplicated: the same package listed in two lock
    file sections stays as two entries.
    """
    grouped: dict[str, list[MatchT]] = {}
    for match in matches:
        grouped.setdefault(match.pattern, []).append(match)
    return grouped


def aggregate(matches: list[LockFileMatch] | list[TextMatch], mode: CheckMode) -> dict[str, Any]:
    """Aggregate a scan result into a single JSON-serialisable report.

    Computes totals and the top-level findings flag, and lists the matches of
    each pattern group.
    """
    grouped = group_by_pattern(matches)

    report: dict[str, Any] = {
        "version": "1",
        "mode": mode.value,
        "hasFindings": bool(matches),
        "totals": {
            "matches": len(matches),
            "patterns": len(grouped),
        },
        "groups": [
            {"pattern": pattern, "matches": [m.to_dict() for m in group]}
            for pattern, group in grouped.items()
        ],
    }

    return report
