"""Human-readable console rendering of scan results."""

from __future__ import annotations

from .discovery import LOCK_FILES
from .models import LockFileMatch, TextMatch
from .report import group_by_pattern
from .scanner import EXTENSIONS_TO_SEARCH

CLEAN_MESSAGE = "No matches found. Your project appears clean!"


def render_text(matches: list[LockFileMatch] | list[TextMatch]) -> str:
    """Return a plain-text report with one block per matched package."""
    if not matches:
        return CLEAN_MESSAGE + "\n"

    lines = [f"Found {len(matches)} match(es):"]

    for pattern, group in group_by_pattern(matches).items():
        lines.append("")
        lines.append(f"Package: {pattern}")
        for match in group:
            if isinstance(match, LockFileMatch):
                lines.append(f"  {match.package}@{match.version} (found in {match.section})")
            else:
                lines.append(f"  {match.file}:{match.line}")
                lines.append(f"    {match.content}")

    return "\n".join(lines) + "\n"


def render_settings_banner(patterns: list[str]) -> str:
    """Describe what is being checked, as shown before a scan starts."""
    rule = "-" * 60
    lines = [f"Testing for {len(patterns)} compromised package(s):", rule]
    lines.extend(f"{index:>4}. {pattern}" for index, pattern in enumerate(patterns, start=1))
    lines.append(rule)
    lines.append("File extensions checked in exhaustive mode:")
    lines.append(f"   {', '.join(EXTENSIONS_TO_SEARCH)}")
    lines.append("Lock files checked in shallow mode:")
    lines.extend(f"   {name} ({manager.value})" for name, manager in LOCK_FILES.items())
    lines.append(rule)
    return "\n".join(lines) + "\n"
