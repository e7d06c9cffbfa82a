"""Whole-token, case-insensitive package name matching."""

from __future__ import annotations

import re
from functools import lru_cache


@lru_cache(maxsize=4096)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Return a compiled matcher for ``pattern``.

    The pattern is matched literally; ``.``, ``+`` and friends in package names
    carry no regex meaning. The lookarounds act like ``\\b`` when the pattern
    starts/ends with a word character, and still require a non-word neighbour
    when it starts with ``@`` or ends with ``/``. Word characters are ASCII
    only, so ``é`` next to a name counts as a boundary.
    """
    return re.compile(rf"(?<!\w){re.escape(pattern)}(?!\w)", re.IGNORECASE | re.ASCII)


def matches(pattern: str, candidate: str) -> bool:
    """Return True when ``candidate`` contains ``pattern`` as a whole token."""
    if not pattern:
        return False
    return compile_pattern(pattern).search(candidate) is not None


def matching_patterns(patterns: list[str], candidate: str) -> list[str]:
    """Return the patterns (in caller order) that match ``candidate``."""
    return [pattern for pattern in patterns if matches(pattern, candidate)]
