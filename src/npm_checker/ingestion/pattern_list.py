"""Resolve a pattern list source into an ordered list of package names."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import PatternListError
from ..validators.pattern_list import validate_document
from .wiz_feed import DEFAULT_TIMEOUT, WIZ_FEED_URL, fetch_wiz_feed, parse_package_names


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _names_from_document(document: Any) -> list[str]:
    """Accept a list of names or a ``{"packages": [{"name": ...}]}`` snapshot."""
    validate_document(document)
    if isinstance(document, list):
        entries = document
    else:
        entries = [entry["name"] for entry in document["packages"]]
    return list(dict.fromkeys(name.strip() for name in entries if name.strip()))


def _names_from_text(text: str) -> list[str]:
    names: dict[str, None] = {}
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            names.setdefault(line, None)
    return list(names)


def load_patterns(
    source: str | None = None,
    *,
    feed_url: str = WIZ_FEED_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[str]:
    """Load package names from ``source``.

    ``None`` downloads ``feed_url``. Other sources may be an http(s) URL to a
    CSV feed, or a local ``.csv``, ``.json`` or plain text file.

    Raises:
        PatternListError: if the source cannot be read or has no usable names.
    """
    if source is None or _is_url(source):
        return parse_package_names(fetch_wiz_feed(source or feed_url, timeout=timeout))

    path = Path(source)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise PatternListError(f"Failed to read package list {path}: {exc}") from exc

    suffix = path.suffix.lower()
    if suffix == ".csv":
        return parse_package_names(content)
    if suffix == ".json":
        try:
            document = json.loads(content.decode("utf-8"))
        except ValueError as exc:
            raise PatternListError(f"Invalid JSON in package list {path}: {exc}") from exc
        return _names_from_document(document)
    return _names_from_text(content.decode("utf-8", errors="replace"))
