"""Utilities for fetching and loading compromised package name lists."""

from .pattern_list import load_patterns
from .wiz_feed import (
    WIZ_FEED_URL,
    fetch_wiz_feed,
    parse_package_names,
)

__all__ = [
    "WIZ_FEED_URL",
    "fetch_wiz_feed",
    "load_patterns",
    "parse_package_names",
]
