"""Data models for lock file discovery and scan matches."""

from __future__ import annotations

from .lock_file import CheckMode, LockFileDescriptor, PackageManager
from .match import UNKNOWN_VERSION, LockFileMatch, TextMatch

__all__ = [
    "CheckMode",
    "LockFileDescriptor",
    "LockFileMatch",
    "PackageManager",
    "TextMatch",
    "UNKNOWN_VERSION",
]
