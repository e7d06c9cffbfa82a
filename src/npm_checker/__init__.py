"""npm-checker core package.

Scanning logic that finds compromised npm package names in lock files
(shallow check) or in source/text files (exhaustive check). The CLI in
``npm_checker.cli`` is a thin wrapper over ``npm_checker.core``.
"""

from .core import scan_repository
from .models import CheckMode, LockFileMatch, TextMatch

__all__ = [
    "CheckMode",
    "LockFileMatch",
    "TextMatch",
    "scan_repository",
]
