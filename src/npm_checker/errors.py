"""Exception hierarchy for npm-checker.

Only validation, configuration and pattern-list failures are raised to the
caller. Per-file and per-directory problems during a scan are logged and
recovered where they happen.
"""

from __future__ import annotations


class CheckerError(RuntimeError):
    """Base error for npm-checker."""


class ValidationError(CheckerError):
    """Raised when scan inputs are unusable; fatal for the whole run."""


class TargetNotFoundError(ValidationError):
    """Raised when the target directory does not exist."""


class NotADirectoryTargetError(ValidationError):
    """Raised when the target path exists but is not a directory."""


class EmptyPatternListError(ValidationError):
    """Raised when no package names are available to search for."""


class PatternListError(CheckerError):
    """Raised when a pattern list source cannot be read or understood."""


class FeedError(PatternListError):
    """Raised when the remote compromised package feed cannot be fetched or parsed."""


class ConfigError(CheckerError):
    """Raised when the configuration file or environment is invalid."""
