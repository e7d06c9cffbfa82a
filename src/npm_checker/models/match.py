"""Match records produced by the shallow and exhaustive scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

UNKNOWN_VERSION = "unknown"


@dataclass(frozen=True)
class LockFileMatch:
    """A compromised package name found inside a lock file."""

    pattern: str
    package: str
    version: str
    section: str
    lock_file: Path | None = None

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Match pattern must be non-empty")
        if not self.section:
            raise ValueError("Match section must be non-empty")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "pattern": self.pattern,
            "package": self.package,
            "version": self.version,
            "section": self.section,
        }
        if self.lock_file is not None:
            data["lockFile"] = str(self.lock_file)
        return data


@dataclass(frozen=True)
class TextMatch:
    """A line of a source/text file that references a compromised package."""

    pattern: str
    file: Path
    line: int
    content: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Match pattern must be non-empty")
        if self.line < 1:
            raise ValueError("Line numbers are 1-based")

    def to_dict(self) -> dict[str, object]:
        return {
            "pattern": self.pattern,
            "file": str(self.file),
            "line": self.line,
            "content": self.content,
        }
