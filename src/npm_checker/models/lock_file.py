"""Lock file descriptor model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PackageManager(str, Enum):
    """Package managers whose lock files are recognised."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


class CheckMode(str, Enum):
    """Which top-level scan to run."""

    SHALLOW = "shallow"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class LockFileDescriptor:
    """A lock file located in the project tree, tagged with its manager."""

    path: Path
    manager: PackageManager
    file_name: str

    def __post_init__(self) -> None:
        if not self.file_name:
            raise ValueError("Lock file name must be non-empty")

    def to_dict(self) -> dict[str, str]:
        return {
            "path": str(self.path),
            "manager": self.manager.value,
            "fileName": self.file_name,
        }
