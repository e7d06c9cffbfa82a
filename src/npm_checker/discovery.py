"""Lock file discovery."""

from __future__ import annotations

from pathlib import Path

from .models import LockFileDescriptor, PackageManager
from .walker import walk

LOCK_FILES: dict[str, PackageManager] = {
    "package-lock.json": PackageManager.NPM,
    "yarn.lock": PackageManager.YARN,
    "pnpm-lock.yaml": PackageManager.PNPM,
    "bun.lockb": PackageManager.BUN,
}


def is_lock_file(path: Path) -> bool:
    return path.name in LOCK_FILES


def find_lock_files(root: Path) -> list[LockFileDescriptor]:
    """Find lock files recursively under root (excluding hidden and vendor dirs).

    Every occurrence is returned, so a monorepo with nested projects yields one
    descriptor per lock file.
    """
    return [
        LockFileDescriptor(path=path, manager=LOCK_FILES[path.name], file_name=path.name)
        for path in walk(root, is_lock_file)
    ]
