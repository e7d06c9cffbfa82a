"""Lock file parsers, keyed by package manager."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Callable
from typing import TypeAlias

from ..models import LockFileMatch, PackageManager
from . import bun_lockb, package_lock, pnpm_lock, yarn_lock

ParseFunction: TypeAlias = Callable[[Path, list[str]], list[LockFileMatch]]

PARSERS: dict[PackageManager, ParseFunction] = {
    PackageManager.NPM: package_lock.parse,
    PackageManager.YARN: yarn_lock.parse,
    PackageManager.PNPM: pnpm_lock.parse,
    PackageManager.BUN: bun_lockb.parse,
}


def get_parser(manager: PackageManager) -> ParseFunction:
    return PARSERS[manager]


__all__ = ["PARSERS", "ParseFunction", "get_parser"]
