"""Shared pytest fixtures for npm-checker tests."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Callable

import pytest
import structlog


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    """Route structlog through stdlib without caching so capture_logs works."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    monkeypatch.setattr("npm_checker.cli.setup_logging", lambda *args, **kwargs: None)
    for var in (
        "NPM_CHECKER_CONFIG",
        "NPM_CHECKER_FEED_URL",
        "NPM_CHECKER_LOG_LEVEL",
        "NPM_CHECKER_LOG_FORMAT",
        "NPM_CHECKER_HTTP_TIMEOUT",
        "NPM_CHECKER_WARN_ONLY",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files under tmp_path from a {relative_path: content} mapping."""

    def _write(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
