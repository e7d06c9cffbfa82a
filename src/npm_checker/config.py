"""Configuration loader for npm-checker.

Settings come from an optional JSON file and are then overridden by
environment variables. The JSON file may contain ``feedUrl``, ``logLevel``,
``logFormat`` and ``httpTimeout``; every key is optional.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any
from collections.abc import Mapping

from .errors import ConfigError
from .ingestion.wiz_feed import DEFAULT_TIMEOUT, WIZ_FEED_URL
from .logging import LOG_FORMATS

CONFIG_PATH_ENV_VAR = "NPM_CHECKER_CONFIG"

_ENV_OVERRIDES = {
    "NPM_CHECKER_FEED_URL": "feed_url",
    "NPM_CHECKER_LOG_LEVEL": "log_level",
    "NPM_CHECKER_LOG_FORMAT": "log_format",
    "NPM_CHECKER_HTTP_TIMEOUT": "http_timeout",
}

_FILE_KEYS = {
    "feedUrl": "feed_url",
    "logLevel": "log_level",
    "logFormat": "log_format",
    "httpTimeout": "http_timeout",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    feed_url: str = WIZ_FEED_URL
    log_level: str = "WARNING"
    log_format: str = "console"
    http_timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.feed_url:
            raise ConfigError("'feedUrl' must be a non-empty string")
        if self.log_level.upper() not in _LOG_LEVELS:
            known = ", ".join(sorted(_LOG_LEVELS))
            raise ConfigError(f"Invalid log level '{self.log_level}'. Expected one of: {known}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log format '{self.log_format}'. Expected one of: {', '.join(LOG_FORMATS)}"
            )
        if self.http_timeout <= 0:
            raise ConfigError("'httpTimeout' must be a positive number")


def _coerce(field: str, value: Any, origin: str) -> Any:
    if field == "http_timeout":
        if isinstance(value, bool):
            raise ConfigError(f"{origin} must be a number")
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"{origin} must be a number") from exc
    if not isinstance(value, str):
        raise ConfigError(f"{origin} must be a string")
    return value


def _resolve_config_path(path: Path | str | None, environ: Mapping[str, str]) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NPM_CHECKER_CONFIG environment variable
    3. No file (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    unknown = sorted(set(data) - set(_FILE_KEYS))
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    return {
        _FILE_KEYS[key]: _coerce(_FILE_KEYS[key], value, f"'{key}'")
        for key, value in data.items()
    }


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to a JSON config file. If not provided, uses the
            NPM_CHECKER_CONFIG env var, or built-in defaults when unset.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        ConfigError: If the file cannot be read or any value is invalid.
    """
    environ = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    config_path = _resolve_config_path(path, environ)
    if config_path is not None:
        values.update(_read_config_file(config_path))

    for env_var, field in _ENV_OVERRIDES.items():
        raw = environ.get(env_var)
        if raw:
            values[field] = _coerce(field, raw, env_var)

    return replace(Settings(), **values) if values else Settings()
