"""Tests for settings resolution."""

import json

import pytest

from npm_checker.config import Settings, load_settings
from npm_checker.errors import ConfigError
from npm_checker.ingestion.wiz_feed import WIZ_FEED_URL


def _write_config(tmp_path, data):
    path = tmp_path / "npm-checker.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


class TestLoadSettings:
    """File and environment precedence."""

    def test_defaults(self):
        settings = load_settings(environ={})

        assert settings == Settings()
        assert settings.feed_url == WIZ_FEED_URL
        assert settings.log_format == "console"

    def test_file_values(self, tmp_path):
        path = _write_config(tmp_path, {"feedUrl": "https://example.invalid/x.csv", "httpTimeout": 5})

        settings = load_settings(path, environ={})

        assert settings.feed_url == "https://example.invalid/x.csv"
        assert settings.http_timeout == 5.0

    def test_env_overrides_file(self, tmp_path):
        path = _write_config(tmp_path, {"logLevel": "INFO", "logFormat": "console"})

        settings = load_settings(
            path,
            environ={"NPM_CHECKER_LOG_LEVEL": "DEBUG", "NPM_CHECKER_LOG_FORMAT": "json"},
        )

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_config_path_from_env(self, tmp_path):
        path = _write_config(tmp_path, {"logLevel": "ERROR"})

        settings = load_settings(environ={"NPM_CHECKER_CONFIG": str(path)})

        assert settings.log_level == "ERROR"


class TestLoadSettingsErrors:
    """Invalid configuration raises ConfigError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.json", environ={})

    def test_invalid_json(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings(_write_config(tmp_path, "{"), environ={})

    def test_not_an_object(self, tmp_path):
        with pytest.raises(ConfigError, match="JSON object"):
            load_settings(_write_config(tmp_path, []), environ={})

    def test_unknown_key(self, tmp_path):
        with pytest.raises(ConfigError, match="feeds"):
            load_settings(_write_config(tmp_path, {"feeds": []}), environ={})

    def test_bad_log_level(self):
        with pytest.raises(ConfigError, match="log level"):
            load_settings(environ={"NPM_CHECKER_LOG_LEVEL": "LOUD"})

    def test_bad_log_format(self, tmp_path):
        with pytest.raises(ConfigError, match="log format"):
            load_settings(_write_config(tmp_path, {"logFormat": "xml"}), environ={})

    def test_bad_timeout(self):
        with pytest.raises(ConfigError):
            load_settings(environ={"NPM_CHECKER_HTTP_TIMEOUT": "soon"})
        with pytest.raises(ConfigError):
            load_settings(environ={"NPM_CHECKER_HTTP_TIMEOUT": "-1"})

    def test_wrong_value_type(self, tmp_path):
        with pytest.raises(ConfigError, match="must be a string"):
            load_settings(_write_config(tmp_path, {"feedUrl": 42}), environ={})
