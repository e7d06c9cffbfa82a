"""Tests for the parser registry and the bun placeholder."""

from structlog.testing import capture_logs

from npm_checker.models import PackageManager
from npm_checker.parsers import PARSERS, bun_lockb, get_parser, package_lock


class TestRegistry:
    """Every package manager has a parser."""

    def test_all_managers_registered(self):
        assert set(PARSERS) == set(PackageManager)

    def test_get_parser(self):
        assert get_parser(PackageManager.NPM) is package_lock.parse


class TestBunLockb:
    """bun.lockb is a known, logged gap."""

    def test_unsupported_notice(self, tmp_path):
        path = tmp_path / "bun.lockb"
        path.write_bytes(b"\x00\x01evil-pkg\x00")

        with capture_logs() as logs:
            assert bun_lockb.parse(path, ["evil-pkg"]) == []

        assert logs[0]["event"] == "parser.unsupported_format"
        assert logs[0]["manager"] == "bun"
