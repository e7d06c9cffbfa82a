"""Tests for console rendering."""

from pathlib import Path

from npm_checker.models import LockFileMatch, TextMatch
from npm_checker.summary import CLEAN_MESSAGE, render_settings_banner, render_text


class TestRenderText:
    """Plain-text rendering of scan results."""

    def test_clean(self):
        assert render_text([]) == CLEAN_MESSAGE + "\n"

    def test_lock_file_matches(self):
        matches = [
            LockFileMatch(pattern="evil-pkg", package="evil-pkg", version="1.2.3", section="packages"),
            LockFileMatch(pattern="evil-pkg", package="evil-pkg", version="1.2.3", section="dependencies"),
        ]

        text = render_text(matches)

        assert text.splitlines() == [
            "Found 2 match(es):",
            "",
            "Package: evil-pkg",
            "  evil-pkg@1.2.3 (found in packages)",
            "  evil-pkg@1.2.3 (found in dependencies)",
        ]

    def test_text_matches(self):
        matches = [TextMatch(pattern="evil-pkg", file=Path("src/a.js"), line=4, content="import 'evil-pkg'")]

        text = render_text(matches)

        assert "  src/a.js:4\n    import 'evil-pkg'\n" in text


class TestSettingsBanner:
    """Pre-scan description of what is checked."""

    def test_lists_patterns_extensions_and_lock_files(self):
        banner = render_settings_banner(["evil-pkg", "@ctrl/tinycolor"])

        assert "Testing for 2 compromised package(s):" in banner
        assert "   1. evil-pkg" in banner
        assert "   2. @ctrl/tinycolor" in banner
        assert ".js, .json, .ts" in banner
        assert "bun.lockb (bun)" in banner
