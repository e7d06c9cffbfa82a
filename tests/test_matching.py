"""Tests for whole-token package name matching."""

from npm_checker.matching import compile_pattern, matches, matching_patterns


class TestMatches:
    """Case-insensitive whole-token semantics."""

    def test_word_characters_are_ascii(self):
        assert matches("lodash", "élodash")
        assert matches("lodash", "lodashé")

    def test_case_insensitive(self):
        assert matches("lodash", "LODASH")

    def test_hyphen_is_a_boundary(self):
        assert matches("lodash", "lodash-es")
        assert matches("evil-pkg", "require('evil-pkg')")

    def test_not_a_substring_of_larger_identifier(self):
        assert not matches("lodash", "mylodash")
        assert not matches("lodash", "lodash_utils")
        assert not matches("lodash", "lodash2")

    def test_scoped_package(self):
        assert matches("@ctrl/tinycolor", '"@ctrl/tinycolor": "4.1.1"')
        assert matches("@ctrl/tinycolor", "node_modules/@ctrl/tinycolor")
        assert not matches("@ctrl/tinycolor", "@ctrl/tinycolor2")

    def test_regex_metacharacters_are_literal(self):
        assert matches("a.b", "uses a.b here")
        assert not matches("a.b", "uses axb here")
        assert matches("c++", "needs c++ today")

    def test_empty_pattern_never_matches(self):
        assert not matches("", "anything")


class TestHelpers:
    """Tests for compiled-pattern helpers."""

    def test_compile_pattern_is_cached(self):
        assert compile_pattern("left-pad") is compile_pattern("left-pad")

    def test_matching_patterns_keeps_caller_order(self):
        patterns = ["zeta", "alpha", "missing"]
        assert matching_patterns(patterns, "alpha zeta") == ["zeta", "alpha"]
