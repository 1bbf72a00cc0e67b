"""Tests for themescope.core.strings module."""

from themescope.core.strings import (
    expand_selector,
    replace_all,
    strip_parent_reference,
)


class TestReplaceAll:
    """Tests for replace_all function."""

    def test_single_occurrence(self):
        assert replace_all('[data-theme="{$}"]', "{$}", "dark") == '[data-theme="dark"]'

    def test_multiple_occurrences(self):
        assert replace_all("a{$}b{$}c", "{$}", "-") == "a-b-c"

    def test_adjacent_occurrences(self):
        assert replace_all("{$}{$}", "{$}", "x") == "xx"

    def test_no_occurrence_returns_original(self):
        template = ".button"
        assert replace_all(template, "{$}", "dark") is template

    def test_replacement_containing_token_is_not_rescanned(self):
        """Inserted text is skipped, so the scan terminates."""
        assert replace_all("x{$}y", "{$}", "{$}{$}") == "x{$}{$}y"

    def test_replacement_completing_token_is_not_rescanned(self):
        assert replace_all("aab", "ab", "a") == "aa"
        assert replace_all("&&", "&", "&&") == "&&&&"

    def test_non_overlapping(self):
        assert replace_all("aaa", "aa", "b") == "ba"

    def test_empty_token_returns_original(self):
        assert replace_all("abc", "", "x") == "abc"

    def test_empty_template(self):
        assert replace_all("", "{$}", "x") == ""


class TestExpandSelector:
    """Tests for expand_selector function."""

    def test_default_template(self):
        assert expand_selector('[data-theme="{$}"] &', "dark") == '[data-theme="dark"] &'

    def test_class_template(self):
        assert expand_selector(".theme-{$} &", "high-contrast") == ".theme-high-contrast &"


class TestStripParentReference:
    """Tests for strip_parent_reference function."""

    def test_trailing_reference(self):
        assert strip_parent_reference('[data-theme="dark"] &') == '[data-theme="dark"]'

    def test_bare_reference_becomes_root(self):
        assert strip_parent_reference("&") == ":root"

    def test_no_reference(self):
        assert strip_parent_reference(".theme-dark") == ".theme-dark"
