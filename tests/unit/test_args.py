"""Tests for variadic argument classification."""

from __future__ import annotations

import pytest

from themescope.core.args import (
    classify_scope_args,
    classify_style_args,
    resolve_style_args,
    theme_scope_args,
)
from themescope.core.errors import ThemeArgumentError
from themescope.core.ir import ThemeConfig


class TestClassifyScopeArgs:
    def test_strings_and_lists_build_filter(self):
        args = classify_scope_args("dark", ["dim", "sepia"])
        assert args.themes == ["dark", "dim", "sepia"]
        assert args.overrides == {}

    def test_mappings_merge_into_overrides(self):
        args = classify_scope_args({"dark": {"color": "gray"}}, "dark", {"selector": ".t-{$} &"})
        assert args.themes == ["dark"]
        assert args.overrides == {"dark": {"color": "gray"}, "selector": ".t-{$} &"}

    def test_no_args(self):
        args = classify_scope_args()
        assert args.themes == []
        assert args.overrides == {}

    def test_unsupported_argument(self):
        with pytest.raises(ThemeArgumentError):
            classify_scope_args(42)


class TestClassifyStyleArgs:
    def test_single_key(self):
        args = classify_style_args("color")
        assert args.keys == ["color"]
        assert args.theme is None

    def test_key_then_theme(self):
        args = classify_style_args("bg", "dark")
        assert args.keys == ["bg"]
        assert args.theme == "dark"

    def test_string_before_list_is_theme(self):
        args = classify_style_args("dark", ["border-width", "border-color"])
        assert args.keys == ["border-width", "border-color"]
        assert args.theme == "dark"

    def test_list_then_string(self):
        args = classify_style_args(["color"], "dark")
        assert args.keys == ["color"]
        assert args.theme == "dark"

    def test_list_keeps_explicit_theme(self):
        args = classify_style_args("color", "dark", ["bg"])
        assert args.keys == ["bg"]
        assert args.theme == "dark"

    def test_mapping_overrides(self):
        args = classify_style_args("color", {"dark": {"color": "gray"}})
        assert args.keys == ["color"]
        assert args.overrides == {"dark": {"color": "gray"}}

    def test_unsupported_argument(self):
        with pytest.raises(ThemeArgumentError):
            classify_style_args("color", 1.5)

    def test_list_with_non_strings_rejected(self):
        with pytest.raises(TypeError):
            classify_style_args(["color", 3])


class TestVariadicEntryPoints:
    def test_resolve_style_args(self, basic_config: ThemeConfig):
        assert resolve_style_args(basic_config, "bg", "dark") == ["white"]
        assert resolve_style_args(basic_config, "dark", ["color", "bg"]) == ["white", "white"]

    def test_resolve_style_args_with_overrides(self, basic_config: ThemeConfig):
        result = resolve_style_args(basic_config, "color", "dark", {"dark": {"color": "gray"}})
        assert result == ["gray"]

    def test_theme_scope_args(self, basic_config: ThemeConfig, color_content):
        blocks = theme_scope_args(basic_config, color_content, "dark", {"dark": {"color": "gray"}})
        assert [(b.theme, b.body[0].value) for b in blocks] == [(None, "black"), ("dark", "gray")]
