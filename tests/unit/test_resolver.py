"""Tests for the style resolver."""

from __future__ import annotations

import warnings

import pytest

from themescope.core.errors import (
    NoResolvableStyleWarning,
    NoThemeContextError,
    ThemeWarning,
    UnknownThemeWarning,
)
from themescope.core.ir import INITIAL, ThemeConfig, ThemeContext
from themescope.core.resolver import format_value, resolve_style, select_theme
from themescope.core.scope import theme_scope


class TestThemeSelection:
    """Test which theme a lookup resolves against."""

    def test_explicit_theme_wins(self, basic_config: ThemeConfig):
        ctx = ThemeContext(config=basic_config, theme="light", values=basic_config.themes["light"])
        assert resolve_style(basic_config, "color", theme="dark", context=ctx) == ["white"]

    def test_context_beats_default(self, basic_config: ThemeConfig):
        ctx = ThemeContext(config=basic_config, theme="dark", values=basic_config.themes["dark"])
        assert resolve_style(basic_config, "color", context=ctx) == ["white"]

    def test_default_without_context(self, basic_config: ThemeConfig):
        assert resolve_style(basic_config, "color") == ["black"]

    def test_unknown_explicit_theme_warns_and_falls_back(self, basic_config: ThemeConfig):
        with pytest.warns(UnknownThemeWarning, match="sepia"):
            assert resolve_style(basic_config, "color", theme="sepia") == ["black"]

    def test_no_theme_context_is_fatal(self, no_default_config: ThemeConfig):
        with pytest.raises(NoThemeContextError, match="Theme not specified"):
            resolve_style(no_default_config, "color")

    def test_select_theme_with_context_without_default(self, no_default_config: ThemeConfig):
        ctx = ThemeContext(
            config=no_default_config, theme="dark", values=no_default_config.themes["dark"]
        )
        assert select_theme(no_default_config, context=ctx) == {"color": "white"}


class TestValueResolution:
    def test_inside_scope_blocks(self, basic_config: ThemeConfig):
        results: dict = {}

        def content(ctx: ThemeContext) -> list:
            results[ctx.theme] = ctx.style("color")
            return []

        theme_scope(basic_config, content)
        assert results == {None: ["black"], "dark": ["white"]}

    def test_missing_key_falls_back_to_default(self, basic_config: ThemeConfig):
        assert resolve_style(basic_config, "bg", theme="dark") == ["white"]

    def test_multiple_keys_in_request_order(self, basic_config: ThemeConfig):
        assert resolve_style(basic_config, ["bg", "color"], theme="dark") == ["white", "white"]
        assert resolve_style(basic_config, ("bg", "color")) == ["white", "black"]

    def test_unresolvable_keys_are_skipped(self, basic_config: ThemeConfig):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ThemeWarning)
            assert resolve_style(basic_config, ["nope", "color"]) == ["black"]

    def test_nothing_resolved_returns_initial_with_one_warning(self, basic_config: ThemeConfig):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = resolve_style(basic_config, "nonexistent")
        assert result is INITIAL
        assert len(caught) == 1
        assert issubclass(caught[0].category, NoResolvableStyleWarning)

    def test_no_keys_returns_initial(self, basic_config: ThemeConfig):
        with pytest.warns(NoResolvableStyleWarning):
            assert resolve_style(basic_config, []) is INITIAL

    def test_inline_default_fallback(self):
        config = ThemeConfig.from_mapping(
            {"default": {"radius": "4px"}, "dark": {"color": "white"}}
        )
        assert resolve_style(config, ["color", "radius"], theme="dark") == ["white", "4px"]

    def test_value_is_returned_untouched(self):
        shadow = ["0 1px 2px", "rgba(0, 0, 0, 0.2)"]
        config = ThemeConfig.from_mapping({"default": "a", "a": {"shadow": shadow, "z": 10}})
        result = resolve_style(config, ["shadow", "z"])
        assert result[0] == shadow
        assert result[1] == 10


class TestOverrides:
    def test_overrides_do_not_mutate_store(self, basic_config: ThemeConfig):
        result = resolve_style(
            basic_config, "color", theme="dark", overrides={"dark": {"color": "silver"}}
        )
        assert result == ["silver"]
        assert basic_config.themes["dark"] == {"color": "white"}
        assert resolve_style(basic_config, "color", theme="dark") == ["white"]

    def test_overrides_add_theme(self, basic_config: ThemeConfig):
        result = resolve_style(
            basic_config, "color", theme="sepia", overrides={"sepia": {"color": "brown"}}
        )
        assert result == ["brown"]

    def test_overrides_replace_active_theme(self, basic_config: ThemeConfig):
        ctx = ThemeContext(config=basic_config, theme="dark", values=basic_config.themes["dark"])
        assert ctx.style("color", overrides={"dark": {"color": "silver"}}) == ["silver"]

    def test_overrides_change_default(self, basic_config: ThemeConfig):
        assert resolve_style(basic_config, "color", overrides={"default": "dark"}) == ["white"]


class TestFormatValue:
    def test_space_separated(self):
        assert format_value(["1px", "solid", "#000"]) == "1px solid #000"

    def test_single(self):
        assert format_value(["black"]) == "black"

    def test_initial(self):
        assert format_value(INITIAL) == "initial"
