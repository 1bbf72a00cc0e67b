"""Tests for CSS custom property and design-token exports."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from themescope.core.errors import MissingSelectorTemplateWarning
from themescope.core.exports import (
    export_tokens_file,
    generate_theme_tokens,
    generate_theme_variables,
)
from themescope.core.ir import ThemeConfig


class TestThemeVariables:
    def test_root_and_theme_blocks(self, basic_config: ThemeConfig):
        css = generate_theme_variables(basic_config)
        assert css == (
            ":root {\n"
            "  --color: black;\n"
            "  --bg: white;\n"
            "}\n"
            "\n"
            '[data-theme="light"] {\n'
            "  --color: black;\n"
            "  --bg: white;\n"
            "}\n"
            "\n"
            '[data-theme="dark"] {\n'
            "  --color: white;\n"
            "}\n"
        )

    def test_prefix(self, basic_config: ThemeConfig):
        css = generate_theme_variables(basic_config, prefix="ts-")
        assert "--ts-color: black;" in css
        assert "--color" not in css

    def test_no_default_has_no_root(self, no_default_config: ThemeConfig):
        css = generate_theme_variables(no_default_config)
        assert ":root" not in css
        assert css.startswith('[data-theme="light"] {')

    def test_missing_selector_warns(self, basic_config: ThemeConfig):
        config = basic_config.merge({"selector": None})
        with pytest.warns(MissingSelectorTemplateWarning):
            css = generate_theme_variables(config)
        assert css == ":root {\n  --color: black;\n  --bg: white;\n}\n"


class TestThemeTokens:
    def test_tokens(self, basic_config: ThemeConfig):
        tokens = generate_theme_tokens(basic_config)
        assert list(tokens) == ["$default", "light", "dark"]
        assert tokens["dark"] == {"color": {"$value": "white"}}
        assert tokens["$default"]["bg"] == {"$value": "white"}

    def test_no_default(self, no_default_config: ThemeConfig):
        assert "$default" not in generate_theme_tokens(no_default_config)

    def test_export_file(self, tmp_path: Path, basic_config: ThemeConfig):
        path = export_tokens_file(basic_config, tmp_path / "dist" / "tokens.json")
        assert path.exists()
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["light"]["color"]["$value"] == "black"
