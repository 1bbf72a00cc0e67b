"""Shared pytest fixtures for themescope tests."""

from pathlib import Path

import pytest

from themescope.core.ir import Declaration, ThemeConfig, ThemeContext
from themescope.core.resolver import format_value


@pytest.fixture
def basic_config() -> ThemeConfig:
    """Return the light/dark configuration with ``default: light``."""
    return ThemeConfig.from_mapping(
        {
            "default": "light",
            "selector": '[data-theme="{$}"] &',
            "light": {"color": "black", "bg": "white"},
            "dark": {"color": "white"},
        }
    )


@pytest.fixture
def no_default_config() -> ThemeConfig:
    """Return a configuration without a default theme."""
    return ThemeConfig.from_mapping(
        {
            "light": {"color": "black"},
            "dark": {"color": "white"},
        }
    )


@pytest.fixture
def color_content():
    """Block content declaring ``color`` from the active theme."""

    def content(ctx: ThemeContext) -> list[Declaration]:
        return [Declaration(property="color", value=format_value(ctx.style("color")))]

    return content


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a project directory containing the basic themes.yaml."""
    (tmp_path / "themes.yaml").write_text(
        "default: light\n"
        "selector: '[data-theme=\"{$}\"] &'\n"
        "light:\n"
        "  color: black\n"
        "  bg: white\n"
        "dark:\n"
        "  color: white\n",
        encoding="utf-8",
    )
    return tmp_path
