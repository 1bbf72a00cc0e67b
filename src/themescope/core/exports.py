"""
Theme exports: CSS custom properties and design-token JSON.

Custom properties put the default theme on ``:root`` and each theme under
its expanded selector, so a page switches themes by setting the attribute
the selector template matches.

Token export follows the W3C Design Token Community Group (DTCG) shape.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any

from .css import render_css
from .errors import MissingSelectorTemplateWarning
from .ir.stylesheet import Rule
from .ir.themes import ThemeConfig, ThemeMap
from .strings import expand_selector, strip_parent_reference


def _variables_rule(selector: str, values: ThemeMap, prefix: str) -> Rule:
    rule = Rule(selector=selector)
    for key, value in values.items():
        rule.declare(f"--{prefix}{key}", value)
    return rule


def generate_theme_variables(config: ThemeConfig, prefix: str = "") -> str:
    """Generate CSS custom properties for every theme.

    Args:
        config: Theme configuration.
        prefix: Prefix inserted after ``--`` in every property name.

    Returns:
        CSS text: ``:root`` with the default theme, then one block per theme.
    """
    rules: list[Rule] = []

    default = config.default_theme()
    if default is not None:
        rules.append(_variables_rule(":root", default, prefix))

    if config.themes:
        if config.selector is None:
            warnings.warn(
                "No selector template configured; per-theme variables were not emitted",
                MissingSelectorTemplateWarning,
                stacklevel=2,
            )
        else:
            for name, values in config.themes.items():
                selector = strip_parent_reference(expand_selector(config.selector, name))
                rules.append(_variables_rule(selector, values, prefix))

    return render_css(rules)


def generate_theme_tokens(config: ThemeConfig) -> dict[str, Any]:
    """Generate DTCG-style design tokens grouped by theme.

    Returns:
        ``{theme: {key: {"$value": value}}}``, with the resolved default
        theme under ``$default`` when one exists.
    """
    tokens: dict[str, Any] = {}

    default = config.default_theme()
    if default is not None:
        tokens["$default"] = {key: {"$value": value} for key, value in default.items()}

    for name, values in config.themes.items():
        tokens[name] = {key: {"$value": value} for key, value in values.items()}

    return tokens


def export_tokens_file(config: ThemeConfig, output_path: Path) -> Path:
    """Generate design tokens and write them to a JSON file.

    Returns:
        Path to the written file.
    """
    tokens = generate_theme_tokens(config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )

    return output_path
