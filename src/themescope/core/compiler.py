"""
Stylesheet compiler.

Compiles a YAML stylesheet source into the stylesheet IR, expanding theme
scopes and resolving ``theme(...)`` calls in declaration values.

Source format::

    rules:
      - selector: .button
        declarations:
          padding: 4px 8px
          border: theme(border-width border-color)
        themes:
          - only: [dark]          # optional name filter
            overrides: {}         # optional config overrides
            declarations:
              color: theme(color)
              background: theme(bg, dark)

A ``theme()`` call takes up to two comma-separated arguments. A group of
space-separated names is a style key list, a single name is a bare string,
and they are classified like resolve_style_args arguments: ``theme(bg, dark)``
and ``theme(dark, border-width border-color)`` both name the dark theme.
Inside a ``themes`` entry a call resolves against the theme of the block
being emitted.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .args import StyleArgs, classify_style_args
from .css import render_css
from .errors import (
    StylesheetCompileError,
    ThemeConfigError,
    make_compile_error,
)
from .ir.stylesheet import BlockBody, Declaration, Rule
from .ir.themes import ThemeConfig, ThemeContext
from .resolver import format_value, resolve_style
from .scope import apply_theme_scope

logger = logging.getLogger(__name__)

_THEME_CALL = re.compile(r"(?<![\w-])theme\(\s*([^()]*?)\s*\)")

_RULE_KEYS = {"selector", "declarations", "rules", "themes"}
_SCOPE_KEYS = {"only", "overrides", "declarations", "rules"}


class StylesheetCompiler:
    """Compiles one stylesheet source against a theme configuration."""

    def __init__(self, config: ThemeConfig, file: Path | None = None) -> None:
        self.config = config
        self.file = file

    def _error(self, message: str, location: str) -> StylesheetCompileError:
        return make_compile_error(message, location, self.file)

    def compile(self, source: Any) -> list[Rule]:
        if not isinstance(source, Mapping) or "rules" not in source:
            raise self._error("Stylesheet must be a mapping with a 'rules' list", "<root>")
        entries = source["rules"]
        if not isinstance(entries, list):
            raise self._error("'rules' must be a list", "rules")
        return [
            self._compile_rule(entry, f"rules[{i}]", None) for i, entry in enumerate(entries)
        ]

    # -------------------------------------------------------------------------
    # Rules and bodies
    # -------------------------------------------------------------------------

    def _compile_rule(self, entry: Any, location: str, context: ThemeContext | None) -> Rule:
        if not isinstance(entry, Mapping):
            raise self._error("Rule entry must be a mapping", location)
        unknown = set(entry) - _RULE_KEYS
        if unknown:
            raise self._error(f"Unknown rule keys: {', '.join(sorted(map(str, unknown)))}", location)
        selector = entry.get("selector")
        if not isinstance(selector, str) or not selector.strip():
            raise self._error("Rule entry needs a non-empty 'selector'", location)

        rule = Rule(selector=selector.strip())
        rule.extend(self._compile_body(entry, location, context))

        scopes = entry.get("themes") or []
        if not isinstance(scopes, list):
            raise self._error("'themes' must be a list of theme scopes", location)
        for j, scope in enumerate(scopes):
            self._compile_scope(rule, scope, f"{location}.themes[{j}]", context)
        return rule

    def _compile_body(
        self, entry: Mapping[str, Any], location: str, context: ThemeContext | None
    ) -> BlockBody:
        body: BlockBody = []

        declarations = entry.get("declarations") or {}
        if not isinstance(declarations, Mapping):
            raise self._error("'declarations' must be a mapping", location)
        for prop, value in declarations.items():
            where = f"{location}.declarations.{prop}"
            body.append(Declaration(property=str(prop), value=self._evaluate(value, where, context)))

        nested = entry.get("rules") or []
        if not isinstance(nested, list):
            raise self._error("'rules' must be a list", location)
        for i, child in enumerate(nested):
            body.append(self._compile_rule(child, f"{location}.rules[{i}]", context))

        return body

    def _compile_scope(
        self, rule: Rule, scope: Any, location: str, context: ThemeContext | None
    ) -> None:
        if not isinstance(scope, Mapping):
            raise self._error("Theme scope must be a mapping", location)
        unknown = set(scope) - _SCOPE_KEYS
        if unknown:
            raise self._error(
                f"Unknown theme scope keys: {', '.join(sorted(map(str, unknown)))}", location
            )

        only = scope.get("only")
        if only is not None and not (
            isinstance(only, str)
            or (isinstance(only, list) and all(isinstance(name, str) for name in only))
        ):
            raise self._error("'only' must be a theme name or a list of theme names", location)

        overrides = scope.get("overrides")
        if overrides is not None and not isinstance(overrides, Mapping):
            raise self._error("'overrides' must be a mapping", location)

        base = context.config if context is not None else self.config
        try:
            apply_theme_scope(
                rule,
                base,
                lambda ctx: self._compile_body(scope, location, ctx),
                themes=only,
                overrides=overrides,
            )
        except ThemeConfigError as e:
            raise self._error(e.message, location) from e

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def _evaluate(self, value: Any, location: str, context: ThemeContext | None) -> str:
        # YAML 1.1 reads unquoted yes/on/true as booleans
        if isinstance(value, bool):
            raise self._error(
                f"Declaration value {value!r} was read as a boolean; quote it in the source",
                location,
            )
        if not isinstance(value, str | int | float):
            raise self._error(
                f"Declaration value must be a scalar, got {type(value).__name__}", location
            )
        config = context.config if context is not None else self.config

        def replace_call(match: re.Match[str]) -> str:
            call = self._parse_call(match.group(1), location)
            result = resolve_style(config, call.keys, theme=call.theme, context=context)
            return format_value(result)

        return _THEME_CALL.sub(replace_call, str(value))

    def _parse_call(self, raw: str, location: str) -> StyleArgs:
        groups = [part.strip().strip("'\"").split() for part in raw.split(",")]
        if len(groups) > 2:
            raise self._error(f"theme({raw}) takes style keys and at most one theme name", location)
        if not groups[0]:
            raise self._error("theme() needs at least one style key", location)
        # A single name is a bare string, a space-separated group is a key list
        args = [group[0] if len(group) == 1 else group for group in groups if group]
        return classify_style_args(*args)


def compile_stylesheet(
    source: Any, config: ThemeConfig, *, file: Path | None = None
) -> list[Rule]:
    """Compile a parsed stylesheet source into rules.

    Raises:
        StylesheetCompileError: If the source is malformed.
        NoThemeContextError: If a theme() call has no theme to resolve against.
    """
    return StylesheetCompiler(config, file=file).compile(source)


def compile_file(path: Path, config: ThemeConfig) -> str:
    """Compile a YAML stylesheet file to CSS text."""
    if not path.exists():
        raise StylesheetCompileError(f"Stylesheet not found: {path}")

    try:
        source = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise StylesheetCompileError(f"Invalid YAML in {path}: {e}") from e

    logger.debug(f"Compiling stylesheet {path}")
    rules = compile_stylesheet(source, config, file=path)
    return render_css(rules)
