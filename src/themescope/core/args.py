"""
Variadic argument classification for stylesheet-style calls.

Stylesheet authors call the theme scope and the style resolver with a free
mixture of strings, lists of strings, and mappings, where the shape of an
argument decides its meaning. These helpers turn such calls into the
structured keyword arguments of theme_scope and resolve_style.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ThemeArgumentError
from .ir.themes import ThemeConfig, ThemeContext, merge
from .resolver import StyleResult, resolve_style
from .scope import BlockContent, ThemeBlock, theme_scope


@dataclass
class ScopeArgs:
    """Classified theme scope arguments."""

    themes: list[str] = field(default_factory=list)
    overrides: dict[str, Any] = field(default_factory=dict)


@dataclass
class StyleArgs:
    """Classified style resolver arguments."""

    keys: list[str] = field(default_factory=list)
    theme: str | None = None
    overrides: dict[str, Any] = field(default_factory=dict)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list | tuple) and all(isinstance(item, str) for item in value)


def _unsupported(value: Any) -> ThemeArgumentError:
    return ThemeArgumentError(
        f"Unsupported argument {value!r}: expected a string, a list of strings, or a mapping"
    )


def classify_scope_args(*args: Any) -> ScopeArgs:
    """Classify theme scope arguments by shape.

    Strings and lists of strings extend the theme name filter; mappings are
    merged into the configuration overrides.
    """
    result = ScopeArgs()
    for arg in args:
        if isinstance(arg, str):
            result.themes.append(arg)
        elif _is_string_list(arg):
            result.themes.extend(arg)
        elif isinstance(arg, Mapping):
            result.overrides = merge(result.overrides, arg)
        else:
            raise _unsupported(arg)
    return result


def classify_style_args(*args: Any) -> StyleArgs:
    """Classify style resolver arguments by shape and position.

    - The first bare string, while no list has been seen, is the style key.
    - A later bare string is the theme name.
    - A list always becomes the style keys; a single string seen before it
      is then reinterpreted as the theme name (``'dark', ['color', 'bg']``).
    - Mappings are merged into the configuration overrides.
    """
    result = StyleArgs()
    single_key: str | None = None
    seen_list = False

    for arg in args:
        if isinstance(arg, str):
            if single_key is None and not seen_list:
                single_key = arg
                result.keys = [arg]
            else:
                result.theme = arg
        elif _is_string_list(arg):
            seen_list = True
            result.keys = list(arg)
            if result.theme is None and single_key is not None:
                result.theme = single_key
                single_key = None
        elif isinstance(arg, Mapping):
            result.overrides = merge(result.overrides, arg)
        else:
            raise _unsupported(arg)

    return result


def theme_scope_args(config: ThemeConfig, content: BlockContent, *args: Any) -> list[ThemeBlock]:
    """Invoke theme_scope with stylesheet-style variadic arguments."""
    classified = classify_scope_args(*args)
    return theme_scope(
        config,
        content,
        themes=classified.themes,
        overrides=classified.overrides or None,
    )


def resolve_style_args(
    config: ThemeConfig,
    *args: Any,
    context: ThemeContext | None = None,
) -> StyleResult:
    """Invoke resolve_style with stylesheet-style variadic arguments."""
    classified = classify_style_args(*args)
    return resolve_style(
        config,
        classified.keys,
        theme=classified.theme,
        context=context,
        overrides=classified.overrides or None,
    )
