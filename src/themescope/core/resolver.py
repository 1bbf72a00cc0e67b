"""
Style resolver.

Looks up style values for the active or an explicitly named theme,
falling back to the default theme for keys the selected theme lacks.

Theme selection precedence:
1. explicit ``theme`` argument, if it names a theme in the (overridden) config
2. the active scope context, if one is passed
3. the config's default theme

With none of these available the lookup cannot proceed and
NoThemeContextError is raised.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import NoResolvableStyleWarning, NoThemeContextError, UnknownThemeWarning
from .ir.themes import INITIAL, CSSKeyword, ThemeConfig, ThemeContext, ThemeMap

logger = logging.getLogger(__name__)

StyleResult = list[Any] | CSSKeyword


def _normalize_keys(keys: str | Sequence[str]) -> list[str]:
    if isinstance(keys, str):
        return [keys]
    return [str(key) for key in keys]


def select_theme(
    config: ThemeConfig,
    *,
    theme: str | None = None,
    context: ThemeContext | None = None,
) -> ThemeMap:
    """Pick the theme values a lookup resolves against.

    Raises:
        NoThemeContextError: If no explicit theme, context, or default applies.
    """
    if theme is not None:
        values = config.get_theme(theme)
        if values is not None:
            return values
        warnings.warn(
            f"Theme '{theme}' is not defined; falling back to the active or default theme",
            UnknownThemeWarning,
            stacklevel=3,
        )

    if context is not None:
        # Overrides may have replaced the active theme for this call
        if context.theme is not None:
            scoped = config.get_theme(context.theme)
        else:
            scoped = config.default_theme()
        return scoped if scoped is not None else context.values

    default = config.default_theme()
    if default is not None:
        return default

    raise NoThemeContextError(
        "Theme not specified: no explicit theme, no active theme scope, and no default theme"
    )


def resolve_style(
    config: ThemeConfig,
    keys: str | Sequence[str],
    *,
    theme: str | None = None,
    context: ThemeContext | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> StyleResult:
    """Resolve one or more style keys to their values.

    Args:
        config: Theme configuration store.
        keys: A style key or a sequence of style keys, in request order.
        theme: Explicit theme name to resolve against.
        context: Active scope context (set inside a theme scope block). Its
            config, which already carries the scope's overrides, takes the
            place of ``config``.
        overrides: Raw configuration overrides merged over the store for this call only.

    Returns:
        The resolved values in request order (a one-element list for a single
        key), or INITIAL when none of the keys resolved.

    Raises:
        NoThemeContextError: If there is no theme to resolve against.
    """
    base = context.config if context is not None else config
    effective = base.merge(overrides)

    selected = select_theme(effective, theme=theme, context=context)
    default = effective.default_theme()

    requested = _normalize_keys(keys)
    values: list[Any] = []
    for key in requested:
        if key in selected:
            values.append(selected[key])
        elif default is not None and key in default:
            values.append(default[key])
        else:
            logger.debug(f"Style key '{key}' not found in selected or default theme")

    if not values:
        warnings.warn(
            f"No style value found for {', '.join(repr(k) for k in requested)}; using 'initial'",
            NoResolvableStyleWarning,
            stacklevel=2,
        )
        return INITIAL

    return values


def format_value(result: StyleResult) -> str:
    """Format a resolver result as a CSS declaration value (space-separated)."""
    if isinstance(result, CSSKeyword):
        return result.value
    return " ".join(str(value) for value in result)
