"""
Theme configuration IR types.

A ThemeConfig is the configuration store consumed by the theme scope and
the style resolver: named themes (style key -> value mappings) plus the
control entries ``default`` and ``selector``.

Raw mapping form (as written in themes.yaml)::

    default: light
    selector: '[data-theme="{$}"] &'
    light:
      color: black
      bg: white
    dark:
      color: white

Control keys may also carry the reserved-prefix marker (``$default``).
Every other key is a theme name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ThemeConfigError
from ..strings import SELECTOR_PLACEHOLDER

if TYPE_CHECKING:
    from ..resolver import StyleResult

logger = logging.getLogger(__name__)

ThemeMap = dict[str, Any]

# Reserved-prefix marker for control keys written as "$default", "$selector"
RESERVED_PREFIX = "$"

DEFAULT_KEY = "default"
SELECTOR_KEY = "selector"
CURRENT_KEY = "current"
RESERVED_KEYS: frozenset[str] = frozenset({DEFAULT_KEY, SELECTOR_KEY, CURRENT_KEY})

DEFAULT_SELECTOR = f'[data-theme="{SELECTOR_PLACEHOLDER}"] &'


class CSSKeyword(StrEnum):
    """CSS-wide keywords returned in place of a resolved value."""

    INITIAL = "initial"


INITIAL = CSSKeyword.INITIAL


def control_key(key: str) -> str | None:
    """Return the control name for a reserved key, or None for a theme name."""
    if key.startswith(RESERVED_PREFIX):
        return key[len(RESERVED_PREFIX) :]
    if key in RESERVED_KEYS:
        return key
    return None


def merge(base: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow top-level merge: keys in ``overrides`` replace the same keys in ``base``.

    Neither input is mutated.
    """
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


# =============================================================================
# Default theme variant
# =============================================================================


class NamedTheme(BaseModel):
    """Default that points at another theme in the store."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str = Field(description="Name of a theme in the same configuration")


class InlineTheme(BaseModel):
    """Default given directly as a style key -> value mapping."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    values: ThemeMap = Field(default_factory=dict, description="Inline default style values")


DefaultTheme = Annotated[NamedTheme | InlineTheme, Field(discriminator="kind")]


def _parse_default(value: Any) -> NamedTheme | InlineTheme | None:
    if value is None:
        return None
    if isinstance(value, NamedTheme | InlineTheme):
        return value
    if isinstance(value, str):
        return NamedTheme(name=value)
    if isinstance(value, Mapping):
        return InlineTheme(values=dict(value))
    raise ThemeConfigError(
        f"'{DEFAULT_KEY}' must be a theme name or a mapping of style values, "
        f"got {type(value).__name__}"
    )


# =============================================================================
# Configuration store
# =============================================================================


class ThemeConfig(BaseModel):
    """Theme configuration store.

    Themes keep their insertion order, which is the order scoped blocks are
    emitted in.
    """

    model_config = ConfigDict(frozen=True)

    themes: dict[str, ThemeMap] = Field(
        default_factory=dict,
        description="Theme name -> style values, in declaration order",
    )
    default: DefaultTheme | None = Field(
        default=None,
        description="Fallback theme, by name or inline",
    )
    selector: str | None = Field(
        default=DEFAULT_SELECTOR,
        description="Selector template; the placeholder is replaced by the theme name",
    )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ThemeConfig:
        """Parse the raw mapping form into a ThemeConfig.

        Raises:
            ThemeConfigError: If a theme is not a mapping or the default is malformed.
        """
        themes: dict[str, ThemeMap] = {}
        default: NamedTheme | InlineTheme | None = None
        selector: str | None = DEFAULT_SELECTOR

        for key, value in raw.items():
            key = str(key)
            control = control_key(key)
            if control is None:
                if not isinstance(value, Mapping):
                    raise ThemeConfigError(
                        f"Theme '{key}' must be a mapping of style keys to values, "
                        f"got {type(value).__name__}"
                    )
                themes[key] = {str(k): v for k, v in value.items()}
            elif control == DEFAULT_KEY:
                default = _parse_default(value)
            elif control == SELECTOR_KEY:
                if value is not None and not isinstance(value, str):
                    logger.debug(f"Ignoring non-string selector template: {value!r}")
                    value = None
                selector = value
            elif control == CURRENT_KEY:
                logger.debug("Dropping transient 'current' entry from configuration input")
            else:
                logger.debug(f"Ignoring unknown control key '{key}'")

        return cls(themes=themes, default=default, selector=selector)

    def to_mapping(self) -> dict[str, Any]:
        """Produce the raw mapping form accepted by from_mapping."""
        data: dict[str, Any] = {}
        if isinstance(self.default, NamedTheme):
            data[DEFAULT_KEY] = self.default.name
        elif isinstance(self.default, InlineTheme):
            data[DEFAULT_KEY] = dict(self.default.values)
        data[SELECTOR_KEY] = self.selector
        for name, values in self.themes.items():
            data[name] = dict(values)
        return data

    def merge(self, overrides: Mapping[str, Any] | None) -> ThemeConfig:
        """Return a new config with ``overrides`` shallow-merged over this one.

        A theme present in ``overrides`` replaces the whole theme of the same
        name. This config is left unchanged.
        """
        if not overrides:
            return self
        normalized = {}
        for key, value in overrides.items():
            control = control_key(str(key))
            normalized[control or str(key)] = value
        return ThemeConfig.from_mapping(merge(self.to_mapping(), normalized))

    def get_theme(self, name: str) -> ThemeMap | None:
        """Get a theme's style values by name."""
        return self.themes.get(name)

    @property
    def theme_names(self) -> list[str]:
        return list(self.themes)

    def default_theme(self) -> ThemeMap | None:
        """Get the usable default theme values (see resolve_default_theme)."""
        return resolve_default_theme(self)


def resolve_default_theme(config: ThemeConfig) -> ThemeMap | None:
    """Resolve the configured default to concrete style values.

    A NamedTheme resolves only to a theme defined directly in the store;
    there is no further indirection.

    Returns:
        The default ThemeMap, or None when there is no usable default.
    """
    default = config.default
    if isinstance(default, NamedTheme):
        return config.themes.get(default.name)
    if isinstance(default, InlineTheme):
        return default.values
    return None


# =============================================================================
# Scope context
# =============================================================================


class ThemeContext(BaseModel):
    """The theme active inside one emitted scope block.

    Passed explicitly to block content. ``theme`` is None for the
    unscoped default block.
    """

    model_config = ConfigDict(frozen=True)

    config: ThemeConfig
    theme: str | None = None
    values: ThemeMap = Field(default_factory=dict)

    def style(
        self,
        keys: str | Sequence[str],
        *,
        theme: str | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> StyleResult:
        """Resolve style keys against this context."""
        from ..resolver import resolve_style

        return resolve_style(self.config, keys, theme=theme, context=self, overrides=overrides)
