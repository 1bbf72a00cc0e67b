"""
themescope Intermediate Representation (IR) types.

All types are re-exported from this package for convenience.
"""

# Stylesheet
from .stylesheet import (
    BlockBody,
    Declaration,
    Rule,
)

# Themes
from .themes import (
    DEFAULT_SELECTOR,
    INITIAL,
    RESERVED_KEYS,
    RESERVED_PREFIX,
    CSSKeyword,
    DefaultTheme,
    InlineTheme,
    NamedTheme,
    ThemeConfig,
    ThemeContext,
    ThemeMap,
    control_key,
    merge,
    resolve_default_theme,
)

__all__ = [
    # Stylesheet
    "BlockBody",
    "Declaration",
    "Rule",
    # Themes
    "CSSKeyword",
    "DEFAULT_SELECTOR",
    "DefaultTheme",
    "INITIAL",
    "InlineTheme",
    "NamedTheme",
    "RESERVED_KEYS",
    "RESERVED_PREFIX",
    "ThemeConfig",
    "ThemeContext",
    "ThemeMap",
    "control_key",
    "merge",
    "resolve_default_theme",
]
