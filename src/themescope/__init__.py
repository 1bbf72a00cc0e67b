"""
themescope - compile-time theme scoping for stylesheets.

Emits per-theme scoped selector blocks from a configuration of named
themes, and resolves style values against the active or a named theme
with fallback to a default theme.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import NoThemeContextError, ThemeConfigError, ThemeScopeError
from .core.ir import INITIAL, ThemeConfig, ThemeContext
from .core.resolver import resolve_style
from .core.scope import theme_scope


def _get_version() -> str:
    try:
        return _metadata_version("themescope")
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "INITIAL",
    "NoThemeContextError",
    "ThemeConfig",
    "ThemeConfigError",
    "ThemeContext",
    "ThemeScopeError",
    "resolve_style",
    "theme_scope",
]
