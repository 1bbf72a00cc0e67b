"""Core themescope functionality: configuration, theme scopes, style resolution, CSS output."""

from . import ir
from .args import (
    ScopeArgs,
    StyleArgs,
    classify_scope_args,
    classify_style_args,
    resolve_style_args,
    theme_scope_args,
)
from .compiler import StylesheetCompiler, compile_file, compile_stylesheet
from .config_loader import (
    THEMES_FILE,
    ThemeConfigValidationResult,
    create_default_config,
    load_theme_config,
    save_theme_config,
    scaffold_theme_config,
    validate_theme_config,
)
from .css import render_css
from .errors import (
    MissingSelectorTemplateWarning,
    NoResolvableStyleWarning,
    NoThemeContextError,
    StylesheetCompileError,
    ThemeArgumentError,
    ThemeConfigError,
    ThemeScopeError,
    ThemeWarning,
    UnknownThemeWarning,
)
from .exports import export_tokens_file, generate_theme_tokens, generate_theme_variables
from .resolver import format_value, resolve_style
from .scope import ThemeBlock, apply_theme_scope, theme_scope
from .strings import expand_selector, replace_all

__all__ = [
    "ir",
    # Errors and warnings
    "ThemeScopeError",
    "ThemeConfigError",
    "NoThemeContextError",
    "ThemeArgumentError",
    "StylesheetCompileError",
    "ThemeWarning",
    "UnknownThemeWarning",
    "MissingSelectorTemplateWarning",
    "NoResolvableStyleWarning",
    # Strings
    "replace_all",
    "expand_selector",
    # Scope and resolver
    "ThemeBlock",
    "theme_scope",
    "apply_theme_scope",
    "resolve_style",
    "format_value",
    "ScopeArgs",
    "StyleArgs",
    "classify_scope_args",
    "classify_style_args",
    "theme_scope_args",
    "resolve_style_args",
    # Output
    "render_css",
    "StylesheetCompiler",
    "compile_stylesheet",
    "compile_file",
    "generate_theme_variables",
    "generate_theme_tokens",
    "export_tokens_file",
    # Configuration
    "THEMES_FILE",
    "ThemeConfigValidationResult",
    "create_default_config",
    "load_theme_config",
    "save_theme_config",
    "scaffold_theme_config",
    "validate_theme_config",
]
