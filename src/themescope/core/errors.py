"""
Error and warning types for theme configuration, scoping, and resolution.

Fatal problems raise a ThemeScopeError subclass and stop compilation.
Recoverable misconfiguration is reported through ``warnings.warn`` with a
ThemeWarning subclass, and the caller receives a well-defined fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ThemeScopeError(Exception):
    """Base exception for all themescope errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ThemeConfigError(ThemeScopeError):
    """
    Raised when a theme configuration cannot be loaded or parsed.

    Examples:
    - Invalid YAML in themes.yaml
    - A theme whose value is not a mapping
    - A default naming a theme that does not exist (when validated strictly)
    """

    pass


class NoThemeContextError(ThemeScopeError):
    """
    Raised when a style lookup has no theme to resolve against.

    There is no usable explicit theme, no active scope context, and
    no default theme.
    """

    pass


class ThemeArgumentError(ThemeScopeError, TypeError):
    """Raised when a variadic argument is neither a string, a list of strings, nor a mapping."""

    pass


class StylesheetCompileError(ThemeScopeError):
    """
    Raised when a stylesheet source cannot be compiled.

    Examples:
    - Invalid YAML
    - Rule entry without a selector
    - Malformed theme() call in a declaration value
    """

    pass


# =============================================================================
# Warnings
# =============================================================================


class ThemeWarning(UserWarning):
    """Base category for recoverable theme misconfiguration."""


class UnknownThemeWarning(ThemeWarning):
    """An explicitly named theme does not exist in the configuration."""


class MissingSelectorTemplateWarning(ThemeWarning):
    """The configuration has no usable selector template for scoped blocks."""


class NoResolvableStyleWarning(ThemeWarning):
    """None of the requested style keys exist in the selected or default theme."""


@dataclass
class ErrorContext:
    """
    Location of an error inside a stylesheet source.

    Attributes:
        location: Dotted path to the offending entry, e.g. ``rules[2].themes[0]``
        file: Optional source file the entry was read from
    """

    location: str
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "styles.yaml: rules[2].themes[0]"
        """
        if self.file:
            return f"{self.file}: {self.location}"
        return self.location


def make_compile_error(
    message: str,
    location: str,
    file: Path | None = None,
) -> StylesheetCompileError:
    """
    Helper to create a StylesheetCompileError with context.

    Args:
        message: Error description
        location: Dotted path to the offending entry
        file: Optional source file path

    Returns:
        StylesheetCompileError with context attached
    """
    return StylesheetCompileError(message, ErrorContext(location=location, file=file))
