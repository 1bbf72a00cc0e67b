"""
String utility functions for themescope.

Provides the literal substring replacement used to expand selector
templates and to resolve parent references in nested selectors.
"""

from __future__ import annotations

# Placeholder token substituted with the theme name in a selector template
SELECTOR_PLACEHOLDER = "{$}"

# Parent selector reference in nested rules
PARENT_REFERENCE = "&"


def replace_all(template: str, token: str, replacement: str) -> str:
    """
    Replace every non-overlapping occurrence of ``token`` with ``replacement``.

    Plain literal search, left to right. After each replacement the scan
    resumes past the inserted text, so a replacement that itself contains
    ``token`` is never rescanned.

    Args:
        template: String to expand
        token: Literal substring to search for
        replacement: Text inserted in place of each occurrence

    Returns:
        The expanded string, or ``template`` unchanged when ``token`` is
        empty or does not occur

    Examples:
        >>> replace_all('[data-theme="{$}"]', "{$}", "dark")
        '[data-theme="dark"]'
        >>> replace_all("a{$}b{$}c", "{$}", "-")
        'a-b-c'
        >>> replace_all("x{$}", "{$}", "{$}{$}")
        'x{$}{$}'
    """
    if not token:
        return template

    parts: list[str] = []
    position = 0
    while True:
        index = template.find(token, position)
        if index == -1:
            break
        parts.append(template[position:index])
        parts.append(replacement)
        position = index + len(token)

    if not parts:
        return template

    parts.append(template[position:])
    return "".join(parts)


def expand_selector(template: str, theme_name: str) -> str:
    """Build a theme's scoping selector from a selector template."""
    return replace_all(template, SELECTOR_PLACEHOLDER, theme_name)


def strip_parent_reference(selector: str) -> str:
    """
    Drop the parent reference from a selector used at the top level.

    ``[data-theme="dark"] &`` becomes ``[data-theme="dark"]``; a bare ``&``
    becomes ``:root``.
    """
    stripped = " ".join(replace_all(selector, PARENT_REFERENCE, " ").split())
    return stripped or ":root"
