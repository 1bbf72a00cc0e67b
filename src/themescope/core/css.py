"""
CSS rendering for the stylesheet IR.

Flattens nested rules into plain CSS: a nested selector containing ``&``
has it replaced by the parent selector, any other nested selector is joined
to its parent as a descendant. Selector lists expand pairwise.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .ir.stylesheet import Declaration, Rule
from .strings import PARENT_REFERENCE, replace_all, strip_parent_reference

_OPENERS = {"(": ")", "[": "]"}


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside brackets, parentheses, or quotes are kept.
    """
    parts: list[str] = []
    current: list[str] = []
    closers: list[str] = []
    quote: str | None = None

    for char in selector:
        if quote:
            if char == quote:
                quote = None
        elif char in ('"', "'"):
            quote = char
        elif char in _OPENERS:
            closers.append(_OPENERS[char])
        elif closers and char == closers[-1]:
            closers.pop()
        elif char == "," and not closers:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    parts.append("".join(current).strip())
    return [part for part in parts if part]


def resolve_selector(parent: str | None, child: str) -> str:
    """Resolve a nested selector against its parent selector."""
    children = split_selector_list(child)
    if parent is None:
        return ", ".join(strip_parent_reference(c) if PARENT_REFERENCE in c else c for c in children)

    resolved: list[str] = []
    for p in split_selector_list(parent):
        for c in children:
            if PARENT_REFERENCE in c:
                resolved.append(replace_all(c, PARENT_REFERENCE, p))
            else:
                resolved.append(f"{p} {c}")
    return ", ".join(resolved)


def flatten_rules(
    rules: Iterable[Rule], parent: str | None = None
) -> Iterator[tuple[str, list[Declaration]]]:
    """Yield ``(selector, declarations)`` pairs in source order, skipping empty rules."""
    for rule in rules:
        if rule.is_empty:
            continue
        selector = resolve_selector(parent, rule.selector)
        if rule.declarations:
            yield selector, rule.declarations
        yield from flatten_rules(rule.children, selector)


def render_css(rules: Iterable[Rule], indent: str = "  ") -> str:
    """Render rules as CSS text."""
    blocks: list[str] = []
    for selector, declarations in flatten_rules(rules):
        lines = [f"{selector} {{"]
        lines.extend(f"{indent}{declaration.render()}" for declaration in declarations)
        lines.append("}")
        blocks.append("\n".join(lines))

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
