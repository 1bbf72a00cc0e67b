"""
Theme scope: emit one block of content per theme.

Content is a callable receiving the ThemeContext of the block being
emitted and returning the block body. The default theme's block comes first
and is unscoped; each named theme then gets a block under its expanded
selector. Later rules win at equal specificity, so per-theme values
override the default in the cascade.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import MissingSelectorTemplateWarning
from .ir.stylesheet import BlockBody, Declaration, Rule
from .ir.themes import NamedTheme, ThemeConfig, ThemeContext
from .strings import expand_selector

logger = logging.getLogger(__name__)

BlockContent = Callable[[ThemeContext], Iterable[Declaration | Rule]]


@dataclass
class ThemeBlock:
    """One emitted block. ``selector`` is None for the unscoped default block."""

    selector: str | None
    theme: str | None
    body: BlockBody = field(default_factory=list)

    @property
    def is_scoped(self) -> bool:
        return self.selector is not None


def _normalize_filter(themes: str | Iterable[str] | None) -> set[str]:
    if themes is None:
        return set()
    if isinstance(themes, str):
        return {themes}
    return {str(name) for name in themes}


def theme_scope(
    config: ThemeConfig,
    content: BlockContent,
    *,
    themes: str | Iterable[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> list[ThemeBlock]:
    """Emit the content once per theme.

    Args:
        config: Theme configuration store.
        content: Block content, called once per emitted block with its context.
        themes: Theme names to emit scoped blocks for; empty or None means all.
        overrides: Raw configuration overrides merged over the store for this call only.

    Returns:
        Emitted blocks in cascade order: the unscoped default block (when a
        default exists, regardless of the filter), then one block per
        selected theme in declaration order.
    """
    effective = config.merge(overrides)
    name_filter = _normalize_filter(themes)
    blocks: list[ThemeBlock] = []

    default = effective.default_theme()
    if default is not None:
        context = ThemeContext(config=effective, theme=None, values=default)
        blocks.append(ThemeBlock(selector=None, theme=None, body=list(content(context))))

    for missing in sorted(name_filter - set(effective.themes)):
        logger.debug(f"Theme filter '{missing}' matches no configured theme; skipping")

    if name_filter:
        selected = [name for name in effective.themes if name in name_filter]
    else:
        # The theme the default points at is already emitted unscoped
        skip = effective.default.name if isinstance(effective.default, NamedTheme) else None
        selected = [name for name in effective.themes if name != skip]
    if not selected:
        return blocks

    template = effective.selector
    if not isinstance(template, str):
        warnings.warn(
            "No selector template configured; scoped theme blocks were not emitted",
            MissingSelectorTemplateWarning,
            stacklevel=2,
        )
        return blocks

    for name in selected:
        context = ThemeContext(config=effective, theme=name, values=effective.themes[name])
        selector = expand_selector(template, name)
        blocks.append(ThemeBlock(selector=selector, theme=name, body=list(content(context))))

    return blocks


def apply_theme_scope(
    rule: Rule,
    config: ThemeConfig,
    content: BlockContent,
    *,
    themes: str | Iterable[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> list[ThemeBlock]:
    """Emit a theme scope into ``rule``.

    The unscoped block's body is added to the rule itself; each scoped block
    becomes a nested rule under its selector.
    """
    blocks = theme_scope(config, content, themes=themes, overrides=overrides)
    for block in blocks:
        if block.is_scoped:
            rule.nest(Rule(selector=block.selector)).extend(block.body)
        else:
            rule.extend(block.body)
    return blocks
