"""
Stylesheet IR types: declarations and (possibly nested) rules.

Nested rule selectors may reference their parent with ``&``; the CSS
renderer flattens the tree.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field


class Declaration(BaseModel):
    """A single ``property: value`` style declaration."""

    property: str = Field(description="CSS property name")
    value: str = Field(description="Literal CSS value text")

    def render(self) -> str:
        return f"{self.property}: {self.value};"


class Rule(BaseModel):
    """A selector with declarations and nested rules."""

    selector: str = Field(description="Selector, may contain '&' when nested")
    declarations: list[Declaration] = Field(default_factory=list)
    children: list[Rule] = Field(default_factory=list)

    def declare(self, property: str, value: Any) -> Rule:
        """Append a declaration and return self for chaining."""
        self.declarations.append(Declaration(property=property, value=str(value)))
        return self

    def nest(self, rule: Rule) -> Rule:
        """Append a nested rule and return it."""
        self.children.append(rule)
        return rule

    def extend(self, body: Iterable[Declaration | Rule]) -> Rule:
        """Append a mixed block body (declarations and nested rules) in order."""
        for node in body:
            if isinstance(node, Declaration):
                self.declarations.append(node)
            else:
                self.children.append(node)
        return self

    @property
    def is_empty(self) -> bool:
        return not self.declarations and all(child.is_empty for child in self.children)


BlockBody = list[Declaration | Rule]

Rule.model_rebuild()
