"""Composite nodes: lists, argument lists, ranges and attribute selectors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Self

from sheetexpr.nodes.base import Kind, Node


@dataclass(frozen=True, slots=True)
class List(Node):
    """Separated list: a b, c / d

    Items sit at even positions and separators at odd positions:
    ``(item, sep, item, sep, item)``.
    """

    kind = Kind.LIST

    items: tuple[Node, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def with_children(self, children: Sequence[Any]) -> Self:
        return type(self)(tuple(children), loc=self.loc)


@dataclass(frozen=True, slots=True)
class ArgumentList(Node):
    """Mixin or function arguments: (a, b, c)"""

    kind = Kind.ARGUMENT_LIST

    items: tuple[Node, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def with_children(self, children: Sequence[Any]) -> Self:
        return type(self)(tuple(children), loc=self.loc)


@dataclass(frozen=True, slots=True)
class Range(Node):
    """Range literal: start..end (inclusive) or start...end (exclusive)"""

    kind = Kind.RANGE

    start: Node
    end: Node
    exclusive: bool = False

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.start, self.end)

    def with_children(self, children: Sequence[Any]) -> Self:
        return type(self)(children[0], children[1], self.exclusive, loc=self.loc)


@dataclass(frozen=True, slots=True)
class AttributeSelector(Node):
    """Attribute selector: [name], [name="value"], [name^=value]"""

    kind = Kind.ATTRIBUTE_SELECTOR

    name: Node
    value: Node | None = None
    operator: str | None = None

    @property
    def children(self) -> tuple[Node, ...]:
        if self.value is None:
            return (self.name,)
        return (self.name, self.value)

    def with_children(self, children: Sequence[Any]) -> Self:
        value = children[1] if len(children) > 1 else None
        return type(self)(children[0], value, self.operator, loc=self.loc)
