"""Scalar value nodes: numbers, units, text and booleans."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any, Self

from sheetexpr.nodes.base import Kind, Node

Numeric = int | float


@dataclass(frozen=True, slots=True)
class Scalar(Node):
    """Node whose whole payload is a single primitive value."""

    value: Any

    @property
    def children(self) -> tuple[Any, ...]:
        return (self.value,)

    def with_children(self, children: Sequence[Any]) -> Self:
        return type(self)(children[0], loc=self.loc)

    def with_value(self, value: Any) -> Self:
        """Copy of this node with the payload at position 0 replaced."""
        return replace(self, value=value)


@dataclass(frozen=True, slots=True)
class Number(Scalar):
    """Unitless number: 12, 0.5"""

    kind = Kind.NUMBER

    value: Numeric


@dataclass(frozen=True, slots=True)
class Percentage(Scalar):
    """Percentage: 50%"""

    kind = Kind.PERCENTAGE

    value: Numeric


@dataclass(frozen=True, slots=True)
class Dimension(Scalar):
    """Number with a unit: 10px, 1.5em"""

    kind = Kind.DIMENSION

    value: Numeric
    unit: str

    @property
    def children(self) -> tuple[Any, ...]:
        return (self.value, self.unit)

    def with_children(self, children: Sequence[Any]) -> Self:
        return type(self)(children[0], children[1], loc=self.loc)


@dataclass(frozen=True, slots=True)
class Identifier(Scalar):
    """Bare word: left, solid, px"""

    kind = Kind.IDENTIFIER

    value: str


@dataclass(frozen=True, slots=True)
class String(Scalar):
    """Quoted string: 'a', "b" """

    kind = Kind.STRING

    value: str


@dataclass(frozen=True, slots=True)
class Boolean(Scalar):
    """Boolean literal: true, false"""

    kind = Kind.BOOLEAN

    value: bool


@dataclass(frozen=True, slots=True)
class Separator(Scalar):
    """List separator between items: ' ', ',' or '/'"""

    kind = Kind.SEPARATOR

    value: str


@dataclass(frozen=True, slots=True)
class Null(Node):
    """null: a value with no payload"""

    kind = Kind.NULL

    def with_children(self, children: Sequence[Any]) -> Self:
        return replace(self)
