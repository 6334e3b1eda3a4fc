"""Base node class and type tags for sheetexpr AST values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Self


class Kind(Enum):
    """Closed set of node type tags.

    The value is the tag as written by the parser (``node.kind.value``),
    which is also what error messages show.
    """

    NUMBER = "number"
    PERCENTAGE = "percentage"
    DIMENSION = "dimension"
    IDENTIFIER = "identifier"
    STRING = "string"
    BOOLEAN = "boolean"
    SEPARATOR = "separator"
    NULL = "null"
    LIST = "list"
    ARGUMENT_LIST = "argumentList"
    RANGE = "range"
    ATTRIBUTE_SELECTOR = "attributeSelector"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Location:
    """Source position of a node.

    Never interpreted by value operations, only carried from inputs to
    results and reported by errors.
    """

    lineno: int
    col_offset: int = 0
    filename: str | None = None

    def __str__(self) -> str:
        name = self.filename or "<stylesheet>"
        return f"{name}:{self.lineno}:{self.col_offset}"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all value nodes.

    Nodes are immutable. Derived values are built as new nodes, so a
    node handed to any operation is never changed by it.

    """

    kind: ClassVar[Kind]

    loc: Location | None = field(default=None, kw_only=True, compare=False, repr=False)

    @property
    def children(self) -> tuple[Any, ...] | None:
        """Payload in positional form, shaped by ``kind``.

        ``None`` for kinds that carry no payload.
        """
        return None

    def with_children(self, children: Sequence[Any]) -> Self:
        """Build a node of the same class and location from ``children``."""
        raise NotImplementedError
