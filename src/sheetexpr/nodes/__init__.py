"""Value nodes for sheetexpr.

Nodes are produced by the style-sheet parser and consumed by the value
operations in :mod:`sheetexpr`. Every node is an immutable dataclass
with a ``kind`` tag, a source ``loc`` and a positional ``children``
view of its payload.

Node Types:
    **Scalars**: Number, Percentage, Dimension, Identifier, String,
    Boolean, Separator, Null

    **Composites**: List, ArgumentList, Range, AttributeSelector

"""

from sheetexpr.nodes.base import Kind, Location, Node
from sheetexpr.nodes.composites import ArgumentList, AttributeSelector, List, Range
from sheetexpr.nodes.scalars import (
    Boolean,
    Dimension,
    Identifier,
    Null,
    Number,
    Numeric,
    Percentage,
    Scalar,
    Separator,
    String,
)

__all__ = [
    "ArgumentList",
    "AttributeSelector",
    "Boolean",
    "Dimension",
    "Identifier",
    "Kind",
    "List",
    "Location",
    "Node",
    "Null",
    "Number",
    "Numeric",
    "Percentage",
    "Range",
    "Scalar",
    "Separator",
    "String",
]
