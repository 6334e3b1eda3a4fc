"""Structural equality between nodes.

Equality compares kinds and then ``children`` recursively, with two
exceptions that compare a flag instead of the children:

- ``range``: equal when ``exclusive`` matches, whatever the bounds.
- ``attributeSelector``: equal when ``operator`` matches.

Source locations never take part in the comparison.
"""

from __future__ import annotations

from typing import Any

from sheetexpr.nodes import AttributeSelector, Node, Range


def equal(a: Any, b: Any) -> bool:
    """Compare two nodes, node sequences or primitive payloads.

    >>> equal(Number(1), Number(1.0))
    True
    >>> equal(Range(Number(1), Number(3)), Range(Number(5), Number(9)))
    True
    """
    a_seq = isinstance(a, list | tuple)
    b_seq = isinstance(b, list | tuple)
    if a_seq or b_seq:
        if not (a_seq and b_seq) or len(a) != len(b):
            return False
        return all(equal(x, y) for x, y in zip(a, b, strict=True))

    if not isinstance(a, Node) or not isinstance(b, Node):
        return _equal_primitive(a, b)

    if a.kind is not b.kind:
        return False

    a_children = a.children
    b_children = b.children
    if a_children is None and b_children is None:
        return True
    if a_children is None or b_children is None:
        return False

    if isinstance(a, Range) and isinstance(b, Range):
        return a.exclusive == b.exclusive
    if isinstance(a, AttributeSelector) and isinstance(b, AttributeSelector):
        return a.operator == b.operator

    return equal(a_children, b_children)


def _equal_primitive(a: Any, b: Any) -> bool:
    # booleans only match booleans (True != 1 here)
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if isinstance(a, Node) or isinstance(b, Node):
        return False
    return a == b
