"""Structural clone of nodes and node sequences."""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from sheetexpr.nodes import Node

T = TypeVar("T")


def clone(node: T, deep: bool = True) -> T:
    """Copy a node, a sequence of nodes, or pass a primitive through.

    A deep clone rebuilds every node in the ``children`` tree, so no node
    object is shared with the original. A shallow clone copies only the
    outer node: composite nodes keep the very same ``children`` tuple.

    Args:
        node: A ``Node``, a list or tuple of nodes, or a primitive payload.
        deep: Recurse into ``children`` when true.

    Returns:
        A value of the same shape as ``node``. Lists stay lists and tuples
        stay tuples.

    Example:
        >>> lst = List((Number(1), Separator(" "), Number(2)))
        >>> clone(lst, deep=False).children is lst.children
        True
    """
    if isinstance(node, list | tuple):
        return type(node)(clone(item, deep) for item in node)

    if not isinstance(node, Node):
        return node

    children = node.children
    if children is None:
        return replace(node)
    if deep:
        children = clone(children, deep)
    return node.with_children(children)
