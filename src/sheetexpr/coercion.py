"""Conversions from nodes to primitives and to enumerable forms.

Coercions never raise. A kind with no defined conversion yields ``None``
from ``to_number``, ``to_string`` and ``to_list_node``; callers check the
kind first.

Conversions:
    - ``to_number``: numeric payload of number, percentage, dimension
    - ``to_string``: rendered text of scalar values
    - ``to_boolean``: truthiness, where composites are always true
    - ``to_array``: items of a list, expanded range, or the node itself
    - ``to_list_node``: range or argument list as a separated list

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sheetexpr.config import DEFAULT_CONFIG, ValueConfig
from sheetexpr.nodes import (
    ArgumentList,
    Kind,
    List,
    Node,
    Numeric,
    Range,
    Separator,
)
from sheetexpr.numbers import format_fixed, format_number

logger = logging.getLogger(__name__)

NUMERIC_KINDS: frozenset[Kind] = frozenset({Kind.NUMBER, Kind.PERCENTAGE, Kind.DIMENSION})
TEXT_KINDS: frozenset[Kind] = frozenset({Kind.IDENTIFIER, Kind.STRING})


def to_number(node: Node) -> Numeric | None:
    """Numeric payload of a number, percentage or dimension."""
    if node.kind in NUMERIC_KINDS:
        return node.children[0]
    return None


def to_string(node: Node | str, *, config: ValueConfig = DEFAULT_CONFIG) -> str | None:
    """Render a scalar node as text.

    Plain numbers are rounded to ``config.precision`` fractional digits;
    percentages and dimensions render their payload as is, followed by
    ``%`` or the unit. Text passes through unchanged.

    >>> to_string(Number(1.23456))
    '1.235'
    >>> to_string(Dimension(10, "px"))
    '10px'
    """
    if isinstance(node, str):
        return node

    kind = node.kind
    if kind is Kind.NUMBER:
        return format_fixed(node.children[0], config.precision)
    if kind in TEXT_KINDS:
        return str(node.children[0])
    if kind is Kind.PERCENTAGE:
        return f"{format_number(node.children[0])}%"
    if kind is Kind.DIMENSION:
        value, unit = node.children
        return f"{format_number(value)}{unit}"
    return None


def to_boolean(node: Node) -> bool:
    """Truthiness of a node.

    Zero, NaN and the empty string are false. Any kind without a scalar
    payload (lists, ranges, null, ...) is true.
    """
    kind = node.kind
    if kind is Kind.BOOLEAN:
        return node.children[0]
    if kind in NUMERIC_KINDS:
        value = node.children[0]
        # NaN is the only value unequal to itself
        return value == value and bool(value)
    if kind in TEXT_KINDS:
        return bool(node.children[0])
    return True


def to_array(node: Node) -> list[Node]:
    """Enumerate the items a node stands for.

    - ``list``: the children at even positions (separators sit at odd ones)
    - ``range``: one node per step of 1 from the start bound towards the
      end bound, each shaped like the start bound
    - anything else: ``[node]``
    """
    if isinstance(node, List):
        return list(node.children[::2])
    if isinstance(node, Range):
        return _expand_range(node)
    return [node]


def _expand_range(node: Range) -> list[Node]:
    start = node.start
    first = start.children[0]
    stop = node.end.children[0]

    # an inclusive range reaches one step past its end bound
    if not node.exclusive:
        stop = stop + 1 if first <= stop else stop - 1

    items: list[Node] = []
    value = first
    if first <= stop:
        while value < stop:
            items.append(start.with_value(value))
            value += 1
    else:
        while value > stop:
            items.append(start.with_value(value))
            value -= 1

    logger.debug(
        "Expanded range %s%s%s into %d items",
        format_number(first),
        "..." if node.exclusive else "..",
        format_number(node.end.children[0]),
        len(items),
    )
    return items


def to_list_node(
    node: Node,
    separator: str | None = None,
    *,
    config: ValueConfig = DEFAULT_CONFIG,
) -> List | None:
    """Convert a list, range or argument list into a ``List`` node.

    Lists are returned as they are. Range items are joined with
    ``config.range_separator`` and arguments with
    ``config.argument_separator``; ``separator`` overrides either.
    The result and its separators carry ``node``'s location.
    """
    if isinstance(node, List):
        return node
    if isinstance(node, Range):
        text = config.range_separator if separator is None else separator
        return _joined(to_array(node), text, node)
    if isinstance(node, ArgumentList):
        text = config.argument_separator if separator is None else separator
        return _joined(node.children, text, node)
    return None


def _joined(items: Sequence[Node], text: str, source: Node) -> List:
    sep = Separator(text, loc=source.loc)
    return List(intersperse(items, sep), loc=source.loc)


def intersperse(items: Sequence[Node], sep: Node) -> tuple[Node, ...]:
    """Place ``sep`` between every pair of adjacent items.

    >>> intersperse((a, b, c), s)
    (a, s, b, s, c)
    """
    result: list[Node] = []
    for i, item in enumerate(items):
        if i:
            result.append(sep)
        result.append(item)
    return tuple(result)
