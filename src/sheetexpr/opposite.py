"""Opposite-value transform for directional keywords.

Used when a rule is mirrored (for example flipping a style sheet for
right-to-left text): ``left`` becomes ``right`` and ``top`` becomes
``bottom``, including inside lists.
"""

from __future__ import annotations

from sheetexpr.config import DEFAULT_CONFIG, ValueConfig
from sheetexpr.nodes import Identifier, List, Node, String


def to_opposite(node: Node, *, config: ValueConfig = DEFAULT_CONFIG) -> Node:
    """Swap directional keywords for their opposites.

    Identifiers and strings found in ``config.opposites`` are replaced;
    any other value comes back as the very same node. Lists are rebuilt
    with each item transformed and separators untouched. Every other kind
    is returned unchanged.

    >>> to_opposite(Identifier("left"))
    Identifier(value='right')
    """
    if isinstance(node, Identifier | String):
        opposite = config.opposites.get(node.value, node.value)
        if opposite == node.value:
            return node
        return node.with_value(opposite)

    if isinstance(node, List):
        children = tuple(
            child if i % 2 else to_opposite(child, config=config)
            for i, child in enumerate(node.children)
        )
        return node.with_children(children)

    return node
