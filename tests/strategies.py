"""Shared hypothesis strategies for sheetexpr property-based testing.

Strategies build structurally valid nodes at two levels:

- **Scalars**: numbers, percentages, dimensions, text and booleans
- **Trees**: lists with separators at odd positions, ranges, argument
  lists and attribute selectors nested over scalars

Payloads are finite so that structural equality is reflexive.
"""

from __future__ import annotations

from hypothesis import strategies as st

from sheetexpr import (
    ArgumentList,
    AttributeSelector,
    Boolean,
    Dimension,
    Identifier,
    List,
    Location,
    Null,
    Number,
    Percentage,
    Range,
    Separator,
    String,
)
from sheetexpr.coercion import intersperse

# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

safe_integer = st.integers(min_value=-10_000, max_value=10_000)

finite_float = st.floats(
    min_value=-1e6,
    max_value=1e6,
    allow_nan=False,
    allow_infinity=False,
)

numeric = st.one_of(safe_integer, finite_float)

unit = st.sampled_from(["px", "em", "rem", "pt", "vh", "deg", "s"])

word = st.from_regex(r"[a-z][a-z0-9-]{0,10}", fullmatch=True)

locations = st.one_of(
    st.none(),
    st.builds(Location, st.integers(1, 500), st.integers(0, 80), st.just("theme.roo")),
)

# ---------------------------------------------------------------------------
# Scalar nodes
# ---------------------------------------------------------------------------

numbers = st.builds(Number, numeric, loc=locations)
percentages = st.builds(Percentage, numeric, loc=locations)
dimensions = st.builds(Dimension, numeric, unit, loc=locations)
identifiers = st.builds(Identifier, word, loc=locations)
strings = st.builds(String, st.text(max_size=20), loc=locations)
booleans = st.builds(Boolean, st.booleans(), loc=locations)

numeric_nodes = st.one_of(numbers, percentages, dimensions)

scalar_nodes = st.one_of(
    numbers, percentages, dimensions, identifiers, strings, booleans, st.just(Null())
)

separators = st.builds(Separator, st.sampled_from([" ", ",", "/"]))

direction = st.sampled_from(["left", "right", "top", "bottom", "center", "auto"])
directional_items = st.one_of(
    st.builds(Identifier, direction),
    st.builds(String, direction),
    numbers,
)


def separated(items: st.SearchStrategy, *, max_size: int = 5) -> st.SearchStrategy:
    """Lists of ``items`` with a separator between each pair."""
    return st.builds(
        lambda values, sep: List(intersperse(values, sep)),
        st.lists(items, max_size=max_size),
        separators,
    )


directional_lists = separated(directional_items)

# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

small_integer = st.integers(min_value=-20, max_value=20)

integer_ranges = st.builds(
    Range,
    st.builds(Number, small_integer),
    st.builds(Number, small_integer),
    st.booleans(),
)

# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------


def _composites(children: st.SearchStrategy) -> st.SearchStrategy:
    return st.one_of(
        separated(children, max_size=3),
        st.builds(ArgumentList, st.lists(children, max_size=3).map(tuple)),
        st.builds(Range, numeric_nodes, numeric_nodes, st.booleans()),
        st.builds(
            AttributeSelector,
            identifiers,
            st.one_of(st.none(), strings, identifiers),
            st.sampled_from([None, "=", "^=", "$=", "*="]),
        ),
    )


nodes = st.recursive(scalar_nodes, _composites, max_leaves=12)
