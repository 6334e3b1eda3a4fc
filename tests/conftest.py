"""Pytest configuration and fixtures for sheetexpr tests."""

import pytest

from sheetexpr import (
    ArgumentList,
    AttributeSelector,
    Boolean,
    Dimension,
    Identifier,
    Kind,
    List,
    Location,
    Null,
    Number,
    Percentage,
    Range,
    Separator,
    String,
)


@pytest.fixture
def loc():
    """Location of a left operand."""
    return Location(3, 8, "theme.roo")


@pytest.fixture
def right_loc():
    """Location of a right operand."""
    return Location(3, 14, "theme.roo")


@pytest.fixture
def space():
    return Separator(" ")


@pytest.fixture
def directions(space):
    """left top right bottom, space separated."""
    return List(
        (
            Identifier("left"),
            space,
            Identifier("top"),
            space,
            Identifier("right"),
            space,
            Identifier("bottom"),
        )
    )


def sample_node(kind: Kind):
    """A representative node with a non-zero payload for every kind."""
    return {
        Kind.NUMBER: Number(2),
        Kind.PERCENTAGE: Percentage(50),
        Kind.DIMENSION: Dimension(10, "px"),
        Kind.IDENTIFIER: Identifier("a"),
        Kind.STRING: String("b"),
        Kind.BOOLEAN: Boolean(True),
        Kind.SEPARATOR: Separator(","),
        Kind.NULL: Null(),
        Kind.LIST: List((Number(1), Separator(" "), Number(2))),
        Kind.ARGUMENT_LIST: ArgumentList((Number(1), Number(2))),
        Kind.RANGE: Range(Number(1), Number(3)),
        Kind.ATTRIBUTE_SELECTOR: AttributeSelector(Identifier("href")),
    }[kind]
