"""Tests for structural equality."""

import pytest

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
    equal,
)


class TestScalars:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (Number(1), Number(1), True),
            (Number(1), Number(1.0), True),
            (Number(1), Number(2), False),
            (Number(1), Percentage(1), False),
            (Dimension(1, "px"), Dimension(1, "px"), True),
            (Dimension(1, "px"), Dimension(1, "em"), False),
            (Identifier("a"), String("a"), False),
            (String("a"), String("a"), True),
            (Boolean(True), Boolean(True), True),
            (Boolean(True), Number(1), False),
            (Null(), Null(), True),
            (Null(), Number(0), False),
        ],
    )
    def test_scalar_pairs(self, a, b, expected):
        assert equal(a, b) is expected

    def test_locations_are_ignored(self):
        assert equal(Number(1, loc=Location(1)), Number(1, loc=Location(40, 2)))


class TestPrimitives:
    def test_numbers_compare_by_value(self):
        assert equal(1, 1.0)
        assert not equal(1, 2)

    def test_booleans_never_equal_numbers(self):
        assert not equal(True, 1)
        assert not equal(0, False)
        assert equal(False, False)

    def test_text(self):
        assert equal("px", "px")
        assert not equal("px", "em")
        assert not equal("1", 1)

    def test_node_against_primitive(self):
        assert not equal(Number(1), 1)


class TestSequences:
    def test_pairwise(self):
        assert equal([Number(1), Identifier("a")], [Number(1), Identifier("a")])
        assert not equal([Number(1), Identifier("a")], [Number(1), Identifier("b")])

    def test_length_mismatch(self):
        assert not equal([Number(1)], [Number(1), Number(1)])

    def test_sequence_against_node(self):
        assert not equal([Number(1)], Number(1))
        assert not equal(Number(1), [Number(1)])

    def test_lists(self, space):
        a = List((Number(1), space, Number(2)))
        b = List((Number(1), Separator(" "), Number(2)))
        c = List((Number(1), Separator(","), Number(2)))
        assert equal(a, b)
        assert not equal(a, c)

    def test_list_against_argument_list(self):
        assert not equal(List((Number(1),)), ArgumentList((Number(1),)))


class TestKindSpecificEquality:
    """Ranges and attribute selectors compare a flag, not their children."""

    def test_ranges_with_different_bounds_are_equal(self):
        assert equal(Range(Number(1), Number(3)), Range(Number(10), Number(90)))

    def test_ranges_with_different_exclusivity_differ(self):
        assert not equal(
            Range(Number(1), Number(3), exclusive=True),
            Range(Number(1), Number(3), exclusive=False),
        )

    def test_attribute_selectors_compare_operator(self):
        a = AttributeSelector(Identifier("href"), String("a"), "^=")
        b = AttributeSelector(Identifier("src"), String("b"), "^=")
        c = AttributeSelector(Identifier("href"), String("a"), "$=")
        assert equal(a, b)
        assert not equal(a, c)

    def test_attribute_selectors_without_value(self):
        assert equal(AttributeSelector(Identifier("a")), AttributeSelector(Identifier("b")))
