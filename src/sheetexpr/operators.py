"""Binary operators over value nodes.

``perform(op, left, right)`` looks up ``(left.kind, op, right.kind)`` in
``RULES``. Each rule builds the result from one operand (keeping its
class, unit and location) or synthesizes a new node at the left
operand's location. A missing key raises ``UnsupportedOperationError``.

Result shapes:
    - onto left: ``10px + 2`` -> ``12px`` (left's kind and unit)
    - onto right: ``2 * 10px`` -> ``20px`` (right's kind and unit)
    - new node: ``2 + px`` -> ``2px``, ``50% / 25%`` -> ``2``

Text concatenation happens whenever either payload is text. Numbers are
written in shortest form and booleans as ``true``/``false``, so
``"a" + 1`` is ``"a1"``.

Division and modulo raise when the divisor payload is zero, blaming the
right operand.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sheetexpr.coercion import to_string
from sheetexpr.exceptions import (
    DivideByZeroError,
    ModuloByZeroError,
    OperationError,
    UnsupportedOperationError,
)
from sheetexpr.nodes import Dimension, Kind, Node, Number
from sheetexpr.numbers import to_text

logger = logging.getLogger(__name__)

OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/", "%"})


@dataclass(frozen=True, slots=True)
class Rule:
    """A named way of combining two operand nodes."""

    name: str
    apply: Callable[[Node, Node], Node]

    def __call__(self, left: Node, right: Node) -> Node:
        return self.apply(left, right)


# ---------------------------------------------------------------------------
# Payload arithmetic
# ---------------------------------------------------------------------------


def _plus(a: Any, b: Any) -> Any:
    if isinstance(a, str) or isinstance(b, str):
        return to_text(a) + to_text(b)
    return a + b


def _minus(a: Any, b: Any) -> Any:
    return a - b


def _times(a: Any, b: Any) -> Any:
    return a * b


def _divide(a: Any, b: Any) -> Any:
    return a / b


def _remainder(a: Any, b: Any) -> Any:
    """Truncated remainder: the sign follows the dividend."""
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    # fmod rejects an infinite dividend; the remainder is undefined
    if math.isinf(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------


def _onto_left(name: str, fn: Callable[[Any, Any], Any]) -> Rule:
    def apply(left: Node, right: Node) -> Node:
        return left.with_value(fn(left.children[0], right.children[0]))

    return Rule(name, apply)


def _onto_right(name: str, fn: Callable[[Any, Any], Any]) -> Rule:
    def apply(left: Node, right: Node) -> Node:
        return right.with_value(fn(left.children[0], right.children[0]))

    return Rule(name, apply)


def _unitless(name: str, fn: Callable[[Any, Any], Any]) -> Rule:
    def apply(left: Node, right: Node) -> Node:
        return Number(fn(left.children[0], right.children[0]), loc=left.loc)

    return Rule(name, apply)


def _nonzero_divisor(rule: Rule, error: type[OperationError]) -> Rule:
    def apply(left: Node, right: Node) -> Node:
        if right.children[0] == 0:
            raise error(left, right)
        return rule(left, right)

    return Rule(rule.name, apply)


def _number_with_unit(left: Node, right: Node) -> Node:
    return Dimension(left.children[0], right.children[0], loc=left.loc)


def _append_rendered(left: Node, right: Node) -> Node:
    return left.with_value(left.children[0] + to_string(right))


def _prepend_rendered(left: Node, right: Node) -> Node:
    return right.with_value(to_string(left) + right.children[0])


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

_N = Kind.NUMBER
_P = Kind.PERCENTAGE
_D = Kind.DIMENSION
_I = Kind.IDENTIFIER
_S = Kind.STRING
_B = Kind.BOOLEAN

_DIVIDE_LEFT = _onto_left("divide-left", _divide)
_DIVIDE_RIGHT = _onto_right("divide-right", _divide)
_DIVIDE_CANCEL = _unitless("divide-cancel-units", _divide)
_MODULO_LEFT = _onto_left("modulo-left", _remainder)
_MODULO_RIGHT = _onto_right("modulo-right", _remainder)
_MODULO_CANCEL = _unitless("modulo-cancel-units", _remainder)

_TABLE: tuple[tuple[str, Rule, tuple[tuple[Kind, Kind], ...]], ...] = (
    # Addition
    (
        "+",
        _onto_left("add-left", _plus),
        (
            (_N, _N), (_P, _N), (_P, _P), (_D, _N), (_D, _D),
            (_I, _N), (_I, _B), (_I, _I),
            (_S, _N), (_S, _B), (_S, _I), (_S, _S),
        ),
    ),
    ("+", Rule("number-with-unit", _number_with_unit), ((_N, _I),)),
    ("+", Rule("append-rendered", _append_rendered), ((_I, _P), (_I, _D), (_S, _D), (_S, _P))),
    (
        "+",
        _onto_right("add-right", _plus),
        ((_N, _P), (_N, _D), (_N, _S), (_B, _I), (_B, _S), (_I, _S)),
    ),
    ("+", Rule("prepend-rendered", _prepend_rendered), ((_P, _S), (_D, _S))),
    # Subtraction
    ("-", _onto_left("subtract-left", _minus), ((_N, _N), (_P, _P), (_P, _N), (_D, _D), (_D, _N))),
    ("-", _onto_right("subtract-right", _minus), ((_N, _D), (_N, _P))),
    # Multiplication
    ("*", _onto_left("multiply-left", _times), ((_N, _N), (_P, _N), (_D, _N))),
    ("*", _onto_right("multiply-right", _times), ((_N, _D), (_N, _P))),
    # Division
    ("/", _nonzero_divisor(_DIVIDE_LEFT, DivideByZeroError), ((_N, _N), (_P, _N), (_D, _N))),
    ("/", _nonzero_divisor(_DIVIDE_CANCEL, DivideByZeroError), ((_P, _P), (_D, _D))),
    ("/", _nonzero_divisor(_DIVIDE_RIGHT, DivideByZeroError), ((_N, _D), (_N, _P))),
    # Modulo
    ("%", _nonzero_divisor(_MODULO_LEFT, ModuloByZeroError), ((_N, _N), (_P, _N), (_D, _N))),
    ("%", _nonzero_divisor(_MODULO_CANCEL, ModuloByZeroError), ((_P, _P), (_D, _D))),
    ("%", _nonzero_divisor(_MODULO_RIGHT, ModuloByZeroError), ((_N, _P), (_N, _D))),
)

RULES: dict[tuple[Kind, str, Kind], Rule] = {
    (left, op, right): rule for op, rule, pairs in _TABLE for left, right in pairs
}


def perform(op: str, left: Node, right: Node) -> Node:
    """Apply binary operator ``op`` to two evaluated operands.

    Args:
        op: One of ``+ - * / %``.
        left: Left operand.
        right: Right operand.

    Returns:
        A new node; the operands are not modified.

    Raises:
        DivideByZeroError: ``/`` with a zero divisor.
        ModuloByZeroError: ``%`` with a zero divisor.
        UnsupportedOperationError: No rule for the operand kinds.

    Example:
        >>> perform("+", Number(2), Identifier("px"))
        Dimension(value=2, unit='px')
        >>> perform("/", Percentage(50), Percentage(25))
        Number(value=2.0)
    """
    rule = RULES.get((left.kind, op, right.kind))
    if rule is None:
        logger.debug("No rule for %s %s %s", left.kind, op, right.kind)
        raise UnsupportedOperationError(op, left, right)

    logger.debug("%s %s %s -> %s", left.kind, op, right.kind, rule.name)
    return rule(left, right)
