"""Number rendering shared by coercion and text concatenation.

The expression language has a single number type. Integral values render
without a fractional part whether they are stored as ``int`` or
``float``, and text concatenation renders booleans as ``true``/``false``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

# Enough significant digits for any finite float written out in full.
_FLOAT_DIGITS = 400


def format_number(value: int | float) -> str:
    """Render a number in its shortest round-trip form.

    >>> format_number(2.0)
    '2'
    >>> format_number(0.5)
    '0.5'
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return _non_finite(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_fixed(value: int | float, precision: int) -> str:
    """Round to ``precision`` fractional digits and drop trailing zeros.

    Ties round away from zero on the exact binary value.

    >>> format_fixed(1.23456, 3)
    '1.235'
    >>> format_fixed(2.5, 3)
    '2.5'
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return _non_finite(value)
    context = Context(prec=_FLOAT_DIGITS + precision)
    exponent = Decimal(1).scaleb(-precision, context)
    rounded = Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=context)
    if rounded.is_zero():
        return "0"
    return format(rounded.normalize(context), "f")


def to_text(value: Any) -> str:
    """Render a raw payload the way text concatenation sees it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"
