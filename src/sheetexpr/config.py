"""Configuration for value rendering and transforms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_OPPOSITES: Mapping[str, str] = MappingProxyType(
    {
        "left": "right",
        "right": "left",
        "top": "bottom",
        "bottom": "top",
    }
)


@dataclass(frozen=True, slots=True)
class ValueConfig:
    """Tunable constants for coercion and opposite-value transforms.

    Attributes:
        precision: Fractional digits kept when a plain number is rendered.
        range_separator: Separator text placed between expanded range items.
        argument_separator: Separator text placed between arguments when an
            argument list becomes a list.
        opposites: Keyword mapping applied by ``to_opposite``.

    Example:
        >>> from sheetexpr import Number, ValueConfig, to_string
        >>> to_string(Number(1.23456), config=ValueConfig(precision=1))
        '1.2'
    """

    precision: int = 3
    range_separator: str = " "
    argument_separator: str = ","
    opposites: Mapping[str, str] = field(default=DEFAULT_OPPOSITES)


DEFAULT_CONFIG = ValueConfig()
