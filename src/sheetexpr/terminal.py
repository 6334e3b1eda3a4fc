"""ANSI styling for diagnostics.

Colours are applied only when stdout is a TTY, unless ``NO_COLOR`` or
``FORCE_COLOR`` says otherwise (``FORCE_COLOR`` wins).
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

Style = Literal["bold", "dim", "red", "green", "yellow", "cyan", "bright_red", "bright_blue"]

_CODES: dict[str, str] = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_blue": "\033[94m",
}
_RESET = "\033[0m"

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _detect_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _detect_colors()


def supports_color() -> bool:
    """Whether diagnostics are currently styled."""
    return _USE_COLORS


def paint(text: str, *styles: Style) -> str:
    """Wrap ``text`` in the ANSI codes for ``styles`` when colours are on."""
    if not _USE_COLORS or not styles:
        return text
    return "".join(_CODES[style] for style in styles) + text + _RESET


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_ESCAPE.sub("", text)


def error_code(text: str) -> str:
    return paint(text, "bright_red", "bold")


def location(text: str) -> str:
    return paint(text, "cyan")


def dim_text(text: str) -> str:
    return paint(text, "dim")


def docs_url(text: str) -> str:
    return paint(text, "bright_blue")


def source_line(lineno: int, content: str, *, is_error: bool = False) -> str:
    """Format one numbered source line, marking the offending one with ``>``."""
    marker = ">" if is_error else " "
    number = paint(f"{marker}{lineno:>3}", "yellow")
    body = paint(content, "bright_red") if is_error else dim_text(content)
    return f"{number} | {body}"
