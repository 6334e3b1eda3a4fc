"""Exceptions for sheetexpr value operations.

Exception Hierarchy:
NodeError (base)
└── OperationError              # Binary operator failure
    ├── DivideByZeroError       # x / 0
    ├── ModuloByZeroError       # x % 0
    └── UnsupportedOperationError  # no rule for (left kind, op, right kind)

Every error carries the message and the ``Location`` of the node it
blames. Division and modulo blame the divisor; unsupported operations
blame the left operand.

Example:
    ```
    S-OP-001: Divide by zero
      --> theme.roo:12:18
       |
    > 12 |   width: $total / 0;
       |                   ^
       |
      Docs: https://sheetexpr.readthedocs.io/en/latest/errors.html#s-op-001
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sheetexpr import terminal
from sheetexpr.nodes import Kind, Location, Node

_DOCS_BASE = "https://sheetexpr.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes.

    Format: S-{CATEGORY}-{NUMBER}
    Categories: OP (binary operators)
    """

    DIVIDE_BY_ZERO = "S-OP-001"
    MODULO_BY_ZERO = "S-OP-002"
    UNSUPPORTED_OPERATION = "S-OP-003"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        prefix = self.value.split("-")[1]
        return {"OP": "operator"}.get(prefix, "unknown")


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Source lines around an error, with an optional caret column.

    Attributes:
        lines: (line_number, content) pairs around the error.
        error_line: 1-based line number of the error.
        column: 0-based column for the caret, if known.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        gutter = terminal.dim_text("   |")
        parts = [gutter]
        for lineno, content in self.lines:
            parts.append(terminal.source_line(lineno, content, is_error=lineno == self.error_line))
        if self.column is not None:
            # "> 12 | " prefix is seven columns wide
            parts.append(f"{gutter}   {' ' * self.column}{terminal.paint('^', 'bright_red')}")
        parts.append(gutter)
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Cut the lines around ``error_line`` out of ``source``."""
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class NodeError(Exception):
    """Base exception for value-operation failures.

    Attributes:
        message: Human-readable description.
        loc: Location of the node the error blames, if known.
        code: Searchable error code.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, loc: Location | None = None):
        self.message = message
        self.loc = loc
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.loc is None:
            return self.message
        return f"{self.message}\n  --> {self.loc}"

    def format_compact(self, source: str | None = None) -> str:
        """Format as a terminal diagnostic.

        When ``source`` (the full style-sheet text) is given and the error
        has a location, the offending line is shown with a caret.
        """
        header = self.message
        if self.code:
            header = f"{terminal.error_code(self.code.value)}: {header}"
        parts = [header]

        if self.loc is not None:
            parts.append(f"  --> {terminal.location(str(self.loc))}")
            if source:
                snippet = build_source_snippet(
                    source, self.loc.lineno, column=self.loc.col_offset
                )
                if snippet.lines:
                    parts.append(snippet.format())

        if self.code:
            parts.append(f"  {terminal.dim_text('Docs:')} {terminal.docs_url(self.code.docs_url)}")

        return "\n".join(parts)


class OperationError(NodeError):
    """A binary operation could not produce a value.

    Attributes:
        operator: The operator symbol (``+ - * / %``).
        left_kind: Kind of the left operand.
        right_kind: Kind of the right operand.
    """

    def __init__(
        self,
        message: str,
        *,
        operator: str,
        left: Node,
        right: Node,
        blame: Node,
    ):
        self.operator = operator
        self.left_kind: Kind = left.kind
        self.right_kind: Kind = right.kind
        super().__init__(message, blame.loc)


class DivideByZeroError(OperationError):
    """Divisor of ``/`` is zero. Blames the divisor."""

    code: ErrorCode | None = ErrorCode.DIVIDE_BY_ZERO

    def __init__(self, left: Node, right: Node):
        super().__init__("Divide by zero", operator="/", left=left, right=right, blame=right)


class ModuloByZeroError(OperationError):
    """Divisor of ``%`` is zero. Blames the divisor."""

    code: ErrorCode | None = ErrorCode.MODULO_BY_ZERO

    def __init__(self, left: Node, right: Node):
        super().__init__("Modulo by zero", operator="%", left=left, right=right, blame=right)


class UnsupportedOperationError(OperationError):
    """No rule exists for the operand kinds. Blames the left operand.

    Example:
        >>> perform("+", Boolean(True), Boolean(False))
        UnsupportedOperationError: Unsupported binary operation: boolean + boolean

    """

    code: ErrorCode | None = ErrorCode.UNSUPPORTED_OPERATION

    def __init__(self, operator: str, left: Node, right: Node):
        message = f"Unsupported binary operation: {left.kind} {operator} {right.kind}"
        super().__init__(message, operator=operator, left=left, right=right, blame=left)
