"""sheetexpr — value model and operator engine for style-sheet expressions.

Evaluated style-sheet expressions are trees of immutable value nodes
(numbers, percentages, dimensions, identifiers, strings, booleans, lists,
ranges). This package defines everything an evaluator does with them
once they exist: copy, compare, coerce, combine and mirror.

Quickstart:
    >>> from sheetexpr import Dimension, Identifier, Number, perform, to_string
    >>> to_string(perform("+", Number(2), Identifier("px")))
    '2px'
    >>> to_string(perform("*", Number(3), Dimension(10, "px")))
    '30px'

Operations:
1. **clone / equal**: structural copy and comparison
2. **to_number / to_string / to_boolean**: scalar coercions
3. **to_array / to_list_node**: iteration over lists and ranges
4. **perform**: ``+ - * / %`` dispatched on both operand kinds
5. **to_opposite**: ``left``/``right`` and ``top``/``bottom`` mirroring

Errors:
Only ``perform`` raises. Every error derives from ``NodeError`` and
carries the ``Location`` of the node it blames:

    >>> perform("/", Number(4), Number(0))  # Raises DivideByZeroError

Thread-Safety:
Nodes are frozen and every operation is a pure function of its
arguments, so all of the API can be called from any number of threads.

Logging:
Modules log under the ``sheetexpr`` logger hierarchy at DEBUG level and
install no handlers.

"""

from sheetexpr.clone import clone
from sheetexpr.coercion import (
    to_array,
    to_boolean,
    to_list_node,
    to_number,
    to_string,
)
from sheetexpr.config import DEFAULT_CONFIG, DEFAULT_OPPOSITES, ValueConfig
from sheetexpr.equality import equal
from sheetexpr.exceptions import (
    DivideByZeroError,
    ErrorCode,
    ModuloByZeroError,
    NodeError,
    OperationError,
    UnsupportedOperationError,
)
from sheetexpr.nodes import (
    ArgumentList,
    AttributeSelector,
    Boolean,
    Dimension,
    Identifier,
    Kind,
    List,
    Location,
    Node,
    Null,
    Number,
    Percentage,
    Range,
    Separator,
    String,
)
from sheetexpr.operators import OPERATORS, perform
from sheetexpr.opposite import to_opposite

__version__ = "0.1.0"

__all__ = [
    # Nodes
    "ArgumentList",
    "AttributeSelector",
    "Boolean",
    "Dimension",
    "Identifier",
    "Kind",
    "List",
    "Location",
    "Node",
    "Null",
    "Number",
    "Percentage",
    "Range",
    "Separator",
    "String",
    # Operations
    "OPERATORS",
    "clone",
    "equal",
    "perform",
    "to_array",
    "to_boolean",
    "to_list_node",
    "to_number",
    "to_opposite",
    "to_string",
    # Configuration
    "DEFAULT_CONFIG",
    "DEFAULT_OPPOSITES",
    "ValueConfig",
    # Errors
    "DivideByZeroError",
    "ErrorCode",
    "ModuloByZeroError",
    "NodeError",
    "OperationError",
    "UnsupportedOperationError",
]
