"""
smartnum — Self-sizing numeric values

A numeric value type that stores each number in the smallest
representation holding it exactly (Integer8 ... Integer64,
UnsignedInteger64, Float32, Float64) and carries IEEE-754 NaN and
infinities as first-class markers.

================================================================================
QUICK START
================================================================================

    from smartnum import Number, parse

    a = Number.of(120)            # Integer8
    b = parse("32768")            # Integer32
    c = a * b                     # Integer32, exact

    parse("inf") + Number.of(5)   # PositiveInfinity
    Number.of(0) / Number.of(0)   # NaN, never an exception

    str(Number.of(0.5))           # '0.5'
    Number.of(0.5).type_name()    # 'Float32'

================================================================================
"""

from .representation import (
    Kind,
    Representation,
    select,
)

from .promotion import (
    Operator,
    promote,
)

from .core import (
    Number,
    DisplayStyle,
)

from .parsing import (
    parse,
    ParseError,
    ParseErrorKind,
)

__version__ = "1.0.0"

__all__ = [
    # Representation
    "Kind",
    "Representation",
    "select",
    # Promotion
    "Operator",
    "promote",
    # Value
    "Number",
    "DisplayStyle",
    # Parsing
    "parse",
    "ParseError",
    "ParseErrorKind",
]
