"""
core.py — Number, a self-sizing numeric value

================================================================================
DESIGN PRINCIPLES
================================================================================

1. TAGGED VALUE
   A Number is a (Representation, payload) pair. The representation is
   always the minimal one chosen by the selector; see representation.py.

2. TOTAL ARITHMETIC
   + - * / % never raise for Number operands. Overflow, division by zero
   and invalid operations (0 * inf, inf - inf) produce NaN or a signed
   infinity, so a computation chain is never interrupted.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance. In-place
   operators (x += y) simply rebind x to x + y. Safe to share between
   threads without locks.

4. EXACT COMPARISON
   Two Numbers are equal when their mathematical values are equal,
   whatever their representations:  Integer8(1) == Float64(1.0).
   NaN is never equal to anything, itself included.

5. EXPLICIT CONVERSION
   Operations with int/float raise TypeError. Convert with Number.of()
   first, so every value goes through the selector.

================================================================================
USAGE
================================================================================

    >>> a = Number.of(300)
    >>> a.type_name()
    'Integer16'
    >>> (a * Number.of(1000)).type_name()
    'Integer32'
    >>> str(Number.of(5) / Number.of(0))
    'inf'

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import math

from .representation import Representation, select, coerce
from .promotion import Operator, apply


# ==============================================================================
# DISPLAY STYLES
# ==============================================================================

class DisplayStyle(Enum):
    """
    Spellings of the special markers when formatting.

    PLAIN output is accepted back by the parser, as is SYMBOLIC.
    """
    PLAIN = ("NaN", "inf", "-inf")
    SYMBOLIC = ("NaN", "∞", "-∞")

    def __init__(self, nan: str, positive_infinity: str, negative_infinity: str):
        self._spellings = {
            Representation.NAN: nan,
            Representation.POSITIVE_INFINITY: positive_infinity,
            Representation.NEGATIVE_INFINITY: negative_infinity,
        }

    def spell(self, representation: Representation) -> str:
        return self._spellings[representation]


# ==============================================================================
# NUMBER
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Number:
    """
    Numeric value that picks its own storage class.

    INVARIANTS:
    1. _representation is minimal for _value (selector output)
    2. float variants hold finite payloads; nan/inf live in the markers
    3. arithmetic between Numbers is total

    SERIALIZATION:
        to_dict() / from_dict(), format {"type": str, "value": int | float | None}.
    """
    _representation: Representation
    _value: int | float

    DEFAULT_STYLE = DisplayStyle.PLAIN

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, native) -> Number:
        """
        Build a Number from a native int or float (NumPy scalars included).

        Raises:
            TypeError: for bool and non-numeric values
        """
        representation = select(native)
        return cls(
            _representation=representation,
            _value=coerce(native, representation),
        )

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse text into a Number. See parsing.parse()."""
        from .parsing import parse
        return parse(text)

    @classmethod
    def zero(cls) -> Number:
        """Integer8 zero. Useful as a start value for sum()."""
        return cls.of(0)

    @classmethod
    def nan(cls) -> Number:
        return cls(_representation=Representation.NAN, _value=math.nan)

    @classmethod
    def infinity(cls) -> Number:
        return cls(_representation=Representation.POSITIVE_INFINITY, _value=math.inf)

    @classmethod
    def negative_infinity(cls) -> Number:
        return cls(_representation=Representation.NEGATIVE_INFINITY, _value=-math.inf)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _binary(self, op: Operator, other: Number) -> Number:
        if not isinstance(other, Number):
            raise TypeError(
                f"Operation not allowed: Number {op.value} {type(other).__name__}. "
                f"Use Number.of() to convert."
            )
        result = apply(
            op,
            self._representation, self._value,
            other._representation, other._value,
        )
        return Number.of(result)

    def __add__(self, other: Number) -> Number:
        return self._binary(Operator.ADD, other)

    def __sub__(self, other: Number) -> Number:
        return self._binary(Operator.SUB, other)

    def __mul__(self, other: Number) -> Number:
        return self._binary(Operator.MUL, other)

    def __truediv__(self, other: Number) -> Number:
        return self._binary(Operator.DIV, other)

    def __mod__(self, other: Number) -> Number:
        return self._binary(Operator.MOD, other)

    def __neg__(self) -> Number:
        return Number.of(-self._value)

    def __abs__(self) -> Number:
        return Number.of(abs(self._value))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return False
        # int/float comparison in Python is exact
        return self._value == other._value

    def __lt__(self, other: Number) -> bool:
        self._check_comparable(other)
        return self._value < other._value

    def __le__(self, other: Number) -> bool:
        self._check_comparable(other)
        return self._value <= other._value

    def __gt__(self, other: Number) -> bool:
        self._check_comparable(other)
        return self._value > other._value

    def __ge__(self, other: Number) -> bool:
        self._check_comparable(other)
        return self._value >= other._value

    def compare(self, other: Number) -> int | None:
        """
        Partial order: -1, 0 or 1, or None when either side is NaN.
        """
        self._check_comparable(other)
        if self.is_nan() or other.is_nan():
            return None
        if self._value < other._value:
            return -1
        if self._value > other._value:
            return 1
        return 0

    def _check_comparable(self, other: Number) -> None:
        if not isinstance(other, Number):
            raise TypeError(f"Cannot compare Number with {type(other).__name__}")

    def __hash__(self) -> int:
        if self.is_nan():
            return hash(Representation.NAN)
        return hash(self._value)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def representation(self) -> Representation:
        return self._representation

    @property
    def value(self) -> int | float:
        """Payload: int for integer variants, float otherwise."""
        return self._value

    def type_name(self) -> str:
        return self._representation.type_name

    def is_nan(self) -> bool:
        return self._representation is Representation.NAN

    def is_infinite(self) -> bool:
        return self._representation in (
            Representation.POSITIVE_INFINITY,
            Representation.NEGATIVE_INFINITY,
        )

    def is_positive_infinity(self) -> bool:
        return self._representation is Representation.POSITIVE_INFINITY

    def is_negative_infinity(self) -> bool:
        return self._representation is Representation.NEGATIVE_INFINITY

    def is_finite(self) -> bool:
        return not self._representation.is_special

    def is_integer(self) -> bool:
        return self._representation.is_integer

    def is_float(self) -> bool:
        return self._representation.is_float

    def is_zero(self) -> bool:
        return self.is_finite() and self._value == 0

    # -------------------------------------------------------------------------
    # Conversion and output
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Value as a Python float (nan/inf for markers).

        Integers beyond 2**53 lose precision here.
        """
        return float(self._value)

    def __float__(self) -> float:
        return self.to_float()

    def format(self, style: DisplayStyle | None = None) -> str:
        """
        Human-readable text.

        Integers print as decimal digits, floats as the shortest text that
        round-trips, markers per the display style.
        """
        if self._representation.is_special:
            return (style or self.DEFAULT_STYLE).spell(self._representation)
        if self._representation.is_integer:
            return str(self._value)
        return repr(self._value)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        if self._representation.is_special:
            return self.type_name()
        return f"{self.type_name()}({self.format()})"

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        Format: {"type": str, "value": int | float | None}

        Markers carry value None so the output stays valid JSON.
        """
        return {
            "type": self.type_name(),
            "value": None if self._representation.is_special else self._value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Number:
        """
        Rebuild from to_dict() output. The value is reselected, so a
        hand-written non-minimal type comes back minimal.

        Raises:
            ValueError: on an unknown type name
        """
        representation = Representation.from_type_name(data["type"])
        if representation.is_special:
            return cls(
                _representation=representation,
                _value=coerce(None, representation),
            )
        return cls.of(data["value"])
