"""
representation.py — Representation table and Selector

================================================================================
DESIGN PRINCIPLES
================================================================================

1. CLOSED SET
   A Number lives in exactly one Representation. The set is closed:
   four signed integer widths, one unsigned width, two float widths and
   three special markers (NaN, +Infinity, -Infinity).

2. MINIMAL SELECTION
   select() never picks a wider representation than needed to hold a
   native value exactly. Ties prefer:

       signed integer > unsigned integer > Float32 > Float64

3. CANONICAL SPECIALS
   Non-finite floats never live inside a float variant. NaN and the
   infinities always map to their marker, whatever width produced them.

================================================================================
WHY ONLY ONE UNSIGNED WIDTH
================================================================================

An unsigned 8/16/32-bit value always fits the next signed width, which
the selector prefers. Only values in [2**63, 2**64 - 1] need an unsigned
variant, so UnsignedInteger64 is the only reachable one.

================================================================================
"""

from __future__ import annotations
from enum import Enum
import logging
import math
import numbers

import numpy as np


logger = logging.getLogger(__name__)


# ==============================================================================
# KINDS
# ==============================================================================

class Kind(Enum):
    """Family of a Representation."""
    INTEGER = "integer"     # two's complement, signed
    UNSIGNED = "unsigned"   # unsigned binary
    FLOAT = "float"         # IEEE-754 binary float
    SPECIAL = "special"     # NaN / infinity marker, no width


# ==============================================================================
# REPRESENTATIONS
# ==============================================================================

_INTEGER_DTYPES = {
    (Kind.INTEGER, 8): np.int8,
    (Kind.INTEGER, 16): np.int16,
    (Kind.INTEGER, 32): np.int32,
    (Kind.INTEGER, 64): np.int64,
    (Kind.UNSIGNED, 64): np.uint64,
}


class Representation(Enum):
    """
    Storage class of a Number.

    Each member carries (type_name, kind, bits). Special markers have
    bits == 0: they are not tied to a float width.
    """
    INTEGER8 = ("Integer8", Kind.INTEGER, 8)
    INTEGER16 = ("Integer16", Kind.INTEGER, 16)
    INTEGER32 = ("Integer32", Kind.INTEGER, 32)
    INTEGER64 = ("Integer64", Kind.INTEGER, 64)
    UNSIGNED_INTEGER64 = ("UnsignedInteger64", Kind.UNSIGNED, 64)
    FLOAT32 = ("Float32", Kind.FLOAT, 32)
    FLOAT64 = ("Float64", Kind.FLOAT, 64)
    NAN = ("NaN", Kind.SPECIAL, 0)
    POSITIVE_INFINITY = ("PositiveInfinity", Kind.SPECIAL, 0)
    NEGATIVE_INFINITY = ("NegativeInfinity", Kind.SPECIAL, 0)

    def __init__(self, type_name: str, kind: Kind, bits: int):
        self._type_name = type_name
        self._kind = kind
        self._bits = bits
        dtype = _INTEGER_DTYPES.get((kind, bits))
        if dtype is not None:
            info = np.iinfo(dtype)
            self._bounds = (int(info.min), int(info.max))
        else:
            self._bounds = None

    @property
    def type_name(self) -> str:
        """Stable identifier, e.g. "Integer16" or "NegativeInfinity"."""
        return self._type_name

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def bounds(self) -> tuple[int, int] | None:
        """(min, max) for integer variants, None otherwise."""
        return self._bounds

    @property
    def is_integer(self) -> bool:
        return self._kind in (Kind.INTEGER, Kind.UNSIGNED)

    @property
    def is_float(self) -> bool:
        return self._kind is Kind.FLOAT

    @property
    def is_special(self) -> bool:
        return self._kind is Kind.SPECIAL

    def holds(self, value: int) -> bool:
        """True if the integer value fits this integer variant's bounds."""
        if self._bounds is None:
            return False
        low, high = self._bounds
        return low <= value <= high

    @classmethod
    def from_type_name(cls, type_name: str) -> Representation:
        for representation in cls:
            if representation.type_name == type_name:
                return representation
        raise ValueError(f"Unknown representation type name: {type_name!r}")


# Selection order, narrowest first
SIGNED_LADDER = (
    Representation.INTEGER8,
    Representation.INTEGER16,
    Representation.INTEGER32,
    Representation.INTEGER64,
)
INTEGER_LADDER = SIGNED_LADDER + (Representation.UNSIGNED_INTEGER64,)

_FLOAT32_MAX = float(np.finfo(np.float32).max)


# ==============================================================================
# SELECTOR
# ==============================================================================

def select(native) -> Representation:
    """
    Pick the minimal Representation that holds a native value exactly.

    Integers climb the signed ladder, then UnsignedInteger64, then fall
    back to a Float64 approximation (or an infinity past the float range).
    Floats are Float32 when an f32 round-trip is exact, else Float64.

    Raises:
        TypeError: for bool and non-numeric inputs
    """
    if isinstance(native, bool):
        raise TypeError("bool is not a number; convert it explicitly with int()")
    if isinstance(native, numbers.Integral):
        return _select_integer(int(native))
    if isinstance(native, numbers.Real):
        try:
            value = float(native)
        except OverflowError:
            logger.debug("%r exceeds the float range, selecting infinity", native)
            return (
                Representation.POSITIVE_INFINITY if native > 0
                else Representation.NEGATIVE_INFINITY
            )
        return _select_float(value)
    raise TypeError(
        f"Cannot select a representation for {type(native).__name__}. "
        f"Supported: int, float and NumPy numeric scalars."
    )


def _select_integer(value: int) -> Representation:
    for representation in INTEGER_LADDER:
        if representation.holds(value):
            return representation
    try:
        approximation = float(value)
    except OverflowError:
        logger.debug("Integer %d exceeds the float range, selecting infinity", value)
        return (
            Representation.POSITIVE_INFINITY if value > 0
            else Representation.NEGATIVE_INFINITY
        )
    logger.debug("Integer %d exceeds 64 bits, approximating as %r", value, approximation)
    return Representation.FLOAT64


def _select_float(value: float) -> Representation:
    if math.isnan(value):
        return Representation.NAN
    if math.isinf(value):
        return (
            Representation.POSITIVE_INFINITY if value > 0
            else Representation.NEGATIVE_INFINITY
        )
    if abs(value) <= _FLOAT32_MAX and float(np.float32(value)) == value:
        return Representation.FLOAT32
    return Representation.FLOAT64


def coerce(native, representation: Representation) -> int | float:
    """
    Convert a native value to the payload stored for a representation.

    Integer variants store a Python int, float variants a finite Python
    float, markers their IEEE float (nan, inf, -inf).
    """
    if representation.is_integer:
        return int(native)
    if representation is Representation.NAN:
        return math.nan
    if representation is Representation.POSITIVE_INFINITY:
        return math.inf
    if representation is Representation.NEGATIVE_INFINITY:
        return -math.inf
    return float(native)
