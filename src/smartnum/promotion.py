"""
promotion.py — Promotion table and operator dispatch

================================================================================
ALGORITHM
================================================================================

For a binary operation  left <op> right:

1. SPECIAL MARKERS FIRST
   If either operand is NaN or an infinity, the special kernel decides
   the result with IEEE-754 float semantics. Finite arithmetic is never
   touched.

2. ZERO DIVISOR
   finite / 0  ->  +inf, -inf or NaN by the sign of the dividend.
   finite % 0  ->  NaN.

3. COMMON REPRESENTATION
   promote(left, right):
   - integer x integer: wider width, signed if either side is signed
   - anything x float:  wider float width, integers converted

4. KERNEL
   The (kind, operator) dispatch table picks the kernel. Integer kernels
   compute the exact result with Python ints; a result that overflows the
   common representation is handed back as-is and the selector escalates
   it. Float kernels compute in float64, which holds every float32 value
   exactly.

The kernels return NATIVE values (int or float, including nan/inf).
The caller runs the selector on them, so results are always minimally
sized and non-finite floats collapse into the markers.

================================================================================
DIVISION SEMANTICS
================================================================================

- Integer "/" is exact when the divisor divides the dividend, otherwise
  true division producing a float:  7 / 2 == 3.5,  8 / 2 == 4.
- "%" truncates toward zero (sign of the dividend), like C fmod:
  -7 % 2 == -1,  7 % -2 == 1.

================================================================================
"""

from __future__ import annotations
from enum import Enum
from typing import Callable
import logging
import math
import operator

from .representation import Representation, Kind


logger = logging.getLogger(__name__)


class Operator(Enum):
    """Binary arithmetic operators, valued by their symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


# ==============================================================================
# PROMOTION TABLE
# ==============================================================================

_FINITE = tuple(r for r in Representation if not r.is_special)


def _find(kind: Kind, bits: int) -> Representation:
    for representation in _FINITE:
        if representation.kind is kind and representation.bits == bits:
            return representation
    raise ValueError(f"No {kind.value} representation with {bits} bits")


def _promote_pair(left: Representation, right: Representation) -> Representation:
    if left.is_integer and right.is_integer:
        bits = max(left.bits, right.bits)
        signed = Kind.INTEGER in (left.kind, right.kind)
        return _find(Kind.INTEGER if signed else Kind.UNSIGNED, bits)
    bits = max(r.bits for r in (left, right) if r.is_float)
    return _find(Kind.FLOAT, bits)


_PROMOTIONS: dict[tuple[Representation, Representation], Representation] = {
    (left, right): _promote_pair(left, right)
    for left in _FINITE
    for right in _FINITE
}


def promote(left: Representation, right: Representation) -> Representation:
    """
    Common representation for a binary operation between two finite
    representations.

    Raises:
        ValueError: if either side is a special marker
    """
    try:
        return _PROMOTIONS[(left, right)]
    except KeyError:
        raise ValueError(
            f"Special markers have no common representation: "
            f"{left.type_name}, {right.type_name}"
        ) from None


# ==============================================================================
# KERNELS
# ==============================================================================

def _divide_by_zero(dividend: int | float) -> float:
    if dividend > 0:
        return math.inf
    if dividend < 0:
        return -math.inf
    return math.nan


def _exact_or_true_div(a: int, b: int) -> int | float:
    if a % b == 0:
        return a // b
    return a / b


def _truncating_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


_INTEGER_KERNELS: dict[Operator, Callable] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _exact_or_true_div,
    Operator.MOD: _truncating_mod,
}

_FLOAT_KERNELS: dict[Operator, Callable] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
    Operator.MOD: math.fmod,
}

_DISPATCH: dict[Kind, dict[Operator, Callable]] = {
    Kind.INTEGER: _INTEGER_KERNELS,
    Kind.UNSIGNED: _INTEGER_KERNELS,
    Kind.FLOAT: _FLOAT_KERNELS,
}


def _special(op: Operator, a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if op is Operator.MOD:
        # an infinite operand is guaranteed here
        return math.nan
    if op is Operator.DIV and b == 0:
        return _divide_by_zero(a)
    # Python floats follow IEEE here: inf - inf, inf * 0 and inf / inf are nan
    return _FLOAT_KERNELS[op](a, b)


def apply(
    op: Operator,
    left: Representation,
    a: int | float,
    right: Representation,
    b: int | float,
) -> int | float:
    """
    Compute  a <op> b  for payloads stored in the given representations.

    Total: never raises for valid payloads. Domain errors come back as
    nan or a signed inf.
    """
    if left.is_special or right.is_special:
        return _special(op, float(a), float(b))

    if op in (Operator.DIV, Operator.MOD) and b == 0:
        return _divide_by_zero(a) if op is Operator.DIV else math.nan

    common = promote(left, right)
    kernel = _DISPATCH[common.kind][op]

    if common.is_float:
        result = kernel(float(a), float(b))
        if not math.isfinite(result):
            logger.debug(
                "%r %s %r overflows %s, collapsing to %r",
                a, op.value, b, common.type_name, result,
            )
        return result

    result = kernel(a, b)
    if isinstance(result, int) and not common.holds(result):
        logger.debug(
            "%d %s %d overflows %s, escalating", a, op.value, b, common.type_name
        )
    return result
