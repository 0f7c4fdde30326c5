"""
test_promotion.py — Promotion table and operator kernels
"""

import logging
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smartnum import Operator, Representation, promote
from smartnum.promotion import apply


R = Representation
FINITE = [r for r in Representation if not r.is_special]
SPECIAL = [r for r in Representation if r.is_special]


# ==============================================================================
# UNIT TESTS: Promotion table
# ==============================================================================

class TestPromote:

    @pytest.mark.parametrize("left, right, expected", [
        (R.INTEGER8, R.INTEGER8, R.INTEGER8),
        (R.INTEGER8, R.INTEGER16, R.INTEGER16),
        (R.INTEGER32, R.INTEGER64, R.INTEGER64),
        (R.INTEGER8, R.UNSIGNED_INTEGER64, R.INTEGER64),
        (R.INTEGER64, R.UNSIGNED_INTEGER64, R.INTEGER64),
        (R.UNSIGNED_INTEGER64, R.UNSIGNED_INTEGER64, R.UNSIGNED_INTEGER64),
        (R.INTEGER8, R.FLOAT32, R.FLOAT32),
        (R.INTEGER64, R.FLOAT32, R.FLOAT32),
        (R.UNSIGNED_INTEGER64, R.FLOAT64, R.FLOAT64),
        (R.FLOAT32, R.FLOAT32, R.FLOAT32),
        (R.FLOAT32, R.FLOAT64, R.FLOAT64),
    ])
    def test_common_representation(self, left, right, expected):
        assert promote(left, right) is expected

    @pytest.mark.parametrize("special", SPECIAL)
    def test_markers_have_no_common_representation(self, special):
        with pytest.raises(ValueError):
            promote(special, R.INTEGER8)
        with pytest.raises(ValueError):
            promote(R.FLOAT64, special)

    @given(left=st.sampled_from(FINITE), right=st.sampled_from(FINITE))
    def test_promotion_is_symmetric(self, left, right):
        assert promote(left, right) is promote(right, left)

    @given(left=st.sampled_from(FINITE), right=st.sampled_from(FINITE))
    def test_promotion_is_never_narrower(self, left, right):
        common = promote(left, right)
        assert common.bits >= min(left.bits, right.bits)
        if left.is_float or right.is_float:
            assert common.is_float


# ==============================================================================
# UNIT TESTS: Integer kernels
# ==============================================================================

class TestIntegerKernels:

    def test_addition_is_exact_past_the_common_width(self):
        assert apply(Operator.ADD, R.INTEGER8, 127, R.INTEGER8, 1) == 128

    def test_overflow_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="smartnum.promotion"):
            apply(Operator.ADD, R.INTEGER8, 127, R.INTEGER8, 1)
        assert "overflows Integer8" in caplog.text

    def test_multiplication_past_64_bits_stays_exact(self):
        big = 2 ** 63 - 1
        assert apply(Operator.MUL, R.INTEGER64, big, R.INTEGER64, big) == big * big

    def test_exact_division_returns_int(self):
        result = apply(Operator.DIV, R.INTEGER8, 8, R.INTEGER8, 2)
        assert result == 4
        assert isinstance(result, int)

    def test_inexact_division_returns_float(self):
        result = apply(Operator.DIV, R.INTEGER8, 7, R.INTEGER8, 2)
        assert result == 3.5
        assert isinstance(result, float)

    @pytest.mark.parametrize("a, b, expected", [
        (7, 2, 1),
        (-7, 2, -1),
        (7, -2, 1),
        (-7, -2, -1),
        (6, 3, 0),
    ])
    def test_remainder_truncates(self, a, b, expected):
        assert apply(Operator.MOD, R.INTEGER8, a, R.INTEGER8, b) == expected


# ==============================================================================
# UNIT TESTS: Float kernels
# ==============================================================================

class TestFloatKernels:

    def test_mixed_operands_compute_as_float(self):
        result = apply(Operator.ADD, R.INTEGER8, 1, R.FLOAT32, 0.5)
        assert result == 1.5
        assert isinstance(result, float)

    def test_remainder_truncates(self):
        assert apply(Operator.MOD, R.FLOAT32, -7.5, R.FLOAT32, 2.0) == -1.5
        assert apply(Operator.MOD, R.FLOAT32, 7.5, R.FLOAT32, -2.0) == 1.5

    def test_overflow_becomes_infinite(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="smartnum.promotion"):
            result = apply(Operator.MUL, R.FLOAT64, 1e308, R.INTEGER8, 10)
        assert result == math.inf
        assert "collapsing" in caplog.text


# ==============================================================================
# UNIT TESTS: Zero divisor and special markers
# ==============================================================================

class TestZeroDivisor:

    def test_positive_over_zero(self):
        assert apply(Operator.DIV, R.INTEGER8, 5, R.INTEGER8, 0) == math.inf

    def test_negative_over_zero(self):
        assert apply(Operator.DIV, R.FLOAT32, -5.0, R.FLOAT32, 0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(apply(Operator.DIV, R.INTEGER8, 0, R.FLOAT32, 0.0))

    def test_remainder_by_zero(self):
        assert math.isnan(apply(Operator.MOD, R.INTEGER8, 5, R.INTEGER8, 0))


class TestSpecialKernel:

    INF = (R.POSITIVE_INFINITY, math.inf)
    NEG_INF = (R.NEGATIVE_INFINITY, -math.inf)
    NAN = (R.NAN, math.nan)

    def _apply(self, op, left, right):
        return apply(op, left[0], left[1], right[0], right[1])

    @pytest.mark.parametrize("op", list(Operator))
    def test_nan_absorbs_everything(self, op):
        assert math.isnan(self._apply(op, self.NAN, (R.INTEGER8, 1)))
        assert math.isnan(self._apply(op, (R.INTEGER8, 0), self.NAN))
        assert math.isnan(self._apply(op, self.NAN, self.NAN))

    def test_infinity_plus_finite(self):
        assert self._apply(Operator.ADD, self.INF, (R.INTEGER8, 5)) == math.inf

    def test_opposite_infinities_cancel_to_nan(self):
        assert math.isnan(self._apply(Operator.ADD, self.INF, self.NEG_INF))
        assert math.isnan(self._apply(Operator.SUB, self.INF, self.INF))

    def test_infinity_times_zero(self):
        assert math.isnan(self._apply(Operator.MUL, self.INF, (R.INTEGER8, 0)))
        assert math.isnan(self._apply(Operator.MUL, (R.FLOAT32, 0.0), self.NEG_INF))

    def test_infinity_times_signed_finite(self):
        assert self._apply(Operator.MUL, self.INF, (R.INTEGER8, 3)) == math.inf
        assert self._apply(Operator.MUL, self.INF, (R.INTEGER8, -3)) == -math.inf
        assert self._apply(Operator.MUL, self.NEG_INF, (R.INTEGER8, -3)) == math.inf

    def test_infinity_over_infinity(self):
        assert math.isnan(self._apply(Operator.DIV, self.INF, self.NEG_INF))

    def test_infinity_over_zero_keeps_sign(self):
        assert self._apply(Operator.DIV, self.NEG_INF, (R.INTEGER8, 0)) == -math.inf

    def test_finite_over_infinity(self):
        assert self._apply(Operator.DIV, (R.INTEGER8, 5), self.INF) == 0

    def test_remainder_with_infinity(self):
        assert math.isnan(self._apply(Operator.MOD, self.INF, (R.INTEGER8, 5)))
        assert math.isnan(self._apply(Operator.MOD, (R.INTEGER8, 5), self.INF))
