"""
Property-based tests for the display formatter.

mpmath provides the exact decimal value of each float so the rounding
done by format_number can be checked against the display precision.
"""

import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st
from mpmath import mp

from calculator_engine import Operator, compute
from number_formatter import (
    DISPLAY_PRECISION,
    ERROR_TOKEN,
    SCIENTIFIC_DIGITS,
    SCIENTIFIC_LOWER_BOUND,
    SCIENTIFIC_UPPER_BOUND,
    format_number,
)

finite_floats = st.floats(
    min_value=-1e300,
    max_value=1e300,
    allow_nan=False,
    allow_infinity=False,
)

safe_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

operators = st.sampled_from(list(Operator))


def _relative_tolerance(value: float):
    magnitude = abs(value)
    if magnitude >= SCIENTIFIC_UPPER_BOUND or magnitude < SCIENTIFIC_LOWER_BOUND:
        significant = SCIENTIFIC_DIGITS + 1
    else:
        significant = DISPLAY_PRECISION
    return mp.mpf(5) * mp.mpf(10) ** -significant


def _assert_close(text: str, value: float):
    with mp.workdps(60):
        shown = mp.mpf(text)
        exact = mp.mpf(value)
        if exact == 0:
            assert shown == 0
        else:
            assert abs(shown - exact) <= abs(exact) * _relative_tolerance(value)


@pytest.mark.property
class TestFormatterProperties:
    @given(value=finite_floats)
    def test_formatted_value_reparses_within_display_precision(self, value: float):
        text = format_number(value)
        assert text != ERROR_TOKEN
        _assert_close(text, value)

    @given(value=finite_floats)
    def test_no_trailing_zeros_in_fraction(self, value: float):
        mantissa = format_number(value).split("e")[0]
        if "." in mantissa:
            assert not mantissa.endswith("0")
            assert not mantissa.endswith(".")

    @given(value=finite_floats)
    def test_never_negative_zero(self, value: float):
        assert format_number(value) != "-0"

    @given(value=st.one_of(st.just(math.nan), st.just(math.inf), st.just(-math.inf)))
    def test_non_finite_is_error_token(self, value: float):
        assert format_number(value) == ERROR_TOKEN


@pytest.mark.property
class TestComputeFormatting:
    @given(a=safe_floats, b=safe_floats, op=operators)
    def test_finite_results_survive_formatting(self, a: float, b: float, op: Operator):
        result = compute(a, b, op)
        assume(math.isfinite(result))
        _assert_close(format_number(result), result)

    @given(a=finite_floats)
    def test_division_by_zero_is_error_token(self, a: float):
        assert format_number(compute(a, 0.0, Operator.DIVIDE)) == ERROR_TOKEN
