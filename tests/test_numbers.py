import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.numbers import gcd, lcm, trailing_zeroes_in_factorial

small = st.integers(min_value=-10_000, max_value=10_000)
positive = st.integers(min_value=1, max_value=10_000)


@given(small, small)
def test_gcd_matches_standard_library(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(positive, positive)
def test_gcd_divides_both(a, b):
    result = gcd(a, b)
    assert a % result == 0
    assert b % result == 0


@given(small)
def test_gcd_with_zero_is_absolute_value(a):
    assert gcd(a, 0) == abs(a)
    assert gcd(0, a) == abs(a)


@given(small, small)
def test_lcm_matches_standard_library(a, b):
    assert lcm(a, b) == math.lcm(a, b)


@given(positive, positive)
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b


@given(positive, positive)
def test_lcm_is_common_multiple(a, b):
    result = lcm(a, b)
    assert result % a == 0
    assert result % b == 0
    assert result >= max(a, b)


def test_lcm_with_zero():
    assert lcm(0, 7) == 0
    assert lcm(0, 0) == 0


def test_trailing_zeroes_of_hundred():
    assert trailing_zeroes_in_factorial(100) == 24


@given(st.integers(min_value=0, max_value=400))
def test_trailing_zeroes_divisibility(n):
    zeroes = trailing_zeroes_in_factorial(n)
    factorial = math.factorial(n)
    assert factorial % (10**zeroes) == 0
    assert factorial % (10 ** (zeroes + 1)) != 0


@given(st.integers(min_value=0, max_value=1000))
def test_trailing_zeroes_non_decreasing(n):
    assert trailing_zeroes_in_factorial(n + 1) >= trailing_zeroes_in_factorial(n)


def test_trailing_zeroes_negative_raises():
    with pytest.raises(ValueError):
        trailing_zeroes_in_factorial(-1)