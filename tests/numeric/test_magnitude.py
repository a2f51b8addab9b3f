"""Tests for magnitude and precision difference."""

import math

import pytest

from numext.numeric.magnitude import magnitude, precision_difference


class TestMagnitude:
    def test_known_values(self):
        """190 → 1.9e2 → 2; 0.0034 → 3.4e-3 → -3."""
        assert magnitude(190.0) == 2
        assert magnitude(0.0034) == -3

    def test_negative_uses_absolute_value(self):
        assert magnitude(-190.0) == 2

    def test_zero(self):
        assert magnitude(0.0) == 0
        assert magnitude(-0.0) == 0

    def test_between_one_and_ten(self):
        assert magnitude(1.0) == 0
        assert magnitude(9.99) == 0

    @pytest.mark.parametrize("k", [-12, -6, -3, -1, 0, 1, 2, 6, 12, 100])
    def test_powers_of_ten(self, k):
        assert magnitude(10.0**k) == k

    def test_returns_int(self):
        assert isinstance(magnitude(1234.5), int)


class TestPrecisionDifference:
    def test_identical_values(self):
        assert precision_difference(111111111111111.0, 111111111111111.0) == 0

    @pytest.mark.parametrize(
        "x", [1.0, -1.0, 3.14159, 1e-210, 6.02e23, -42.0, 5e-324, 1e-310, -2.2e-308, 1.7e308]
    )
    def test_self_difference_is_zero(self, x):
        assert precision_difference(x, x) == 0

    def test_six_digit_agreement(self):
        assert precision_difference(111111111111111.0, 111111011111111.0) == pytest.approx(
            1e-6, rel=1e-6
        )

    def test_first_digit_disagreement(self):
        assert precision_difference(111111111111111.0, 191111111111111.0) == pytest.approx(0.8)

    def test_last_digit_disagreement(self):
        result = precision_difference(111111111111111.0, 111111111111119.0)
        assert 0 < result < 1e-12

    def test_tiny_values(self):
        assert precision_difference(1.23e-210, 1.23001e-210) == pytest.approx(1e-5, rel=1e-6)

    def test_magnitude_mismatch_adds_penalty(self):
        """2.123 - 1.23001 + 10**1."""
        assert precision_difference(21.23e-210, 1.23001e-210) == pytest.approx(10.89299)

    def test_larger_magnitude_gap_dominates(self):
        assert precision_difference(1.0, 1000.0) == pytest.approx(1000.0)

    def test_non_negative(self):
        for a, b in [(1.5, 2.5), (2.5, 1.5), (-3.0, 3.0), (0.0, 5.0)]:
            assert precision_difference(a, b) >= 0

    def test_subnormal_operands_are_normalized(self):
        """5e-324 has magnitude -324; its scaled value needs 10 ** 324."""
        assert magnitude(5e-324) == -324
        assert precision_difference(5e-324, 5e-324) == 0
        assert precision_difference(1e-310, 1e-310) == 0

    def test_subnormal_same_magnitude_difference(self):
        """1.2e-310 and 1.5e-310 share magnitude -310."""
        assert precision_difference(1.5e-310, 1.2e-310) == pytest.approx(0.3, rel=1e-3)

    def test_unrepresentable_penalty_is_inf(self):
        """Magnitudes 200 and -200 give a penalty of 10 ** 400."""
        assert precision_difference(1e200, 1e-200) == math.inf
        assert precision_difference(1e-200, 1e200) == math.inf

    def test_largest_representable_penalty(self):
        """A gap of 308 orders of magnitude still fits in a double."""
        assert precision_difference(1e154, 1e-154) == pytest.approx(1e308)


class TestMagnitudeExtremes:
    @pytest.mark.parametrize("value, expected", [(1.7e308, 308), (2.5e-308, -308)])
    def test_near_limits(self, value, expected):
        assert magnitude(value) == expected
