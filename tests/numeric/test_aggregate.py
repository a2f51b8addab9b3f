"""Tests for aggregate helpers."""

import math

import pytest

from numext.numeric.aggregate import mean


class TestMean:
    def test_simple(self):
        assert mean([1, 2, 3]) == 2.0

    def test_single_value(self):
        assert mean([4.5]) == 4.5

    def test_negative_values(self):
        assert mean([-1.0, 1.0, -3.0, 3.0]) == 0.0

    def test_fractional(self):
        assert mean([0.1, 0.2, 0.3]) == pytest.approx(0.2)

    def test_consumes_generator_once(self):
        consumed = []

        def gen():
            for v in (2.0, 4.0, 6.0):
                consumed.append(v)
                yield v

        assert mean(gen()) == 4.0
        assert consumed == [2.0, 4.0, 6.0]

    def test_accepts_any_iterable(self):
        assert mean(range(1, 6)) == 3.0
        assert mean((10.0, 20.0)) == 15.0

    def test_empty_is_nan(self):
        assert math.isnan(mean([]))
