# -*- coding: utf-8 -*-
"""
EmaFilter Tests
===============
"""
from decimal import Decimal

import pytest

from indicators import EmaFilter


class TestEmaFirstValue:
    """Первое значение возвращается как есть"""

    @pytest.mark.parametrize("alpha", ["0.01", "0.5", "1", Decimal(2) / Decimal(27)])
    def test_first_output_equals_input(self, alpha):
        ema = EmaFilter(alpha)
        assert ema.update(Decimal("123.4567")) == Decimal("123.4567")

    def test_float_input_goes_through_str(self):
        ema = EmaFilter("0.5")
        assert ema.update(10.1) == Decimal("10.1")

    def test_value_absent_before_first_update(self):
        assert EmaFilter("0.5").value is None


class TestEmaRecursion:
    """value = alpha * x + (1 - alpha) * prev"""

    def test_half_weight(self):
        ema = EmaFilter("0.5")
        ema.update(10)
        assert ema.update(20) == Decimal("15")
        assert ema.update(25) == Decimal("20")

    def test_alpha_one_follows_input(self):
        ema = EmaFilter(1)
        for x in (5, 7, -3):
            assert ema.update(x) == Decimal(x)

    def test_converges_to_constant(self):
        ema = EmaFilter.from_period(26)
        ema.update(100)
        for _ in range(400):
            value = ema.update(10)
        assert abs(value - Decimal(10)) < Decimal("1e-6")


class TestEmaConstruction:

    def test_from_period(self):
        assert EmaFilter.from_period(12).alpha == Decimal(2) / Decimal(13)
        assert EmaFilter.from_period(1).alpha == Decimal(1)

    @pytest.mark.parametrize("alpha", [0, "-0.1", "1.5"])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(ValueError):
            EmaFilter(alpha)

    def test_invalid_period(self):
        with pytest.raises(ValueError):
            EmaFilter.from_period(0)
