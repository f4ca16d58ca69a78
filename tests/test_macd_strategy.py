# -*- coding: utf-8 -*-
"""
MacdStrategy Tests
==================
"""
from decimal import Decimal

import pytest

from models import TrendDirection, TrendSignal
from strategies import MacdStrategy, StrategyParams
from conftest import make_candle, sine_closes


def run(strategy, closes):
    return [strategy.process_one_candle(make_candle(c, i)) for i, c in enumerate(closes)]


class TestStrategyParams:

    def test_defaults(self):
        params = StrategyParams()
        assert (params.short_weight, params.long_weight, params.signal_weight) == (12, 26, 9)
        assert params.flip_threshold == Decimal(1)
        assert params.initial_side is TrendDirection.SHORT

    @pytest.mark.parametrize("kwargs", [
        {"short_weight": 0},
        {"long_weight": -1},
        {"signal_weight": 0},
        {"flip_threshold": Decimal("-0.1")},
        {"initial_side": TrendDirection.NONE},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            StrategyParams(**kwargs)


class TestProcessOneCandle:

    def test_first_decision_is_none(self):
        assert MacdStrategy().process_one_candle(make_candle(123.45)) is TrendDirection.NONE

    def test_constant_closes_never_flip(self):
        strategy = MacdStrategy(StrategyParams(12, 26, 9))
        decisions = run(strategy, [10] * 40)
        assert decisions == [TrendDirection.NONE] * 40
        assert strategy.last_sample.histogram == 0

    def test_swinging_market_flips_both_ways(self):
        decisions = run(MacdStrategy(), sine_closes(300))
        flips = [d for d in decisions if d is not TrendDirection.NONE]
        assert TrendDirection.LONG in flips
        assert TrendDirection.SHORT in flips
        for prev, cur in zip(flips, flips[1:]):
            assert prev is not cur

    def test_deterministic_replay(self):
        closes = sine_closes(300)
        first = run(MacdStrategy(StrategyParams(12, 26, 9)), closes)
        second = run(MacdStrategy(StrategyParams(12, 26, 9)), closes)
        assert first == second

    def test_threshold_changes_decisions(self):
        closes = sine_closes(300, amplitude=5.0)
        loose = run(MacdStrategy(StrategyParams(flip_threshold=Decimal("0.01"))), closes)
        strict = run(MacdStrategy(StrategyParams(flip_threshold=Decimal("1000"))), closes)
        assert any(d is not TrendDirection.NONE for d in loose)
        assert all(d is TrendDirection.NONE for d in strict)


class TestOnCandle:

    def test_signal_on_flip(self):
        strategy = MacdStrategy()
        signals = []
        for i, c in enumerate(sine_closes(300)):
            candle = make_candle(c, i)
            out = strategy.on_candle(candle)
            if out:
                signals.append((candle, out, strategy.last_sample))

        assert signals
        candle, out, sample = signals[0]
        assert len(out) == 1
        sig = out[0]
        assert isinstance(sig, TrendSignal)
        assert sig.strategy == "MACD"
        assert sig.direction is TrendDirection.LONG
        assert sig.t_open_ms == candle.t_open_ms
        assert sig.extra["histogram"] == sample.histogram
        assert sig.extra["macd"] == sample.macd_line
        assert sig.extra["signal"] == sample.signal_line
        assert sig.extra["close"] == candle.c

    def test_no_signal_without_flip(self):
        assert MacdStrategy().on_candle(make_candle(10)) == []
