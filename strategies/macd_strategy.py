# strategies/macd_strategy.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from models import Candle, TrendDirection, TrendSignal
from indicators import EmaFilter, OscillatorBuilder, OscillatorSample
from engine import TrendStateMachine


@dataclass(frozen=True)
class StrategyParams:
    """
    Параметры MACD-стратегии. Задаются один раз при создании.
    Веса — периоды EMA, alpha = 2 / (N + 1).
    flip_threshold — в абсолютных единицах гистограммы, зависит от масштаба цены.
    """
    short_weight: int = 12
    long_weight: int = 26
    signal_weight: int = 9
    flip_threshold: Decimal = Decimal(1)
    initial_side: TrendDirection = TrendDirection.SHORT

    def __post_init__(self):
        for name in ("short_weight", "long_weight", "signal_weight"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} должен быть >= 1")
        if Decimal(str(self.flip_threshold)) < 0:
            raise ValueError("flip_threshold не может быть отрицательным")
        if self.initial_side not in (TrendDirection.LONG, TrendDirection.SHORT):
            raise ValueError("initial_side должен быть LONG или SHORT")


class MacdStrategy:
    """
    Стратегия разворота тренда по гистограмме MACD.
    Одна стратегия — один инструмент, свечи строго по порядку.
    """
    name = "MACD"

    def __init__(self, params: Optional[StrategyParams] = None):
        self.params = params or StrategyParams()
        self.oscillator = OscillatorBuilder(
            EmaFilter.from_period(self.params.short_weight),
            EmaFilter.from_period(self.params.long_weight),
            EmaFilter.from_period(self.params.signal_weight),
        )
        self.trend_machine = TrendStateMachine(
            threshold=self.params.flip_threshold,
            initial_side=self.params.initial_side,
        )
        self.last_sample: Optional[OscillatorSample] = None

    def process_one_candle(self, candle: Candle) -> TrendDirection:
        self.last_sample = self.oscillator.process(candle)
        return self.trend_machine.update(self.last_sample.histogram)

    def on_candle(self, candle: Candle) -> list[TrendSignal]:
        direction = self.process_one_candle(candle)
        if direction is TrendDirection.NONE:
            return []

        sample = self.last_sample
        return [
            TrendSignal(
                symbol=candle.symbol,
                timeframe=candle.timeframe,
                t_open_ms=candle.t_open_ms,
                strategy=self.name,
                direction=direction,
                extra={
                    "macd": sample.macd_line,
                    "signal": sample.signal_line,
                    "histogram": sample.histogram,
                    "close": candle.c,
                },
            )
        ]
