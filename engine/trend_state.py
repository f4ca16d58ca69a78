# engine/trend_state.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from models import TrendDirection
from indicators.ema import Number, to_decimal

ZERO = Decimal(0)


@dataclass
class TrendState:
    """
    Всё, что машина помнит между свечами.
    trend — последний подтверждённый разворот (NONE до первого разворота),
    extremum — экстремум гистограммы с момента последнего разворота.
    """
    trend: TrendDirection = TrendDirection.NONE
    extremum: Decimal = ZERO
    last_histogram: Optional[Decimal] = None


class TrendStateMachine:
    """
    Гистерезис по гистограмме MACD.

    В SHORT ищем разворот вверх:
      - пока h < 0 и падает — запоминаем минимум;
      - если h всё ещё < 0, но отскочил от минимума больше чем на threshold,
        переходим в LONG и сбрасываем экстремум.
    В LONG — зеркально. До первого разворота работаем со стороны initial_side.
    Неизменный тренд повторно не сообщается — на таких свечах отдаём NONE.
    """

    def __init__(
        self,
        threshold: Number = 1,
        initial_side: TrendDirection = TrendDirection.SHORT,
    ):
        if initial_side not in (TrendDirection.LONG, TrendDirection.SHORT):
            raise ValueError(f"initial_side должен быть LONG или SHORT, получено {initial_side}")
        self.threshold = to_decimal(threshold)
        self.initial_side = initial_side
        self.state = TrendState()

    @property
    def side(self) -> TrendDirection:
        if self.state.trend is TrendDirection.NONE:
            return self.initial_side
        return self.state.trend

    def update(self, histogram: Number) -> TrendDirection:
        h = to_decimal(histogram)
        state = self.state

        if state.last_histogram is None:
            state.last_histogram = h
            return TrendDirection.NONE

        if self.side is TrendDirection.SHORT:
            if h < 0 and h < state.last_histogram:
                state.extremum = h
            state.last_histogram = h
            delta = abs(state.extremum - h)
            if h < 0 and delta > self.threshold:
                return self._flip(TrendDirection.LONG)
        else:
            if h > 0 and h > state.last_histogram:
                state.extremum = h
            state.last_histogram = h
            delta = abs(state.extremum - h)
            if h > 0 and delta > self.threshold:
                return self._flip(TrendDirection.SHORT)

        return TrendDirection.NONE

    def _flip(self, direction: TrendDirection) -> TrendDirection:
        self.state.trend = direction
        self.state.extremum = ZERO
        return direction
