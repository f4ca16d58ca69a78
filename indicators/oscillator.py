# indicators/oscillator.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN

from models import Candle
from .ema import EmaFilter, Number, to_decimal

FOUR_PLACES = Decimal("0.0001")


def round4(x: Number) -> Decimal:
    """Округление до 4 знаков (банковское, как Math.Round)."""
    return to_decimal(x).quantize(FOUR_PLACES, rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True)
class OscillatorSample:
    short_ema: Decimal
    long_ema: Decimal
    macd_line: Decimal
    signal_line: Decimal
    histogram: Decimal


class OscillatorBuilder:
    """
    MACD по цене закрытия:
      macd      = EMA_short - EMA_long
      signal    = EMA_signal(macd)
      histogram = macd - signal
    macd, signal и histogram округляются до 4 знаков на каждом шаге,
    иначе пороги в TrendStateMachine начинают плавать.
    """

    def __init__(self, short_filter: EmaFilter, long_filter: EmaFilter, signal_filter: EmaFilter):
        self.short_filter = short_filter
        self.long_filter = long_filter
        self.signal_filter = signal_filter

    def process(self, candle: Candle) -> OscillatorSample:
        short_ema = self.short_filter.update(candle.c)
        long_ema = self.long_filter.update(candle.c)
        macd_line = round4(short_ema - long_ema)
        signal_line = round4(self.signal_filter.update(macd_line))
        histogram = round4(macd_line - signal_line)
        return OscillatorSample(
            short_ema=short_ema,
            long_ema=long_ema,
            macd_line=macd_line,
            signal_line=signal_line,
            histogram=histogram,
        )
