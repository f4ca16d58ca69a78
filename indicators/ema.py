# indicators/ema.py
from decimal import Decimal
from typing import Optional, Union

Number = Union[Decimal, float, int, str]


def to_decimal(x: Number) -> Decimal:
    # float идёт через str, чтобы 0.1 не превращался в 0.1000000000000000055...
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


class EmaFilter:
    """
    Экспоненциальное скользящее среднее, обновляется по одному значению.
    Первое значение возвращается как есть, дальше:
        value = alpha * x + (1 - alpha) * value_prev
    """

    def __init__(self, alpha: Number):
        alpha = to_decimal(alpha)
        if not (Decimal(0) < alpha <= Decimal(1)):
            raise ValueError(f"alpha должна быть в (0, 1], получено {alpha}")
        self.alpha = alpha
        self.value: Optional[Decimal] = None

    @classmethod
    def from_period(cls, period: int) -> "EmaFilter":
        """alpha = 2 / (period + 1), как у классической EMA(N)."""
        if period < 1:
            raise ValueError(f"период EMA должен быть >= 1, получено {period}")
        return cls(Decimal(2) / Decimal(period + 1))

    def update(self, x: Number) -> Decimal:
        x = to_decimal(x)
        if self.value is None:
            self.value = x
        else:
            self.value = self.alpha * x + (1 - self.alpha) * self.value
        return self.value
