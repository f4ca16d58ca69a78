from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class TrendDirection(str, Enum):
    """
    Решение стратегии на свече.
    NONE — решения ещё нет или тренд не сменился.
    """
    NONE = "none"
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class Candle:
    """
    Закрытая свеча, с которой работают стратегии и менеджер.
    t_open_ms — время начала свечи (ms), свечи идут строго по возрастанию.
    """
    symbol: str
    timeframe: str
    t_open_ms: int
    o: float
    h: float
    l: float
    c: float
    v: float = 0.0


@dataclass
class TrendSignal:
    """
    Смена тренда, которую отдаёт стратегия.
    Никакой логики Telegram, ордеров и т.п. — только факт разворота.
    """
    symbol: str
    timeframe: str
    t_open_ms: int
    strategy: str
    direction: TrendDirection
    extra: Dict[str, Any] = field(default_factory=dict)


__all__ = ["Candle", "TrendDirection", "TrendSignal"]
