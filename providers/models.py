# providers/models.py
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class CandlePeriod(IntEnum):
    ONE_MINUTE = 1
    THREE_MINUTES = 3
    FIVE_MINUTES = 5
    MINUTES_15 = 15
    MINUTES_30 = 30

    @property
    def timeframe(self) -> str:
        """Таймфрейм в формате ccxt: '1m', '15m' и т.п."""
        return f"{int(self)}m"

    @property
    def millis(self) -> int:
        return int(self) * 60_000


class OrderSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


# ==========================
# VENUE RESPONSE MODELS
# ==========================

class Ticker(BaseModel):
    symbol: str
    bid: Optional[float] = None
    ask: Optional[float] = None


class PriceLevel(BaseModel):
    price: float
    quantity: float


class OrderBookDepth(BaseModel):
    symbol: str
    bids: List[PriceLevel] = Field(default_factory=list)
    asks: List[PriceLevel] = Field(default_factory=list)


class OrderResult(BaseModel):
    """
    Результат операции с ордером.
    ok=False — биржа отклонила запрос, причина в error.
    """
    ok: bool
    order_id: Optional[str] = None
    error: Optional[str] = None


class OrderStatus(BaseModel):
    order_id: str
    symbol: str
    status: str  # 'open', 'closed', 'canceled', 'expired', 'rejected'
    amount: Optional[float] = None
    filled: Optional[float] = None
    price: Optional[float] = None

    @property
    def is_filled(self) -> bool:
        return self.status == "closed"
