#__init__.py
from .exchange import (
    ExchangeProvider,
    ProviderError,
    ProviderExchangeError,
    ProviderNetworkError,
    ProviderPayloadError,
    ProviderRateLimitError,
    make_exchange,
)
from .models import (
    CandlePeriod,
    OrderBookDepth,
    OrderResult,
    OrderSide,
    OrderStatus,
    PriceLevel,
    Ticker,
)

__all__ = [
    "CandlePeriod",
    "ExchangeProvider",
    "OrderBookDepth",
    "OrderResult",
    "OrderSide",
    "OrderStatus",
    "PriceLevel",
    "ProviderError",
    "ProviderExchangeError",
    "ProviderNetworkError",
    "ProviderPayloadError",
    "ProviderRateLimitError",
    "Ticker",
    "make_exchange",
]
