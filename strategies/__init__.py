#__init__.py
from .macd_strategy import MacdStrategy, StrategyParams

__all__ = [
    "MacdStrategy",
    "StrategyParams",
]
