# strategy_manager.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from models import Candle, TrendDirection, TrendSignal
from strategies import MacdStrategy, StrategyParams

Key = Tuple[str, str]


class CandleOrderError(ValueError):
    """Свеча пришла не по порядку или повторно."""


@dataclass
class StrategyManager:
    """
    Держит по одной стратегии на (symbol, timeframe),
    проверяет порядок свечей и прогоняет через стратегию.
    """
    params: StrategyParams = field(default_factory=StrategyParams)
    strategies: Dict[Key, MacdStrategy] = field(default_factory=dict)
    last_open_ms: Dict[Key, int] = field(default_factory=dict)
    trends: Dict[Key, TrendDirection] = field(default_factory=dict)

    def strategy_for(self, symbol: str, timeframe: str) -> MacdStrategy:
        key = (symbol, timeframe)
        strategy = self.strategies.get(key)
        if strategy is None:
            strategy = MacdStrategy(self.params)
            self.strategies[key] = strategy
        return strategy

    def process_candle(self, candle: Candle) -> List[TrendSignal]:
        key = (candle.symbol, candle.timeframe)
        last = self.last_open_ms.get(key)
        if last is not None and candle.t_open_ms <= last:
            raise CandleOrderError(
                f"{candle.symbol} {candle.timeframe}: свеча {candle.t_open_ms} "
                f"не позже предыдущей {last}"
            )

        signals = self.strategy_for(*key).on_candle(candle)
        self.last_open_ms[key] = candle.t_open_ms
        for sig in signals:
            self.trends[key] = sig.direction
        return signals

    def replay(self, candles: Iterable[Candle]) -> List[TrendSignal]:
        signals: List[TrendSignal] = []
        for candle in candles:
            signals.extend(self.process_candle(candle))
        return signals

    def current_trend(self, symbol: str, timeframe: str) -> TrendDirection:
        """Последний разворот по инструменту (NONE, если его ещё не было)."""
        return self.trends.get((symbol, timeframe), TrendDirection.NONE)

    def last_seen(self, symbol: str, timeframe: str) -> Optional[int]:
        return self.last_open_ms.get((symbol, timeframe))
