# trend_daemon.py

import time
from datetime import datetime, timezone
from typing import List

from config import Config, load_config
from models import Candle, TrendSignal
from providers import ExchangeProvider, ProviderError, ProviderRateLimitError, make_exchange
from strategy_manager import StrategyManager
from utils.timeframes import period_start

from signal_router import SignalRouter
from handlers.telegram_handler import make_telegram_handler
from handlers.log_handler import log_handler


def print_sample(candle: Candle, manager: StrategyManager) -> None:
    sample = manager.strategy_for(candle.symbol, candle.timeframe).last_sample
    if sample is None:
        return
    dt = datetime.fromtimestamp(candle.t_open_ms / 1000, timezone.utc)
    print(
        f"{candle.symbol} {candle.timeframe} {dt:%Y-%m-%dT%H:%M:%S}; "
        f"MACD: {sample.histogram}; Close price: {candle.c}"
    )


def warmup(provider: ExchangeProvider, manager: StrategyManager, cfg: Config, now_ms: int) -> None:
    """
    Прогоняет последние закрытые свечи через стратегии без отправки сигналов,
    чтобы EMA и состояние тренда успели сформироваться.
    """
    end_ms = period_start(now_ms, cfg.period)
    start_ms = end_ms - cfg.warmup_candles * cfg.period.millis

    for symbol in cfg.symbols:
        try:
            candles = provider.fetch_candles(symbol, cfg.period, start_ms, end_ms)
        except ProviderError as e:
            print(f"❌ Предзаполнение {symbol} {cfg.period.timeframe}: {e}")
            continue

        if not candles:
            print(f"⚠️ Недостаточно данных: {symbol} {cfg.period.timeframe}")
            continue

        manager.replay(candles)
        trend = manager.current_trend(symbol, cfg.period.timeframe)
        print(f"✅ {symbol}: прогрето {len(candles)} свечей, тренд {trend.value}")


def poll_once(
    provider: ExchangeProvider,
    manager: StrategyManager,
    router: SignalRouter,
    cfg: Config,
    now_ms: int,
) -> List[TrendSignal]:
    """
    Один проход по всем символам: забираем закрытые свечи после последней
    обработанной, прогоняем по порядку и рассылаем сигналы.
    Если запрос упал — символ пропускается целиком, частичных данных нет.
    """
    timeframe = cfg.period.timeframe
    end_ms = period_start(now_ms, cfg.period)
    routed: List[TrendSignal] = []

    for symbol in cfg.symbols:
        last_seen = manager.last_seen(symbol, timeframe)
        # сигналы по свечам раньше route_from_ms только прогревают стратегию
        route_from_ms = end_ms - cfg.period.millis
        if last_seen is None:
            print(f"⚠️ {symbol} {timeframe}: стратегия не прогрета, догоняю {cfg.warmup_candles} свечей")
            start_ms = end_ms - cfg.warmup_candles * cfg.period.millis
        else:
            start_ms = last_seen + cfg.period.millis
            route_from_ms = start_ms
        if start_ms >= end_ms:
            continue

        try:
            candles = provider.fetch_candles(symbol, cfg.period, start_ms, end_ms)
        except ProviderRateLimitError as e:
            print(f"⏳ Rate limit {symbol} {timeframe}: {e}; пауза 2с")
            time.sleep(2)
            continue
        except ProviderError as e:
            print(f"❌ Ошибка {symbol} {timeframe}: {e}")
            continue

        for candle in candles:
            if last_seen is not None and candle.t_open_ms <= last_seen:
                continue

            signals = manager.process_candle(candle)
            print_sample(candle, manager)

            if candle.t_open_ms >= route_from_ms:
                for sig in signals:
                    router.route(sig)
                    routed.append(sig)

            last_seen = candle.t_open_ms

    return routed


def main():
    cfg = load_config()

    provider = ExchangeProvider(make_exchange(cfg.exchange_id))
    manager = StrategyManager(params=cfg.params)

    router = SignalRouter(
        handlers=[
            make_telegram_handler(cfg.tg_token, cfg.tg_chat_id, cfg.tz),
            log_handler,
        ]
    )

    warmup(provider, manager, cfg, provider.exchange.milliseconds())

    print("🟢 Старт мониторинга…")

    while True:
        poll_once(provider, manager, router, cfg, provider.exchange.milliseconds())
        time.sleep(cfg.poll_sec)


if __name__ == "__main__":
    main()
