# config.py
import os
from dataclasses import dataclass, field
from decimal import Decimal

from dotenv import load_dotenv

from models import TrendDirection
from providers.models import CandlePeriod
from strategies import StrategyParams


@dataclass
class Config:
    exchange_id: str
    symbols: list[str]
    period: CandlePeriod
    tz: str
    tg_token: str
    tg_chat_id: str
    params: StrategyParams = field(default_factory=StrategyParams)
    poll_sec: float = 5.0
    warmup_candles: int = 100


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip()


def load_strategy_params() -> StrategyParams:
    side = _env("MACD_INITIAL_SIDE", "short").lower()
    try:
        initial_side = TrendDirection(side)
    except ValueError:
        raise ValueError(f"MACD_INITIAL_SIDE: ожидается long или short, получено {side!r}")

    return StrategyParams(
        short_weight=int(_env("MACD_SHORT", "12")),
        long_weight=int(_env("MACD_LONG", "26")),
        signal_weight=int(_env("MACD_SIGNAL", "9")),
        flip_threshold=Decimal(_env("MACD_FLIP_THRESHOLD", "1")),
        initial_side=initial_side,
    )


def load_config() -> Config:
    load_dotenv()
    exchange_id = _env("EXCHANGE_ID", "binance")
    symbols = [s.strip() for s in _env("SYMBOLS", "BTC/USDT").split(",") if s.strip()]
    period = CandlePeriod(int(_env("CANDLE_PERIOD", "1")))
    tz = _env("TZ", "Europe/Helsinki")
    tg_token = _env("TELEGRAM_BOT_TOKEN", "")
    tg_chat_id = _env("TELEGRAM_CHAT_ID", "")
    poll_sec = float(_env("POLL_SEC", "5.0"))
    warmup_candles = int(_env("WARMUP_CANDLES", "100"))
    return Config(
        exchange_id,
        symbols,
        period,
        tz,
        tg_token,
        tg_chat_id,
        params=load_strategy_params(),
        poll_sec=poll_sec,
        warmup_candles=warmup_candles,
    )
