# handlers/log_handler.py
from models import TrendSignal


def log_handler(signal: TrendSignal):
    print(
        f"LOG: {signal.symbol} {signal.timeframe} {signal.strategy} "
        f"{signal.direction.value} @ {signal.t_open_ms}"
    )
