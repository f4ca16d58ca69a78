# signal_formatter.py
from datetime import datetime
from zoneinfo import ZoneInfo

from models import TrendDirection, TrendSignal

def format_signal(signal: TrendSignal, tz: str) -> str:
    """
    Формирует Telegram‑сообщение о развороте тренда.
    """
    if signal.direction is TrendDirection.LONG:
        icon = "🟢"
        label = "LONG"
    elif signal.direction is TrendDirection.SHORT:
        icon = "🔴"
        label = "SHORT"
    else:
        icon = "⚪"
        label = "—"

    dt_open = datetime.fromtimestamp(signal.t_open_ms / 1000, ZoneInfo(tz))
    candle_str = dt_open.strftime("%Y-%m-%d %H:%M")

    lines = [
        f"<b>{icon} {signal.strategy}: {label}</b>",
        f"<b>Таймфрейм:</b> {signal.timeframe}",
        f"<b>Пара:</b> {signal.symbol}",
        f"<b>Свеча:</b> {candle_str}",
    ]

    histogram = signal.extra.get("histogram")
    if histogram is not None:
        lines.append(f"<b>Гистограмма:</b> {histogram}")
    close = signal.extra.get("close")
    if close is not None:
        lines.append(f"<b>Цена:</b> {close}")

    return "\n".join(lines)
