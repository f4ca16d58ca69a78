# handlers/telegram_handler.py
from models import TrendDirection, TrendSignal
from notifier import send_telegram_message
from signal_formatter import format_signal


def make_telegram_handler(tg_token: str, tg_chat_id: str, tz: str):
    """
    Handler для SignalRouter: шлёт в Telegram только развороты LONG/SHORT.
    """
    def handler(signal: TrendSignal):
        if signal.direction is TrendDirection.NONE:
            return
        if not send_telegram_message(tg_token, tg_chat_id, format_signal(signal, tz)):
            print(f"⚠️ {signal.symbol} {signal.direction.value}: разворот не доставлен в Telegram")
    return handler
