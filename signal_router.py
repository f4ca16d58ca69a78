# signal_router.py
from dataclasses import dataclass, field
from typing import Callable, List

from models import TrendSignal

SignalHandler = Callable[[TrendSignal], None]


@dataclass
class SignalRouter:
    """
    Рассылает сигнал разворота всем обработчикам.
    Упавший обработчик не мешает остальным.
    """
    handlers: List[SignalHandler] = field(default_factory=list)

    def add(self, handler: SignalHandler) -> None:
        self.handlers.append(handler)

    def route(self, signal: TrendSignal) -> int:
        delivered = 0
        for handler in self.handlers:
            try:
                handler(signal)
                delivered += 1
            except Exception as e:
                name = getattr(handler, "__name__", handler)
                print(f"❌ {signal.symbol} {signal.direction.value}: ошибка в обработчике {name}: {e}")
        return delivered
