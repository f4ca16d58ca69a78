# -*- coding: utf-8 -*-
"""
Общие фикстуры: свечи и фейковая ccxt-биржа без сети.
"""
import math

import pytest

from models import Candle

T0 = 1_700_000_040_000  # ровно на границе минуты
MINUTE = 60_000


def make_candle(close, i=0, symbol="BTC/USDT", timeframe="1m"):
    return Candle(
        symbol=symbol,
        timeframe=timeframe,
        t_open_ms=T0 + i * MINUTE,
        o=close,
        h=close,
        l=close,
        c=close,
        v=1.0,
    )


def sine_closes(n, base=1000.0, amplitude=200.0, step=8.0):
    return [round(base + amplitude * math.sin(i / step), 2) for i in range(n)]


def ohlcv_rows(closes, start_ms=T0):
    return [[start_ms + i * MINUTE, c, c, c, c, 1.0] for i, c in enumerate(closes)]


class FakeExchange:
    """Минимальная замена ccxt.Exchange для тестов."""

    def __init__(self, rows=None, now_ms=None):
        self.rows = list(rows or [])
        self.now_ms = now_ms if now_ms is not None else T0
        self.errors = {}
        self.ohlcv_calls = []
        self.created = []
        self.cancelled = []
        self.order = {"id": "42", "status": "open", "amount": 1.0, "filled": 0.0, "price": 100.0}
        self.ticker = {"symbol": "BTC/USDT", "bid": 99.5, "ask": 100.5, "last": 100.0}
        self.book = {"bids": [[99.5, 1.0], [99.0, 2.0]], "asks": [[100.5, 3.0, 0]]}

    def _maybe_raise(self, name):
        exc = self.errors.get(name)
        if exc is not None:
            raise exc

    def milliseconds(self):
        return self.now_ms

    def fetch_ohlcv(self, symbol, timeframe="1m", since=None, limit=None, params=None):
        self._maybe_raise("fetch_ohlcv")
        self.ohlcv_calls.append({"symbol": symbol, "timeframe": timeframe, "since": since, "limit": limit})
        rows = [r for r in self.rows if since is None or r[0] >= since]
        if limit is not None:
            rows = rows[:limit]
        return [list(r) for r in rows]

    def amount_to_precision(self, symbol, amount):
        return f"{amount:.5f}"

    def price_to_precision(self, symbol, price):
        return f"{price:.2f}"

    def create_order(self, symbol, type, side, amount, price=None, params=None):
        self._maybe_raise("create_order")
        self.created.append((symbol, type, side, amount, price))
        return {"id": "42", "symbol": symbol, "status": "open"}

    def cancel_order(self, id, symbol=None, params=None):
        self._maybe_raise("cancel_order")
        self.cancelled.append((id, symbol))
        return {"id": id, "status": "canceled"}

    def fetch_order(self, id, symbol=None, params=None):
        self._maybe_raise("fetch_order")
        return self.order

    def fetch_ticker(self, symbol, params=None):
        self._maybe_raise("fetch_ticker")
        return self.ticker

    def fetch_order_book(self, symbol, limit=None, params=None):
        self._maybe_raise("fetch_order_book")
        return self.book


@pytest.fixture
def fake_exchange():
    return FakeExchange()
