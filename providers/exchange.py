# providers/exchange.py
from typing import Any, Callable, List, Optional

import ccxt

from models import Candle
from .models import (
    CandlePeriod,
    OrderBookDepth,
    OrderResult,
    OrderSide,
    OrderStatus,
    PriceLevel,
    Ticker,
)


class ProviderError(Exception):
    """Любая ошибка при работе с биржей."""


class ProviderNetworkError(ProviderError):
    pass


class ProviderRateLimitError(ProviderNetworkError):
    pass


class ProviderExchangeError(ProviderError):
    pass


class ProviderPayloadError(ProviderError):
    """Биржа ответила, но ответ не разобрать."""


def make_exchange(exchange_id: str) -> ccxt.Exchange:
    exchange_class = getattr(ccxt, exchange_id, None)
    if exchange_class is None:
        raise ValueError(f"ccxt не знает биржу {exchange_id!r}")
    exchange = exchange_class(
        {
            "enableRateLimit": True,
            "options": {"defaultType": "spot"},
        }
    )
    exchange.load_markets()
    return exchange


class ExchangeProvider:
    """
    Обёртка над ccxt-биржей: свечи, ордера, стакан.
    Ошибки ccxt переводятся в ProviderError, повторов внутри нет.
    Отказы биржи по ордерам возвращаются как OrderResult(ok=False).
    """

    def __init__(self, exchange: ccxt.Exchange, page_limit: int = 500):
        self.exchange = exchange
        self.page_limit = page_limit

    # ---------- Свечи ----------

    def fetch_candles(
        self,
        pair: str,
        period: CandlePeriod,
        start_ms: int,
        end_ms: Optional[int] = None,
    ) -> List[Candle]:
        """
        Свечи с началом в [start_ms, end_ms), по возрастанию времени.
        end_ms по умолчанию — текущее время биржи.
        """
        if end_ms is None:
            end_ms = self.exchange.milliseconds()

        candles: List[Candle] = []
        since = start_ms
        while since < end_ms:
            raw = self._call(
                self.exchange.fetch_ohlcv,
                pair,
                timeframe=period.timeframe,
                since=since,
                limit=self.page_limit,
            )
            if not raw:
                break

            batch = sorted((self._parse_row(pair, period, row) for row in raw), key=lambda c: c.t_open_ms)
            for candle in batch:
                if candle.t_open_ms < start_ms or candle.t_open_ms >= end_ms:
                    continue
                if candles and candle.t_open_ms <= candles[-1].t_open_ms:
                    continue
                candles.append(candle)

            newest = batch[-1].t_open_ms
            # биржа может отдавать страницы короче limit, листаем до end_ms
            if newest < since:
                break
            since = newest + period.millis

        return candles

    # ---------- Ордера ----------

    def place_limit_order(self, side: OrderSide, pair: str, price: float, quantity: float) -> OrderResult:
        def submit():
            amount = float(self.exchange.amount_to_precision(pair, quantity))
            rate = float(self.exchange.price_to_precision(pair, price))
            return self.exchange.create_order(pair, "limit", OrderSide(side).value, amount, rate)

        try:
            order = self._call(submit)
        except ProviderExchangeError as e:
            print(f"❌ Ордер {OrderSide(side).value} {pair} отклонён: {e}")
            return OrderResult(ok=False, error=str(e))

        order_id = (order or {}).get("id")
        if order_id is None:
            return OrderResult(ok=False, error="биржа не вернула id ордера")
        return OrderResult(ok=True, order_id=str(order_id))

    def cancel_order(self, pair: str, order_id: str) -> OrderResult:
        try:
            self._call(self.exchange.cancel_order, order_id, pair)
        except ProviderExchangeError as e:
            print(f"❌ Отмена ордера {order_id} {pair} не удалась: {e}")
            return OrderResult(ok=False, order_id=str(order_id), error=str(e))
        return OrderResult(ok=True, order_id=str(order_id))

    def get_order_status(self, pair: str, order_id: str) -> OrderStatus:
        order = self._call(self.exchange.fetch_order, order_id, pair)
        if not isinstance(order, dict):
            raise ProviderPayloadError(f"неожиданный ответ fetch_order: {order!r}")
        return OrderStatus(
            order_id=str(order.get("id") or order_id),
            symbol=pair,
            status=order.get("status") or "unknown",
            amount=order.get("amount"),
            filled=order.get("filled"),
            price=order.get("price"),
        )

    # ---------- Рынок ----------

    def get_best_bid_ask(self, pair: str) -> Ticker:
        ticker = self._call(self.exchange.fetch_ticker, pair)
        if not isinstance(ticker, dict):
            raise ProviderPayloadError(f"неожиданный ответ fetch_ticker: {ticker!r}")
        return Ticker(symbol=pair, bid=ticker.get("bid"), ask=ticker.get("ask"))

    def get_order_book_depth(self, pair: str, limit: Optional[int] = None) -> OrderBookDepth:
        book = self._call(self.exchange.fetch_order_book, pair, limit)
        try:
            bids = [PriceLevel(price=float(row[0]), quantity=float(row[1])) for row in book["bids"]]
            asks = [PriceLevel(price=float(row[0]), quantity=float(row[1])) for row in book["asks"]]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderPayloadError(f"не удалось разобрать стакан {pair}: {e}") from e
        return OrderBookDepth(symbol=pair, bids=bids, asks=asks)

    # ---------- Внутренняя логика ----------

    def _call(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except ccxt.RateLimitExceeded as e:
            raise ProviderRateLimitError(str(e)) from e
        except ccxt.NetworkError as e:
            raise ProviderNetworkError(str(e)) from e
        except ccxt.BaseError as e:
            raise ProviderExchangeError(str(e)) from e

    def _parse_row(self, pair: str, period: CandlePeriod, row) -> Candle:
        try:
            t_open_ms, o, h, l, c, v, *_ = row
            return Candle(
                symbol=pair,
                timeframe=period.timeframe,
                t_open_ms=int(t_open_ms),
                o=float(o),
                h=float(h),
                l=float(l),
                c=float(c),
                v=float(v or 0.0),
            )
        except (TypeError, ValueError) as e:
            raise ProviderPayloadError(f"битая свеча {pair}: {row!r}") from e
