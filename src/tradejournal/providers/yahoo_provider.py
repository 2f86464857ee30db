"""Yahoo Finance quote provider via yfinance."""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from tradejournal.core.timezone import now_eastern
from tradejournal.domain.views import Quote

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _to_price(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        price = Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError):
        return None
    return price if price > 0 else None


def _safe_quote_for_symbol(symbol: str, tickers_obj) -> tuple[Optional[Decimal], Optional[Decimal]]:
    """
    Get (last_price, previous_close) for one symbol from a yfinance Tickers object.

    On any error returns (None, None).
    """
    try:
        ticker = tickers_obj.tickers.get(symbol)
        if ticker is None:
            return (None, None)
        info = ticker.info
        if not isinstance(info, dict):
            return (None, None)
        price = info.get("currentPrice")
        if price is None:
            price = info.get("regularMarketPrice")
        prev_close = info.get("previousClose") or info.get("regularMarketPreviousClose")
        return (_to_price(price), _to_price(prev_close))
    except Exception as exc:  # yfinance raises a wide variety of errors
        logger.debug("yfinance lookup failed for %s: %s", symbol, exc)
        return (None, None)


def _fetch_quotes_impl(symbols: list[str]) -> dict[str, Quote]:
    if not symbols:
        return {}
    yf = _get_yf()
    tickers = yf.Tickers(" ".join(symbols))
    as_of = now_eastern()
    result: dict[str, Quote] = {}
    for sym in symbols:
        price, prev_close = _safe_quote_for_symbol(sym, tickers)
        if price is not None:
            result[sym] = Quote(symbol=sym, last_price=price, prev_close=prev_close, as_of=as_of)
    return result


class YahooMarketDataProvider:
    """Fetches quotes from Yahoo Finance with a bounded wait."""

    def __init__(self, fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS):
        self._fetch_timeout = fetch_timeout_seconds

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return quotes for symbols; an overall timeout yields an empty result."""
        keys = [s.strip().upper() for s in symbols if s and s.strip()]
        if not keys:
            return {}
        pool = ThreadPoolExecutor(max_workers=1)
        try:
            future = pool.submit(_fetch_quotes_impl, keys)
            return future.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError:
            logger.warning("yfinance quote fetch timed out after %ss", self._fetch_timeout)
            return {}
        finally:
            # Do not block on a hung fetch; its result is discarded
            pool.shutdown(wait=False)
