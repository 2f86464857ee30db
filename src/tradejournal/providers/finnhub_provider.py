"""Finnhub quote provider.

One ``GET /quote?symbol=...`` per symbol. Requests for different symbols run
concurrently and may finish in any order; the result is assembled only after
every request has resolved.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import requests

from tradejournal.core.timezone import now_eastern
from tradejournal.domain.views import Quote

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 8


class FinnhubAPIError(Exception):
    pass


def _to_price(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    # Finnhub answers unknown symbols with zeros
    if not price.is_finite() or price <= 0:
        return None
    return price


class FinnhubMarketDataProvider:
    """Quote provider backed by the Finnhub REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_workers = max(1, max_workers)
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def _require_key(self) -> None:
        if not self._api_key:
            raise FinnhubAPIError("Finnhub API key is not configured")

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Fetch all symbols concurrently; failed symbols are omitted."""
        unique = list(dict.fromkeys(s.strip().upper() for s in symbols if s and s.strip()))
        if not unique:
            return {}
        self._require_key()

        workers = min(self._max_workers, len(unique))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            fetched = list(pool.map(self._fetch_one_safe, unique))

        return {quote.symbol: quote for quote in fetched if quote is not None}

    def _fetch_one_safe(self, symbol: str) -> Optional[Quote]:
        try:
            return self.fetch_quote(symbol)
        except (requests.RequestException, FinnhubAPIError, ValueError) as exc:
            logger.warning("Quote lookup failed for %s: %s", symbol, exc)
            return None

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch a single quote; raises FinnhubAPIError on a bad or empty answer."""
        self._require_key()
        resp = self._session.get(
            f"{self._base_url}/quote",
            params={"symbol": symbol, "token": self._api_key},
            timeout=self._timeout,
        )
        if resp.status_code == 429:
            raise FinnhubAPIError(f"Rate limited fetching {symbol}")
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise FinnhubAPIError(f"Malformed quote payload for {symbol}")

        last_price = _to_price(payload.get("c"))
        if last_price is None:
            raise FinnhubAPIError(f"No price available for {symbol}")

        return Quote(
            symbol=symbol,
            last_price=last_price,
            prev_close=_to_price(payload.get("pc")),
            as_of=now_eastern(),
        )
