"""Market data service for live quotes."""

import logging
from datetime import datetime
from typing import Optional

from tradejournal.config.settings import Settings
from tradejournal.core.timezone import now_eastern
from tradejournal.domain.views import Quote
from tradejournal.providers import (
    MarketDataProvider,
    StubMarketDataProvider,
    FinnhubMarketDataProvider,
    YahooMarketDataProvider,
)

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> MarketDataProvider:
    """Build the quote provider selected by settings.market_data_provider."""
    if settings.market_data_provider == "finnhub":
        if not settings.finnhub_api_key:
            logger.warning("FINNHUB_API_KEY is not set; quotes will be unavailable")
        return FinnhubMarketDataProvider(
            api_key=settings.finnhub_api_key or "",
            base_url=settings.finnhub_base_url,
            timeout=settings.quote_fetch_timeout_seconds,
            max_workers=settings.quote_max_workers,
        )
    if settings.market_data_provider == "yahoo":
        return YahooMarketDataProvider(
            fetch_timeout_seconds=settings.quote_fetch_timeout_seconds,
        )
    return StubMarketDataProvider()


class MarketDataService:
    """
    Service for fetching live quotes.

    Wraps a provider with caching and graceful degradation: a provider
    failure never propagates, the affected symbols simply have no quote.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 60,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._quote_cache: dict[str, Quote] = {}
        self._cache_time: Optional[datetime] = None

    @property
    def provider(self) -> MarketDataProvider:
        return self._provider

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for symbols with caching.

        Returns dict mapping symbol -> Quote. Uses cached data within TTL;
        falls back to whatever is cached when the provider fails.
        """
        symbols = list(dict.fromkeys(s.strip().upper() for s in symbols if s and s.strip()))
        if not symbols:
            return {}

        if self._is_cache_valid():
            result = {s: self._quote_cache[s] for s in symbols if s in self._quote_cache}
            missing = [s for s in symbols if s not in result]
            if not missing:
                return result
        else:
            missing = symbols
            result = {}

        try:
            new_quotes = self._provider.get_quotes(missing)
        except Exception as exc:  # any provider failure degrades to cache
            logger.warning("Quote provider failed for %s: %s", ",".join(missing), exc)
            for s in missing:
                if s in self._quote_cache:
                    result[s] = self._quote_cache[s]
        else:
            self._quote_cache.update(new_quotes)
            self._cache_time = now_eastern()
            result.update(new_quotes)

        return {s: result[s] for s in symbols if s in result}

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """Fetch a single quote, or None when unavailable."""
        return self.get_quotes([symbol]).get(symbol.strip().upper())

    def clear_cache(self) -> None:
        self._quote_cache.clear()
        self._cache_time = None

    def _is_cache_valid(self) -> bool:
        """Check if cache is within TTL."""
        if not self._cache_time:
            return False
        elapsed = (now_eastern() - self._cache_time).total_seconds()
        return elapsed < self._cache_ttl
