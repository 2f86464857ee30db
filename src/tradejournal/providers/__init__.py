"""Market data providers module."""

from tradejournal.providers.market_data_provider import MarketDataProvider
from tradejournal.providers.stub_provider import StubMarketDataProvider
from tradejournal.providers.finnhub_provider import FinnhubMarketDataProvider, FinnhubAPIError
from tradejournal.providers.yahoo_provider import YahooMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
    "FinnhubMarketDataProvider",
    "FinnhubAPIError",
    "YahooMarketDataProvider",
]
