"""Market data provider protocol."""

from typing import Protocol

from tradejournal.domain.views import Quote


class MarketDataProvider(Protocol):
    """
    Protocol for price quote providers.

    Implementations fetch the current price for each requested symbol.
    A symbol whose lookup fails is omitted from the result; the provider
    may still raise if the whole request cannot be made.
    """

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for multiple symbols.

        Returns dict mapping symbol -> Quote. Missing symbols are omitted.
        """
        ...
