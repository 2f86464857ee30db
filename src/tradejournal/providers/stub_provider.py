"""Stub market data provider for offline/testing use."""

import random
from decimal import Decimal

from tradejournal.core.timezone import now_eastern
from tradejournal.domain.views import Quote


# Deterministic fake prices for common symbols: (last, previous close)
_STUB_PRICES: dict[str, tuple[Decimal, Decimal]] = {
    "AAPL": (Decimal("185.50"), Decimal("184.25")),
    "GOOGL": (Decimal("142.75"), Decimal("141.50")),
    "MSFT": (Decimal("378.25"), Decimal("376.80")),
    "AMZN": (Decimal("178.50"), Decimal("177.25")),
    "TSLA": (Decimal("248.75"), Decimal("250.10")),
    "NVDA": (Decimal("485.25"), Decimal("482.50")),
    "META": (Decimal("505.50"), Decimal("502.75")),
    "SPY": (Decimal("485.25"), Decimal("484.10")),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Known symbols get fixed prices; unknown symbols get a price derived from
    a seeded generator keyed on the symbol, so repeated lookups agree.
    """

    def __init__(self, seed: int = 42):
        self._seed = seed

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return stub quotes for requested symbols."""
        as_of = now_eastern()
        result: dict[str, Quote] = {}

        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in _STUB_PRICES:
                last_price, prev_close = _STUB_PRICES[upper_symbol]
            else:
                rng = random.Random(f"{self._seed}:{upper_symbol}")
                last_price = Decimal(str(50 + rng.random() * 200)).quantize(Decimal("0.01"))
                change_pct = Decimal(str((rng.random() - 0.5) * 0.04))
                prev_close = (last_price / (1 + change_pct)).quantize(Decimal("0.01"))

            result[upper_symbol] = Quote(
                symbol=upper_symbol,
                last_price=last_price,
                prev_close=prev_close,
                as_of=as_of,
            )

        return result
