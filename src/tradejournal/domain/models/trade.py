"""Trade domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from tradejournal.domain.models.enums import TradeSide


@dataclass(frozen=True)
class Trade:
    """
    A single executed trade (append-only fact).

    Trades are never edited or deleted; positions and realized P/L are
    always recomputed from the full set.
    """

    trade_id: str
    user_id: str
    ticker: str
    side: TradeSide
    shares: Decimal
    price: Decimal
    traded_at: datetime

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "ticker", self.ticker.strip().upper())
        if isinstance(self.side, str) and not isinstance(self.side, TradeSide):
            object.__setattr__(self, "side", TradeSide(self.side.upper()))

    @property
    def is_buy(self) -> bool:
        return self.side == TradeSide.BUY

    @property
    def notional(self) -> Decimal:
        """Gross value of the trade (shares x price)."""
        return self.shares * self.price
