"""View models for positions, quotes and performance outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradejournal.domain.models import JournalEntry

CENT = Decimal("0.01")


@dataclass(frozen=True)
class PositionView:
    """
    Open holding in one ticker with its weighted-average cost basis.

    current_price is None until filled in from a quote.
    """

    ticker: str
    shares: Decimal
    average_cost: Decimal
    current_price: Optional[Decimal] = None

    @property
    def total_cost(self) -> Decimal:
        return self.shares * self.average_cost

    @property
    def market_value(self) -> Optional[Decimal]:
        if self.current_price is None:
            return None
        return self.shares * self.current_price

    @property
    def gain_loss(self) -> Optional[Decimal]:
        market_value = self.market_value
        if market_value is None:
            return None
        return market_value - self.total_cost

    @property
    def gain_loss_pct(self) -> Optional[Decimal]:
        gain_loss = self.gain_loss
        if gain_loss is None:
            return None
        total_cost = self.total_cost
        if total_cost == 0:
            return Decimal("0")
        return (gain_loss / total_cost * 100).quantize(CENT)


@dataclass
class Quote:
    """Market quote data for a symbol."""

    symbol: str
    last_price: Decimal
    prev_close: Optional[Decimal]
    as_of: datetime


@dataclass(frozen=True)
class RealizedPnlItem:
    """Year-to-date average-price match for one ticker."""

    ticker: str
    buy_shares: Decimal
    sell_shares: Decimal
    avg_buy_price: Decimal
    avg_sell_price: Decimal
    matched_shares: Decimal
    realized_pl: Decimal


@dataclass
class RealizedPnlView:
    """Realized profit/loss for one calendar year."""

    year: int
    total: Decimal
    items: list[RealizedPnlItem] = field(default_factory=list)
    as_of: Optional[datetime] = None


@dataclass
class PerformanceView:
    """Positions enriched with quotes plus year-to-date realized P/L."""

    positions: list[PositionView]
    realized: RealizedPnlView
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    total_market_value: Optional[Decimal] = None
    unrealized_pl: Optional[Decimal] = None
    as_of: Optional[datetime] = None


@dataclass
class JournalPage:
    """One page of journal entries, newest first."""

    entries: list[JournalEntry]
    total: int
    offset: int
    limit: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.entries) < self.total
