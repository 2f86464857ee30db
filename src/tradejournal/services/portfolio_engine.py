"""Position and realized P/L engine.

Pure functions over an unordered collection of trades. Nothing here touches
a store or the clock: callers pass the trades and the reference instant, and
every call recomputes from scratch.

Two different cost models are in play and they are not reconcilable:

- open positions keep one running weighted-average bucket per ticker across
  the whole history;
- realized P/L matches the year-to-date average buy price against the
  year-to-date average sell price per ticker.

The two figures disagree when trades span a year boundary or when a ticker
is only partially sold within the year. That is a known approximation.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional, Protocol

from tradejournal.core.timezone import market_year, to_eastern
from tradejournal.domain.models import Trade, TradeSide
from tradejournal.domain.views import PositionView, RealizedPnlItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Net quantities at or below this are treated as closed
POSITION_EPSILON = Decimal("0.000001")


@dataclass
class _CostBucket:
    shares: Decimal = ZERO
    total_cost: Decimal = ZERO


@dataclass
class _YearTotals:
    buy_count: int = 0
    sell_count: int = 0
    buy_shares: Decimal = ZERO
    sell_shares: Decimal = ZERO
    buy_value: Decimal = ZERO
    sell_value: Decimal = ZERO


def _chronological(trades: Iterable[Trade]) -> list[Trade]:
    # sorted() is stable: trades sharing a timestamp keep their input order
    return sorted(trades, key=lambda t: to_eastern(t.traded_at))


def _apply_trade(bucket: _CostBucket, trade: Trade) -> None:
    if trade.side == TradeSide.BUY:
        bucket.shares += trade.shares
        bucket.total_cost += trade.shares * trade.price
        return

    if bucket.shares <= ZERO:
        logger.debug("Ignoring SELL of %s %s with no open shares", trade.shares, trade.ticker)
        return

    avg_cost_before_sale = bucket.total_cost / bucket.shares
    sold = min(trade.shares, bucket.shares)
    bucket.shares -= sold
    bucket.total_cost -= sold * avg_cost_before_sale

    if bucket.shares <= POSITION_EPSILON:
        bucket.shares = ZERO
        bucket.total_cost = ZERO


def _replay(trades: Iterable[Trade]) -> dict[str, _CostBucket]:
    book: dict[str, _CostBucket] = {}
    for trade in _chronological(trades):
        _apply_trade(book.setdefault(trade.ticker, _CostBucket()), trade)
    return book


def compute_positions(trades: Iterable[Trade]) -> list[PositionView]:
    """
    Fold trades (oldest first) into open positions with weighted-average cost.

    BUY adds shares and cost. SELL removes shares at the pre-sale average
    cost, so the remaining average is unchanged. A SELL with nothing open is
    ignored; a SELL larger than the open quantity closes the position.
    Quantities and prices are not validated here.

    Returns one PositionView per ticker with shares above POSITION_EPSILON,
    sorted by ticker, with current_price unset.
    """
    book = _replay(trades)
    return [
        PositionView(
            ticker=ticker,
            shares=bucket.shares,
            average_cost=bucket.total_cost / bucket.shares,
        )
        for ticker, bucket in sorted(book.items())
        if bucket.shares > POSITION_EPSILON
    ]


def shares_held(
    trades: Iterable[Trade],
    ticker: str,
    as_of: Optional[datetime] = None,
) -> Decimal:
    """Open quantity of ticker after replaying trades up to and including as_of."""
    ticker = ticker.strip().upper()
    relevant = [t for t in trades if t.ticker == ticker]
    if as_of is not None:
        cutoff = to_eastern(as_of)
        relevant = [t for t in relevant if to_eastern(t.traded_at) <= cutoff]
    bucket = _replay(relevant).get(ticker)
    if bucket is None or bucket.shares <= POSITION_EPSILON:
        return ZERO
    return bucket.shares


def sellable_shares(trades: Iterable[Trade], ticker: str, as_of: datetime) -> Decimal:
    """
    Largest SELL of ticker that can be inserted at as_of.

    Starts from the quantity held at as_of and walks the later trades, so a
    backdated SELL cannot leave an already recorded later SELL uncovered.
    Trades sharing the as_of timestamp count as earlier.
    """
    ticker = ticker.strip().upper()
    cutoff = to_eastern(as_of)
    relevant = [t for t in trades if t.ticker == ticker]
    running = shares_held(relevant, ticker, as_of=cutoff)
    lowest = running
    for trade in _chronological(t for t in relevant if to_eastern(t.traded_at) > cutoff):
        running += trade.shares if trade.side == TradeSide.BUY else -trade.shares
        lowest = min(lowest, running)
    return max(lowest, ZERO)


def realized_pl_by_ticker(trades: Iterable[Trade], as_of: datetime) -> list[RealizedPnlItem]:
    """
    Per-ticker realized P/L for the calendar year containing as_of.

    Only trades dated in that year count. For each ticker with at least one
    BUY and one SELL in the window, min(bought, sold) shares are matched at
    the year's average sell price minus the year's average buy price.
    Tickers that only bought or only sold contribute nothing.
    """
    year = market_year(as_of)
    totals: dict[str, _YearTotals] = {}

    for trade in trades:
        if market_year(trade.traded_at) != year:
            continue
        entry = totals.setdefault(trade.ticker, _YearTotals())
        if trade.side == TradeSide.BUY:
            entry.buy_count += 1
            entry.buy_shares += trade.shares
            entry.buy_value += trade.notional
        else:
            entry.sell_count += 1
            entry.sell_shares += trade.shares
            entry.sell_value += trade.notional

    items: list[RealizedPnlItem] = []
    for ticker, entry in sorted(totals.items()):
        if entry.buy_count == 0 or entry.sell_count == 0:
            continue
        if entry.buy_shares <= ZERO or entry.sell_shares <= ZERO:
            # Degenerate quantities; no average price exists
            continue
        avg_buy = entry.buy_value / entry.buy_shares
        avg_sell = entry.sell_value / entry.sell_shares
        matched = min(entry.buy_shares, entry.sell_shares)
        items.append(
            RealizedPnlItem(
                ticker=ticker,
                buy_shares=entry.buy_shares,
                sell_shares=entry.sell_shares,
                avg_buy_price=avg_buy,
                avg_sell_price=avg_sell,
                matched_shares=matched,
                realized_pl=(avg_sell - avg_buy) * matched,
            )
        )
    return items


def compute_realized_pl(trades: Iterable[Trade], as_of: datetime) -> Decimal:
    """Total realized P/L for the calendar year containing as_of."""
    return sum(
        (item.realized_pl for item in realized_pl_by_ticker(trades, as_of)),
        ZERO,
    )


class PnlCalculator(Protocol):
    """Interface the services depend on; lets the reducer be swapped out."""

    def compute_positions(self, trades: Iterable[Trade]) -> list[PositionView]:
        ...

    def realized_pl_by_ticker(
        self, trades: Iterable[Trade], as_of: datetime
    ) -> list[RealizedPnlItem]:
        ...

    def compute_realized_pl(self, trades: Iterable[Trade], as_of: datetime) -> Decimal:
        ...

    def shares_held(
        self, trades: Iterable[Trade], ticker: str, as_of: Optional[datetime] = None
    ) -> Decimal:
        ...

    def sellable_shares(self, trades: Iterable[Trade], ticker: str, as_of: datetime) -> Decimal:
        ...


class PortfolioEngine:
    """
    Full-recompute implementation of PnlCalculator.

    Stateless; every call replays the supplied trades from scratch.
    """

    def compute_positions(self, trades: Iterable[Trade]) -> list[PositionView]:
        return compute_positions(trades)

    def realized_pl_by_ticker(
        self, trades: Iterable[Trade], as_of: datetime
    ) -> list[RealizedPnlItem]:
        return realized_pl_by_ticker(trades, as_of)

    def compute_realized_pl(self, trades: Iterable[Trade], as_of: datetime) -> Decimal:
        return compute_realized_pl(trades, as_of)

    def shares_held(
        self, trades: Iterable[Trade], ticker: str, as_of: Optional[datetime] = None
    ) -> Decimal:
        return shares_held(trades, ticker, as_of)

    def sellable_shares(self, trades: Iterable[Trade], ticker: str, as_of: datetime) -> Decimal:
        return sellable_shares(trades, ticker, as_of)
