"""Performance service: positions with live prices and YTD realized P/L."""

import dataclasses
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from tradejournal.core.timezone import now_eastern, market_year
from tradejournal.domain.models import Trade
from tradejournal.domain.views import (
    CENT,
    PositionView,
    PerformanceView,
    RealizedPnlView,
)
from tradejournal.repositories.protocols import TradeRepository
from tradejournal.services.market_data_service import MarketDataService
from tradejournal.services.portfolio_engine import PnlCalculator, PortfolioEngine


class PerformanceService:
    """
    Service for portfolio performance views.

    Every call reloads the user's trades and recomputes from scratch, then
    enriches the open positions with quotes.
    """

    def __init__(
        self,
        trade_repo: TradeRepository,
        market_data_service: MarketDataService,
        engine: Optional[PnlCalculator] = None,
    ):
        self._trade_repo = trade_repo
        self._market = market_data_service
        self._engine = engine or PortfolioEngine()

    def get_performance(self, user_id: str, as_of: Optional[datetime] = None) -> PerformanceView:
        """Positions (with prices where available) and realized P/L for as_of's year."""
        as_of = as_of or now_eastern()
        trades = self._trade_repo.list_by_user(user_id)
        return self.build_performance(trades, as_of)

    def realized_pnl(self, user_id: str, as_of: Optional[datetime] = None) -> RealizedPnlView:
        as_of = as_of or now_eastern()
        return self.build_realized(self._trade_repo.list_by_user(user_id), as_of)

    def build_performance(self, trades: Sequence[Trade], as_of: datetime) -> PerformanceView:
        positions = self.price_positions(self._engine.compute_positions(trades))

        total_cost = sum((p.total_cost for p in positions), Decimal("0"))
        total_market_value: Optional[Decimal] = None
        unrealized_pl: Optional[Decimal] = None
        if positions and all(p.current_price is not None for p in positions):
            total_market_value = sum((p.market_value for p in positions), Decimal("0"))
            unrealized_pl = (total_market_value - total_cost).quantize(CENT)
            total_market_value = total_market_value.quantize(CENT)

        return PerformanceView(
            positions=positions,
            realized=self.build_realized(trades, as_of),
            total_cost=total_cost.quantize(CENT),
            total_market_value=total_market_value,
            unrealized_pl=unrealized_pl,
            as_of=as_of,
        )

    def build_realized(self, trades: Sequence[Trade], as_of: datetime) -> RealizedPnlView:
        items = self._engine.realized_pl_by_ticker(trades, as_of)
        total = sum((item.realized_pl for item in items), Decimal("0"))
        return RealizedPnlView(
            year=market_year(as_of),
            total=total.quantize(CENT),
            items=items,
            as_of=as_of,
        )

    def price_positions(self, positions: list[PositionView]) -> list[PositionView]:
        """Fill current_price from quotes; a missing quote leaves it unset."""
        if not positions:
            return []
        quotes = self._market.get_quotes([p.ticker for p in positions])
        return [
            dataclasses.replace(p, current_price=quotes[p.ticker].last_price)
            if p.ticker in quotes
            else p
            for p in positions
        ]
