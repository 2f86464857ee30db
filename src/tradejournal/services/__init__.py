"""Service layer - business logic orchestration."""

from tradejournal.services.portfolio_engine import (
    PortfolioEngine,
    PnlCalculator,
    compute_positions,
    compute_realized_pl,
    realized_pl_by_ticker,
    sellable_shares,
    shares_held,
)
from tradejournal.services.market_data_service import MarketDataService, create_provider
from tradejournal.services.identity_service import IdentityService
from tradejournal.services.trade_service import TradeService, TradeCreate
from tradejournal.services.journal_service import JournalService
from tradejournal.services.performance_service import PerformanceService

__all__ = [
    "PortfolioEngine",
    "PnlCalculator",
    "compute_positions",
    "compute_realized_pl",
    "realized_pl_by_ticker",
    "sellable_shares",
    "shares_held",
    "MarketDataService",
    "create_provider",
    "IdentityService",
    "TradeService",
    "TradeCreate",
    "JournalService",
    "PerformanceService",
]
