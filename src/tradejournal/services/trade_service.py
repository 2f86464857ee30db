"""Trade service: the trade-submission boundary."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradejournal.core.timezone import now_eastern, to_eastern
from tradejournal.core.exceptions import ValidationError, InsufficientSharesError
from tradejournal.domain.models import Trade, TradeSide
from tradejournal.repositories.protocols import TradeRepository
from tradejournal.services.portfolio_engine import PnlCalculator, PortfolioEngine

logger = logging.getLogger(__name__)


@dataclass
class TradeCreate:
    """Input data for recording a trade."""

    ticker: str
    side: TradeSide
    shares: Decimal
    price: Decimal
    traded_at: Optional[datetime] = None


class TradeService:
    """
    Service for recording and listing trades.

    Trades are append-only. This is where malformed trades are rejected;
    the P/L engine itself never validates.
    """

    def __init__(
        self,
        trade_repo: TradeRepository,
        engine: Optional[PnlCalculator] = None,
        enforce_sell_holdings: bool = True,
    ):
        self._trade_repo = trade_repo
        self._engine = engine or PortfolioEngine()
        self._enforce_sell_holdings = enforce_sell_holdings

    def record_trade(self, user_id: str, data: TradeCreate) -> Trade:
        """
        Validate and persist a trade, returning the stored record.

        A SELL may not exceed the shares held at the trade's own timestamp,
        nor leave any later recorded SELL of the same ticker uncovered
        (when enforce_sell_holdings is on).
        """
        self._validate(data)
        side = TradeSide(data.side)
        ticker = data.ticker.strip().upper()
        traded_at = to_eastern(data.traded_at) if data.traded_at else now_eastern()

        if side == TradeSide.SELL and self._enforce_sell_holdings:
            history = self._trade_repo.list_by_user_and_ticker(user_id, ticker)
            available = self._engine.sellable_shares(history, ticker, traded_at)
            if data.shares > available:
                raise InsufficientSharesError(ticker, str(data.shares), str(available))

        trade = self._trade_repo.create(
            Trade(
                trade_id=str(uuid.uuid4()),
                user_id=user_id,
                ticker=ticker,
                side=side,
                shares=data.shares,
                price=data.price,
                traded_at=traded_at,
            )
        )
        logger.info(
            "Recorded %s %s %s @ %s for user %s",
            trade.side.value, trade.shares, trade.ticker, trade.price, user_id,
        )
        return trade

    def list_trades(self, user_id: str) -> list[Trade]:
        """All trades for a user, oldest first."""
        return self._trade_repo.list_by_user(user_id)

    def trade_history(self, user_id: str, ticker: str) -> list[Trade]:
        """Trade history for one ticker, oldest first."""
        if not ticker or not ticker.strip():
            raise ValidationError("Ticker is required")
        return self._trade_repo.list_by_user_and_ticker(user_id, ticker.strip().upper())

    @staticmethod
    def _validate(data: TradeCreate) -> None:
        if not data.ticker or not data.ticker.strip():
            raise ValidationError("Trade requires a ticker")
        try:
            TradeSide(data.side)
        except ValueError:
            raise ValidationError(f"Invalid trade side: {data.side}") from None
        if data.shares is None or not data.shares.is_finite() or data.shares <= 0:
            raise ValidationError("Trade requires shares > 0")
        if data.price is None or not data.price.is_finite() or data.price <= 0:
            raise ValidationError("Trade requires price > 0")
