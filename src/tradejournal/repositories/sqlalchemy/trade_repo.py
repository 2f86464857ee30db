"""SQLAlchemy implementation of TradeRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradejournal.core.timezone import to_eastern, to_naive_eastern
from tradejournal.domain.models import Trade
from tradejournal.repositories.sqlalchemy.database import store_operation
from tradejournal.repositories.sqlalchemy.orm_models import TradeORM


class SqlAlchemyTradeRepository:
    """SQLAlchemy-backed trade repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, trade: Trade) -> Trade:
        """Persist a new trade and return the stored record."""
        orm_trade = TradeORM(
            id=trade.trade_id,
            ticker=trade.ticker,
            shares=trade.shares,
            price=trade.price,
            trade_type=trade.side,
            user_id=trade.user_id,
            created_at=to_naive_eastern(trade.traded_at),
        )
        with store_operation(self._db, "insert trade"):
            self._db.add(orm_trade)
            self._db.commit()
            self._db.refresh(orm_trade)
        return self._to_domain(orm_trade)

    def get_by_id(self, trade_id: str) -> Optional[Trade]:
        """Retrieve trade by ID."""
        with store_operation(self._db, "get trade"):
            orm_trade = self._db.query(TradeORM).filter(TradeORM.id == trade_id).first()
        return self._to_domain(orm_trade) if orm_trade else None

    def list_by_user(self, user_id: str) -> list[Trade]:
        """List all trades owned by a user, ordered by trade time."""
        with store_operation(self._db, "select trades"):
            orm_trades = (
                self._db.query(TradeORM)
                .filter(TradeORM.user_id == user_id)
                .order_by(TradeORM.created_at)
                .all()
            )
        return [self._to_domain(t) for t in orm_trades]

    def list_by_user_and_ticker(self, user_id: str, ticker: str) -> list[Trade]:
        """List a user's trades for one ticker, ordered by trade time."""
        with store_operation(self._db, "select trades by ticker"):
            orm_trades = (
                self._db.query(TradeORM)
                .filter(
                    TradeORM.user_id == user_id,
                    TradeORM.ticker == ticker.strip().upper(),
                )
                .order_by(TradeORM.created_at)
                .all()
            )
        return [self._to_domain(t) for t in orm_trades]

    @staticmethod
    def _to_domain(orm: TradeORM) -> Trade:
        """Convert ORM model to domain model."""
        return Trade(
            trade_id=orm.id,
            user_id=orm.user_id,
            ticker=orm.ticker,
            side=orm.trade_type,
            shares=Decimal(str(orm.shares)) if orm.shares is not None else Decimal("0"),
            price=Decimal(str(orm.price)) if orm.price is not None else Decimal("0"),
            traded_at=to_eastern(orm.created_at),
        )
