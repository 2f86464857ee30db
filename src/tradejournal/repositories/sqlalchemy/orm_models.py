"""SQLAlchemy ORM model definitions.

Timestamps are stored as naive US/Eastern wall time.
"""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Text,
    ForeignKey,
    Index,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from tradejournal.repositories.sqlalchemy.database import Base
from tradejournal.domain.models.enums import TradeSide


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    email = Column(String(320), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False)

    trades = relationship("TradeORM", back_populates="user")
    journal_entries = relationship("JournalEntryORM", back_populates="user")


class AuthSessionORM(Base):
    """SQLAlchemy model for AuthSession (bearer tokens)."""

    __tablename__ = "auth_sessions"

    token = Column(String(128), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False)
    revoked_at = Column(DateTime, nullable=True)


class TradeORM(Base):
    """
    SQLAlchemy model for Trade.

    Column names follow the trade store schema: trade_type holds the side
    and created_at holds the execution time.
    """

    __tablename__ = "trades"
    __table_args__ = (Index("ix_trades_user_ticker", "user_id", "ticker"),)

    id = Column(String(36), primary_key=True)
    ticker = Column(String(20), nullable=False)
    shares = Column(Numeric(precision=18, scale=8), nullable=False, default=Decimal("0"))
    price = Column(Numeric(precision=18, scale=4), nullable=False, default=Decimal("0"))
    trade_type = Column(SqlEnum(TradeSide), nullable=False)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False)

    user = relationship("UserORM", back_populates="trades")


class JournalEntryORM(Base):
    """SQLAlchemy model for JournalEntry."""

    __tablename__ = "journal_entries"
    __table_args__ = (Index("ix_journal_user_ticker", "user_id", "ticker"),)

    id = Column(String(36), primary_key=True)
    ticker = Column(String(20), nullable=False)
    content = Column(Text, nullable=False, default="")
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    user = relationship("UserORM", back_populates="journal_entries")
