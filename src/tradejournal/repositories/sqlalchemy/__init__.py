"""SQLAlchemy repository implementations."""

from tradejournal.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    store_operation,
    Base,
)
from tradejournal.repositories.sqlalchemy.trade_repo import SqlAlchemyTradeRepository
from tradejournal.repositories.sqlalchemy.journal_repo import SqlAlchemyJournalRepository
from tradejournal.repositories.sqlalchemy.user_repo import (
    SqlAlchemyUserRepository,
    SqlAlchemySessionRepository,
)

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "store_operation",
    "Base",
    "SqlAlchemyTradeRepository",
    "SqlAlchemyJournalRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemySessionRepository",
]
