"""Repository protocol definitions (interfaces)."""

from tradejournal.repositories.protocols.trade_repo import TradeRepository
from tradejournal.repositories.protocols.journal_repo import JournalRepository
from tradejournal.repositories.protocols.user_repo import UserRepository, SessionRepository

__all__ = [
    "TradeRepository",
    "JournalRepository",
    "UserRepository",
    "SessionRepository",
]
