"""Domain models package."""

from tradejournal.domain.models.enums import TradeSide
from tradejournal.domain.models.trade import Trade
from tradejournal.domain.models.journal import JournalEntry
from tradejournal.domain.models.user import User, AuthSession

__all__ = [
    "TradeSide",
    "Trade",
    "JournalEntry",
    "User",
    "AuthSession",
]
