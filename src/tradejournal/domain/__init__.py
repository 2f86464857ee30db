"""Domain layer - pure business models with no external dependencies."""

from tradejournal.domain.models import (
    TradeSide,
    Trade,
    JournalEntry,
    User,
    AuthSession,
)

__all__ = [
    "TradeSide",
    "Trade",
    "JournalEntry",
    "User",
    "AuthSession",
]
