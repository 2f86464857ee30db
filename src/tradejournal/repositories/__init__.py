"""Repository layer - data access abstractions and implementations."""

from tradejournal.repositories.protocols import (
    TradeRepository,
    JournalRepository,
    UserRepository,
    SessionRepository,
)

__all__ = [
    "TradeRepository",
    "JournalRepository",
    "UserRepository",
    "SessionRepository",
]
