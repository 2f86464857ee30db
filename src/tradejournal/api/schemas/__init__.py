"""Pydantic schemas for API request/response."""

from tradejournal.api.schemas.auth import (
    CredentialsRequest,
    SessionResponse,
    UserResponse,
)
from tradejournal.api.schemas.trade import (
    TradeCreateRequest,
    TradeResponse,
    TradeListResponse,
)
from tradejournal.api.schemas.performance import (
    PositionResponse,
    RealizedItemResponse,
    RealizedPnlResponse,
    PerformanceResponse,
)
from tradejournal.api.schemas.journal import (
    JournalEntryCreateRequest,
    JournalEntryUpdateRequest,
    JournalEntryResponse,
    JournalPageResponse,
)

__all__ = [
    "CredentialsRequest",
    "SessionResponse",
    "UserResponse",
    "TradeCreateRequest",
    "TradeResponse",
    "TradeListResponse",
    "PositionResponse",
    "RealizedItemResponse",
    "RealizedPnlResponse",
    "PerformanceResponse",
    "JournalEntryCreateRequest",
    "JournalEntryUpdateRequest",
    "JournalEntryResponse",
    "JournalPageResponse",
]
