"""Core utilities and shared functionality."""

from tradejournal.core.timezone import (
    now_eastern,
    to_eastern,
    to_naive_eastern,
    market_year,
    parse_datetime_eastern,
    EASTERN_TZ,
)
from tradejournal.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    InsufficientSharesError,
    StoreError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "to_naive_eastern",
    "market_year",
    "parse_datetime_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "InsufficientSharesError",
    "StoreError",
]
