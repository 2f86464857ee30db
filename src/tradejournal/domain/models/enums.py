"""Enumerations for domain models."""

from enum import Enum


class TradeSide(str, Enum):
    """Direction of a trade."""

    BUY = "BUY"
    SELL = "SELL"
