"""Pydantic schemas for performance endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class PositionResponse(BaseModel):
    """Response schema for a single open position."""

    model_config = {"from_attributes": True}

    ticker: str
    shares: Decimal
    average_cost: Decimal
    total_cost: Decimal
    current_price: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    gain_loss: Optional[Decimal] = None
    gain_loss_pct: Optional[Decimal] = None


class RealizedItemResponse(BaseModel):
    """Response schema for one ticker's year-to-date realized P/L."""

    model_config = {"from_attributes": True}

    ticker: str
    buy_shares: Decimal
    sell_shares: Decimal
    avg_buy_price: Decimal
    avg_sell_price: Decimal
    matched_shares: Decimal
    realized_pl: Decimal


class RealizedPnlResponse(BaseModel):
    """Response schema for year-to-date realized P/L."""

    model_config = {"from_attributes": True}

    year: int
    total: Decimal
    items: list[RealizedItemResponse]
    as_of: Optional[datetime] = None


class PerformanceResponse(BaseModel):
    """Response schema for the performance table."""

    model_config = {"from_attributes": True}

    positions: list[PositionResponse]
    realized: RealizedPnlResponse
    total_cost: Decimal
    total_market_value: Optional[Decimal] = None
    unrealized_pl: Optional[Decimal] = None
    as_of: Optional[datetime] = None
