"""Pydantic schemas for trade endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradejournal.domain.models.enums import TradeSide


class TradeCreateRequest(BaseModel):
    """Request schema for recording a trade."""

    ticker: str = Field(..., min_length=1, max_length=20, description="Stock ticker")
    side: TradeSide = Field(..., description="BUY or SELL")
    shares: Decimal = Field(..., gt=0, description="Number of shares")
    price: Decimal = Field(..., gt=0, description="Price per share")
    traded_at: Optional[datetime] = Field(
        default=None,
        description="Execution time (US/Eastern when naive); defaults to now",
    )

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class TradeResponse(BaseModel):
    """Response schema for a trade."""

    model_config = {"from_attributes": True}

    trade_id: str
    ticker: str
    side: TradeSide
    shares: Decimal
    price: Decimal
    traded_at: datetime


class TradeListResponse(BaseModel):
    """Response schema for trade listing."""

    trades: list[TradeResponse]
    total: int
