"""Pydantic schemas for journal endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class JournalEntryCreateRequest(BaseModel):
    """Request schema for creating a journal entry."""

    ticker: str = Field(..., max_length=20, description="Ticker the note is about")
    content: str = Field(default="", description="Rich-text or plain-text note body")

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class JournalEntryUpdateRequest(BaseModel):
    """Request schema for editing an entry's content."""

    content: str = Field(..., description="Replacement note body")


class JournalEntryResponse(BaseModel):
    """Response schema for a journal entry."""

    model_config = {"from_attributes": True}

    entry_id: str
    ticker: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JournalPageResponse(BaseModel):
    """Response schema for one page of entries."""

    entries: list[JournalEntryResponse]
    total: int
    offset: int
    limit: int
    has_more: bool
