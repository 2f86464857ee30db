"""Pydantic schemas for auth endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Request schema for sign-up and sign-in."""

    email: str = Field(..., max_length=254, description="Account email")
    password: str = Field(..., max_length=256, description="Account password")


class UserResponse(BaseModel):
    """Response schema for a user."""

    model_config = {"from_attributes": True}

    user_id: str
    email: str
    created_at: Optional[datetime] = None


class SessionResponse(BaseModel):
    """Response schema for an issued session."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponse
