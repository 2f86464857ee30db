"""User and session models for the identity provider."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from tradejournal.core.timezone import to_eastern


@dataclass
class User:
    """Registered journal owner. Every trade and entry is scoped to user_id."""

    user_id: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        self.email = self.email.strip().lower()


@dataclass
class AuthSession:
    """Bearer session issued on sign-up / sign-in; sign-out revokes it."""

    token: str
    user_id: str
    created_at: datetime
    expires_at: datetime
    revoked_at: Optional[datetime] = None

    def is_active(self, now: datetime) -> bool:
        if self.revoked_at is not None:
            return False
        return to_eastern(now) < to_eastern(self.expires_at)
