"""User and session repository protocols."""

from datetime import datetime
from typing import Protocol, Optional

from tradejournal.domain.models import User, AuthSession


class UserRepository(Protocol):
    """Interface for user data access."""

    def create(self, user: User) -> User:
        """Persist a new user."""
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by (lowercased) email."""
        ...


class SessionRepository(Protocol):
    """Interface for auth session data access."""

    def create(self, session: AuthSession) -> AuthSession:
        """Persist a newly issued session."""
        ...

    def get_by_token(self, token: str) -> Optional[AuthSession]:
        """Retrieve session by bearer token."""
        ...

    def revoke(self, token: str, revoked_at: datetime) -> None:
        """Mark a session revoked; no-op when unknown or already revoked."""
        ...
