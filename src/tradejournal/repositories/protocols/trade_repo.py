"""Trade repository protocol."""

from typing import Protocol, Optional

from tradejournal.domain.models import Trade


class TradeRepository(Protocol):
    """Interface for trade data access (append-only)."""

    def create(self, trade: Trade) -> Trade:
        """Persist a new trade and return the stored record."""
        ...

    def get_by_id(self, trade_id: str) -> Optional[Trade]:
        """Retrieve trade by ID."""
        ...

    def list_by_user(self, user_id: str) -> list[Trade]:
        """List all trades owned by a user, ordered by trade time."""
        ...

    def list_by_user_and_ticker(self, user_id: str, ticker: str) -> list[Trade]:
        """List a user's trades for one ticker, ordered by trade time."""
        ...
