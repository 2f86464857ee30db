"""Journal entry repository protocol."""

from typing import Protocol, Optional

from tradejournal.domain.models import JournalEntry


class JournalRepository(Protocol):
    """Interface for journal entry data access."""

    def create(self, entry: JournalEntry) -> JournalEntry:
        """Persist a new entry."""
        ...

    def get_by_id(self, entry_id: str) -> Optional[JournalEntry]:
        """Retrieve entry by ID."""
        ...

    def list_by_user(self, user_id: str, ticker: Optional[str] = None) -> list[JournalEntry]:
        """List a user's entries, newest first, optionally for one ticker."""
        ...

    def update(self, entry: JournalEntry) -> JournalEntry:
        """Update an existing entry."""
        ...

    def delete(self, entry_id: str) -> None:
        """Delete an entry (hard delete)."""
        ...
