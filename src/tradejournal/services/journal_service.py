"""Journal service for per-ticker notes."""

import uuid
from typing import Optional

from tradejournal.core.timezone import now_eastern
from tradejournal.core.exceptions import ValidationError, NotFoundError
from tradejournal.domain.models import JournalEntry
from tradejournal.domain.views import JournalPage
from tradejournal.repositories.protocols import JournalRepository


class JournalService:
    """
    Service for journal entry CRUD.

    Entries are owned by one user; another user's entry is reported as
    not found rather than forbidden.
    """

    def __init__(self, journal_repo: JournalRepository, page_size: int = 5):
        self._journal_repo = journal_repo
        self._page_size = page_size

    def add_entry(self, user_id: str, ticker: str, content: str) -> JournalEntry:
        """Create a new entry for a ticker."""
        if not ticker or not ticker.strip():
            raise ValidationError("Please select a ticker")
        return self._journal_repo.create(
            JournalEntry(
                entry_id=str(uuid.uuid4()),
                user_id=user_id,
                ticker=ticker,
                content=content or "",
                created_at=now_eastern(),
            )
        )

    def get_entry(self, user_id: str, entry_id: str) -> JournalEntry:
        entry = self._journal_repo.get_by_id(entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError("Journal entry", entry_id)
        return entry

    def update_entry(self, user_id: str, entry_id: str, content: str) -> JournalEntry:
        """Replace an entry's content. The ticker is fixed at creation."""
        entry = self.get_entry(user_id, entry_id)
        entry.content = content or ""
        entry.updated_at = now_eastern()
        return self._journal_repo.update(entry)

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        self.get_entry(user_id, entry_id)
        self._journal_repo.delete(entry_id)

    def list_entries(
        self,
        user_id: str,
        ticker: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> JournalPage:
        """
        Entries newest first, optionally for one ticker.

        Paged for "display more": pass the next offset to continue.
        """
        if offset < 0:
            raise ValidationError("offset must be >= 0")
        limit = self._page_size if limit is None else limit
        if limit < 1:
            raise ValidationError("limit must be >= 1")

        entries = self._journal_repo.list_by_user(user_id, ticker=ticker or None)
        return JournalPage(
            entries=entries[offset:offset + limit],
            total=len(entries),
            offset=offset,
            limit=limit,
        )
