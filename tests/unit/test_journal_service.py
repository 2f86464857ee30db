"""
Unit tests for JournalService.

Tests cover:
- Create, edit and delete entries
- Ownership: another user's entry is not found
- Listing newest first, ticker filter, "display more" paging
"""

from datetime import timedelta

import pytest

from tradejournal.core.exceptions import ValidationError, NotFoundError
from tradejournal.domain.models import JournalEntry
from tradejournal.services import JournalService

from tests.conftest import eastern_datetime


class TestJournalCrud:
    """Tests for entry create/update/delete."""

    def test_add_entry(self, journal_service: JournalService, sample_user):
        entry = journal_service.add_entry(sample_user.user_id, "aapl", "<p>Bought the dip</p>")

        assert entry.ticker == "AAPL"
        assert entry.content == "<p>Bought the dip</p>"
        assert entry.created_at is not None
        assert entry.updated_at is None

    @pytest.mark.parametrize("ticker", ["", "   "])
    def test_add_entry_requires_ticker(self, journal_service, sample_user, ticker):
        with pytest.raises(ValidationError) as exc_info:
            journal_service.add_entry(sample_user.user_id, ticker, "note")

        assert exc_info.value.message == "Please select a ticker"

    def test_update_replaces_content_only(self, journal_service, sample_user):
        entry = journal_service.add_entry(sample_user.user_id, "AAPL", "first")

        updated = journal_service.update_entry(sample_user.user_id, entry.entry_id, "second")

        assert updated.entry_id == entry.entry_id
        assert updated.ticker == "AAPL"
        assert updated.content == "second"
        assert updated.updated_at is not None
        assert journal_service.get_entry(sample_user.user_id, entry.entry_id).content == "second"

    def test_delete_entry(self, journal_service, sample_user):
        entry = journal_service.add_entry(sample_user.user_id, "AAPL", "gone soon")

        journal_service.delete_entry(sample_user.user_id, entry.entry_id)

        with pytest.raises(NotFoundError):
            journal_service.get_entry(sample_user.user_id, entry.entry_id)

    def test_unknown_entry(self, journal_service, sample_user):
        with pytest.raises(NotFoundError):
            journal_service.update_entry(sample_user.user_id, "missing", "x")

    def test_other_users_entry_is_not_found(self, journal_service, user_factory):
        """
        GIVEN an entry owned by alice
        WHEN bob tries to edit or delete it
        THEN NotFoundError is raised and the entry is unchanged
        """
        alice = user_factory()
        bob = user_factory()
        entry = journal_service.add_entry(alice.user_id, "AAPL", "mine")

        with pytest.raises(NotFoundError):
            journal_service.update_entry(bob.user_id, entry.entry_id, "hijacked")
        with pytest.raises(NotFoundError):
            journal_service.delete_entry(bob.user_id, entry.entry_id)

        assert journal_service.get_entry(alice.user_id, entry.entry_id).content == "mine"


class TestJournalListing:
    """Tests for listing and paging."""

    @pytest.fixture
    def seeded(self, journal_repo, sample_user) -> list[JournalEntry]:
        """Seven entries with increasing timestamps, alternating tickers."""
        start = eastern_datetime(2024, 1, 1)
        entries = []
        for i in range(7):
            entries.append(journal_repo.create(JournalEntry(
                entry_id=f"e{i}",
                user_id=sample_user.user_id,
                ticker="AAPL" if i % 2 == 0 else "MSFT",
                content=f"note {i}",
                created_at=start + timedelta(hours=i),
            )))
        return entries

    def test_newest_first_with_default_page(self, journal_service, sample_user, seeded):
        page = journal_service.list_entries(sample_user.user_id)

        assert [e.entry_id for e in page.entries] == ["e6", "e5", "e4", "e3", "e2"]
        assert page.total == 7
        assert page.limit == 5
        assert page.has_more is True

    def test_display_more(self, journal_service, sample_user, seeded):
        page = journal_service.list_entries(sample_user.user_id, offset=5)

        assert [e.entry_id for e in page.entries] == ["e1", "e0"]
        assert page.has_more is False

    def test_ticker_filter(self, journal_service, sample_user, seeded):
        page = journal_service.list_entries(sample_user.user_id, ticker="msft")

        assert [e.entry_id for e in page.entries] == ["e5", "e3", "e1"]
        assert page.total == 3

    def test_invalid_paging(self, journal_service, sample_user):
        with pytest.raises(ValidationError):
            journal_service.list_entries(sample_user.user_id, offset=-1)
        with pytest.raises(ValidationError):
            journal_service.list_entries(sample_user.user_id, limit=0)

    def test_entries_scoped_to_user(self, journal_service, user_factory, seeded):
        stranger = user_factory()

        assert journal_service.list_entries(stranger.user_id).total == 0
