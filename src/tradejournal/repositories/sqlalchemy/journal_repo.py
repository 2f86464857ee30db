"""SQLAlchemy implementation of JournalRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from tradejournal.core.timezone import to_eastern, to_naive_eastern
from tradejournal.domain.models import JournalEntry
from tradejournal.repositories.sqlalchemy.database import store_operation
from tradejournal.repositories.sqlalchemy.orm_models import JournalEntryORM


class SqlAlchemyJournalRepository:
    """SQLAlchemy-backed journal entry repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: JournalEntry) -> JournalEntry:
        """Persist a new entry."""
        orm_entry = JournalEntryORM(
            id=entry.entry_id,
            ticker=entry.ticker,
            content=entry.content,
            user_id=entry.user_id,
            created_at=to_naive_eastern(entry.created_at),
            updated_at=to_naive_eastern(entry.updated_at) if entry.updated_at else None,
        )
        with store_operation(self._db, "insert journal entry"):
            self._db.add(orm_entry)
            self._db.commit()
            self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def get_by_id(self, entry_id: str) -> Optional[JournalEntry]:
        """Retrieve entry by ID."""
        with store_operation(self._db, "get journal entry"):
            orm_entry = self._db.query(JournalEntryORM).filter(
                JournalEntryORM.id == entry_id
            ).first()
        return self._to_domain(orm_entry) if orm_entry else None

    def list_by_user(self, user_id: str, ticker: Optional[str] = None) -> list[JournalEntry]:
        """List a user's entries, newest first, optionally for one ticker."""
        with store_operation(self._db, "select journal entries"):
            query = self._db.query(JournalEntryORM).filter(JournalEntryORM.user_id == user_id)
            if ticker:
                query = query.filter(JournalEntryORM.ticker == ticker.strip().upper())
            orm_entries = query.order_by(JournalEntryORM.created_at.desc()).all()
        return [self._to_domain(e) for e in orm_entries]

    def update(self, entry: JournalEntry) -> JournalEntry:
        """Update an existing entry's content."""
        with store_operation(self._db, "update journal entry"):
            orm_entry = self._db.query(JournalEntryORM).filter(
                JournalEntryORM.id == entry.entry_id
            ).first()
            if not orm_entry:
                raise ValueError(f"Journal entry not found: {entry.entry_id}")
            orm_entry.content = entry.content
            orm_entry.updated_at = (
                to_naive_eastern(entry.updated_at) if entry.updated_at else None
            )
            self._db.commit()
            self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def delete(self, entry_id: str) -> None:
        """Delete an entry."""
        with store_operation(self._db, "delete journal entry"):
            self._db.query(JournalEntryORM).filter(
                JournalEntryORM.id == entry_id
            ).delete()
            self._db.commit()

    @staticmethod
    def _to_domain(orm: JournalEntryORM) -> JournalEntry:
        """Convert ORM model to domain model."""
        return JournalEntry(
            entry_id=orm.id,
            user_id=orm.user_id,
            ticker=orm.ticker,
            content=orm.content or "",
            created_at=to_eastern(orm.created_at),
            updated_at=to_eastern(orm.updated_at) if orm.updated_at else None,
        )
