"""SQLAlchemy implementations of UserRepository and SessionRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from tradejournal.core.timezone import to_eastern, to_naive_eastern
from tradejournal.domain.models import User, AuthSession
from tradejournal.repositories.sqlalchemy.database import store_operation
from tradejournal.repositories.sqlalchemy.orm_models import UserORM, AuthSessionORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user."""
        orm_user = UserORM(
            user_id=user.user_id,
            email=user.email,
            password_hash=user.password_hash,
            created_at=to_naive_eastern(user.created_at),
        )
        with store_operation(self._db, "insert user"):
            self._db.add(orm_user)
            self._db.commit()
            self._db.refresh(orm_user)
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        with store_operation(self._db, "get user"):
            orm_user = self._db.query(UserORM).filter(UserORM.user_id == user_id).first()
        return self._to_domain(orm_user) if orm_user else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by email."""
        with store_operation(self._db, "get user by email"):
            orm_user = self._db.query(UserORM).filter(
                UserORM.email == email.strip().lower()
            ).first()
        return self._to_domain(orm_user) if orm_user else None

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        return User(
            user_id=orm.user_id,
            email=orm.email,
            password_hash=orm.password_hash,
            created_at=to_eastern(orm.created_at),
        )


class SqlAlchemySessionRepository:
    """SQLAlchemy-backed auth session repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, session: AuthSession) -> AuthSession:
        """Persist a newly issued session."""
        orm_session = AuthSessionORM(
            token=session.token,
            user_id=session.user_id,
            created_at=to_naive_eastern(session.created_at),
            expires_at=to_naive_eastern(session.expires_at),
            revoked_at=None,
        )
        with store_operation(self._db, "insert session"):
            self._db.add(orm_session)
            self._db.commit()
            self._db.refresh(orm_session)
        return self._to_domain(orm_session)

    def get_by_token(self, token: str) -> Optional[AuthSession]:
        """Retrieve session by bearer token."""
        with store_operation(self._db, "get session"):
            orm_session = self._db.query(AuthSessionORM).filter(
                AuthSessionORM.token == token
            ).first()
        return self._to_domain(orm_session) if orm_session else None

    def revoke(self, token: str, revoked_at: datetime) -> None:
        """Mark a session revoked."""
        with store_operation(self._db, "revoke session"):
            orm_session = self._db.query(AuthSessionORM).filter(
                AuthSessionORM.token == token
            ).first()
            if orm_session is None or orm_session.revoked_at is not None:
                return
            orm_session.revoked_at = to_naive_eastern(revoked_at)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: AuthSessionORM) -> AuthSession:
        return AuthSession(
            token=orm.token,
            user_id=orm.user_id,
            created_at=to_eastern(orm.created_at),
            expires_at=to_eastern(orm.expires_at),
            revoked_at=to_eastern(orm.revoked_at) if orm.revoked_at else None,
        )
