"""Identity service: sign-up, sign-in, sign-out and session resolution."""

import hashlib
import hmac
import logging
import secrets
import uuid
from datetime import timedelta
from typing import Optional

from tradejournal.core.timezone import now_eastern
from tradejournal.core.exceptions import AuthenticationError, ValidationError
from tradejournal.domain.models import User, AuthSession
from tradejournal.repositories.protocols import UserRepository, SessionRepository

logger = logging.getLogger(__name__)

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 260_000
_SALT_BYTES = 16
_TOKEN_BYTES = 32


def hash_password(password: str, iterations: int = PBKDF2_ITERATIONS, salt: Optional[str] = None) -> str:
    """Return an encoded ``algorithm$iterations$salt$digest`` password hash."""
    salt = salt or secrets.token_hex(_SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{PBKDF2_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoded hash in constant time."""
    try:
        algorithm, iterations, salt, expected = encoded.split("$", 3)
    except ValueError:
        return False
    if algorithm != PBKDF2_ALGORITHM:
        return False
    candidate = hash_password(password, iterations=int(iterations), salt=salt)
    return hmac.compare_digest(candidate.rsplit("$", 1)[1], expected)


class IdentityService:
    """
    Identity provider for the journal.

    Issues opaque bearer sessions scoped to a stable user_id. Every store
    and computation downstream is keyed on that id.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        session_ttl: timedelta = timedelta(days=7),
        password_min_length: int = 8,
        hash_iterations: int = PBKDF2_ITERATIONS,
    ):
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._session_ttl = session_ttl
        self._password_min_length = password_min_length
        self._hash_iterations = hash_iterations

    def sign_up(self, email: str, password: str) -> tuple[User, AuthSession]:
        """
        Register a new user and open a session for them.

        Raises ValidationError for a malformed email, a short password or an
        email that is already registered.
        """
        email = self._normalize_email(email)
        if len(password or "") < self._password_min_length:
            raise ValidationError(
                f"Password must be at least {self._password_min_length} characters"
            )
        if self._user_repo.get_by_email(email):
            raise ValidationError(f"An account already exists for {email}")

        user = self._user_repo.create(
            User(
                user_id=str(uuid.uuid4()),
                email=email,
                password_hash=hash_password(password, iterations=self._hash_iterations),
                created_at=now_eastern(),
            )
        )
        logger.info("Registered user %s", user.user_id)
        return user, self._open_session(user)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Verify credentials and open a new session."""
        user = self._user_repo.get_by_email((email or "").strip().lower())
        if user is None or not verify_password(password or "", user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return self._open_session(user)

    def sign_out(self, token: str) -> None:
        """Revoke a session. Unknown or already-revoked tokens are ignored."""
        self._session_repo.revoke(token, now_eastern())

    def get_session(self, token: Optional[str]) -> AuthSession:
        """Return the active session for a token or raise AuthenticationError."""
        if not token:
            raise AuthenticationError()
        session = self._session_repo.get_by_token(token)
        if session is None or not session.is_active(now_eastern()):
            raise AuthenticationError("Session is invalid or has expired")
        return session

    def resolve(self, token: Optional[str]) -> User:
        """Return the user owning an active session."""
        session = self.get_session(token)
        user = self._user_repo.get_by_id(session.user_id)
        if user is None:
            raise AuthenticationError("Session user no longer exists")
        return user

    def _open_session(self, user: User) -> AuthSession:
        issued_at = now_eastern()
        return self._session_repo.create(
            AuthSession(
                token=secrets.token_urlsafe(_TOKEN_BYTES),
                user_id=user.user_id,
                created_at=issued_at,
                expires_at=issued_at + self._session_ttl,
            )
        )

    @staticmethod
    def _normalize_email(email: str) -> str:
        email = (email or "").strip().lower()
        local, _, domain = email.partition("@")
        if not local or "." not in domain or " " in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return email
