"""Application context for in-process session management.

Owns one authoritative, immutable snapshot of the signed-in user's trades,
positions, realized P/L and journal entries. Every successful mutation
replaces the snapshot with one recomputed from scratch; a failed mutation
leaves the previous snapshot in place and re-raises.
"""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, TypeVar

from tradejournal.config.settings import Settings, set_settings, get_settings
from tradejournal.core.exceptions import AppError, AuthenticationError
from tradejournal.core.timezone import now_eastern
from tradejournal.domain.models import AuthSession, JournalEntry, Trade, User
from tradejournal.domain.views import PositionView, RealizedPnlView
from tradejournal.repositories.sqlalchemy.database import (
    init_db_with_path,
    reset_database,
    get_session,
)
from tradejournal.repositories.sqlalchemy import (
    SqlAlchemyTradeRepository,
    SqlAlchemyJournalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemySessionRepository,
)
from tradejournal.providers import MarketDataProvider
from tradejournal.services import (
    IdentityService,
    JournalService,
    MarketDataService,
    PerformanceService,
    TradeCreate,
    TradeService,
    create_provider,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class JournalState:
    """Everything the signed-in user sees, derived in one pass."""

    user: User
    trades: tuple[Trade, ...] = ()
    positions: tuple[PositionView, ...] = ()
    realized: Optional[RealizedPnlView] = None
    journal_entries: tuple[JournalEntry, ...] = ()
    refreshed_at: Optional[datetime] = None

    def entries_for(self, ticker: Optional[str] = None) -> list[JournalEntry]:
        """Journal entries newest first, optionally for one ticker."""
        if not ticker:
            return list(self.journal_entries)
        ticker = ticker.strip().upper()
        return [e for e in self.journal_entries if e.ticker == ticker]

    def trade_history(self, ticker: str) -> list[Trade]:
        ticker = ticker.strip().upper()
        return [t for t in self.trades if t.ticker == ticker]


class AppContext:
    """
    Application context providing in-process access to all services.

    Entry point for non-HTTP clients. Holds at most one signed-in session.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        provider: Optional[MarketDataProvider] = None,
        clock: Callable[[], datetime] = now_eastern,
    ):
        self._data_dir = data_dir
        self._provider = provider
        self._clock = clock
        self._db = None
        self._initialized = False

        self._auth_session: Optional[AuthSession] = None
        self._state: Optional[JournalState] = None

        # Service instances (lazy initialized)
        self._identity_service: Optional[IdentityService] = None
        self._trade_service: Optional[TradeService] = None
        self._journal_service: Optional[JournalService] = None
        self._market_data_service: Optional[MarketDataService] = None
        self._performance_service: Optional[PerformanceService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """Initialize or reinitialize the application with a data directory."""
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)

        reset_database()
        init_db_with_path(settings.get_data_dir() / "journal.db")

        self.close()
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def data_dir(self) -> Path:
        return get_settings().get_data_dir()

    def _get_db(self):
        if self._db is None:
            self._db = get_session()
        return self._db

    # Service accessors

    @property
    def identity(self) -> IdentityService:
        if self._identity_service is None:
            settings = get_settings()
            self._identity_service = IdentityService(
                user_repo=SqlAlchemyUserRepository(self._get_db()),
                session_repo=SqlAlchemySessionRepository(self._get_db()),
                session_ttl=timedelta(hours=settings.session_ttl_hours),
                password_min_length=settings.password_min_length,
                hash_iterations=settings.password_hash_iterations,
            )
        return self._identity_service

    @property
    def trades(self) -> TradeService:
        if self._trade_service is None:
            self._trade_service = TradeService(
                trade_repo=SqlAlchemyTradeRepository(self._get_db()),
                enforce_sell_holdings=get_settings().enforce_sell_holdings,
            )
        return self._trade_service

    @property
    def journal(self) -> JournalService:
        if self._journal_service is None:
            self._journal_service = JournalService(
                journal_repo=SqlAlchemyJournalRepository(self._get_db()),
                page_size=get_settings().journal_page_size,
            )
        return self._journal_service

    @property
    def market_data(self) -> MarketDataService:
        if self._market_data_service is None:
            settings = get_settings()
            self._market_data_service = MarketDataService(
                provider=self._provider or create_provider(settings),
                cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
            )
        return self._market_data_service

    @property
    def performance(self) -> PerformanceService:
        if self._performance_service is None:
            self._performance_service = PerformanceService(
                trade_repo=SqlAlchemyTradeRepository(self._get_db()),
                market_data_service=self.market_data,
            )
        return self._performance_service

    # Session

    @property
    def state(self) -> JournalState:
        """Current snapshot; raises AuthenticationError when signed out."""
        if self._state is None:
            raise AuthenticationError()
        return self._state

    @property
    def is_signed_in(self) -> bool:
        return self._state is not None

    def sign_up(self, email: str, password: str) -> JournalState:
        user, auth_session = self.identity.sign_up(email, password)
        return self._start_session(user, auth_session)

    def sign_in(self, email: str, password: str) -> JournalState:
        auth_session = self.identity.sign_in(email, password)
        user = self.identity.resolve(auth_session.token)
        return self._start_session(user, auth_session)

    def sign_out(self) -> None:
        """Revoke the session and drop the snapshot."""
        if self._auth_session is not None:
            self.identity.sign_out(self._auth_session.token)
        self._auth_session = None
        self._state = None

    def refresh(self) -> JournalState:
        """Reload trades and entries and recompute every derived value."""
        self._state = self._load(self.state.user)
        return self._state

    # Mutations

    def record_trade(self, data: TradeCreate) -> Trade:
        user = self.state.user
        trade = self._mutate(lambda: self.trades.record_trade(user.user_id, data))
        self._state = self._derive(
            user,
            tuple(self.trades.list_trades(user.user_id)),
            self._state.journal_entries,
        )
        return trade

    def add_journal_entry(self, ticker: str, content: str) -> JournalEntry:
        user = self.state.user
        entry = self._mutate(lambda: self.journal.add_entry(user.user_id, ticker, content))
        self._replace_entries((entry,) + self._state.journal_entries)
        return entry

    def update_journal_entry(self, entry_id: str, content: str) -> JournalEntry:
        user = self.state.user
        entry = self._mutate(lambda: self.journal.update_entry(user.user_id, entry_id, content))
        self._replace_entries(
            tuple(entry if e.entry_id == entry_id else e for e in self._state.journal_entries)
        )
        return entry

    def delete_journal_entry(self, entry_id: str) -> None:
        user = self.state.user
        self._mutate(lambda: self.journal.delete_entry(user.user_id, entry_id))
        self._replace_entries(
            tuple(e for e in self._state.journal_entries if e.entry_id != entry_id)
        )

    def close(self) -> None:
        """Clean up resources and drop cached services."""
        if self._db is not None:
            self._db.close()
            self._db = None
        self._identity_service = None
        self._trade_service = None
        self._journal_service = None
        self._market_data_service = None
        self._performance_service = None
        self._auth_session = None
        self._state = None

    # Internals

    def _start_session(self, user: User, auth_session: AuthSession) -> JournalState:
        self._auth_session = auth_session
        self._state = self._load(user)
        return self._state

    def _load(self, user: User) -> JournalState:
        trades = tuple(self.trades.list_trades(user.user_id))
        entries = tuple(self.journal.list_entries(user.user_id, limit=10**9).entries)
        return self._derive(user, trades, entries)

    def _derive(
        self,
        user: User,
        trades: tuple[Trade, ...],
        entries: tuple[JournalEntry, ...],
    ) -> JournalState:
        view = self.performance.build_performance(trades, self._clock())
        return JournalState(
            user=user,
            trades=trades,
            positions=tuple(view.positions),
            realized=view.realized,
            journal_entries=entries,
            refreshed_at=self._clock(),
        )

    def _replace_entries(self, entries: tuple[JournalEntry, ...]) -> None:
        self._state = dataclasses.replace(self._state, journal_entries=entries)

    @staticmethod
    def _mutate(action: Callable[[], T]) -> T:
        try:
            return action()
        except AppError as exc:
            logger.warning("Action failed, keeping previous state: %s", exc.message)
            raise


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
