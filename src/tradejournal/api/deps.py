"""Dependency injection for FastAPI."""

from datetime import timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tradejournal.config.settings import get_settings
from tradejournal.domain.models import User
from tradejournal.providers import MarketDataProvider
from tradejournal.repositories.sqlalchemy.database import get_db
from tradejournal.repositories.sqlalchemy import (
    SqlAlchemyTradeRepository,
    SqlAlchemyJournalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemySessionRepository,
)
from tradejournal.services import (
    IdentityService,
    JournalService,
    MarketDataService,
    PerformanceService,
    TradeService,
    create_provider,
)

_bearer = HTTPBearer(auto_error=False)

_market_provider: Optional[MarketDataProvider] = None
_market_data_service: Optional[MarketDataService] = None


def get_trade_repo(db: Session = Depends(get_db)) -> SqlAlchemyTradeRepository:
    """Provide TradeRepository instance."""
    return SqlAlchemyTradeRepository(db)


def get_journal_repo(db: Session = Depends(get_db)) -> SqlAlchemyJournalRepository:
    """Provide JournalRepository instance."""
    return SqlAlchemyJournalRepository(db)


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


def get_session_repo(db: Session = Depends(get_db)) -> SqlAlchemySessionRepository:
    return SqlAlchemySessionRepository(db)


def get_market_provider() -> MarketDataProvider:
    """Provide the process-wide MarketDataProvider selected by settings."""
    global _market_provider
    if _market_provider is None:
        _market_provider = create_provider(get_settings())
    return _market_provider


def get_market_data_service(
    provider: MarketDataProvider = Depends(get_market_provider),
) -> MarketDataService:
    """Provide the process-wide MarketDataService."""
    global _market_data_service
    if _market_data_service is None or _market_data_service.provider is not provider:
        _market_data_service = MarketDataService(
            provider=provider,
            cache_ttl_seconds=get_settings().market_data_cache_ttl_seconds,
        )
    return _market_data_service


def reset_market_data() -> None:
    """Drop the cached provider and service (for tests or a settings change)."""
    global _market_provider, _market_data_service
    _market_provider = None
    _market_data_service = None


def get_identity_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    session_repo: SqlAlchemySessionRepository = Depends(get_session_repo),
) -> IdentityService:
    """Provide IdentityService instance."""
    settings = get_settings()
    return IdentityService(
        user_repo=user_repo,
        session_repo=session_repo,
        session_ttl=timedelta(hours=settings.session_ttl_hours),
        password_min_length=settings.password_min_length,
        hash_iterations=settings.password_hash_iterations,
    )


def get_trade_service(
    trade_repo: SqlAlchemyTradeRepository = Depends(get_trade_repo),
) -> TradeService:
    """Provide TradeService instance."""
    return TradeService(
        trade_repo=trade_repo,
        enforce_sell_holdings=get_settings().enforce_sell_holdings,
    )


def get_journal_service(
    journal_repo: SqlAlchemyJournalRepository = Depends(get_journal_repo),
) -> JournalService:
    """Provide JournalService instance."""
    return JournalService(
        journal_repo=journal_repo,
        page_size=get_settings().journal_page_size,
    )


def get_performance_service(
    trade_repo: SqlAlchemyTradeRepository = Depends(get_trade_repo),
    market_data_service: MarketDataService = Depends(get_market_data_service),
) -> PerformanceService:
    """Provide PerformanceService instance."""
    return PerformanceService(
        trade_repo=trade_repo,
        market_data_service=market_data_service,
    )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityService = Depends(get_identity_service),
) -> User:
    """Resolve the bearer token to a user; raises AuthenticationError (401)."""
    return identity.resolve(token)
