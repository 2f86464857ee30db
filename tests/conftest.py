"""
Pytest configuration and fixtures for trade journal tests.

This module provides:
- In-memory SQLite database fixtures
- Factory helpers for users, trades and journal entries
- Deterministic and failing market data providers
- Time helpers for Eastern timezone
- Service and repository fixtures
"""

import os

# Keep the app module from touching ~/.trade-journal and keep hashing cheap
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from tradejournal.main import app
from tradejournal.api.deps import get_market_provider, reset_market_data
from tradejournal.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from tradejournal.repositories.sqlalchemy import orm_models  # noqa: F401
from tradejournal.repositories.sqlalchemy import (
    SqlAlchemyTradeRepository,
    SqlAlchemyJournalRepository,
    SqlAlchemyUserRepository,
    SqlAlchemySessionRepository,
)
from tradejournal.providers.stub_provider import StubMarketDataProvider
from tradejournal.services import (
    IdentityService,
    JournalService,
    MarketDataService,
    PerformanceService,
    TradeService,
    TradeCreate,
)
from tradejournal.domain.models import Trade, TradeSide, User
from tradejournal.domain.views import Quote
from tradejournal.core.timezone import EASTERN_TZ
from tradejournal.config.settings import reset_settings

TEST_HASH_ITERATIONS = 1000


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def trade_repo(test_session) -> SqlAlchemyTradeRepository:
    return SqlAlchemyTradeRepository(test_session)


@pytest.fixture
def journal_repo(test_session) -> SqlAlchemyJournalRepository:
    return SqlAlchemyJournalRepository(test_session)


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def session_repo(test_session) -> SqlAlchemySessionRepository:
    return SqlAlchemySessionRepository(test_session)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Provides fixed quotes with no randomness. Symbols outside FIXED_QUOTES
    have no quote, like an unknown ticker at a real provider.
    """

    FIXED_QUOTES = {
        "AAPL": (Decimal("185.50"), Decimal("184.25")),
        "GOOGL": (Decimal("142.75"), Decimal("141.50")),
        "MSFT": (Decimal("378.25"), Decimal("376.80")),
        "TSLA": (Decimal("248.75"), Decimal("250.10")),
        "SPY": (Decimal("485.25"), Decimal("484.10")),
    }

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 15, 16, 0, 0)
        self.calls: list[list[str]] = []

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return deterministic quotes for requested symbols."""
        self.calls.append(list(symbols))
        result = {}
        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in self.FIXED_QUOTES:
                last_price, prev_close = self.FIXED_QUOTES[upper_symbol]
                result[upper_symbol] = Quote(
                    symbol=upper_symbol,
                    last_price=last_price,
                    prev_close=prev_close,
                    as_of=self._as_of,
                )
        return result


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def market_provider() -> StubMarketDataProvider:
    """Provide test MarketDataProvider with fixed seed."""
    return StubMarketDataProvider(seed=42)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def identity_service(user_repo, session_repo) -> IdentityService:
    """Provide test IdentityService with cheap password hashing."""
    return IdentityService(
        user_repo=user_repo,
        session_repo=session_repo,
        hash_iterations=TEST_HASH_ITERATIONS,
    )


@pytest.fixture
def trade_service(trade_repo) -> TradeService:
    return TradeService(trade_repo=trade_repo)


@pytest.fixture
def journal_service(journal_repo) -> JournalService:
    return JournalService(journal_repo=journal_repo, page_size=5)


@pytest.fixture
def market_data_service(deterministic_provider) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
    )


@pytest.fixture
def performance_service(trade_repo, market_data_service) -> PerformanceService:
    return PerformanceService(
        trade_repo=trade_repo,
        market_data_service=market_data_service,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(identity_service) -> Callable[..., User]:
    """Factory for registering test users."""

    def _create_user(email: Optional[str] = None, password: str = "correct-horse") -> User:
        if email is None:
            email = f"trader-{uuid.uuid4().hex[:8]}@example.com"
        user, _ = identity_service.sign_up(email, password)
        return user

    return _create_user


@pytest.fixture
def sample_user(user_factory) -> User:
    return user_factory(email="trader@example.com")


@pytest.fixture
def trade_factory(trade_service) -> Callable[..., Trade]:
    """Factory for recording trades through the service boundary."""

    def _record(
        user_id: str,
        ticker: str,
        side: TradeSide,
        shares: str,
        price: str,
        traded_at: Optional[datetime] = None,
    ) -> Trade:
        return trade_service.record_trade(
            user_id,
            TradeCreate(
                ticker=ticker,
                side=side,
                shares=Decimal(shares),
                price=Decimal(price),
                traded_at=traded_at,
            ),
        )

    return _record


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, deterministic_provider) -> TestClient:
    """Provide FastAPI test client with test database and fixed quotes."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_provider] = lambda: deterministic_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_market_data()


@pytest.fixture
def auth_headers(client) -> dict[str, str]:
    """Sign up a user through the API and return its bearer header."""
    response = client.post("/auth/signup", json={
        "email": "api-trader@example.com",
        "password": "correct-horse",
    })
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def make_trade(
    ticker: str,
    side: TradeSide,
    shares: str,
    price: str,
    traded_at: datetime,
    user_id: str = "user-1",
    trade_id: Optional[str] = None,
) -> Trade:
    """Build an in-memory Trade for engine tests."""
    return Trade(
        trade_id=trade_id or str(uuid.uuid4()),
        user_id=user_id,
        ticker=ticker,
        side=side,
        shares=Decimal(shares),
        price=Decimal(price),
        traded_at=traded_at,
    )
