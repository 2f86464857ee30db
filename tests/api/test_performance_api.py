"""
API tests for performance endpoints.

Tests cover:
- Performance table with quotes and totals
- Realized P/L for the as_of year
- as_of parsing errors
- Quote caching and degradation over HTTP
"""

from decimal import Decimal

from fastapi.testclient import TestClient

from tradejournal.api.deps import get_market_provider
from tradejournal.config.settings import Settings
from tradejournal.main import app
from tradejournal.services import create_provider


def _seed(client: TestClient, headers: dict) -> None:
    for payload in (
        {"ticker": "AAPL", "side": "BUY", "shares": "10", "price": "150", "traded_at": "2024-01-02T10:00:00"},
        {"ticker": "MSFT", "side": "BUY", "shares": "5", "price": "400", "traded_at": "2024-01-03T10:00:00"},
        {"ticker": "AAPL", "side": "SELL", "shares": "4", "price": "170", "traded_at": "2024-02-01T10:00:00"},
    ):
        assert client.post("/trades", json=payload, headers=headers).status_code == 201


class TestPerformanceAPI:
    """Tests for GET /performance."""

    def test_performance_table(self, client: TestClient, auth_headers):
        """
        GIVEN AAPL and MSFT positions
        WHEN I GET /performance as of mid-2024
        THEN positions carry prices, gain/loss and the year's realized P/L
        """
        _seed(client, auth_headers)

        response = client.get("/performance", params={"as_of": "2024-06-15"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        aapl, msft = data["positions"]
        assert aapl["ticker"] == "AAPL"
        assert Decimal(aapl["shares"]) == Decimal("6")
        assert Decimal(aapl["average_cost"]) == Decimal("150")
        assert Decimal(aapl["current_price"]) == Decimal("185.50")
        assert Decimal(aapl["gain_loss_pct"]) == Decimal("23.67")
        assert msft["ticker"] == "MSFT"
        assert Decimal(data["total_market_value"]) == Decimal("3004.25")
        assert Decimal(data["unrealized_pl"]) == Decimal("104.25")
        assert data["realized"]["year"] == 2024
        assert Decimal(data["realized"]["total"]) == Decimal("80.00")

    def test_empty_book(self, client: TestClient, auth_headers):
        data = client.get("/performance", headers=auth_headers).json()

        assert data["positions"] == []
        assert data["total_market_value"] is None

    def test_requires_auth(self, client: TestClient):
        assert client.get("/performance").status_code == 401


class TestRealizedAPI:
    def test_realized_other_year(self, client: TestClient, auth_headers):
        _seed(client, auth_headers)

        data = client.get(
            "/performance/realized", params={"as_of": "2025-01-10"}, headers=auth_headers
        ).json()

        assert data["year"] == 2025
        assert Decimal(data["total"]) == Decimal("0")
        assert data["items"] == []

    def test_invalid_as_of(self, client: TestClient, auth_headers):
        response = client.get(
            "/performance/realized", params={"as_of": "not a date"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestQuoteDegradationAPI:
    def test_quotes_cached_across_requests(self, client: TestClient, auth_headers, deterministic_provider):
        """
        GIVEN a priced AAPL position
        WHEN /performance is requested twice within the cache TTL
        THEN the quote provider is asked only once
        """
        _seed(client, auth_headers)

        client.get("/performance", params={"as_of": "2024-06-15"}, headers=auth_headers)
        client.get("/performance", params={"as_of": "2024-06-15"}, headers=auth_headers)

        assert deterministic_provider.calls == [["AAPL", "MSFT"]]

    def test_finnhub_without_key_renders_unpriced(self, client: TestClient, auth_headers):
        """
        GIVEN Finnhub is selected but no API key is configured
        WHEN I GET /performance
        THEN the table renders with every price unset instead of failing
        """
        _seed(client, auth_headers)
        provider = create_provider(Settings(
            database_url="sqlite://",
            market_data_provider="finnhub",
            finnhub_api_key=None,
        ))
        app.dependency_overrides[get_market_provider] = lambda: provider

        response = client.get("/performance", params={"as_of": "2024-06-15"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert [p["ticker"] for p in data["positions"]] == ["AAPL", "MSFT"]
        assert all(p["current_price"] is None for p in data["positions"])
        assert data["total_market_value"] is None
        assert Decimal(data["realized"]["total"]) == Decimal("80.00")
