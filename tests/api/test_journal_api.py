"""
API tests for journal endpoints.

Tests cover:
- Create, edit and delete entries
- Listing with ticker filter and "display more" paging
- Ownership and error responses (400, 404)
"""

from fastapi.testclient import TestClient


def _add(client: TestClient, headers: dict, ticker: str = "AAPL", content: str = "<p>note</p>"):
    return client.post("/journal", json={"ticker": ticker, "content": content}, headers=headers)


class TestJournalCrudAPI:
    def test_create_entry(self, client: TestClient, auth_headers):
        response = _add(client, auth_headers, ticker="aapl")

        assert response.status_code == 201
        data = response.json()
        assert data["ticker"] == "AAPL"
        assert data["content"] == "<p>note</p>"
        assert data["entry_id"]

    def test_create_requires_ticker(self, client: TestClient, auth_headers):
        response = _add(client, auth_headers, ticker="")

        assert response.status_code == 400
        assert response.json()["message"] == "Please select a ticker"

    def test_update_and_delete(self, client: TestClient, auth_headers):
        entry_id = _add(client, auth_headers).json()["entry_id"]

        updated = client.patch(f"/journal/{entry_id}", json={"content": "edited"}, headers=auth_headers)
        assert updated.status_code == 200
        assert updated.json()["content"] == "edited"
        assert updated.json()["updated_at"] is not None

        deleted = client.delete(f"/journal/{entry_id}", headers=auth_headers)
        assert deleted.status_code == 204

        missing = client.delete(f"/journal/{entry_id}", headers=auth_headers)
        assert missing.status_code == 404
        assert missing.json()["error"] == "NOT_FOUND"

    def test_other_user_cannot_edit(self, client: TestClient, auth_headers):
        entry_id = _add(client, auth_headers).json()["entry_id"]
        other = client.post("/auth/signup", json={"email": "other@example.com", "password": "correct-horse"})
        other_headers = {"Authorization": f"Bearer {other.json()['access_token']}"}

        response = client.patch(f"/journal/{entry_id}", json={"content": "mine now"}, headers=other_headers)

        assert response.status_code == 404


class TestJournalListingAPI:
    def test_display_more(self, client: TestClient, auth_headers):
        """
        GIVEN seven entries
        WHEN I page through with the default page size
        THEN the first page has five and reports more, the second has two
        """
        for i in range(7):
            _add(client, auth_headers, ticker="AAPL" if i % 2 == 0 else "MSFT", content=f"n{i}")

        first = client.get("/journal", headers=auth_headers).json()
        assert len(first["entries"]) == 5
        assert first["total"] == 7
        assert first["has_more"] is True

        second = client.get("/journal", params={"offset": 5}, headers=auth_headers).json()
        assert len(second["entries"]) == 2
        assert second["has_more"] is False

        contents = [e["content"] for e in first["entries"] + second["entries"]]
        assert sorted(contents) == [f"n{i}" for i in range(7)]

    def test_ticker_filter(self, client: TestClient, auth_headers):
        _add(client, auth_headers, ticker="AAPL")
        _add(client, auth_headers, ticker="MSFT")

        data = client.get("/journal", params={"ticker": "msft"}, headers=auth_headers).json()

        assert [e["ticker"] for e in data["entries"]] == ["MSFT"]

    def test_invalid_limit(self, client: TestClient, auth_headers):
        assert client.get("/journal", params={"limit": 0}, headers=auth_headers).status_code == 422
