"""
API tests for auth endpoints.

Tests cover:
- Sign-up, sign-in, sign-out and /auth/me
- Error responses (400, 401, 422)
"""

from fastapi.testclient import TestClient


class TestSignUpAPI:
    """Tests for POST /auth/signup."""

    def test_sign_up_success(self, client: TestClient):
        """
        GIVEN no users exist
        WHEN I POST /auth/signup with valid credentials
        THEN response is 201 with a bearer token and the user
        """
        response = client.post("/auth/signup", json={
            "email": "New@Example.com",
            "password": "correct-horse",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["email"] == "new@example.com"
        assert "password_hash" not in data["user"]

    def test_sign_up_duplicate(self, client: TestClient):
        payload = {"email": "dup@example.com", "password": "correct-horse"}
        client.post("/auth/signup", json=payload)

        response = client.post("/auth/signup", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_sign_up_short_password(self, client: TestClient):
        response = client.post("/auth/signup", json={"email": "a@example.com", "password": "short"})

        assert response.status_code == 400
        assert "at least" in response.json()["message"]

    def test_sign_up_missing_field(self, client: TestClient):
        response = client.post("/auth/signup", json={"email": "a@example.com"})

        assert response.status_code == 422


class TestSessionAPI:
    def test_sign_in_and_me(self, client: TestClient):
        client.post("/auth/signup", json={"email": "me@example.com", "password": "correct-horse"})

        response = client.post("/auth/signin", json={"email": "me@example.com", "password": "correct-horse"})
        assert response.status_code == 200
        token = response.json()["access_token"]

        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "me@example.com"

    def test_sign_in_wrong_password(self, client: TestClient):
        client.post("/auth/signup", json={"email": "me@example.com", "password": "correct-horse"})

        response = client.post("/auth/signin", json={"email": "me@example.com", "password": "wrong-horse"})

        assert response.status_code == 401
        assert response.json() == {"error": "NOT_AUTHENTICATED", "message": "Invalid email or password"}

    def test_me_without_token(self, client: TestClient):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client: TestClient):
        response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401

    def test_sign_out_invalidates_token(self, client: TestClient, auth_headers):
        response = client.post("/auth/signout", headers=auth_headers)
        assert response.status_code == 204

        assert client.get("/auth/me", headers=auth_headers).status_code == 401

    def test_sign_out_requires_session(self, client: TestClient):
        assert client.post("/auth/signout").status_code == 401
