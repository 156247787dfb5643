"""
Tests for the browser session endpoints.

These tests verify:
- /api/session reflects the cookie-backed session
- Logout removes the server-side session
- Forged cookies never resolve a session
- /api/users lists connected users
"""

from fastapi.testclient import TestClient

from mailrelay.api.deps import sign_session_id
from mailrelay.services import UserProfile

from .conftest import login, session_user_id


class TestSession:
    """Tests for GET /api/session."""

    def test_anonymous(self, client):
        response = client.get("/api/session")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_after_login(self, client, app):
        login(client)
        user_id = app.state.sessions.values()[0].user_id

        data = client.get("/api/session").json()

        assert data == {
            "authenticated": True,
            "userId": user_id,
            "email": "ana@example.com",
            "displayName": "Ana Pérez",
        }

    def test_unsigned_cookie_is_ignored(self, client, app):
        login(client)
        session_id = app.state.sessions.values()[0].session_id
        client.cookies.clear()
        client.cookies.set("session_id", session_id)

        assert client.get("/api/session").json() == {"authenticated": False}

    def test_signed_unknown_session_is_ignored(self, client):
        client.cookies.set("session_id", sign_session_id("no-such-session"))

        assert client.get("/api/session").json() == {"authenticated": False}


class TestLogout:
    """Tests for POST /api/logout."""

    def test_logout_then_session_is_anonymous(self, client, app):
        login(client)

        response = client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert len(app.state.sessions) == 0
        assert client.get("/api/session").json() == {"authenticated": False}

    def test_logout_keeps_refresh_token(self, client, app):
        login(client)
        user_id = session_user_id(client)

        client.post("/api/logout")

        assert app.state.tokens.get(user_id) == "refresh-1"

    def test_logout_without_session(self, client):
        response = client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}


class TestUsers:
    """Tests for GET /api/users."""

    def test_empty(self, client):
        assert client.get("/api/users").json() == []

    def test_lists_connected_users(self, app, client, oauth):
        login(client)
        first_id = session_user_id(client)
        oauth.profile = UserProfile(email="luis@example.com", display_name="Luis")
        with TestClient(app) as second:
            login(second)
            second_id = session_user_id(second)

        users = client.get("/api/users").json()

        assert [u["userId"] for u in users] == [first_id, second_id]
        assert users[1]["email"] == "luis@example.com"
        assert users[1]["displayName"] == "Luis"
        assert "connectedAt" in users[1]
