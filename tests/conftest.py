"""
Shared fixtures: a fresh app per test with a fake Google adapter and a
stubbed webhook behind httpx.MockTransport.
"""

import os

os.environ.setdefault("INTERNAL_API_KEY", "test-internal-key")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("N8N_WEBHOOK_URL", "http://n8n.test/webhook/finanzas-procesar")

import json
from typing import Callable, List, Optional
from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from fastapi.testclient import TestClient

from mailrelay.app import create_app
from mailrelay.services import TokenGrant, UserProfile, WebhookRelay

API_KEY = "test-internal-key"
WEBHOOK_URL = "http://n8n.test/webhook/finanzas-procesar"


class FakeOAuthClient:
    """Stands in for GoogleOAuthClient; records every call."""

    def __init__(self) -> None:
        self.grant = TokenGrant(access_token="access-1", refresh_token="refresh-1")
        self.profile = UserProfile(email="ana@example.com", display_name="Ana Pérez")
        self.refreshed = "fresh-access"
        self.exchange_error: Optional[Exception] = None
        self.profile_error: Optional[Exception] = None
        self.refresh_error: Optional[Exception] = None
        self.exchanged: List[str] = []
        self.refresh_calls: List[str] = []

    def build_authorization_url(self, state: str) -> str:
        return f"https://accounts.example/auth?{httpx.QueryParams({'state': state})}"

    async def exchange_code(self, code: str) -> TokenGrant:
        self.exchanged.append(code)
        if self.exchange_error:
            raise self.exchange_error
        return self.grant

    async def fetch_user_profile(self, access_token: str) -> UserProfile:
        if self.profile_error:
            raise self.profile_error
        return self.profile

    async def refresh_access_token(self, refresh_token: str) -> str:
        self.refresh_calls.append(refresh_token)
        if self.refresh_error:
            raise self.refresh_error
        return self.refreshed


class Webhook:
    """Records relayed requests and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"ok": True})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def payloads(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def oauth() -> FakeOAuthClient:
    return FakeOAuthClient()


@pytest.fixture
def webhook() -> Webhook:
    return Webhook()


@pytest.fixture
def app(oauth: FakeOAuthClient, webhook: Webhook):
    relay = WebhookRelay(WEBHOOK_URL, transport=httpx.MockTransport(webhook))
    return create_app(oauth_client=oauth, relay=relay)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def state_from_location(location: str) -> str:
    return parse_qs(urlparse(location).query)["state"][0]


def login(client: TestClient) -> httpx.Response:
    """Run /auth/google and its callback; returns the callback response."""

    start = client.get("/auth/google", follow_redirects=False)
    state = state_from_location(start.headers["location"])
    return client.get(
        "/auth/google/callback",
        params={"code": "auth-code", "state": state},
        follow_redirects=False,
    )


def session_user_id(client: TestClient) -> str:
    return client.get("/api/session").json()["userId"]
