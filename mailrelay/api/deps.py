"""Request-scoped accessors and session cookie handling."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response
from itsdangerous import BadSignature, Signer

from ..core import (
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    SECRET_KEY,
    SESSION_COOKIE,
    SESSION_MAX_AGE,
)
from ..models import Session
from ..services import (
    AuthFlow,
    GoogleOAuthClient,
    OAuthClient,
    SessionStore,
    TokenStore,
    UserStore,
    WebhookRelay,
)

logger = logging.getLogger("mailrelay.api.deps")

_signer = Signer(SECRET_KEY, salt="session-cookie")


def get_token_store(request: Request) -> TokenStore:
    return request.app.state.tokens


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_user_store(request: Request) -> UserStore:
    return request.app.state.users


def get_relay(request: Request) -> WebhookRelay:
    return request.app.state.relay


def get_oauth_client(request: Request) -> OAuthClient:
    """Return the app's OAuth adapter, building it from the environment on first use.

    Raises ConfigurationError when Google credentials are missing, so callers
    resolve it inside their own error handling rather than through Depends.
    """

    client = getattr(request.app.state, "oauth_client", None)
    if client is None:
        client = GoogleOAuthClient()
        request.app.state.oauth_client = client
    return client


def get_auth_flow(request: Request) -> AuthFlow:
    return AuthFlow(
        get_oauth_client(request),
        get_token_store(request),
        get_session_store(request),
        get_user_store(request),
    )


# Session cookie -------------------------------------------------------------

def sign_session_id(session_id: str) -> str:
    return _signer.sign(session_id).decode("utf-8")


def unsign_session_id(value: str) -> Optional[str]:
    try:
        return _signer.unsign(value).decode("utf-8")
    except BadSignature:
        return None


def session_id_from_request(request: Request) -> Optional[str]:
    raw = request.cookies.get(SESSION_COOKIE)
    if not raw:
        return None
    return unsign_session_id(raw)


def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        SESSION_COOKIE,
        sign_session_id(session_id),
        max_age=SESSION_MAX_AGE,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        SESSION_COOKIE,
        path="/",
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )


def authenticate(request: Request) -> Optional[Session]:
    """Resolve the request's session, or None when the cookie is absent or stale."""

    session_id = session_id_from_request(request)
    if not session_id:
        return None
    return get_session_store(request).get(session_id)


def require_session(
    session: Optional[Session] = Depends(authenticate),
) -> Session:
    if session is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session


__all__ = [
    "authenticate",
    "clear_session_cookie",
    "get_auth_flow",
    "get_oauth_client",
    "get_relay",
    "get_session_store",
    "get_token_store",
    "get_user_store",
    "require_session",
    "session_id_from_request",
    "set_session_cookie",
    "sign_session_id",
    "unsign_session_id",
]
