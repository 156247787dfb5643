"""Authorization-code flow: initiate, complete the callback, log out."""

from __future__ import annotations

import logging
import secrets
import uuid
from dataclasses import dataclass
from typing import Optional, Protocol

from ..models import Session, User
from .google import TokenGrant, UserProfile
from .state import decode_state, encode_state
from .stores import SessionStore, TokenStore, UserStore

logger = logging.getLogger("mailrelay.services.auth_flow")


class OAuthClient(Protocol):
    def build_authorization_url(self, state: str) -> str: ...

    async def exchange_code(self, code: str) -> TokenGrant: ...

    async def fetch_user_profile(self, access_token: str) -> UserProfile: ...

    async def refresh_access_token(self, refresh_token: str) -> str: ...


@dataclass(frozen=True)
class CallbackResult:
    user: User
    session: Session
    refresh_token_stored: bool


def new_user_id() -> str:
    return uuid.uuid4().hex


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def display_name_for(profile: UserProfile) -> str:
    """Profile name, else the local part of the email address."""

    name = (profile.display_name or "").strip()
    if name:
        return name
    return profile.email.split("@")[0]


class AuthFlow:
    """Drives one authorization attempt from redirect to committed session.

    Every step runs once; a failure ends the attempt and the user has to
    start over from :meth:`authorization_url`.
    """

    def __init__(
        self,
        oauth_client: OAuthClient,
        tokens: TokenStore,
        sessions: SessionStore,
        users: UserStore,
    ) -> None:
        self.oauth_client = oauth_client
        self.tokens = tokens
        self.sessions = sessions
        self.users = users

    def authorization_url(self, user_id: Optional[str] = None) -> str:
        """Consent URL for ``user_id``, which must come from a verified session."""

        user_id = user_id or new_user_id()
        logger.info("Starting Google OAuth for user %s", user_id)
        return self.oauth_client.build_authorization_url(encode_state(user_id))

    async def complete(self, code: str, state: str) -> CallbackResult:
        user_id = decode_state(state)

        grant = await self.oauth_client.exchange_code(code)
        stored = False
        if grant.refresh_token:
            self.tokens.set(user_id, grant.refresh_token)
            stored = True
        else:
            logger.info("No refresh token granted for user %s", user_id)

        profile = await self.oauth_client.fetch_user_profile(grant.access_token)
        display_name = display_name_for(profile)

        user = User(user_id=user_id, email=profile.email, display_name=display_name)
        self.users.set(user_id, user)

        session = Session(
            session_id=new_session_id(),
            user_id=user_id,
            email=profile.email,
            display_name=display_name,
        )
        self.sessions.set(session.session_id, session)

        logger.info("Connected user %s (%s)", user_id, profile.email)
        return CallbackResult(user=user, session=session, refresh_token_stored=stored)


__all__ = [
    "AuthFlow",
    "CallbackResult",
    "OAuthClient",
    "display_name_for",
    "new_session_id",
    "new_user_id",
]
