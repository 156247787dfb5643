"""
Google OAuth Client
Authorization-code and refresh-token flows plus the userinfo lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import AsyncOAuth2Client
from authlib.oauth2.rfc6749.parameters import prepare_grant_uri

from ..core import (
    GOOGLE_AUTHORIZE_URL,
    GOOGLE_SCOPES,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
    HTTP_TIMEOUT,
    ProviderError,
    RefreshTokenRevoked,
    google_credentials,
)

logger = logging.getLogger("mailrelay.services.google")


@dataclass(frozen=True)
class TokenGrant:
    access_token: str
    refresh_token: Optional[str] = None


@dataclass(frozen=True)
class UserProfile:
    email: str
    display_name: Optional[str] = None


class GoogleOAuthClient:
    """Thin wrapper over Authlib's async OAuth2 client for Google."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        *,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not (client_id and client_secret and redirect_uri):
            client_id, client_secret, redirect_uri = google_credentials()
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> AsyncOAuth2Client:
        return AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
            scope=" ".join(GOOGLE_SCOPES),
            timeout=self.timeout,
            transport=self._transport,
        )

    def build_authorization_url(self, state: str) -> str:
        """Consent URL requesting offline access with a forced consent prompt."""

        return prepare_grant_uri(
            GOOGLE_AUTHORIZE_URL,
            client_id=self.client_id,
            response_type="code",
            redirect_uri=self.redirect_uri,
            scope=" ".join(GOOGLE_SCOPES),
            state=state,
            access_type="offline",
            prompt="consent",
        )

    async def exchange_code(self, code: str) -> TokenGrant:
        """Exchange an authorization code for tokens."""

        async with self._client() as client:
            try:
                token = await client.fetch_token(GOOGLE_TOKEN_URL, code=code)
            except OAuthError as exc:
                raise ProviderError(
                    f"Code exchange rejected: {exc.error}", error=exc.error
                ) from exc
            except (httpx.HTTPError, ValueError) as exc:
                raise ProviderError(f"Code exchange failed: {exc}") from exc

        access_token = token.get("access_token")
        if not access_token:
            raise ProviderError("Token response carried no access_token")
        return TokenGrant(
            access_token=access_token, refresh_token=token.get("refresh_token")
        )

    async def fetch_user_profile(self, access_token: str) -> UserProfile:
        """Read the signed-in user's email and name from the userinfo endpoint."""

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                r = await client.get(
                    GOOGLE_USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
            except httpx.HTTPError as exc:
                raise ProviderError(f"Userinfo request failed: {exc}") from exc

        if r.status_code != 200:
            raise ProviderError(f"Userinfo request returned {r.status_code}")
        try:
            info = r.json()
        except ValueError as exc:
            raise ProviderError("Userinfo response was not JSON") from exc

        email = info.get("email")
        if not email:
            raise ProviderError("Unable to read Google profile.")
        return UserProfile(email=email, display_name=info.get("name") or None)

    async def refresh_access_token(self, refresh_token: str) -> str:
        """Mint a new access token from a stored refresh token.

        Raises RefreshTokenRevoked when Google answers ``invalid_grant``; any
        other failure is a plain ProviderError.
        """

        async with self._client() as client:
            try:
                token = await client.refresh_token(
                    GOOGLE_TOKEN_URL, refresh_token=refresh_token
                )
            except OAuthError as exc:
                if exc.error == "invalid_grant":
                    raise RefreshTokenRevoked(
                        "Refresh token revoked or expired", error=exc.error
                    ) from exc
                raise ProviderError(
                    f"Refresh rejected: {exc.error}", error=exc.error
                ) from exc
            except (httpx.HTTPError, ValueError) as exc:
                raise ProviderError(f"Refresh failed: {exc}") from exc

        access_token = token.get("access_token")
        if not access_token:
            raise ProviderError("Refresh response carried no access_token")
        return access_token


__all__ = ["GoogleOAuthClient", "TokenGrant", "UserProfile"]
