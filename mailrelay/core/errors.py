"""Exception types raised by the service and translated by the routers."""

from __future__ import annotations

from typing import Optional


class MailRelayError(Exception):
    """Base class for application errors."""


class ConfigurationError(MailRelayError):
    """Required configuration is missing or malformed."""


class InvalidStateError(MailRelayError):
    """The OAuth ``state`` round-trip value is tampered, expired or malformed."""


class ProviderError(MailRelayError):
    """A call to the identity provider failed."""

    def __init__(self, message: str, *, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.error = error


class RefreshTokenRevoked(ProviderError):
    """The stored refresh token was rejected and can never be used again."""


class UpstreamError(MailRelayError):
    """The workflow webhook could not be reached."""


__all__ = [
    "ConfigurationError",
    "InvalidStateError",
    "MailRelayError",
    "ProviderError",
    "RefreshTokenRevoked",
    "UpstreamError",
]
