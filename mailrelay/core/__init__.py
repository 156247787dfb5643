"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DEFAULT_INTERNAL_API_KEY,
    GOOGLE_AUTHORIZE_URL,
    GOOGLE_SCOPES,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
    HOST,
    HTTP_TIMEOUT,
    INTERNAL_API_KEY,
    LOG_LEVEL,
    N8N_WEBHOOK_URL,
    OAUTH_STATE_MAX_AGE,
    PORT,
    PUBLIC_DIR,
    SECRET_KEY,
    SECRET_KEY_GENERATED,
    SESSION_COOKIE,
    SESSION_MAX_AGE,
    google_credentials,
)
from .errors import (
    ConfigurationError,
    InvalidStateError,
    MailRelayError,
    ProviderError,
    RefreshTokenRevoked,
    UpstreamError,
)
from .logs import configure_logging
from .time import utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DEFAULT_INTERNAL_API_KEY",
    "GOOGLE_AUTHORIZE_URL",
    "GOOGLE_SCOPES",
    "GOOGLE_TOKEN_URL",
    "GOOGLE_USERINFO_URL",
    "HOST",
    "HTTP_TIMEOUT",
    "INTERNAL_API_KEY",
    "LOG_LEVEL",
    "N8N_WEBHOOK_URL",
    "OAUTH_STATE_MAX_AGE",
    "PORT",
    "PUBLIC_DIR",
    "SECRET_KEY",
    "SECRET_KEY_GENERATED",
    "SESSION_COOKIE",
    "SESSION_MAX_AGE",
    "ConfigurationError",
    "InvalidStateError",
    "MailRelayError",
    "ProviderError",
    "RefreshTokenRevoked",
    "UpstreamError",
    "configure_logging",
    "google_credentials",
    "utcnow",
]
