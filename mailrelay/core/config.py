"""Application settings and environment helpers."""

from __future__ import annotations

import os
import secrets
from pathlib import Path
from typing import Iterable, List, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Server ---------------------------------------------------------------------
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Internal API ---------------------------------------------------------------
DEFAULT_INTERNAL_API_KEY = "change_me"
INTERNAL_API_KEY = os.getenv("INTERNAL_API_KEY") or DEFAULT_INTERNAL_API_KEY


# Google OAuth configuration -------------------------------------------------
# Read lazily through google_credentials() so the app can boot without them.
GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
GOOGLE_SCOPES = [
    "openid",
    "email",
    "profile",
    "https://www.googleapis.com/auth/gmail.readonly",
]


def google_credentials() -> Tuple[str, str, str]:
    """Return (client_id, client_secret, redirect_uri) or raise ConfigurationError."""

    names = ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REDIRECT_URI")
    missing = [name for name in names if not os.getenv(name)]
    if missing:
        raise ConfigurationError(
            "Missing Google OAuth configuration: " + ", ".join(missing)
        )
    return (
        _require_env("GOOGLE_CLIENT_ID"),
        _require_env("GOOGLE_CLIENT_SECRET"),
        _require_env("GOOGLE_REDIRECT_URI"),
    )


# Workflow webhook -----------------------------------------------------------
N8N_WEBHOOK_URL = os.getenv(
    "N8N_WEBHOOK_URL", "http://localhost:5678/webhook/finanzas-procesar"
)
HTTP_TIMEOUT = _env_float("HTTP_TIMEOUT", 20.0)


# Application security -------------------------------------------------------
SECRET_KEY_GENERATED = not os.getenv("SECRET_KEY")
SECRET_KEY = os.getenv("SECRET_KEY") or secrets.token_urlsafe(32)
OAUTH_STATE_MAX_AGE = _env_int("OAUTH_STATE_MAX_AGE", 600)

SESSION_COOKIE = "session_id"
SESSION_MAX_AGE = 7 * 24 * 60 * 60
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    f"http://localhost:{PORT}",
    f"http://127.0.0.1:{PORT}",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Static assets --------------------------------------------------------------
PUBLIC_DIR = Path(
    os.getenv("PUBLIC_DIR", str(Path(__file__).resolve().parents[1] / "public"))
)


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
    "google_credentials",
]
