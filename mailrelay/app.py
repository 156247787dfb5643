"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DEFAULT_INTERNAL_API_KEY,
    INTERNAL_API_KEY,
    LOG_LEVEL,
    N8N_WEBHOOK_URL,
    PUBLIC_DIR,
    SECRET_KEY_GENERATED,
    configure_logging,
)
from .services import InMemoryStore, OAuthClient, WebhookRelay

logger = logging.getLogger("mailrelay.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if INTERNAL_API_KEY == DEFAULT_INTERNAL_API_KEY:
        logger.warning("INTERNAL_API_KEY is not set; using the insecure default")
    if SECRET_KEY_GENERATED:
        logger.warning("SECRET_KEY is not set; sessions will not survive a restart")
    logger.info("Relaying /process to %s", app.state.relay.url)
    yield


def create_app(
    *,
    oauth_client: Optional[OAuthClient] = None,
    relay: Optional[WebhookRelay] = None,
) -> FastAPI:
    configure_logging(LOG_LEVEL)

    app = FastAPI(title="Mail Relay API", version="0.1.0", lifespan=lifespan)

    # Stores live for the lifetime of the app.
    app.state.tokens = InMemoryStore()
    app.state.sessions = InMemoryStore()
    app.state.users = InMemoryStore()
    # None means "build from GOOGLE_* on first use".
    app.state.oauth_client = oauth_client
    app.state.relay = relay or WebhookRelay(N8N_WEBHOOK_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)

    if PUBLIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
    return app


app = create_app()
