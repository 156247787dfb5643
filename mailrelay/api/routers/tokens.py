"""Internal endpoint handing fresh access tokens to the workflow engine."""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from ...core import (
    INTERNAL_API_KEY,
    ConfigurationError,
    ProviderError,
    RefreshTokenRevoked,
)
from ...services import TokenStore
from ..deps import get_oauth_client, get_token_store

logger = logging.getLogger("mailrelay.api.tokens")

router = APIRouter(tags=["tokens"])


def _api_key_valid(api_key: Optional[str]) -> bool:
    if not api_key:
        return False
    return secrets.compare_digest(
        api_key.encode("utf-8"), INTERNAL_API_KEY.encode("utf-8")
    )


@router.get("/tokens/{user_id}")
async def get_access_token(
    user_id: str,
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
    tokens: TokenStore = Depends(get_token_store),
):
    if not _api_key_valid(x_api_key):
        return JSONResponse({"error": "Unauthorized"}, status_code=401)

    refresh_token = tokens.get(user_id)
    if not refresh_token:
        return JSONResponse({"error": "No refresh token"}, status_code=404)

    try:
        access_token = await get_oauth_client(request).refresh_access_token(refresh_token)
    except RefreshTokenRevoked:
        logger.warning("Refresh token for user %s was revoked; dropping it", user_id)
        tokens.delete(user_id)
        return JSONResponse({"error": "Refresh token revoked"}, status_code=500)
    except (ConfigurationError, ProviderError) as exc:
        logger.error("Token refresh for user %s failed: %s", user_id, exc)
        return JSONResponse({"error": "Token refresh error"}, status_code=500)

    logger.info("Issued fresh access token for user %s", user_id)
    return {"accessToken": access_token}


__all__ = ["router"]
