"""Google OAuth authentication routes."""

from __future__ import annotations

import html
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...core import ConfigurationError, InvalidStateError, ProviderError
from ...models import Session
from ..deps import authenticate, get_auth_flow, set_session_cookie

logger = logging.getLogger("mailrelay.api.auth")

router = APIRouter(tags=["auth"])

LANDING_URL = "/?connected=1"


def _diagnostic_page(status_code: int, title: str, message: str) -> HTMLResponse:
    body = (
        "<!doctype html><html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(title)}</title></head><body>"
        f"<h1>{html.escape(title)}</h1><p>{html.escape(message)}</p>"
        "<p><a href=\"/auth/google\">Try connecting again</a></p>"
        "</body></html>"
    )
    return HTMLResponse(body, status_code=status_code)


@router.get("/auth/google")
def auth_google_start(
    request: Request, session: Optional[Session] = Depends(authenticate)
):
    # Only a verified session may reuse its id; otherwise a fresh one is minted.
    user_id = session.user_id if session else None
    try:
        url = get_auth_flow(request).authorization_url(user_id)
    except ConfigurationError as exc:
        logger.error("Cannot start Google OAuth: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return RedirectResponse(url, status_code=302)


@router.get("/auth/google/callback")
async def auth_google_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    error_description: Optional[str] = None,
):
    if error:
        logger.warning("Google OAuth error: %s - %s", error, error_description)
        return _diagnostic_page(
            400, "Authorization denied", error_description or error
        )
    if not code or not state:
        return _diagnostic_page(400, "Bad request", "Missing code or state.")

    try:
        result = await get_auth_flow(request).complete(code, state)
    except InvalidStateError as exc:
        logger.warning("Rejected OAuth callback: %s", exc)
        return _diagnostic_page(400, "Bad request", str(exc))
    except ConfigurationError as exc:
        logger.error("OAuth callback misconfigured: %s", exc)
        return _diagnostic_page(500, "Server misconfigured", str(exc))
    except ProviderError as exc:
        logger.error("OAuth callback failed at the provider: %s", exc)
        return _diagnostic_page(502, "Google sign-in failed", str(exc))
    except Exception:
        logger.exception("Unexpected error in OAuth callback")
        return _diagnostic_page(500, "Callback error", "Unexpected error.")

    response = RedirectResponse(LANDING_URL, status_code=302)
    set_session_cookie(response, result.session.session_id)
    return response


__all__ = ["router"]
