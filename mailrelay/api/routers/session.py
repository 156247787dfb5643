"""Browser session and user listing endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...models import Session
from ...services import SessionStore, UserStore
from ..deps import (
    authenticate,
    clear_session_cookie,
    get_session_store,
    get_user_store,
    session_id_from_request,
)

router = APIRouter(prefix="/api", tags=["session"])


@router.get("/session")
def current_session(
    session: Optional[Session] = Depends(authenticate),
) -> Dict[str, Any]:
    if session is None:
        return {"authenticated": False}
    return session.to_public()


@router.post("/logout")
def logout(request: Request, sessions: SessionStore = Depends(get_session_store)):
    session_id = session_id_from_request(request)
    if session_id:
        sessions.delete(session_id)
    response = JSONResponse({"success": True})
    clear_session_cookie(response)
    return response


@router.get("/users")
def list_users(users: UserStore = Depends(get_user_store)) -> List[Dict[str, Any]]:
    """Every user connected since the process started, oldest first."""

    ordered = sorted(users.values(), key=lambda user: user.connected_at)
    return [user.to_public() for user in ordered]


__all__ = ["router"]
