"""Relay of processing requests to the workflow webhook."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ...core import UpstreamError
from ...models import Session
from ...services import WebhookRelay
from ..deps import get_relay, require_session

logger = logging.getLogger("mailrelay.api.process")

router = APIRouter(tags=["process"])


async def _read_filtros(request: Request) -> Any:
    try:
        body = await request.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    return body.get("filtros") or {}


@router.post("/process")
async def process(
    request: Request,
    session: Session = Depends(require_session),
    relay: WebhookRelay = Depends(get_relay),
):
    filtros = await _read_filtros(request)
    try:
        result = await relay.process(session.user_id, filtros)
    except UpstreamError:
        return JSONResponse({"error": "Error llamando a n8n"}, status_code=500)

    if result.is_json:
        return JSONResponse(result.body, status_code=result.status_code)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type or "text/plain",
    )


__all__ = ["router"]
