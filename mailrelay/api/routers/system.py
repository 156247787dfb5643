"""System-level endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from ...core import PUBLIC_DIR

router = APIRouter(tags=["system"])


@router.get("/")
def index() -> FileResponse:
    """Static landing page."""

    page = PUBLIC_DIR / "index.html"
    if not page.is_file():
        raise HTTPException(status_code=404, detail="Landing page not found")
    return FileResponse(page)


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


__all__ = ["router"]
