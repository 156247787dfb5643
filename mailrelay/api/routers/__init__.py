"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .process import router as process_router
from .session import router as session_router
from .system import router as system_router
from .tokens import router as tokens_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    auth_router,
    session_router,
    tokens_router,
    process_router,
)

__all__ = ["ALL_ROUTERS"]
