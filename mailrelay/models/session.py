"""Record model for browser sessions."""

from __future__ import annotations

from typing import Any, Dict

from sqlmodel import SQLModel


class Session(SQLModel):
    """Server-side session resolved from the ``session_id`` cookie."""

    session_id: str
    user_id: str
    email: str
    display_name: str

    def to_public(self) -> Dict[str, Any]:
        return {
            "authenticated": True,
            "userId": self.user_id,
            "email": self.email,
            "displayName": self.display_name,
        }


__all__ = ["Session"]
