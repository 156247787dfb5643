"""Record model for Google-connected users."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel):
    """Mailbox owner who completed the OAuth consent flow."""

    user_id: str
    email: str
    display_name: str
    connected_at: datetime = ORMField(default_factory=utcnow)

    def to_public(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "displayName": self.display_name,
            "connectedAt": self.connected_at.isoformat(),
        }


__all__ = ["User"]
