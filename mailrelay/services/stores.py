"""In-memory key/value stores for refresh tokens, sessions and users.

Entries live until overwritten, deleted or the process exits. Each single-key
operation is atomic; nothing spans more than one key.
"""

from __future__ import annotations

import threading
from typing import Dict, Generic, List, Optional, Protocol, TypeVar

from ..models import Session, User

V = TypeVar("V")


class KeyValueStore(Protocol[V]):
    """Storage contract the routers depend on."""

    def get(self, key: str) -> Optional[V]: ...

    def set(self, key: str, value: V) -> None: ...

    def delete(self, key: str) -> None: ...

    def values(self) -> List[V]: ...


class InMemoryStore(Generic[V]):
    """Lock-protected dict implementing :class:`KeyValueStore`."""

    def __init__(self) -> None:
        self._items: Dict[str, V] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            return self._items.get(key)

    def set(self, key: str, value: V) -> None:
        with self._lock:
            self._items[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def values(self) -> List[V]:
        with self._lock:
            return list(self._items.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items


TokenStore = KeyValueStore[str]
SessionStore = KeyValueStore[Session]
UserStore = KeyValueStore[User]


__all__ = [
    "InMemoryStore",
    "KeyValueStore",
    "SessionStore",
    "TokenStore",
    "UserStore",
]
