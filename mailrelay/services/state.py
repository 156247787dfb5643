"""Signed OAuth ``state`` tokens."""

from __future__ import annotations

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

from ..core import OAUTH_STATE_MAX_AGE, SECRET_KEY, InvalidStateError


def _serializer(secret_key: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key, salt="oauth-state")


def encode_state(user_id: str, *, secret_key: str = SECRET_KEY) -> str:
    """Sign the pending flow's user id into an opaque ``state`` value."""

    return _serializer(secret_key).dumps({"userId": user_id})


def decode_state(
    state: str,
    *,
    secret_key: str = SECRET_KEY,
    max_age: int = OAUTH_STATE_MAX_AGE,
) -> str:
    """Return the user id carried by ``state`` or raise InvalidStateError."""

    try:
        payload = _serializer(secret_key).loads(state, max_age=max_age)
    except SignatureExpired as exc:
        raise InvalidStateError("OAuth state expired") from exc
    except BadData as exc:
        raise InvalidStateError("OAuth state failed verification") from exc

    user_id = payload.get("userId") if isinstance(payload, dict) else None
    if not isinstance(user_id, str) or not user_id:
        raise InvalidStateError("OAuth state carries no userId")
    return user_id


__all__ = ["decode_state", "encode_state"]
