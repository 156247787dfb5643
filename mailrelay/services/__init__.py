"""Service layer helpers."""

from .auth_flow import AuthFlow, CallbackResult, OAuthClient
from .google import GoogleOAuthClient, TokenGrant, UserProfile
from .relay import RelayResponse, WebhookRelay
from .state import decode_state, encode_state
from .stores import InMemoryStore, KeyValueStore, SessionStore, TokenStore, UserStore

__all__ = [
    "AuthFlow",
    "CallbackResult",
    "GoogleOAuthClient",
    "InMemoryStore",
    "KeyValueStore",
    "OAuthClient",
    "RelayResponse",
    "SessionStore",
    "TokenGrant",
    "TokenStore",
    "UserProfile",
    "UserStore",
    "WebhookRelay",
    "decode_state",
    "encode_state",
]
