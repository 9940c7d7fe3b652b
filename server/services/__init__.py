"""Backing logic: record store, auth provider, payload decoding."""

from .auth_provider import AuthProvider, EmailAlreadyRegistered, FirebaseAuthProvider, TokenResult
from .firebase_app import get_firebase_app
from .payloads import (
    PayloadDecoderChain,
    RawPayload,
    RegistrationPayload,
    decode_direct_fields,
    decode_nested_data,
    decode_raw_string,
)
from .user_store import FirebaseUserStore, JsonUserStore, UserStore

__all__ = [
    "AuthProvider",
    "EmailAlreadyRegistered",
    "FirebaseAuthProvider",
    "FirebaseUserStore",
    "JsonUserStore",
    "PayloadDecoderChain",
    "RawPayload",
    "RegistrationPayload",
    "TokenResult",
    "UserStore",
    "decode_direct_fields",
    "decode_nested_data",
    "decode_raw_string",
    "get_firebase_app",
]
