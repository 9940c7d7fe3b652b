"""
Auth provider abstraction.

Verifies client ID tokens, creates auth users and mints custom tokens.
Implementation: Firebase Auth. When Firebase is not configured the state
holds no provider and the auth endpoints answer 503.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from ..config import ServerConfig
from .firebase_app import get_firebase_app

logger = logging.getLogger(__name__)


class EmailAlreadyRegistered(Exception):
    """The auth backend already has a user with this email."""


@dataclass
class TokenResult:
    """Outcome of verifying one ID token."""

    valid: bool
    uid: Optional[str] = None
    email: Optional[str] = None
    error: Optional[str] = None


class AuthProvider(Protocol):
    """Protocol for token verification and auth-user management."""

    def verify_id_token(self, id_token: str) -> TokenResult:
        ...

    def create_user(self, email: str, password: str, display_name: str) -> Dict:
        """Create an auth user. Returns {"uid", "email_verified"}. Raises EmailAlreadyRegistered."""
        ...

    def create_custom_token(self, uid: str) -> str:
        ...


class FirebaseAuthProvider:
    """AuthProvider backed by the Firebase Admin SDK."""

    def __init__(self, config: ServerConfig):
        self._app = get_firebase_app(config)

    def verify_id_token(self, id_token: str) -> TokenResult:
        from firebase_admin import auth

        try:
            decoded = auth.verify_id_token(id_token, app=self._app)
        except (
            ValueError,
            auth.InvalidIdTokenError,
            auth.CertificateFetchError,
            auth.UserDisabledError,
        ) as e:
            logger.warning("Firebase token verification failed: %s", e)
            return TokenResult(valid=False, error=str(e))
        return TokenResult(valid=True, uid=decoded["uid"], email=decoded.get("email"))

    def create_user(self, email: str, password: str, display_name: str) -> Dict:
        from firebase_admin import auth

        try:
            record = auth.create_user(
                email=email,
                password=password,
                display_name=display_name,
                email_verified=False,
                disabled=False,
                app=self._app,
            )
        except auth.EmailAlreadyExistsError as e:
            raise EmailAlreadyRegistered(email) from e
        return {"uid": record.uid, "email_verified": record.email_verified}

    def create_custom_token(self, uid: str) -> str:
        from firebase_admin import auth

        token = auth.create_custom_token(uid, app=self._app)
        return token.decode("utf-8") if isinstance(token, bytes) else token
