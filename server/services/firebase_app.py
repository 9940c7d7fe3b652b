"""
Firebase app bootstrap shared by the user store and the auth provider.

Credentials come from a service account file when FIREBASE_CREDENTIALS_PATH
is set, otherwise from FIREBASE_CLIENT_EMAIL + FIREBASE_PRIVATE_KEY.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import ServerConfig

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


def _certificate_source(config: ServerConfig) -> Any:
    if config.firebase_credentials_path:
        return str(Path(config.firebase_credentials_path).resolve())
    return {
        "type": "service_account",
        "project_id": config.firebase_project_id,
        "client_email": config.firebase_client_email,
        "private_key": config.firebase_private_key,
        "token_uri": GOOGLE_TOKEN_URI,
    }


def get_firebase_app(config: ServerConfig):
    """Return the default Firebase app, initializing it on first use."""
    try:
        import firebase_admin
        from firebase_admin import credentials
    except ImportError:
        raise ImportError(
            "firebase-admin is required for the Firebase user store. pip install firebase-admin"
        )
    if firebase_admin._apps:
        return firebase_admin.get_app()
    if not config.has_firebase_credentials:
        raise ValueError("Firebase credentials are not configured")
    cred = credentials.Certificate(_certificate_source(config))
    options: Dict[str, Optional[str]] = {}
    if config.firebase_database_url:
        options["databaseURL"] = config.firebase_database_url
    if config.firebase_project_id:
        options["projectId"] = config.firebase_project_id
    app = firebase_admin.initialize_app(cred, options or None)
    logger.info("[startup] Firebase app initialized (project=%s)", config.firebase_project_id)
    return app
