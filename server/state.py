"""Application state: config, record store, auth provider, scoring registry, clock."""

import logging
from typing import Callable, Dict, List, Optional

from fastapi import HTTPException

from ranking import ScoringRegistry, StoreUnavailable, UserRecord, ensure_records, get_default_registry
from ranking.utils import now_ms

from .config import ServerConfig, get_config
from .services import (
    AuthProvider,
    FirebaseAuthProvider,
    FirebaseUserStore,
    JsonUserStore,
    PayloadDecoderChain,
    UserStore,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, clock: Callable[[], int] = now_ms):
        self.config = config
        self.registry: ScoringRegistry = get_default_registry()
        self.decoder_chain = PayloadDecoderChain()
        # Epoch-ms source; every request reads it once
        self.clock = clock

        self.user_store: Optional[UserStore] = self._create_user_store(config)
        logger.info("[startup] User store: %s", type(self.user_store).__name__ if self.user_store else None)
        self.auth_provider: Optional[AuthProvider] = self._create_auth_provider(config)
        logger.info("[startup] Auth provider: %s", type(self.auth_provider).__name__ if self.auth_provider else None)

    def _create_user_store(self, config: ServerConfig) -> Optional[UserStore]:
        """Create user store from config (Realtime Database or JSON file)."""
        if config.data_source == "firebase":
            ok, errors = config.validate()
            if not ok:
                logger.warning("[startup] Firebase user store skipped: %s", "; ".join(errors))
                return None
            try:
                return FirebaseUserStore(config)
            except Exception as e:
                logger.warning("[startup] Firebase user store init failed: %s, user persistence disabled", e)
                return None
        if config.data_source == "json" and config.users_json_path:
            return JsonUserStore(config.users_json_path)
        return None

    def _create_auth_provider(self, config: ServerConfig) -> Optional[AuthProvider]:
        """Firebase Auth when Firebase credentials are configured, else none."""
        if config.data_source != "firebase" or not config.has_firebase_credentials:
            return None
        try:
            return FirebaseAuthProvider(config)
        except Exception as e:
            logger.warning("[startup] Firebase auth init failed: %s, auth endpoints disabled", e)
            return None

    def now(self) -> int:
        return self.clock()

    def require_store(self) -> UserStore:
        if self.user_store is None:
            raise HTTPException(
                status_code=503,
                detail="User store not configured. Set DATA_SOURCE and its settings in .env.",
            )
        return self.user_store

    def require_auth(self) -> AuthProvider:
        if self.auth_provider is None:
            raise HTTPException(
                status_code=503,
                detail="Auth provider not configured. Set DATA_SOURCE=firebase and Firebase credentials in .env.",
            )
        return self.auth_provider

    def load_snapshot(self) -> Dict[str, Dict]:
        """Raw `{id: document}` snapshot of the user store. Store failures raise StoreUnavailable."""
        store = self.require_store()
        try:
            return store.fetch_all()
        except Exception as e:
            logger.exception("User store fetch failed")
            raise StoreUnavailable(str(e)) from e

    def load_records(self) -> List[UserRecord]:
        return ensure_records(self.load_snapshot())


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None rebuilds it from config on next access)."""
    global _state
    _state = state
