"""
User store: the record store behind every ranking, search and account endpoint.
Persistence to a JSON file or the Firebase Realtime Database depending on DATA_SOURCE.

Documents are keyed by user id and use the stored camelCase keys
(createdAt, lastActive, isActive, ...).
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from ..config import ServerConfig
from .firebase_app import get_firebase_app

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Protocol for user persistence. Implement for JSON file or Realtime Database."""

    def fetch_all(self) -> Dict[str, Dict]:
        """Return every user document keyed by id (a full table snapshot)."""
        ...

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        """Return user dict if exists, else None."""
        ...

    def find_by_field(self, field: str, value: Any) -> Dict[str, Dict]:
        """Return users whose `field` equals `value`, keyed by id."""
        ...

    def create(self, user_id: str, user: Dict) -> Dict:
        """Store a new user document under `user_id`. Returns the stored dict."""
        ...

    def update(self, user_id: str, updates: Dict) -> Optional[Dict]:
        """Merge `updates` into an existing user. Returns updated user or None if not found."""
        ...


class JsonUserStore:
    """User store backed by a JSON file (e.g. data/users.json)."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._users: Dict[str, Dict] = {}
        self._lock = threading.Lock()
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not read %s (%s); starting with no users", self._path, e)
            self._users = {}
            return
        users = data.get("users", data) if isinstance(data, dict) else data
        if isinstance(users, list):
            for u in users:
                uid = u.get("id") or u.get("uid") if isinstance(u, dict) else None
                if uid:
                    self._users[str(uid)] = u
        elif isinstance(users, dict):
            for uid, u in users.items():
                if isinstance(u, dict):
                    self._users[str(uid)] = u

    def _save(self) -> None:
        out = {"users": self._users}
        with open(self._path, "w") as f:
            json.dump(out, f, indent=2)

    def fetch_all(self) -> Dict[str, Dict]:
        with self._lock:
            return {uid: dict(u) for uid, u in self._users.items()}

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        with self._lock:
            user = self._users.get(user_id)
            return dict(user) if user is not None else None

    def find_by_field(self, field: str, value: Any) -> Dict[str, Dict]:
        with self._lock:
            return {
                uid: dict(u) for uid, u in self._users.items() if u.get(field) == value
            }

    def create(self, user_id: str, user: Dict) -> Dict:
        with self._lock:
            self._users[user_id] = dict(user)
            self._save()
            return dict(user)

    def update(self, user_id: str, updates: Dict) -> Optional[Dict]:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.update(updates)
            self._save()
            return dict(user)


class FirebaseUserStore:
    """User store backed by a Realtime Database node (default 'users')."""

    def __init__(self, config: ServerConfig):
        app = get_firebase_app(config)
        from firebase_admin import db

        self._ref = db.reference(config.users_path, app=app)

    @staticmethod
    def _as_mapping(data: Any) -> Dict[str, Dict]:
        # The database returns a list when every child key is a small integer
        if isinstance(data, list):
            return {str(i): d for i, d in enumerate(data) if isinstance(d, dict)}
        if isinstance(data, dict):
            return {str(k): v for k, v in data.items() if isinstance(v, dict)}
        return {}

    def fetch_all(self) -> Dict[str, Dict]:
        return self._as_mapping(self._ref.get())

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        data = self._ref.child(user_id).get()
        return data if isinstance(data, dict) else None

    def find_by_field(self, field: str, value: Any) -> Dict[str, Dict]:
        # Needs an ".indexOn" rule for `field` in the database rules
        return self._as_mapping(self._ref.order_by_child(field).equal_to(value).get())

    def create(self, user_id: str, user: Dict) -> Dict:
        self._ref.child(user_id).set(user)
        return user

    def update(self, user_id: str, updates: Dict) -> Optional[Dict]:
        child = self._ref.child(user_id)
        if not isinstance(child.get(), dict):
            return None
        child.update(updates)
        return child.get()
