"""Shared fixtures: a pinned clock, the example user set, and an app wired to a JSON store."""

import json
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from server.app import app
from server.config import ServerConfig
from server.services import EmailAlreadyRegistered, TokenResult
from server.state import AppState, set_state

NOW = 1_700_000_000_000
HOUR = 3_600_000
DAY = 24 * HOUR


class FakeAuthProvider:
    """In-memory stand-in for Firebase Auth."""

    def __init__(self):
        self.tokens: Dict[str, TokenResult] = {
            "alice-token": TokenResult(valid=True, uid="uid-alice", email="alice@example.com"),
            "admin-token": TokenResult(valid=True, uid="uid-admin", email="admin@example.com"),
        }
        self.emails: Dict[str, str] = {}

    def verify_id_token(self, id_token: str) -> TokenResult:
        return self.tokens.get(id_token, TokenResult(valid=False, error="Decoding Firebase ID token failed"))

    def create_user(self, email: str, password: str, display_name: str) -> Dict:
        if email in self.emails:
            raise EmailAlreadyRegistered(email)
        uid = f"auth-{len(self.emails) + 1}"
        self.emails[email] = uid
        return {"uid": uid, "email_verified": False}

    def create_custom_token(self, uid: str) -> str:
        return f"custom-{uid}"


class FailingStore:
    """User store whose reads always fail."""

    def fetch_all(self):
        raise RuntimeError("connection refused")


@pytest.fixture
def example_users() -> Dict[str, Dict]:
    return {
        "1": {"username": "alice", "points": 5, "submissions": 1, "createdAt": NOW - HOUR, "isActive": True},
        "2": {"username": "bob", "points": 50, "submissions": 0, "createdAt": NOW - 2 * HOUR, "isActive": True},
    }


@pytest.fixture
def make_state(tmp_path):
    """Install an AppState backed by a JSON file in tmp_path, with the clock pinned to NOW."""

    def _make(users: Optional[Dict[str, Dict]] = None, auth=None, data_source: Optional[str] = "json") -> AppState:
        path = tmp_path / "users.json"
        if users is not None:
            path.write_text(json.dumps({"users": users}))
        config = ServerConfig(data_source=data_source, users_json_path=path)
        state = AppState(config, clock=lambda: NOW)
        state.auth_provider = auth
        set_state(state)
        return state

    yield _make
    set_state(None)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
