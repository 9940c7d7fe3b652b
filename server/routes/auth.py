"""Registration, login, token verification and admin user creation."""

import logging
import re
import secrets
import string
from typing import Dict, Optional

import bcrypt
from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from ..models import CreateUserRequest, TokenRequest
from ..services import EmailAlreadyRegistered, RawPayload, RegistrationPayload
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()

# Username: one string, no spaces, alphanumeric and underscore only
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 20
MIN_PASSWORD_LENGTH = 6
# bcrypt only reads the first 72 bytes
MAX_PASSWORD_BYTES = 72

STARTING_POINTS = 10
_ID_ALPHABET = string.digits + string.ascii_lowercase


def _validate_username(name: str) -> None:
    if not name:
        raise HTTPException(status_code=400, detail="Username is required")
    if len(name) < MIN_USERNAME_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Username must be at least {MIN_USERNAME_LENGTH} characters",
        )
    if len(name) > MAX_USERNAME_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Username must be at most {MAX_USERNAME_LENGTH} characters",
        )
    if not USERNAME_PATTERN.match(name):
        raise HTTPException(
            status_code=400,
            detail="Username must be one word: letters, numbers, and underscores only (no spaces or special characters).",
        )


def _validate_password(password: str) -> None:
    if not password:
        raise HTTPException(status_code=400, detail="Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
        )


def _hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def _generate_user_id(now: int) -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"user_{now}_{suffix}"


def _ensure_username_available(state: AppState, username: str) -> None:
    store = state.require_store()
    if store.find_by_field("username_lower", username.lower()):
        raise HTTPException(status_code=409, detail="Username already taken")


def _user_document(user_id: str, username: str, email: Optional[str], now: int) -> Dict:
    return {
        "id": user_id,
        "username": username,
        "username_lower": username.lower(),
        "email": email or None,
        "points": STARTING_POINTS,
        "submissions": 0,
        "createdAt": now,
        "lastActive": now,
        "isActive": True,
        "role": "user",
    }


def _create_account(state: AppState, payload: RegistrationPayload) -> Dict:
    """Create the user (and its auth user when possible). Runs in the threadpool."""
    store = state.require_store()
    _ensure_username_available(state, payload.username)
    now = state.now()

    auth_user: Optional[Dict] = None
    custom_token: Optional[str] = None
    auth = state.auth_provider
    if auth is not None and payload.email:
        try:
            auth_user = auth.create_user(payload.email, payload.password, payload.username)
        except EmailAlreadyRegistered:
            raise HTTPException(status_code=409, detail="Email already registered")
        user_id = auth_user["uid"]
        custom_token = auth.create_custom_token(user_id)
    else:
        user_id = _generate_user_id(now)

    user = _user_document(user_id, payload.username, payload.email, now)
    user["password"] = _hash_password(payload.password)
    if auth_user is not None:
        user["uid"] = user_id
        user["emailVerified"] = auth_user.get("email_verified", False)
    store.create(user_id, user)
    logger.info("Registered user %s (%s)", user_id, payload.username)

    return {
        "success": True,
        "message": "User registered successfully",
        "userId": user_id,
        "username": payload.username,
        "points": STARTING_POINTS,
        "token": custom_token or f"user_{user_id}_{now}",
    }


@router.post("/register", status_code=201)
async def register(request: Request):
    """
    Register with username + password (+ optional email).
    Accepts JSON, form fields, a `data` field holding JSON text, or a JSON-encoded string body.
    With Firebase Auth configured and an email supplied, an auth user is created too.
    """
    state = get_state()
    raw = RawPayload(
        body=await request.body(),
        content_type=request.headers.get("content-type", ""),
    )
    payload = state.decoder_chain.decode(raw)
    if not payload.username:
        raise HTTPException(status_code=400, detail="Username is required")
    if not payload.password:
        raise HTTPException(status_code=400, detail="Password is required")
    _validate_username(payload.username)
    _validate_password(payload.password)
    return await run_in_threadpool(_create_account, state, payload)


@router.post("/login")
def login(request: TokenRequest):
    """Exchange a client ID token for the stored profile and a fresh custom token."""
    state = get_state()
    auth = state.require_auth()
    store = state.require_store()
    if not request.id_token:
        raise HTTPException(status_code=400, detail="ID token is required")
    token = auth.verify_id_token(request.id_token)
    if not token.valid:
        raise HTTPException(status_code=401, detail="Invalid token")
    user = store.get_by_id(token.uid)
    if not user:
        raise HTTPException(status_code=404, detail="User not found in database")
    store.update(token.uid, {"lastActive": state.now()})
    return {
        "success": True,
        "data": {
            "uid": token.uid,
            "username": user.get("username"),
            "email": token.email,
            "points": user.get("points") or 0,
            "customToken": auth.create_custom_token(token.uid),
            # Previous visit, read before the update above
            "lastActive": user.get("lastActive"),
        },
    }


@router.post("/auth/verify")
def verify_token(request: TokenRequest):
    state = get_state()
    auth = state.require_auth()
    if not request.id_token:
        raise HTTPException(status_code=400, detail="ID token is required")
    token = auth.verify_id_token(request.id_token)
    if token.valid:
        data = {"uid": token.uid, "email": token.email, "valid": True}
    else:
        data = {"valid": False, "error": token.error}
    return {"success": token.valid, "data": data}


@router.post("/auth/create-user", status_code=201)
def create_auth_user(
    request: CreateUserRequest,
    authorization: Optional[str] = Header(None),
):
    """Admin-only: create an auth user and its record. Requires `Authorization: Bearer <admin ID token>`."""
    state = get_state()
    auth = state.require_auth()
    store = state.require_store()
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Admin authorization required")
    admin = auth.verify_id_token(authorization[len("Bearer "):])
    if not admin.valid:
        raise HTTPException(status_code=401, detail="Invalid admin token")
    if not (request.email and request.password and request.username):
        raise HTTPException(status_code=400, detail="Email, password, and username are required")
    username = request.username.strip()
    _validate_username(username)
    _ensure_username_available(state, username)
    try:
        auth_user = auth.create_user(request.email, request.password, username)
    except EmailAlreadyRegistered:
        raise HTTPException(status_code=409, detail="Email already registered")
    uid = auth_user["uid"]
    user = _user_document(uid, username, request.email, state.now())
    user["uid"] = uid
    user["createdByAdmin"] = admin.uid
    store.create(uid, user)
    logger.info("Admin %s created user %s (%s)", admin.uid, uid, username)
    return {
        "success": True,
        "message": "User created successfully",
        "data": {"uid": uid, "username": username, "email": request.email},
    }
