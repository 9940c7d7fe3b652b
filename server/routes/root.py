"""Root and health endpoints."""

import math
from datetime import datetime, timezone

from fastapi import APIRouter

from ranking import ensure_records
from ranking.stages import is_active

from ..state import get_state

router = APIRouter()

SERVICE_NAME = "User Ranking API"
SERVICE_VERSION = "1.0.0"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "ready" if state.user_store is not None else "not_configured",
        "algorithms": state.registry.descriptions(),
        "endpoints": [
            "/api/register (POST)",
            "/api/login (POST)",
            "/api/auth/verify (POST)",
            "/api/auth/create-user (POST)",
            "/api/check-duplicate (POST)",
            "/api/search (POST)",
            "/api/trending (GET)",
            "/api/leaderboard (GET)",
            "/api/sort (GET)",
            "/api/health (GET)",
        ],
    }


@router.get("/api/health")
def health():
    """User counts over the whole store."""
    state = get_state()
    snapshot = state.load_snapshot()
    records = ensure_records(snapshot)
    active = [r for r in records if is_active(r)]
    total_points = sum(r.points for r in active)
    return {
        "success": True,
        "status": "healthy",
        "totalUsers": len(snapshot),
        "activeUsers": len(active),
        "totalPoints": total_points,
        "averagePoints": math.floor(total_points / len(active) + 0.5) if active else 0,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
