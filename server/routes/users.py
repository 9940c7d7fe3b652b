"""Duplicate checks over stored user fields."""

from fastapi import APIRouter, HTTPException

from ..models import CheckDuplicateRequest
from ..state import get_state

router = APIRouter()


@router.post("/check-duplicate")
def check_duplicate(request: CheckDuplicateRequest):
    """Users whose `field` equals `value` exactly."""
    if not request.field or request.value is None or request.value == "":
        raise HTTPException(status_code=400, detail="Field and value required")
    store = get_state().require_store()
    matches = store.find_by_field(request.field, request.value)
    duplicates = [
        {"id": uid, "username": user.get("username"), request.field: request.value}
        for uid, user in matches.items()
    ]
    return {
        "success": True,
        "hasDuplicates": len(duplicates) > 0,
        "count": len(duplicates),
        "duplicates": duplicates,
    }
