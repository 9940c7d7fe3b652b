"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .auth import router as auth_router
from .rankings import router as rankings_router
from .root import router as root_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(users_router, prefix="/api", tags=["users"])
    app.include_router(rankings_router, prefix="/api", tags=["rankings"])
