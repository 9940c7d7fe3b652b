"""
User Ranking API: FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .errors import register_error_handlers
from .logging_config import setup_logging
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, error envelopes, and startup."""
    config = get_config()
    setup_logging(config.log_level)

    app = FastAPI(
        title="User Ranking API",
        description="Registration, search, and trending/leaderboard rankings over user records",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    register_error_handlers(app)

    @app.on_event("startup")
    def _startup():
        _, errors = config.validate()
        for error in errors:
            logger.warning("[startup] Config: %s", error)
        state = get_state()
        logger.info(
            "[startup] User Ranking API starting (environment=%s, data_source=%s, algorithms=%s)",
            config.environment,
            config.data_source,
            ", ".join(state.registry.available()),
        )

    return app


app = create_app()
