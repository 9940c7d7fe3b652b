"""Exception handlers translating errors into the `{success: false, error}` envelope."""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ranking import InvalidAlgorithm, RankingError, StoreUnavailable

from .config import get_config
from .utils import error_envelope

logger = logging.getLogger(__name__)


def _ranking_error(request: Request, exc: RankingError) -> JSONResponse:
    if isinstance(exc, InvalidAlgorithm):
        body = error_envelope(exc.message, available=exc.available)
    elif isinstance(exc, StoreUnavailable):
        body = error_envelope(exc.error, message=exc.message)
        if get_config().is_development:
            body["details"] = "".join(traceback.format_exception(exc))
    else:
        body = error_envelope(exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


def _http_error(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in errors
    )
    return JSONResponse(status_code=400, content=error_envelope("Invalid request", message=message))


def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = error_envelope("Internal server error", message=str(exc))
    if get_config().is_development:
        body["details"] = "".join(traceback.format_exception(exc))
    return JSONResponse(status_code=500, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Attach envelope-producing handlers to the app."""
    app.add_exception_handler(RankingError, _ranking_error)
    app.add_exception_handler(HTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unhandled_error)
