"""HTTP plumbing shared by the API routers: error rendering and request logging.

Every error body has the shape ``{"error": ...}``. Protean's handlers are
installed first and then overridden for the exceptions this API renders
itself, so the status codes stay stable regardless of framework defaults.
"""

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from shared.exceptions import AuthenticationError, ConflictError
from shared.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


def _messages(exc) -> dict:
    messages = getattr(exc, "messages", None)
    if messages:
        return messages
    return {"_entity": [str(exc) or exc.__class__.__name__]}


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _messages(exc)})


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": _messages(exc)})


async def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"error": exc.messages})


async def _unauthenticated(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": exc.messages},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error while serving request",
        method=request.method,
        path=request.url.path,
        error=exc.__class__.__name__,
    )
    return JSONResponse(status_code=500, content={"error": {"_entity": ["Internal server error"]}})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(AuthenticationError, _unauthenticated)
    app.add_exception_handler(Exception, _unhandled)


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request served",
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response
