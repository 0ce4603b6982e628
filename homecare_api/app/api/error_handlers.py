"""
Exception handlers producing the API's error envelope.

Clients expect ``{"message": str}`` for every error and an extra
``"field"`` naming the first offending input on validation failures
(HTTP 400).  FastAPI's own ``{"detail": ...}`` bodies and its 422
status for invalid requests are replaced accordingly.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


def error_body(message: str, field: str | None = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    if field:
        body["field"] = field
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routers may pass a ready-made envelope (with ``field``) as detail.
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    # loc starts with the request part ("body", "query", "path").
    loc = [str(part) for part in first.get("loc", ())]
    field = ".".join(loc[1:]) if len(loc) > 1 else None
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(first.get("msg", "Invalid request"), field),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
