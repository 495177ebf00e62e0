"""
Error rendering for the JSON API.

Every failure leaves the API as ``{"error": "<message>"}``; request validation
problems become a 400 with the individual field errors under ``details``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Turn storage failures raised inside the block into a generic 500."""
    try:
        yield
    except OSError as exc:
        logger.exception("%s: %s", message, exc)
        raise HTTPException(500, message) from exc


def _validation_details(exc: RequestValidationError) -> list[dict]:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        details.append({"field": ".".join(loc), "msg": err.get("msg", "")})
    return details


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            {"error": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            jsonable_encoder({"error": "Invalid input", "details": _validation_details(exc)}),
            status_code=400,
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)
