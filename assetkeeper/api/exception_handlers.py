"""
Map domain errors to HTTP responses
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from assetkeeper.core.errors import (
    NotFoundError,
    PreconditionFailedError,
    InvalidCredentialsError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(PreconditionFailedError)
    async def precondition_handler(request: Request, exc: PreconditionFailedError):
        return _error(400, str(exc))

    @app.exception_handler(InvalidCredentialsError)
    async def credentials_handler(request: Request, exc: InvalidCredentialsError):
        return _error(401, str(exc))

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError):
        return _error(502, str(exc))

    @app.exception_handler(httpx.TransportError)
    async def transport_handler(request: Request, exc: httpx.TransportError):
        logger.error(f"Gemini request failed: {exc!r}")
        return _error(502, f"Gemini request failed: {exc}")

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        return _error(409, str(exc.orig))
