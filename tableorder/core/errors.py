"""Error types surfaced by the API."""
from typing import Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

AUTH_REALM = "tableorder-admin"


class TableOrderError(Exception):
    """Base error rendered as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers


class ValidationError(TableOrderError):
    """Malformed or missing input."""

    status_code = 400


class Unauthenticated(TableOrderError):
    """No usable credentials were supplied."""

    status_code = 401

    def __init__(self, message: str = "authentication required"):
        super().__init__(
            message, headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'}
        )


class InvalidCredentials(TableOrderError):
    """Credentials were supplied but do not match."""

    status_code = 401

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)


class NotFound(TableOrderError):
    """The referenced record does not exist."""

    status_code = 404


class InternalError(TableOrderError):
    """Unexpected failure while handling a request."""

    status_code = 500

    def __init__(self, message: str = "internal server error"):
        super().__init__(message)


class FatalStartupError(RuntimeError):
    """The service cannot start (bad configuration or unreachable database)."""


async def table_order_error_handler(request: Request, exc: TableOrderError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "invalid request body"})
