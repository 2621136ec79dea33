"""Mapping of domain errors to HTTP error responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.domain.error import (
    DataIntegrityError,
    DomainError,
    NeedLoginError,
    NotAllowedError,
    NotFoundError,
    NotJoinPrivateGroupError,
    UnimplementedError,
)

# Most specific first; the first matching class wins
ERROR_CODES: list[tuple[type[DomainError], int, str, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND", "Not Found"),
    (NeedLoginError, status.HTTP_401_UNAUTHORIZED, "NEED_LOGIN", "Unauthorized"),
    (
        NotJoinPrivateGroupError,
        status.HTTP_401_UNAUTHORIZED,
        "NOT_JOIN_PRIVATE_GROUP_ERROR",
        "Unauthorized",
    ),
    (NotAllowedError, status.HTTP_401_UNAUTHORIZED, "NOT_ALLOWED", "Unauthorized"),
    (
        UnimplementedError,
        status.HTTP_501_NOT_IMPLEMENTED,
        "UNIMPLEMENTED",
        "Not Implemented",
    ),
    (
        DataIntegrityError,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "UNEXPECTED_NOT_FOUND",
        "Internal Server Error",
    ),
]


class ErrorResponse(JSONResponse):
    """JSON error body shared by every failed request."""

    def __init__(self, status_code: int, code: str, error: str, message: str) -> None:
        super().__init__(
            status_code=status_code,
            content={
                "code": code,
                "error": error,
                "message": message,
                "status_code": status_code,
            },
        )


def classify(exc: DomainError) -> tuple[int, str, str]:
    """Find the HTTP status, error code and reason phrase for a domain error."""
    for error_type, status_code, code, error in ERROR_CODES:
        if isinstance(exc, error_type):
            return status_code, code, error
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal Server Error"


async def domain_error_handler(request: Request, exc: DomainError) -> ErrorResponse:
    """Render a domain error raised by a route."""
    status_code, code, error = classify(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            code=code,
            error=str(exc),
        )
    else:
        logfire.info("Request rejected", path=request.url.path, code=code)
    return ErrorResponse(status_code, code, error, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
