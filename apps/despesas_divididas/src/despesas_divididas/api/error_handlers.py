"""Map ledger failures to the JSON error body of the API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from despesas_divididas.api.schemas.errors import ErrorResponse
from despesas_divididas.domain.errors import DomainError, compose_error_message

logger = logging.getLogger(__name__)


def _respond(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_content())


def _field_issues(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in issue["loc"]),
            "message": str(issue["msg"]),
        }
        for issue in exc.errors()
    ]


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Return the ledger error with its own status code."""

    logger.info(
        "ledger_request_rejected",
        extra={"path": request.url.path, "code": exc.code},
    )
    return _respond(exc.status_code, ErrorResponse.from_domain_error(exc))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed payloads as 400 with one issue per field."""

    body = ErrorResponse(
        code="INVALID_REQUEST",
        message=compose_error_message(
            cause="Request payload validation failed.",
            action="Fix the invalid fields and send the request again.",
        ),
        details={"errors": _field_issues(exc)},
    )
    return _respond(HTTPStatus.BAD_REQUEST, body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Hide internals of failures the ledger does not model."""

    error_type = type(exc).__name__
    logger.exception(
        "unexpected_error",
        extra={"path": request.url.path, "error_type": error_type},
    )
    body = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message=compose_error_message(
            cause="An unexpected internal error occurred.",
            action="Retry later or contact support if the error persists.",
        ),
        details={"error_type": error_type},
    )
    return _respond(HTTPStatus.INTERNAL_SERVER_ERROR, body)


ERROR_HANDLERS: dict[type[Exception], Any] = {
    DomainError: handle_domain_error,
    RequestValidationError: handle_validation_error,
    Exception: handle_unexpected_error,
}


def register_error_handlers(app: FastAPI) -> None:
    for exception_type, handler in ERROR_HANDLERS.items():
        app.add_exception_handler(exception_type, handler)
