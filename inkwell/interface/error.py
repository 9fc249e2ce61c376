"""Interface layer errors.

Domain and adapter errors that escape a route are turned into JSON
responses here. Backend failures never leak their message to the client.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from inkwell.adapter.error import AuthProviderError, BackendError
from inkwell.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

BACKEND_UNAVAILABLE = "Something went wrong. Please try again."


class InterfaceError(Exception):
    """Base interface error."""

    pass


class WebhookAuthError(InterfaceError):
    """A backend webhook arrived without the shared secret."""

    pass


def error_body(message: str, field: str | None = None) -> dict:
    body: dict = {"detail": message}
    if field:
        body["field"] = field
    return body


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(str(exc), exc.field),
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(f"{exc.resource} not found"),
    )


async def handle_not_authorized(request: Request, exc: NotAuthorizedError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=error_body(str(exc)))


async def handle_business_rule(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error_body(str(exc)))


async def handle_auth_provider_error(
    request: Request, exc: AuthProviderError
) -> JSONResponse:
    logfire.warn("Auth provider rejected request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(str(exc) or "Authentication failed"),
    )


async def handle_backend_error(request: Request, exc: BackendError) -> JSONResponse:
    if exc.is_conflict:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content=error_body("Already exists")
        )
    logfire.error(
        "Backend request failed",
        path=request.url.path,
        status_code=exc.status_code,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY, content=error_body(BACKEND_UNAVAILABLE)
    )


async def handle_webhook_auth_error(request: Request, exc: WebhookAuthError) -> JSONResponse:
    logfire.warn("Webhook rejected", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body("Invalid webhook secret"),
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    # Malformed identifiers in paths and bodies
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and adapter errors to HTTP responses."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(BusinessRuleViolationError, handle_business_rule)
    app.add_exception_handler(AuthProviderError, handle_auth_provider_error)
    app.add_exception_handler(BackendError, handle_backend_error)
    app.add_exception_handler(WebhookAuthError, handle_webhook_auth_error)
    app.add_exception_handler(ValueError, handle_value_error)
