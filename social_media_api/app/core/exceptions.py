"""
Domain errors and their HTTP mapping.

Services raise one of the three error kinds below; the transport layer
translates them into status codes through the handlers installed by
``register_exception_handlers``.  Every error carries a human readable
message which is returned to the client as ``{"detail": message}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "A user with this username already exists."


class SocialMediaError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(SocialMediaError):
    """Input violates a validation rule (blank fields, bad author, missing id)."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateResourceError(SocialMediaError):
    """A uniqueness rule was violated."""

    status_code = status.HTTP_409_CONFLICT


class ResourceNotFoundError(SocialMediaError):
    """A lookup found nothing.

    Surfaces as 401 because the only endpoint that lets it escape is
    login, where it means the credentials did not match.
    """

    status_code = status.HTTP_401_UNAUTHORIZED


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers mapping domain errors to JSON responses."""

    @app.exception_handler(SocialMediaError)
    async def social_media_error_handler(request: Request, exc: SocialMediaError) -> JSONResponse:
        logger.info(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies are invalid requests like any other.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Return validation errors with only JSON-safe fields."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
