"""Typed errors raised by services and mapped to HTTP responses in main.py."""

from http import HTTPStatus


class MessagelyError(Exception):
    """Base class for every error the services raise on purpose."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MessagelyError):
    status = HTTPStatus.BAD_REQUEST
    default_message = "Invalid input"


class AuthError(MessagelyError):
    status = HTTPStatus.UNAUTHORIZED
    default_message = "Not authenticated"


class ForbiddenError(MessagelyError):
    status = HTTPStatus.FORBIDDEN
    default_message = "Not allowed"


class NotFoundError(MessagelyError):
    status = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class ConflictError(MessagelyError):
    status = HTTPStatus.CONFLICT
    default_message = "Already exists"


class StorageError(MessagelyError):
    """Database failure. The original exception is kept as ``__cause__``."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Storage failure"
