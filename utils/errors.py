"""
Error kinds raised by the stores, the auth layer and the route handlers.

Each kind carries the HTTP status it maps to; the translation into a
response happens once, in ``api.middleware.register_exception_handlers``.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for every expected, client-visible failure."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request body"


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Email already in use"


class InvalidCredentials(AppError):
    """Wrong email or wrong password; deliberately indistinguishable."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
