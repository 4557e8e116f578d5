"""Error taxonomy shared by services and route handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for failures raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input has the wrong shape, length or type."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentialsError(DomainError):
    """Username or password rejected; deliberately unspecific."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class NotFoundError(DomainError):
    """Referenced category, item or footer entry does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(DomainError):
    """Entity with the same key already exists."""

    status_code = status.HTTP_409_CONFLICT


class ApiError(HTTPException):
    """HTTP error carrying an optional secondary ``details`` field."""

    def __init__(
        self,
        status_code: int,
        error: str,
        *,
        details: str | None = None,
        extra: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=error, headers=headers)
        self.details = details
        self.extra = extra or {}


def error_payload(error: str, details: str | None = None, extra: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the JSON body used by every error response."""
    payload: dict[str, Any] = {"error": error}
    if details is not None:
        payload["details"] = details
    if extra:
        payload.update(extra)
    return payload


@contextmanager
def store_failure(operation: str) -> Iterator[None]:
    """Turn unexpected storage errors into a 500 naming the failed operation."""
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("%s", operation)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, operation, details=str(exc)) from exc
