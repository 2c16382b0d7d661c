"""
Structured errors raised by the Duolingo client.

Transport failures are raised by httpx and reach the caller untouched. Errors
detected locally (missing session, missing language data, rejected login) are
raised as DuolingoClientError carrying a frozen ErrorDetail, so callers branch
on ``error.error_code`` instead of matching message text.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, NoReturn

import httpx
from pydantic import BaseModel, ConfigDict, Field

from duolingo_client.error_enums import ErrorCode


class ErrorDetail(BaseModel):
    """Data-only description of a client error."""

    error_code: ErrorCode
    message: str
    operation: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class DuolingoClientError(Exception):
    """Exception wrapping an ErrorDetail."""

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "error_detail": self.error_detail.model_dump(mode="json"),
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.error_detail.message}"

    def __repr__(self) -> str:
        return (
            f"DuolingoClientError(code={self.error_code}, "
            f"message={self.error_detail.message!r}, operation={self.operation})"
        )


def _raise(
    error_code: ErrorCode, operation: str, message: str, **details: Any
) -> NoReturn:
    raise DuolingoClientError(
        ErrorDetail(
            error_code=error_code,
            message=message,
            operation=operation,
            details=details,
        )
    )


def raise_authentication_required(operation: str, **additional_context: Any) -> NoReturn:
    """Raise when a session-dependent operation runs without a session.

    Args:
        operation: Name of the operation that needed the session
        **additional_context: Extra fields stored in the error details

    Raises:
        DuolingoClientError: Always, with AUTHENTICATION_REQUIRED
    """
    _raise(
        ErrorCode.AUTHENTICATION_REQUIRED,
        operation,
        "Login required",
        **additional_context,
    )


def raise_language_not_active(
    operation: str, language: str, username: str, **additional_context: Any
) -> NoReturn:
    """Raise when a profile carries no data for the requested language.

    Args:
        operation: Name of the operation performing the lookup
        language: Requested language id
        username: User whose profile was fetched
        **additional_context: Extra fields stored in the error details

    Raises:
        DuolingoClientError: Always, with LANGUAGE_NOT_ACTIVE
    """
    _raise(
        ErrorCode.LANGUAGE_NOT_ACTIVE,
        operation,
        f"{language} is not the active language for {username}",
        language=language,
        username=username,
        **additional_context,
    )


def raise_login_rejected(
    operation: str, username: str, message: str, **additional_context: Any
) -> NoReturn:
    """Raise when the login endpoint refuses the supplied credentials.

    Raises:
        DuolingoClientError: Always, with AUTHENTICATION_ERROR
    """
    _raise(
        ErrorCode.AUTHENTICATION_ERROR,
        operation,
        message,
        username=username,
        **additional_context,
    )


def classify_error(exc: BaseException) -> ErrorCode:
    """Map an exception raised by a client operation to its ErrorCode.

    httpx status and network errors map to TRANSPORT_ERROR; anything that is
    neither a transport error nor a DuolingoClientError maps to UNKNOWN_ERROR.
    """
    if isinstance(exc, DuolingoClientError):
        return exc.error_detail.error_code
    if isinstance(exc, (httpx.HTTPStatusError, httpx.TransportError)):
        return ErrorCode.TRANSPORT_ERROR
    return ErrorCode.UNKNOWN_ERROR
