"""
duolingo_client.error_enums - Error code definitions.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # HTTP status or network failure, raised by httpx and never wrapped
    TRANSPORT_ERROR = "TRANSPORT_ERROR"

    # Session-dependent operation invoked while logged out
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"

    # Credentials rejected by the login endpoint
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"

    # Requested language data absent from the fetched profile
    LANGUAGE_NOT_ACTIVE = "LANGUAGE_NOT_ACTIVE"
