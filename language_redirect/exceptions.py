"""
Custom Exception Classes for the Language Redirect service

This module defines the exceptions raised while resolving a visitor's
language, together with machine-readable error codes for consistent
error responses.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error responses"""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    LANGUAGE_NO_PRESET_AVAILABLE = "LANGUAGE_NO_PRESET_AVAILABLE"
    LANGUAGE_INVALID_LOCALE = "LANGUAGE_INVALID_LOCALE"


class LanguageRedirectError(Exception):
    """Base exception class for all language redirect exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Language Resolution Exceptions
# ============================================================================


class NoPresetAvailableError(LanguageRedirectError):
    """Raised when neither cookie, header nor default yields a language preset"""

    def __init__(self, dimension_name: str = "language"):
        super().__init__(
            message=(
                "Unable to find a language preset for the detected locale "
                "and no default preset is configured. "
                f"Check your content dimension settings: content_dimensions.{dimension_name}."
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=ErrorCode.LANGUAGE_NO_PRESET_AVAILABLE,
            details={"dimension": dimension_name},
        )


class InvalidLocaleIdentifierError(LanguageRedirectError):
    """Raised when a string cannot be parsed as a locale identifier"""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"'{identifier}' is not a valid locale identifier",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ErrorCode.LANGUAGE_INVALID_LOCALE,
            details={"identifier": identifier},
        )
