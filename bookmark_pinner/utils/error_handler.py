"""
Exception hierarchy for Bookmark Pinner.

All custom exceptions for the project are defined here. Import them from
bookmark_pinner.utils.error_handler.
"""

from typing import Optional


class BookmarkPinnerError(Exception):
    """Base exception for all bookmark pinner errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(BookmarkPinnerError):
    """General validation errors."""

    pass


class SubmissionValidationError(ValidationError):
    """The bookmark form holds an invalid URL or an empty title."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BookmarkPinnerError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Source Resolution Errors
# ============================================================================


class ResolutionError(BookmarkPinnerError):
    """The active page URL could not be determined."""

    pass


class SelectionUnavailableError(ResolutionError):
    """The current text selection could not be read."""

    pass


# ============================================================================
# Network Errors
# ============================================================================


class NetworkError(BookmarkPinnerError):
    """Network/HTTP related errors."""

    pass


class FetchError(NetworkError):
    """
    The page could not be loaded.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code if a response was received
    """

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


# ============================================================================
# API Errors
# ============================================================================


class APIError(BookmarkPinnerError):
    """Base class for API-related errors."""

    pass


class PinboardAPIError(APIError):
    """
    The Pinboard service rejected or failed a request.

    Attributes:
        message: Error description
        status_code: HTTP status code if applicable
        result_code: Pinboard result_code if the service returned one
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        result_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.result_code = result_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)


class AuthenticationError(PinboardAPIError):
    """Authentication/authorization errors."""

    pass


class RateLimitError(PinboardAPIError):
    """Rate limit exceeded errors."""

    pass
