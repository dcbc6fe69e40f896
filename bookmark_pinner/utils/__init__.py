"""
Utility modules for Bookmark Pinner.
"""

from .error_handler import (
    APIError,
    AuthenticationError,
    BookmarkPinnerError,
    ConfigurationError,
    FetchError,
    NetworkError,
    PinboardAPIError,
    RateLimitError,
    ResolutionError,
    SelectionUnavailableError,
    SubmissionValidationError,
    ValidationError,
)
from .validation import is_valid_url

__all__ = [
    "APIError",
    "AuthenticationError",
    "BookmarkPinnerError",
    "ConfigurationError",
    "FetchError",
    "NetworkError",
    "PinboardAPIError",
    "RateLimitError",
    "ResolutionError",
    "SelectionUnavailableError",
    "SubmissionValidationError",
    "ValidationError",
    "is_valid_url",
]
