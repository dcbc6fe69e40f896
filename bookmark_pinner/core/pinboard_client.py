"""
Pinboard API client.

Wraps the one write operation this tool needs, ``posts/add``, and turns the
service's failure modes into the project's exception hierarchy.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..utils.error_handler import (
    AuthenticationError,
    ConfigurationError,
    PinboardAPIError,
    RateLimitError,
)
from .data_models import Bookmark


class PinboardClient:
    """
    Client for the Pinboard v1 API.

    Example:
        >>> with PinboardClient(api_token="user:ABC123") as client:
        ...     client.add_bookmark(Bookmark(url="https://example.com", title="Ex"))
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    def __init__(
        self,
        api_token: Optional[str],
        base_url: str = "https://api.pinboard.in/v1",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Pinboard client.

        Args:
            api_token: Pinboard API token in 'username:HEX' form
            base_url: API base URL (trailing slash removed)
            timeout: Request timeout in seconds
            session: Optional preconfigured requests session
        """
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session
        self.logger = logging.getLogger(__name__)

    def __enter__(self) -> "PinboardClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PinboardClient(base_url={self.base_url!r}, timeout={self.timeout})"

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.DEFAULT_HEADERS)
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    @staticmethod
    def build_add_params(bookmark: Bookmark) -> Dict[str, str]:
        """Map a form bookmark onto posts/add parameters."""
        return {
            "url": bookmark.url.strip(),
            "description": bookmark.title.strip(),
            "extended": bookmark.description,
            # Pinboard separates tags with spaces
            "tags": " ".join(tag.replace(" ", "_") for tag in bookmark.tag_list),
            "shared": "no" if bookmark.private else "yes",
            "toread": "yes" if bookmark.read_later else "no",
        }

    def _request(self, method: str, params: Dict[str, str]) -> Dict[str, Any]:
        """
        POST an API method and return the decoded JSON body.

        Raises:
            ConfigurationError: If no API token is configured
            AuthenticationError: On HTTP 401/403
            RateLimitError: On HTTP 429
            PinboardAPIError: On any other failure
        """
        if not self.api_token:
            raise ConfigurationError(
                "No Pinboard API token configured. Set PINBOARD_API_TOKEN or "
                "add pinboard.api_token to your configuration."
            )

        url = f"{self.base_url}/{method}"
        data = dict(params, auth_token=self.api_token, format="json")

        try:
            response = self.session.post(url, data=data, timeout=self.timeout)
        except requests.Timeout as e:
            raise PinboardAPIError(f"Request to Pinboard timed out: {e}") from e
        except requests.RequestException as e:
            raise PinboardAPIError(f"Could not reach Pinboard: {e}") from e

        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(
                "Pinboard rejected the API token", status_code=status
            )
        if status == 429:
            raise RateLimitError(
                "Pinboard rate limit exceeded, try again shortly", status_code=status
            )
        if not 200 <= status < 300:
            raise PinboardAPIError(
                response.reason or "Pinboard request failed", status_code=status
            )

        try:
            body = response.json()
        except ValueError as e:
            raise PinboardAPIError(
                "Pinboard returned a malformed response", status_code=status
            ) from e

        if not isinstance(body, dict):
            raise PinboardAPIError(
                "Pinboard returned a malformed response", status_code=status
            )
        return body

    def add_bookmark(self, bookmark: Bookmark) -> None:
        """
        Create a bookmark.

        Raises:
            PinboardAPIError: If the service did not accept the bookmark
        """
        params = self.build_add_params(bookmark)
        self.logger.info(f"Adding bookmark {params['url']}")

        body = self._request("posts/add", params)
        result_code = body.get("result_code")
        if result_code != "done":
            raise PinboardAPIError(
                str(result_code or "unknown error"), result_code=result_code
            )

        self.logger.info(f"Bookmark {params['url']} added")
