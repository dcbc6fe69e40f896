"""
Metadata Fetcher Module

Loads a page with a single GET and pulls its <title> and meta description
out with two regular expressions. Both values are best-effort and default
to an empty string.
"""

import html
import logging
import re
from typing import Optional

import requests

from ..utils.browser_simulator import BrowserSimulator
from ..utils.error_handler import FetchError
from .data_models import PageMetadata

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"<title>(.*?)</title>")
DESCRIPTION_PATTERN = re.compile(
    r"""<meta[^>]*name=["']description["'][^>]*content=["'](.*?)["']""",
    re.IGNORECASE,
)


def extract_document_title(document: str) -> str:
    """Return the first <title> text with HTML entities decoded."""
    match = TITLE_PATTERN.search(document)
    return html.unescape(match.group(1)) if match else ""


def extract_page_description(document: str) -> str:
    """Return the content of the first description <meta> tag, decoded."""
    match = DESCRIPTION_PATTERN.search(document)
    return html.unescape(match.group(1)) if match else ""


class MetadataFetcher:
    """Fetch a page and extract bookmark metadata from it."""

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize metadata fetcher.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            session: Optional preconfigured requests session
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(BrowserSimulator().get_headers())
        return session

    def load_document(self, url: str) -> str:
        """
        GET the page and return its body as text.

        Raises:
            FetchError: On network failure or a non-2xx status
        """
        try:
            response = self.session.get(
                url, timeout=self.timeout, verify=self.verify_ssl
            )
        except requests.RequestException as e:
            raise FetchError(str(e), url=url) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                response.reason or f"HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        return response.text

    def fetch_metadata(self, url: str) -> PageMetadata:
        """
        Load the page and extract title and description independently.

        Raises:
            FetchError: If the page could not be loaded
        """
        document = self.load_document(url)
        metadata = PageMetadata(
            title=extract_document_title(document),
            description=extract_page_description(document),
        )
        logger.debug(
            f"Extracted metadata for {url}: title={metadata.title!r}, "
            f"description={metadata.description!r}"
        )
        return metadata
