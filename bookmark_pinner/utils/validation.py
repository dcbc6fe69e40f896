"""
Input validation utilities for Bookmark Pinner.

This module provides validation functions for command-line arguments
and the bookmark form.
"""

import os
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

from bookmark_pinner.utils.error_handler import ValidationError

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_valid_url(url: Optional[str]) -> bool:
    """
    Check whether a string parses as an absolute URL.

    An absolute URL here has a scheme and an authority, so
    "https://example.com" passes while "not a url", "" and "ftp:/bad" do not.
    Surrounding whitespace is not stripped.
    """
    if not url or not isinstance(url, str):
        return False
    if any(ch.isspace() for ch in url):
        return False

    try:
        parsed = urlparse(url)
        # Accessing port validates it
        parsed.port
    except ValueError:
        return False

    if not parsed.scheme or not _SCHEME_RE.match(parsed.scheme):
        return False

    return bool(parsed.netloc) and bool(parsed.hostname)


def validate_config_file(file_path: Union[str, Path, None]) -> Union[Path, None]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to configuration file (optional)

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If config file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in (".toml", ".json"):
        raise ValidationError(
            f"Configuration file must be TOML or JSON, got: {path.suffix}"
        )

    return path.absolute()


def validate_url_argument(url: Optional[str]) -> Optional[str]:
    """
    Validate a URL passed on the command line.

    Raises:
        ValidationError: If the URL is not absolute
    """
    if url is None:
        return None

    url = url.strip()
    if not is_valid_url(url):
        raise ValidationError(f"Not a valid absolute URL: {url}")
    return url
