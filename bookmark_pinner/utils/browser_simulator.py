"""
Browser Simulator Module

Provides realistic browser headers so pages serve the same markup (and
title) a user's browser would receive.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class BrowserProfile:
    """Browser profile with headers and capabilities"""

    user_agent: str
    accept: str
    accept_language: str
    accept_encoding: str
    sec_fetch_dest: str = "document"
    sec_fetch_mode: str = "navigate"
    sec_fetch_site: str = "none"
    sec_fetch_user: str = "?1"


# Safari on macOS, the platform the browser automation targets
DEFAULT_PROFILE = BrowserProfile(
    user_agent=(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15"
    ),
    accept="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    accept_language="en-US,en;q=0.9",
    accept_encoding="gzip, deflate",
)


class BrowserSimulator:
    """Build browser-like request headers"""

    def __init__(self, profile: BrowserProfile = DEFAULT_PROFILE):
        self.profile = profile

    def get_headers(self) -> Dict[str, str]:
        """
        Get realistic browser headers.

        Returns:
            Dictionary of HTTP headers
        """
        profile = self.profile
        return {
            "User-Agent": profile.user_agent,
            "Accept": profile.accept,
            "Accept-Language": profile.accept_language,
            "Accept-Encoding": profile.accept_encoding,
            "Sec-Fetch-Dest": profile.sec_fetch_dest,
            "Sec-Fetch-Mode": profile.sec_fetch_mode,
            "Sec-Fetch-Site": profile.sec_fetch_site,
            "Sec-Fetch-User": profile.sec_fetch_user,
            "Upgrade-Insecure-Requests": "1",
        }
