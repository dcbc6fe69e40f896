"""
Data models for Bookmark Pinner.

This module defines the transient structures that flow from source
resolution through the form to the Pinboard call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PageMetadata:
    """Title and description extracted from a fetched page."""

    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class TabQueryResult:
    """
    Result of asking the frontmost application for its active page.

    An empty result (``url is None``) means the frontmost application is not
    a recognised browser or could not be queried.
    """

    url: Optional[str] = None
    application: Optional[str] = None

    @classmethod
    def empty(cls, application: Optional[str] = None) -> "TabQueryResult":
        return cls(url=None, application=application)

    @property
    def found(self) -> bool:
        return bool(self.url)


@dataclass
class Bookmark:
    """
    A bookmark being composed in the form.

    Created fresh per invocation, populated from auto-detection, edited by
    the user and discarded once the service accepts it.
    """

    url: str = ""
    title: str = ""
    description: str = ""
    tags: str = ""
    private: bool = False
    read_later: bool = False

    @property
    def tag_list(self) -> List[str]:
        """Tags from the comma-separated field, blanks dropped."""
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    def apply_metadata(self, metadata: PageMetadata) -> None:
        self.title = metadata.title
        self.description = metadata.description

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and serialization"""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "tags": self.tags,
            "private": self.private,
            "readLater": self.read_later,
        }


@dataclass
class CaptureResult:
    """Outcome of one capture command run."""

    bookmark: Optional[Bookmark] = None
    submitted: bool = False
    aborted: bool = False
    errors: List[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        if self.submitted or self.aborted:
            return 0
        return 1 if self.errors else 0
