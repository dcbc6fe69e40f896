"""
Core bookmark capture modules.

This package contains source resolution, page metadata extraction, the
bookmark form and the Pinboard client.
"""

from .bookmark_form import BookmarkForm, FormAction, validate_submission
from .capture import CaptureCommand
from .data_models import Bookmark, CaptureResult, PageMetadata, TabQueryResult
from .metadata_fetcher import (
    MetadataFetcher,
    extract_document_title,
    extract_page_description,
)
from .pinboard_client import PinboardClient
from .preferences import PreferenceStore
from .source_resolver import (
    RECOGNISED_BROWSERS,
    ActiveTabQuery,
    AppleScriptTabQuery,
    SelectionReader,
    SourceResolver,
)

__all__ = [
    "ActiveTabQuery",
    "AppleScriptTabQuery",
    "Bookmark",
    "BookmarkForm",
    "CaptureCommand",
    "CaptureResult",
    "FormAction",
    "MetadataFetcher",
    "PageMetadata",
    "PinboardClient",
    "PreferenceStore",
    "RECOGNISED_BROWSERS",
    "SelectionReader",
    "SourceResolver",
    "TabQueryResult",
    "extract_document_title",
    "extract_page_description",
    "validate_submission",
]
