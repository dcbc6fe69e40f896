"""
Capture command: resolve the active page, fetch its metadata, let the user
review it and pin it to Pinboard.
"""

import logging
from typing import Optional

from ..utils.error_handler import FetchError
from .bookmark_form import BookmarkForm, FormAction
from .data_models import Bookmark, CaptureResult
from .metadata_fetcher import MetadataFetcher
from .source_resolver import SourceResolver

logger = logging.getLogger(__name__)


class CaptureCommand:
    """
    Run one capture from source resolution to submission.

    Each stage runs once and in order; nothing is shared between stages
    except the bookmark being composed.
    """

    def __init__(
        self,
        resolver: SourceResolver,
        fetcher: MetadataFetcher,
        form: BookmarkForm,
        interactive: bool = True,
        url: Optional[str] = None,
        tags: Optional[str] = None,
        private: Optional[bool] = None,
        read_later: Optional[bool] = None,
    ):
        """
        Initialize the command.

        Args:
            resolver: Source resolver used when no URL is given
            fetcher: Metadata fetcher for the resolved page
            form: Form that edits and submits the bookmark
            interactive: Prompt the user; otherwise submit once as populated
            url: Explicit URL, skipping source resolution
            tags: Initial tags (comma-separated)
            private: Override the remembered Private value for this run
            read_later: Override the remembered Read Later value for this run
        """
        self.resolver = resolver
        self.fetcher = fetcher
        self.form = form
        self.interactive = interactive
        self.url = url
        self.tags = tags
        self.private = private
        self.read_later = read_later

    def prepare(self, url: str) -> Bookmark:
        """Build the pre-populated bookmark for a resolved URL."""
        bookmark = self.form.new_bookmark(url)
        if self.tags:
            bookmark.tags = self.tags
        if self.private is not None:
            bookmark.private = self.private
        if self.read_later is not None:
            bookmark.read_later = self.read_later

        try:
            bookmark.apply_metadata(self.fetcher.fetch_metadata(url))
        except FetchError as e:
            # The form still opens with the URL filled in
            logger.error(f"Could not load document title: {e}")

        return bookmark

    def run(self) -> CaptureResult:
        url = self.url or self.resolver.resolve()
        if url is None:
            return CaptureResult(aborted=True)

        bookmark = self.prepare(url)
        result = CaptureResult(bookmark=bookmark)

        if not self.interactive:
            result.submitted = self.form.submit(bookmark)
            if not result.submitted:
                result.errors.append(self.form.last_error or "submission failed")
            return result

        action = FormAction.EDIT
        while True:
            if action == FormAction.EDIT:
                self.form.edit(bookmark)
            self.form.show(bookmark)

            action = self.form.choose_action()
            if action == FormAction.QUIT:
                logger.info("Capture cancelled by user")
                result.aborted = True
                return result
            if action == FormAction.OPEN_SITE:
                self.form.open_site()
                continue
            if action == FormAction.SUBMIT:
                if self.form.submit(bookmark):
                    result.submitted = True
                    return result
                result.errors.append(self.form.last_error or "submission failed")
                # Keep the populated values for the retry
                action = FormAction.EDIT
