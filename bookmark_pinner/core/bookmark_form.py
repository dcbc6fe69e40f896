"""
Bookmark Form Module

Terminal form for reviewing a captured bookmark before it is pinned, plus
the validation and submission flow behind its "Add Bookmark" action.
"""

import logging
import webbrowser
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from ..utils.error_handler import BookmarkPinnerError, SubmissionValidationError
from ..utils.validation import is_valid_url
from .data_models import Bookmark
from .pinboard_client import PinboardClient
from .preferences import PRIVATE, READ_LATER, PreferenceStore

logger = logging.getLogger(__name__)

# Typing this in a text field clears it
CLEAR_MARKER = "-"


class FormAction(str, Enum):
    """Actions available from the form."""

    SUBMIT = "s"
    OPEN_SITE = "o"
    EDIT = "e"
    QUIT = "q"


def validate_submission(bookmark: Bookmark) -> None:
    """
    Check that a bookmark may be submitted.

    Raises:
        SubmissionValidationError: If the URL is not absolute or the title
            is blank
    """
    if not is_valid_url(bookmark.url.strip()):
        raise SubmissionValidationError(f"Invalid URL: {bookmark.url!r}")
    if not bookmark.title.strip():
        raise SubmissionValidationError("Title is empty")


class Notifier:
    """User-facing notifications: failure toasts, progress, confirmation."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def failure(self, title: str, message: Optional[str] = None) -> None:
        text = f"[bold red]✗ {title}[/bold red]"
        if message:
            text += f"\n  {escape(message)}"
        self.console.print(text)

    @contextmanager
    def animated(self, title: str) -> Iterator[None]:
        with self.console.status(title):
            yield

    def hud(self, message: str) -> None:
        self.console.print(f"[bold green]✓ {message}[/bold green]")


class BookmarkForm:
    """
    Editable bookmark form with sticky Private / Read Later checkboxes.
    """

    def __init__(
        self,
        client: PinboardClient,
        preferences: PreferenceStore,
        site_url: str = "https://pinboard.in",
        console: Optional[Console] = None,
    ):
        """
        Initialize the form.

        Args:
            client: Pinboard client used by the submit action
            preferences: Store holding the remembered checkbox values
            site_url: Site opened by the "Open Pinboard" action
            console: Rich console instance (creates one if not provided)
        """
        self.client = client
        self.preferences = preferences
        self.site_url = site_url
        self.console = console or Console()
        self.notifier = Notifier(self.console)
        self.last_error: Optional[str] = None

    def new_bookmark(self, url: str = "") -> Bookmark:
        """Create a bookmark seeded with the remembered checkbox values."""
        return Bookmark(
            url=url,
            private=self.preferences.get_bool(PRIVATE),
            read_later=self.preferences.get_bool(READ_LATER),
        )

    def _ask_text(self, label: str, value: str, placeholder: str) -> str:
        if not value:
            self.console.print(f"[dim]{escape(placeholder)}[/dim]")
        answer = Prompt.ask(label, default=value, show_default=bool(value),
                            console=self.console)
        if answer.strip() == CLEAR_MARKER:
            return ""
        return answer

    def _ask_checkbox(self, label: str, key: str, value: bool) -> bool:
        answer = Confirm.ask(label, default=value, console=self.console)
        # Only a toggle is remembered; the shown value may be a one-run override
        if answer != value:
            self.preferences.set(key, answer)
        return answer

    def edit(self, bookmark: Bookmark) -> Bookmark:
        """Let the user edit every field in place."""
        self.console.print(
            Panel(
                f"Press Enter to keep a value, type '{CLEAR_MARKER}' to clear it.",
                title="Add Bookmark",
                border_style="blue",
            )
        )
        bookmark.url = self._ask_text(
            "URL",
            bookmark.url,
            "Enter URL (Tip: Select a URL before opening this form)",
        )
        bookmark.title = self._ask_text("Title", bookmark.title, "Enter title")
        bookmark.description = self._ask_text(
            "Description", bookmark.description, "Enter bookmark description"
        )
        bookmark.tags = self._ask_text(
            "Tags", bookmark.tags, "Enter tags (comma-separated)"
        )
        bookmark.private = self._ask_checkbox("Private", PRIVATE, bookmark.private)
        bookmark.read_later = self._ask_checkbox(
            "Read Later", READ_LATER, bookmark.read_later
        )
        return bookmark

    def show(self, bookmark: Bookmark) -> None:
        lines = [
            f"[bold]URL:[/bold] {escape(bookmark.url)}",
            f"[bold]Title:[/bold] {escape(bookmark.title)}",
            f"[bold]Description:[/bold] {escape(bookmark.description)}",
            f"[bold]Tags:[/bold] {escape(bookmark.tags)}",
            f"[bold]Private:[/bold] {'yes' if bookmark.private else 'no'}",
            f"[bold]Read Later:[/bold] {'yes' if bookmark.read_later else 'no'}",
        ]
        self.console.print(Panel("\n".join(lines), title="Bookmark", border_style="blue"))

    def choose_action(self) -> FormAction:
        hint = "[s] Add Bookmark  [e] Edit  [o] Open Pinboard  [q] Quit"
        self.console.print(f"[dim]{escape(hint)}[/dim]")
        choice = Prompt.ask(
            "Action",
            choices=[action.value for action in FormAction],
            default=FormAction.SUBMIT.value,
            console=self.console,
        )
        return FormAction(choice)

    def open_site(self) -> None:
        logger.info(f"Opening {self.site_url}")
        webbrowser.open(self.site_url)

    def submit(self, bookmark: Bookmark) -> bool:
        """
        Validate and pin the bookmark.

        Returns:
            True if the service accepted it. On False the bookmark is left
            untouched so the user can retry.
        """
        logger.debug(f"bookmark {bookmark.to_dict()}")
        self.last_error = None

        try:
            validate_submission(bookmark)
        except SubmissionValidationError as e:
            logger.info(f"Submission blocked: {e}")
            self.last_error = str(e)
            self.notifier.failure("Enter a valid URL and title for the bookmark")
            return False

        error = None
        with self.notifier.animated("Pinning bookmark..."):
            try:
                self.client.add_bookmark(bookmark)
            except BookmarkPinnerError as e:
                error = e

        if error is not None:
            logger.error(f"addBookmark error: {error}")
            self.last_error = str(error)
            self.notifier.failure("Could not pin bookmark", str(error))
            return False

        self.notifier.hud("Bookmark pinned!")
        return True
