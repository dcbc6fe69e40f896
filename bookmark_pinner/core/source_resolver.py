"""
Source Resolver Module

Determines the URL of the page the user is looking at: the current text
selection when it is a URL, otherwise the active tab of the frontmost
recognised browser.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import pyperclip

from ..utils.error_handler import SelectionUnavailableError
from ..utils.validation import is_valid_url
from .data_models import TabQueryResult

logger = logging.getLogger(__name__)

WEBKIT = "webkit"
CHROMIUM = "chromium"

# Frontmost application name -> scripting dictionary family
RECOGNISED_BROWSERS: Dict[str, str] = {
    "Safari": WEBKIT,
    "Webkit": WEBKIT,
    "Brave Browser": CHROMIUM,
    "Google Chrome": CHROMIUM,
}

FRONTMOST_APP_SCRIPT = [
    'tell application "System Events" to set frontApp to name of first '
    "process whose frontmost is true",
    "return frontApp",
]

TAB_URL_SCRIPTS: Dict[str, List[str]] = {
    WEBKIT: [
        'using terms from application "Safari"',
        'tell application "{app}" to set currentTabUrl to URL of front document',
        "end using terms from",
        "return currentTabUrl",
    ],
    CHROMIUM: [
        'using terms from application "Google Chrome"',
        'tell application "{app}" to set currentTabUrl to URL of active tab '
        "of front window",
        "end using terms from",
        "return currentTabUrl",
    ],
}


class SelectionReader:
    """Read the user's current text selection via the system clipboard."""

    def read(self) -> str:
        """
        Return the selected text.

        Raises:
            SelectionUnavailableError: If nothing can be read
        """
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise SelectionUnavailableError(f"Clipboard not readable: {e}") from e

        if not text or not text.strip():
            raise SelectionUnavailableError("No text selected")
        return text.strip()


class ActiveTabQuery(ABC):
    """Ask the frontmost application for the URL of its active page."""

    @abstractmethod
    def query(self) -> TabQueryResult:
        """Return the active tab URL, or an empty result."""
        pass


class AppleScriptTabQuery(ActiveTabQuery):
    """macOS implementation of ActiveTabQuery using osascript."""

    def __init__(
        self,
        osascript_path: str = "osascript",
        browsers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0,
    ):
        self.osascript_path = osascript_path
        self.browsers = dict(browsers if browsers is not None else RECOGNISED_BROWSERS)
        self.timeout = timeout

    def _run_applescript(self, lines: List[str]) -> Optional[str]:
        """Run a script and return its stripped output, or None on failure."""
        command = [self.osascript_path]
        for line in lines:
            command.extend(["-e", line])

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug(f"osascript failed to run: {e}")
            return None

        if result.returncode != 0:
            logger.debug(
                f"osascript exited with {result.returncode}: {result.stderr.strip()}"
            )
            return None

        output = result.stdout.strip()
        return output or None

    def frontmost_application(self) -> Optional[str]:
        return self._run_applescript(FRONTMOST_APP_SCRIPT)

    def query(self) -> TabQueryResult:
        app = self.frontmost_application()
        if app is None:
            return TabQueryResult.empty()

        family = self.browsers.get(app)
        if family is None:
            logger.debug(f"Frontmost application '{app}' is not a recognised browser")
            return TabQueryResult.empty(application=app)

        # Application names come from the allow-list, never from user input
        script = [line.format(app=app) for line in TAB_URL_SCRIPTS[family]]
        url = self._run_applescript(script)
        if not url:
            return TabQueryResult.empty(application=app)

        return TabQueryResult(url=url, application=app)


class SourceResolver:
    """Resolve zero or one candidate URL for the active page."""

    def __init__(
        self,
        selection_reader: Optional[SelectionReader] = None,
        tab_query: Optional[ActiveTabQuery] = None,
        use_selection: bool = True,
    ):
        self.selection_reader = selection_reader or SelectionReader()
        self.tab_query = tab_query or AppleScriptTabQuery()
        self.use_selection = use_selection

    def _url_from_selection(self) -> str:
        """
        Read the selection and check that it is a URL.

        Raises:
            SelectionUnavailableError: If there is no usable selection
        """
        selected_text = self.selection_reader.read()
        logger.debug(f"selectedText {selected_text!r}")
        if not is_valid_url(selected_text):
            raise SelectionUnavailableError(f"{selected_text} is not a valid URL")
        return selected_text

    def resolve(self) -> Optional[str]:
        """
        Return the best-guess URL for the active page, or None.
        """
        if self.use_selection:
            try:
                return self._url_from_selection()
            except SelectionUnavailableError as e:
                logger.debug(f"Selection not usable: {e}")

        result = self.tab_query.query()
        if not result.found:
            logger.info("Couldn't determine URL of front-most application")
            return None

        logger.info(f"Resolved URL {result.url} from {result.application}")
        return result.url
