"""
Pytest configuration and shared fixtures for bookmark pinner tests.

This module provides common fixtures, mocks, and test utilities that are
shared across multiple test modules.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from bookmark_pinner.core.bookmark_form import BookmarkForm
from bookmark_pinner.core.data_models import Bookmark
from bookmark_pinner.core.pinboard_client import PinboardClient
from bookmark_pinner.core.preferences import PreferenceStore
from tests.fixtures.mock_utilities import MockRequestsSession

# ============================================================================
# Pytest Configuration
# ============================================================================


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep a developer's real token and config directory out of the tests."""
    monkeypatch.delenv("PINBOARD_API_TOKEN", raising=False)
    monkeypatch.setattr(
        "bookmark_pinner.config.pydantic_config.DEFAULT_CONFIG_DIR",
        tmp_path / "config-home",
    )


# ============================================================================
# Temporary Directory and File Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="pinner_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


@pytest.fixture
def preferences(temp_dir: Path) -> PreferenceStore:
    return PreferenceStore(temp_dir / "preferences.json")


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def mock_session() -> MockRequestsSession:
    """A requests session answering 200 OK to everything."""
    return MockRequestsSession()


# ============================================================================
# Form Fixtures
# ============================================================================


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(record=True, force_terminal=False, width=120)


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock(spec=PinboardClient)


@pytest.fixture
def form(mock_client, preferences, console) -> BookmarkForm:
    return BookmarkForm(
        client=mock_client,
        preferences=preferences,
        site_url="https://pinboard.in",
        console=console,
    )


@pytest.fixture
def valid_bookmark() -> Bookmark:
    return Bookmark(
        url="https://example.com/article",
        title="An Article",
        description="About things",
        tags="python, reading",
        private=True,
        read_later=False,
    )
