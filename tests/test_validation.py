"""
Tests for URL and argument validation.
"""

import pytest

from bookmark_pinner.utils.error_handler import ValidationError
from bookmark_pinner.utils.validation import (
    is_valid_url,
    validate_config_file,
    validate_url_argument,
)


class TestIsValidURL:
    """Tests for is_valid_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com/path?q=1#frag",
            "https://sub.example.co.uk:8443/a/b",
            "ftp://files.example.com/pub",
            "http://localhost:3000",
        ],
    )
    def test_absolute_urls_are_valid(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "example.com",
            "ftp:/bad",
            "/relative/path",
            "https://",
            "http://example.com:notaport",
            "1http://example.com",
        ],
    )
    def test_non_absolute_urls_are_invalid(self, url):
        assert is_valid_url(url) is False

    def test_none_is_invalid(self):
        assert is_valid_url(None) is False

    def test_surrounding_whitespace_is_invalid(self):
        """Callers trim before validating."""
        assert is_valid_url(" https://example.com ") is False
        assert is_valid_url("https://example.com") is True


class TestValidateUrlArgument:
    def test_none_passes_through(self):
        assert validate_url_argument(None) is None

    def test_strips_whitespace(self):
        assert validate_url_argument("  https://a.com  ") == "https://a.com"

    def test_invalid_url_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_url_argument("not a url")
        assert "not a url" in str(exc_info.value)


class TestValidateConfigFile:
    def test_none_passes_through(self):
        assert validate_config_file(None) is None

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(ValidationError):
            validate_config_file(temp_dir / "missing.toml")

    def test_directory_raises(self, temp_dir):
        with pytest.raises(ValidationError):
            validate_config_file(temp_dir)

    def test_wrong_extension_raises(self, temp_dir):
        path = temp_dir / "config.ini"
        path.write_text("[x]")
        with pytest.raises(ValidationError) as exc_info:
            validate_config_file(path)
        assert ".ini" in str(exc_info.value)

    def test_valid_file_returns_absolute_path(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("")
        result = validate_config_file(path)
        assert result.is_absolute()
        assert result.name == "config.toml"
