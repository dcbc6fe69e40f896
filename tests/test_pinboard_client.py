"""
Unit tests for the Pinboard client.
"""

import pytest
import requests

from bookmark_pinner.core.data_models import Bookmark
from bookmark_pinner.core.pinboard_client import PinboardClient
from bookmark_pinner.utils.error_handler import (
    AuthenticationError,
    ConfigurationError,
    PinboardAPIError,
    RateLimitError,
)
from tests.fixtures.mock_utilities import MockRequestsSession, MockResponse
from tests.fixtures.test_data import (
    PINBOARD_DONE,
    PINBOARD_MISSING_URL,
    TEST_API_TOKEN,
)


def make_client(session, token=TEST_API_TOKEN):
    return PinboardClient(
        api_token=token,
        base_url="https://api.pinboard.in/v1/",
        timeout=12,
        session=session,
    )


class TestPinboardClientBasics:
    def test_initialization_strips_trailing_slash(self):
        client = PinboardClient(api_token=TEST_API_TOKEN, base_url="https://x.test/v1/")
        assert client.base_url == "https://x.test/v1"

    def test_repr_hides_token(self):
        client = PinboardClient(api_token=TEST_API_TOKEN)
        assert "PinboardClient" in repr(client)
        assert TEST_API_TOKEN not in repr(client)

    def test_context_manager_closes_session(self):
        with PinboardClient(api_token=TEST_API_TOKEN) as client:
            session = client.session
            assert session.headers["Accept"] == "application/json"
        assert client._session is None


class TestBuildAddParams:
    def test_maps_form_fields(self, valid_bookmark):
        params = PinboardClient.build_add_params(valid_bookmark)

        assert params == {
            "url": "https://example.com/article",
            "description": "An Article",
            "extended": "About things",
            "tags": "python reading",
            "shared": "no",
            "toread": "no",
        }

    def test_public_read_later(self):
        params = PinboardClient.build_add_params(
            Bookmark(url="https://a.com", title="A", read_later=True)
        )
        assert params["shared"] == "yes"
        assert params["toread"] == "yes"
        assert params["tags"] == ""

    def test_multi_word_tags_are_joined(self):
        params = PinboardClient.build_add_params(
            Bookmark(url="https://a.com", title="A", tags="machine learning, ,ai")
        )
        assert params["tags"] == "machine_learning ai"

    def test_url_and_title_trimmed(self):
        params = PinboardClient.build_add_params(
            Bookmark(url=" https://a.com ", title="  A  ")
        )
        assert params["url"] == "https://a.com"
        assert params["description"] == "A"


class TestAddBookmark:
    def test_success_posts_full_payload(self, valid_bookmark):
        session = MockRequestsSession(MockResponse(200, json_data=PINBOARD_DONE))
        client = make_client(session)

        client.add_bookmark(valid_bookmark)

        assert session.request_count == 1
        request = session.request_history[0]
        assert request["method"] == "POST"
        assert request["url"] == "https://api.pinboard.in/v1/posts/add"
        assert request["timeout"] == 12
        assert request["data"]["auth_token"] == TEST_API_TOKEN
        assert request["data"]["format"] == "json"
        assert request["data"]["url"] == valid_bookmark.url
        assert request["data"]["description"] == valid_bookmark.title

    def test_missing_token_raises_before_request(self, valid_bookmark):
        session = MockRequestsSession()
        client = make_client(session, token=None)

        with pytest.raises(ConfigurationError):
            client.add_bookmark(valid_bookmark)

        assert session.request_count == 0

    def test_result_code_error(self, valid_bookmark):
        session = MockRequestsSession(MockResponse(200, json_data=PINBOARD_MISSING_URL))
        client = make_client(session)

        with pytest.raises(PinboardAPIError) as exc_info:
            client.add_bookmark(valid_bookmark)

        assert str(exc_info.value) == "missing url"
        assert exc_info.value.result_code == "missing url"

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_failure(self, valid_bookmark, status):
        session = MockRequestsSession(MockResponse(status, reason="Unauthorized"))

        with pytest.raises(AuthenticationError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert exc_info.value.status_code == status
        assert f"HTTP {status}" in str(exc_info.value)

    def test_rate_limit(self, valid_bookmark):
        session = MockRequestsSession(MockResponse(429, reason="Too Many Requests"))

        with pytest.raises(RateLimitError):
            make_client(session).add_bookmark(valid_bookmark)

    def test_server_error(self, valid_bookmark):
        session = MockRequestsSession(MockResponse(500, reason="Internal Server Error"))

        with pytest.raises(PinboardAPIError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert "Internal Server Error" in str(exc_info.value)
        assert exc_info.value.status_code == 500

    def test_malformed_json(self, valid_bookmark):
        session = MockRequestsSession(MockResponse(200, text="<html>"))

        with pytest.raises(PinboardAPIError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert "malformed" in str(exc_info.value)

    @pytest.mark.parametrize("body", [["done"], "done", 1])
    def test_non_object_json(self, valid_bookmark, body):
        session = MockRequestsSession(MockResponse(200, json_data=body))

        with pytest.raises(PinboardAPIError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert "malformed" in str(exc_info.value)
        assert exc_info.value.status_code == 200

    def test_network_error(self, valid_bookmark):
        session = MockRequestsSession(error=requests.ConnectionError("refused"))

        with pytest.raises(PinboardAPIError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert "refused" in str(exc_info.value)

    def test_timeout(self, valid_bookmark):
        session = MockRequestsSession(error=requests.Timeout("slow"))

        with pytest.raises(PinboardAPIError) as exc_info:
            make_client(session).add_bookmark(valid_bookmark)

        assert "timed out" in str(exc_info.value)
