"""Root pytest configuration for all tests."""

import logging
from unittest.mock import Mock

import pytest

from confluence_mcp.confluence_client.api_wrapper import APIWrapper
from confluence_mcp.confluence_client.config import Settings

# Keep urllib3 connection chatter out of captured logs
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture
def settings():
    """Settings with fake credentials and default tuning."""
    return Settings(
        email="test@example.com",
        api_token="token123",
        domain="test.atlassian.net",
    )


@pytest.fixture
def api(settings):
    """Real APIWrapper whose requests.Session is a Mock.

    Queue responses with ``api._session.request.side_effect = [...]``.
    """
    wrapper = APIWrapper(settings)
    wrapper._session = Mock()
    return wrapper


@pytest.fixture
def mock_api(settings):
    """Mock APIWrapper with real settings and URL resolution."""
    mock = Mock()
    mock.settings = settings
    mock.base_url = settings.base_url
    mock.resolve_url.side_effect = APIWrapper(settings).resolve_url
    return mock
