"""Unit tests for confluence_client.auth module."""

import base64

import pytest
from unittest.mock import patch

from confluence_mcp.confluence_client.auth import Authenticator, Credentials, basic_auth_header
from confluence_mcp.confluence_client.errors import ConfigurationError

FULL_ENV = {
    'ATLASSIAN_EMAIL': 'test@example.com',
    'ATLASSIAN_API_TOKEN': 'test-token-123',
    'ATLASSIAN_DOMAIN': 'test.atlassian.net',
}


def _getenv_from(env_vars):
    def getenv_side_effect(key):
        return env_vars.get(key)
    return getenv_side_effect


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_are_immutable(self):
        creds = Credentials(email="a@b.c", api_token="t", domain="x.atlassian.net")
        with pytest.raises(AttributeError):
            creds.domain = "other"


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('confluence_mcp.confluence_client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('confluence_mcp.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_success(self, mock_getenv, mock_load_dotenv):
        mock_getenv.side_effect = _getenv_from(FULL_ENV)

        creds = Authenticator().get_credentials()

        assert creds == Credentials(
            email='test@example.com',
            api_token='test-token-123',
            domain='test.atlassian.net',
        )

    @patch('confluence_mcp.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_missing_domain_is_named(self, mock_getenv, mock_load_dotenv):
        env = dict(FULL_ENV, ATLASSIAN_DOMAIN=None)
        mock_getenv.side_effect = _getenv_from(env)

        with pytest.raises(ConfigurationError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == ['ATLASSIAN_DOMAIN']
        assert 'ATLASSIAN_DOMAIN' in str(exc_info.value)

    @patch('confluence_mcp.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_all_missing_are_listed(self, mock_getenv, mock_load_dotenv):
        mock_getenv.side_effect = _getenv_from({})

        with pytest.raises(ConfigurationError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == [
            'ATLASSIAN_EMAIL',
            'ATLASSIAN_API_TOKEN',
            'ATLASSIAN_DOMAIN',
        ]

    @patch('confluence_mcp.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_empty_string_counts_as_missing(self, mock_getenv, mock_load_dotenv):
        env = dict(FULL_ENV, ATLASSIAN_API_TOKEN='')
        mock_getenv.side_effect = _getenv_from(env)

        with pytest.raises(ConfigurationError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == ['ATLASSIAN_API_TOKEN']


class TestBasicAuthHeader:

    def test_encodes_email_and_token(self):
        header = basic_auth_header("user@example.com", "abc")
        assert header.startswith("Basic ")
        assert base64.b64decode(header[len("Basic "):]) == b"user@example.com:abc"
