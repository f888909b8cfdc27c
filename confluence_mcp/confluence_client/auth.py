"""Authentication module for loading Atlassian credentials.

This module handles loading Confluence Cloud credentials from environment variables
using python-dotenv. It validates that all required credentials are present and
raises ConfigurationError naming every missing variable before any request is made.
"""

import base64
import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import ConfigurationError


class Credentials(NamedTuple):
    """Atlassian API credentials."""
    email: str
    api_token: str
    domain: str


class Authenticator:
    """Loads and validates Atlassian credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Required environment variables:
        ATLASSIAN_EMAIL: Account email address
        ATLASSIAN_API_TOKEN: Atlassian API token
        ATLASSIAN_DOMAIN: Site host (e.g., yourteam.atlassian.net)

    Raises:
        ConfigurationError: If any required credential is missing

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.domain}")
    """

    ENV_EMAIL = 'ATLASSIAN_EMAIL'
    ENV_API_TOKEN = 'ATLASSIAN_API_TOKEN'
    ENV_DOMAIN = 'ATLASSIAN_DOMAIN'

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Atlassian credentials from environment variables.

        Returns:
            Credentials: A named tuple containing email, api_token and domain

        Raises:
            ConfigurationError: If any required credential is missing
        """
        email = os.getenv(self.ENV_EMAIL)
        api_token = os.getenv(self.ENV_API_TOKEN)
        domain = os.getenv(self.ENV_DOMAIN)

        missing = []
        if not email:
            missing.append(self.ENV_EMAIL)
        if not api_token:
            missing.append(self.ENV_API_TOKEN)
        if not domain:
            missing.append(self.ENV_DOMAIN)

        if missing:
            raise ConfigurationError.for_missing(missing)

        return Credentials(email=email, api_token=api_token, domain=domain)  # type: ignore[arg-type]


def basic_auth_header(email: str, api_token: str) -> str:
    """Build the value of the Authorization header for HTTP Basic auth."""
    token = base64.b64encode(f"{email}:{api_token}".encode('utf-8')).decode('ascii')
    return f"Basic {token}"
