"""HTTP transport for the Confluence Cloud REST API.

This module wraps a requests Session and provides the single request
primitive every operation is built on: URL joining, Basic authentication,
JSON encoding, and translation of failures to our typed exception hierarchy.
Both API generations (v1 under /wiki/rest/api and v2 under /wiki/api/v2)
go through the same path.
"""

import json
import logging
import re
import threading
from typing import Any, Dict, Optional

import requests
from requests.exceptions import RequestException

from .auth import basic_auth_header
from .config import Settings
from .errors import ApiError, APIUnreachableError

logger = logging.getLogger(__name__)


class APIWrapper:
    """Thin wrapper around a requests Session for Confluence API calls.

    This class:
    1. Resolves relative endpoints against the configured site origin
    2. Attaches Basic auth and JSON headers to every request
    3. Raises ApiError (status + raw text) on any non-2xx response
    4. Returns None for 204 No Content instead of parsing an empty body

    No retries are performed; a failed request surfaces immediately.

    Example:
        >>> api = APIWrapper(settings)
        >>> page = api.request("/wiki/rest/api/content/123?expand=version")
    """

    def __init__(self, settings: Settings):
        """Initialize the API wrapper with connection settings.

        Args:
            settings: Settings carrying credentials, site domain and timeout
        """
        self.settings = settings
        self._session: Optional[requests.Session] = None
        self._session_lock = threading.Lock()

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def _get_session(self) -> requests.Session:
        """Get or create the requests Session.

        The session is created lazily on first use so constructing the
        wrapper never touches the network. At most one session is created
        even when worker threads race on first use.
        """
        with self._session_lock:
            if self._session is None:
                session = requests.Session()
                session.headers.update({
                    'Authorization': basic_auth_header(
                        self.settings.email, self.settings.api_token
                    ),
                    'Accept': 'application/json',
                    'Content-Type': 'application/json',
                })
                self._session = session
            return self._session

    def resolve_url(self, endpoint: str) -> str:
        """Join an endpoint to the site origin unless it is already absolute.

        Pagination follows "next" links with this same rule, so both
        absolute and relative cursors resolve identically.
        """
        if endpoint.startswith('http://') or endpoint.startswith('https://'):
            return endpoint
        if not endpoint.startswith('/'):
            endpoint = '/' + endpoint
        return f"{self.base_url}{endpoint}"

    def _sanitize_credentials(self, text: str) -> str:
        """Mask credentials before text is written to logs.

        Example:
            >>> api._sanitize_credentials("Authorization: Basic dXNlcjpwYXNz")
            "Authorization: ***REDACTED***"
        """
        if not text:
            return text

        sanitized = text

        # Passwords in URLs (user:pass@host)
        sanitized = re.sub(r'://([\w.-]+):([\w.-]+)@', r'://***:***@', sanitized)

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )

        sanitized = re.sub(
            r'(Basic|Bearer)\s+[^\s\n\r"\']+',
            r'\1 ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )

        if self.settings.api_token:
            sanitized = sanitized.replace(self.settings.api_token, '***REDACTED***')

        return sanitized

    def request(
        self,
        endpoint: str,
        method: str = 'GET',
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a single API request and return the parsed JSON body.

        Args:
            endpoint: Path relative to the site origin (e.g. "/wiki/rest/api/space")
                      or an absolute URL
            method: HTTP method
            body: JSON-serializable payload (sent as the request body)
            headers: Extra headers; these override the defaults

        Returns:
            Parsed JSON response, or None for 204 No Content

        Raises:
            ApiError: If the response status is not 2xx
            APIUnreachableError: If the site cannot be reached
        """
        url = self.resolve_url(endpoint)
        data = json.dumps(body) if body is not None else None

        logger.debug(f"{method} {url}")
        try:
            response = self._get_session().request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.settings.timeout,
            )
        except RequestException as e:
            logger.error(
                f"Request failed: {method} {url} - {self._sanitize_credentials(str(e))}"
            )
            raise APIUnreachableError(endpoint=self.base_url) from e

        if not 200 <= response.status_code < 300:
            logger.error(
                f"API operation failed: {method} {url} -> {response.status_code}"
            )
            logger.debug(self._sanitize_credentials(response.text))
            raise ApiError(response.status_code, response.text)

        if response.status_code == 204:
            return None

        return response.json()

    def get(self, endpoint: str) -> Any:
        return self.request(endpoint)

    def post(self, endpoint: str, body: Any) -> Any:
        return self.request(endpoint, method='POST', body=body)

    def put(self, endpoint: str, body: Any) -> Any:
        return self.request(endpoint, method='PUT', body=body)

    def delete(self, endpoint: str) -> Any:
        return self.request(endpoint, method='DELETE')

    def close(self) -> None:
        """Close the underlying session, if one was opened."""
        if self._session is not None:
            self._session.close()
            self._session = None
