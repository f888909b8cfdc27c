"""Test helper modules for Confluence MCP testing.

- http_helpers: Mock responses and request inspection for APIWrapper tests
"""

from .http_helpers import make_response, requested_urls

__all__ = [
    'make_response',
    'requested_urls',
]
