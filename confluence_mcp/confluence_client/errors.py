"""Typed exception hierarchy for Confluence-related errors.

This module defines all custom exceptions used by the Confluence client library.
All exceptions inherit from ConfluenceMCPError so the tool boundary can catch
them uniformly, and each carries a descriptive message with enough context
to be shown to the calling agent as-is.
"""

from typing import List, Optional


class ConfluenceMCPError(Exception):
    """Base exception for all confluence-mcp errors.

    Use this to catch any application-level error from the server.
    """
    pass


class ConfluenceError(ConfluenceMCPError):
    """Base exception for all Confluence-related errors."""
    pass


class ConfigurationError(ConfluenceError):
    """Raised when required credentials or settings are missing or invalid."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])

    @classmethod
    def for_missing(cls, missing: List[str]) -> "ConfigurationError":
        """Build the error for a list of missing environment variables."""
        return cls(
            f"Missing required environment variables: {', '.join(missing)}",
            missing=missing,
        )


class ApiError(ConfluenceError):
    """Raised when the Confluence API answers with a non-2xx status.

    The raw response text is kept unparsed; error bodies are not guaranteed
    to be JSON.
    """

    def __init__(self, status_code: int, response_text: str):
        super().__init__(
            f"Confluence API error ({status_code}): {response_text}"
        )
        self.status_code = status_code
        self.response_text = response_text


class APIUnreachableError(ConfluenceError):
    """Raised when the Confluence API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class PageNotFoundError(ConfluenceError):
    """Raised when a read made before a write returned no page."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class ValidationError(ConfluenceError):
    """Raised for malformed input detected before any request is made."""

    def __init__(self, message: str):
        super().__init__(message)


class UnknownToolError(ConfluenceMCPError):
    """Raised when a tool name is not registered with the dispatcher."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolCallError(ConfluenceMCPError):
    """Raised by the MCP server to report a failure payload as an error result."""

    def __init__(self, message: str):
        super().__init__(message)
