"""Confluence client library for the MCP server.

This package provides the HTTP transport, settings, credential loading and
pagination used by every Confluence operation.
"""

from .errors import (
    ConfluenceMCPError,
    ConfluenceError,
    ConfigurationError,
    ApiError,
    APIUnreachableError,
    PageNotFoundError,
    ValidationError,
    UnknownToolError,
    ToolCallError,
)
from .auth import Authenticator, Credentials
from .config import Settings, SettingsLoader, load_settings
from .api_wrapper import APIWrapper
from .pagination import collect_all

__all__ = [
    "ConfluenceMCPError",
    "ConfluenceError",
    "ConfigurationError",
    "ApiError",
    "APIUnreachableError",
    "PageNotFoundError",
    "ValidationError",
    "UnknownToolError",
    "ToolCallError",
    "Authenticator",
    "Credentials",
    "Settings",
    "SettingsLoader",
    "load_settings",
    "APIWrapper",
    "collect_all",
]
