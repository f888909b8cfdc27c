"""Test fixtures for the Confluence MCP server.

This module provides:
- Sample Confluence XHTML page bodies
- Builders for Confluence REST API JSON responses
"""

from .sample_pages import (
    SAMPLE_PAGE_SIMPLE,
    SAMPLE_PAGE_WITH_LINKS,
    SAMPLE_DAILY_REPORT,
)
from .api_responses import (
    BASE_URL,
    page_response,
    children_page,
    child_item,
    space_response,
    labels_response,
)

__all__ = [
    'SAMPLE_PAGE_SIMPLE',
    'SAMPLE_PAGE_WITH_LINKS',
    'SAMPLE_DAILY_REPORT',
    'BASE_URL',
    'page_response',
    'children_page',
    'child_item',
    'space_response',
    'labels_response',
]
