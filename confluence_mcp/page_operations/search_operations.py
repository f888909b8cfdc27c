"""Search using Confluence Query Language (CQL).

The query string is passed through URL-encoded and otherwise untouched;
this module never parses or validates CQL.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from ..confluence_client.api_wrapper import APIWrapper
from ..models import SearchResult

logger = logging.getLogger(__name__)

SEARCH_PATH = "/wiki/rest/api/content/search"


def _with_space(cql: str, space_key: Optional[str]) -> str:
    if space_key:
        cql += f' AND space = "{space_key}"'
    return cql


class SearchOperations:
    """CQL search plus text and title shortcuts."""

    def __init__(self, api: APIWrapper):
        self.api = api

    def search(self, cql: str, limit: int = 25) -> List[SearchResult]:
        """Run a raw CQL query.

        Args:
            cql: Query, e.g. 'type=page AND space=DEV AND text ~ "report"'
            limit: Maximum number of results

        Returns:
            Matching content items
        """
        logger.debug(f"CQL search: {cql}")
        data = self.api.get(f"{SEARCH_PATH}?cql={quote(cql, safe='')}&limit={limit}") or {}
        return [SearchResult.from_api(item) for item in data.get('results') or []]

    def search_by_text(
        self, text: str, space_key: Optional[str] = None, limit: int = 25
    ) -> List[SearchResult]:
        return self.search(_with_space(f'text ~ "{text}"', space_key), limit)

    def search_by_title(
        self, title: str, space_key: Optional[str] = None, limit: int = 25
    ) -> List[SearchResult]:
        return self.search(_with_space(f'title ~ "{title}"', space_key), limit)
