"""Space listing and lookup."""

import logging
from typing import List
from urllib.parse import quote

from ..confluence_client.api_wrapper import APIWrapper
from ..models import Space, SpaceContentItem

logger = logging.getLogger(__name__)

SPACE_PATH = "/wiki/rest/api/space"

CONTENT_TYPES = ("page", "blogpost")


class SpaceOperations:
    """Read-only access to Confluence spaces."""

    def __init__(self, api: APIWrapper):
        self.api = api

    def list_spaces(self, limit: int = 25) -> List[Space]:
        data = self.api.get(f"{SPACE_PATH}?limit={limit}") or {}
        return [Space.from_api(item, self.api.base_url) for item in data.get('results') or []]

    def get_space(self, space_key: str) -> Space:
        """Fetch a space with its plain-text description and homepage."""
        data = self.api.get(
            f"{SPACE_PATH}/{quote(space_key, safe='')}?expand=description.plain,homepage"
        )
        return Space.from_api(data, self.api.base_url)

    def get_space_content(
        self, space_key: str, content_type: str = "page", limit: int = 25
    ) -> List[SpaceContentItem]:
        """List pages or blog posts in a space.

        Args:
            space_key: Space key
            content_type: "page" (default) or "blogpost"; other values mean "page"
            limit: Maximum number of items
        """
        if content_type not in CONTENT_TYPES:
            content_type = "page"
        data = self.api.get(
            f"{SPACE_PATH}/{quote(space_key, safe='')}/content/{content_type}?limit={limit}"
        ) or {}
        return [SpaceContentItem.from_api(item) for item in data.get('results') or []]
