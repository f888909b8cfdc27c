"""Comments and attachments hanging off a page."""

import logging
from typing import List
from urllib.parse import quote

from ..confluence_client.api_wrapper import APIWrapper
from ..models import Attachment, Comment

logger = logging.getLogger(__name__)

CONTENT_PATH = "/wiki/rest/api/content"


class CommentOperations:
    """Page comments (read and append) and attachments (read only)."""

    def __init__(self, api: APIWrapper):
        self.api = api

    def _child_path(self, page_id: str, child_type: str) -> str:
        return f"{CONTENT_PATH}/{quote(str(page_id), safe='')}/child/{child_type}"

    def get_comments(self, page_id: str, limit: int = 25) -> List[Comment]:
        """Fetch page comments with bodies rendered as plain text."""
        data = self.api.get(
            f"{self._child_path(page_id, 'comment')}?expand=body.storage&limit={limit}"
        ) or {}
        return [Comment.from_api(item) for item in data.get('results') or []]

    def add_comment(self, page_id: str, content: str) -> dict:
        """Append a comment to a page.

        Args:
            page_id: Page to comment on
            content: Comment body in storage format (HTML)

        Returns:
            Dict with the new comment's ID
        """
        body = {
            "type": "comment",
            "container": {"id": page_id, "type": "page"},
            "body": {
                "storage": {
                    "value": content,
                    "representation": "storage",
                },
            },
        }
        data = self.api.post(CONTENT_PATH, body)
        logger.info(f"Added comment {data.get('id')} to page {page_id}")
        return {"id": data.get('id')}

    def get_attachments(self, page_id: str, limit: int = 25) -> List[Attachment]:
        data = self.api.get(
            f"{self._child_path(page_id, 'attachment')}?limit={limit}"
        ) or {}
        return [
            Attachment.from_api(item, self.api.base_url)
            for item in data.get('results') or []
        ]
