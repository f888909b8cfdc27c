"""Page operations for Confluence content.

This module provides the PageOperations class: reading, creating,
updating, moving and deleting pages, listing their children, and the
composite fetch of a page together with its children.

Updates use Confluence's optimistic locking: every PUT must carry the
version number read immediately before, plus one. A stale number is
rejected by the server with 409 and surfaces as ApiError.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional
from urllib.parse import quote

from ..confluence_client.api_wrapper import APIWrapper
from ..confluence_client.errors import PageNotFoundError
from ..confluence_client.pagination import collect_all
from ..content_converter import html_to_text
from ..models import Page, PageRef, PageSummary
from .models import (
    ChildPageResult,
    ContentFormat,
    DoneSections,
    PageWithChildren,
)

logger = logging.getLogger(__name__)

CONTENT_PATH = "/wiki/rest/api/content"
PAGES_V2_PATH = "/wiki/api/v2/pages"

DEFAULT_EXPAND = "body.storage,version,space"


def extract_marked_sections(text: str, start: str = "DONE", stop: str = "TODO") -> List[str]:
    """Return every segment following a ``start`` marker.

    Each segment runs up to the next ``stop`` marker or the end of the
    text and is stripped of surrounding whitespace.

    Example:
        >>> extract_marked_sections("DONE task1 TODO task2 DONE task3")
        ['task1', 'task3']
    """
    pattern = re.compile(
        re.escape(start) + r"(.*?)(?=" + re.escape(stop) + r"|$)",
        re.DOTALL,
    )
    return [match.group(1).strip() for match in pattern.finditer(text or "")]


class PageOperations:
    """High-level page operations on top of APIWrapper.

    Usage:
        ops = PageOperations(api)

        page = ops.get_page("12345")
        ops.update_page_auto("12345", content="<p>New body</p>")
        tree = ops.get_page_with_children("12345", include_full_body=True)
    """

    def __init__(self, api: APIWrapper):
        """Initialize PageOperations.

        Args:
            api: APIWrapper used for all requests
        """
        self.api = api

    @property
    def base_url(self) -> str:
        return self.api.base_url

    def _content_path(self, page_id: str) -> str:
        return f"{CONTENT_PATH}/{quote(str(page_id), safe='')}"

    def get_page(self, page_id: str, expand: str = DEFAULT_EXPAND) -> Page:
        """Fetch a page with its body, version and space.

        Args:
            page_id: Confluence page ID
            expand: Comma-separated properties to expand

        Returns:
            Page; body/space/version are None when not returned

        Raises:
            ApiError: If the request fails (e.g. 404)
        """
        data = self.api.get(f"{self._content_path(page_id)}?expand={expand}")
        return Page.from_api(data, self.base_url)

    def get_page_content(self, page_id: str, format: Optional[str] = "text") -> str:
        """Fetch only the body of a page.

        Args:
            page_id: Confluence page ID
            format: "text" (default) or "html"; anything else means "text"

        Returns:
            Storage XHTML or its plain-text rendering
        """
        data = self.api.get(f"{self._content_path(page_id)}?expand=body.storage") or {}
        html = ((data.get('body') or {}).get('storage') or {}).get('value') or ""
        if ContentFormat.parse(format) is ContentFormat.HTML:
            return html
        return html_to_text(html)

    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: Optional[str] = None,
    ) -> PageRef:
        """Create a new page.

        Args:
            space_key: Key of the space to create the page in
            title: Page title
            content: Body in storage format (XHTML)
            parent_id: Optional parent page; without it the page lands at
                       the space root

        Returns:
            PageRef with the new page's ID, title and URL
        """
        body = {
            "type": "page",
            "title": title,
            "space": {"key": space_key},
            "body": {
                "storage": {
                    "value": content,
                    "representation": "storage",
                },
            },
        }
        if parent_id:
            body["ancestors"] = [{"id": parent_id}]

        data = self.api.post(CONTENT_PATH, body)
        logger.info(f"Created page {data.get('id')} '{title}' in space {space_key}")
        return PageRef.from_api(data, self.base_url)

    def update_page(
        self,
        page_id: str,
        title: str,
        content: str,
        version: int,
    ) -> PageRef:
        """Replace a page's title and body.

        Args:
            page_id: Confluence page ID
            title: New title
            content: New body in storage format (XHTML)
            version: The version most recently read (NOT the target version);
                     version + 1 is submitted

        Returns:
            PageRef with the new version number

        Raises:
            ApiError: If the version is stale (409) or the request fails
        """
        body = {
            "type": "page",
            "title": title,
            "body": {
                "storage": {
                    "value": content,
                    "representation": "storage",
                },
            },
            "version": {"number": int(version) + 1},
        }
        data = self.api.put(self._content_path(page_id), body)
        logger.info(f"Updated page {page_id} to version {int(version) + 1}")
        return PageRef.from_api(data, self.base_url)

    def update_page_auto(
        self,
        page_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> PageRef:
        """Update a page after reading its current version.

        Costs one extra request, but the caller never has to know the
        version. Omitted title or content keep their current values.

        Raises:
            PageNotFoundError: If the read returns no page
            ApiError: If either request fails
        """
        data = self.api.get(f"{self._content_path(page_id)}?expand=body.storage,version")
        if not data:
            raise PageNotFoundError(page_id)
        current = Page.from_api(data, self.base_url)

        return self.update_page(
            page_id,
            title if title is not None else current.title,
            content if content is not None else (current.content or ""),
            current.version or 1,
        )

    def delete_page(self, page_id: str) -> dict:
        """Move a page to the trash.

        Raises:
            ApiError: On any non-2xx response, including an already trashed page
        """
        self.api.delete(self._content_path(page_id))
        logger.info(f"Deleted page {page_id}")
        return {"success": True, "deleted_page_id": page_id}

    def move_page(self, page_id: str, new_parent_id: str) -> PageRef:
        """Reparent a page.

        The page is re-submitted with its current title and body, the
        ancestor list replaced by ``[new_parent_id]``, and version + 1.

        Raises:
            PageNotFoundError: If the read returns no page
            ApiError: If either request fails
        """
        data = self.api.get(
            f"{self._content_path(page_id)}?expand=version,ancestors,body.storage"
        )
        if not data:
            raise PageNotFoundError(page_id)
        current = Page.from_api(data, self.base_url)

        body = {
            "type": "page",
            "title": current.title,
            "body": {
                "storage": {
                    "value": current.content or "",
                    "representation": "storage",
                },
            },
            "ancestors": [{"id": new_parent_id}],
            "version": {"number": (current.version or 1) + 1},
        }
        result = self.api.put(self._content_path(page_id), body)
        logger.info(
            f"Moved page {page_id} from {current.parent_id} to {new_parent_id}"
        )
        ref = PageRef.from_api(result, self.base_url)
        ref.parent_id = new_parent_id
        return ref

    def _children_path(self, parent_id: str, limit: Optional[int]) -> str:
        limit = limit or self.api.settings.child_page_limit
        return f"{PAGES_V2_PATH}/{quote(str(parent_id), safe='')}/children?limit={limit}"

    def get_child_pages(self, parent_id: str, limit: Optional[int] = None) -> List[PageSummary]:
        """List every direct child of a page (id, title, status).

        Follows pagination cursors until the listing is exhausted.
        """
        return collect_all(
            self.api,
            self._children_path(parent_id, limit),
            PageSummary.from_api,
            max_pages=self.api.settings.max_pages,
        )

    def get_child_pages_extended(
        self, parent_id: str, limit: Optional[int] = None
    ) -> List[PageSummary]:
        """List every direct child of a page, including parent and space IDs."""
        return collect_all(
            self.api,
            self._children_path(parent_id, limit),
            PageSummary.from_api_extended,
            max_pages=self.api.settings.max_pages,
        )

    def get_page_with_children(
        self, page_id: str, include_full_body: bool = False
    ) -> PageWithChildren:
        """Fetch a page and its direct children in one call.

        A failure to list the children is logged and treated as no
        children. With ``include_full_body``, children are fetched in
        parallel; a child whose fetch fails keeps its summary plus an error
        message, so the output always has one entry per child, in listing
        order.

        Raises:
            ApiError: If the parent page cannot be fetched
        """
        parent = self.get_page(page_id)

        try:
            summaries = self.get_child_pages(page_id)
        except Exception as e:
            logger.warning(f"Could not list children of page {page_id}: {e}")
            summaries = []

        if not include_full_body or not summaries:
            return PageWithChildren(
                parent=parent,
                children=[ChildPageResult(summary=s) for s in summaries],
            )

        max_workers = min(self.api.settings.max_workers, len(summaries))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.get_page, s.page_id) for s in summaries]

            children = []
            for summary, future in zip(summaries, futures):
                try:
                    children.append(ChildPageResult(summary=summary, page=future.result()))
                except Exception as e:
                    logger.warning(f"  ✗ Error fetching child {summary.page_id}: {e}")
                    children.append(ChildPageResult(summary=summary, error=str(e)))

        logger.info(
            f"Fetched page {page_id} with {len(children)} children "
            f"({sum(1 for c in children if c.error)} errors)"
        )
        return PageWithChildren(parent=parent, children=children)

    def extract_done_sections(self, page_id: str) -> DoneSections:
        """Collect the text following each DONE marker, up to the next TODO."""
        content = self.get_page_content(page_id, "text")
        return DoneSections(
            page_id=page_id,
            done_sections=extract_marked_sections(content),
            full_content=content,
        )
