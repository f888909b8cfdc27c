"""Cursor-following pagination for Confluence v2 list endpoints.

v2 list responses carry a page of ``results`` and, when more remain, a
``_links.next`` link holding the cursor for the following page. The link
may be relative ("/wiki/api/v2/...") or absolute; both are resolved with
APIWrapper.resolve_url.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .api_wrapper import APIWrapper

logger = logging.getLogger(__name__)

T = TypeVar('T')


def collect_all(
    api: APIWrapper,
    seed_path: str,
    item_mapper: Callable[[Dict[str, Any]], T],
    max_pages: Optional[int] = None,
) -> List[T]:
    """Fetch every page of a paginated listing and map its items.

    Pages are requested strictly one after another, since each request
    depends on the previous page's cursor. Items are returned in page order,
    then in the order received within each page.

    Traversal ends when a page offers no next link. It also ends, with a
    warning, if the server hands back a cursor that was already fetched or
    if ``max_pages`` pages have been fetched.

    Args:
        api: APIWrapper used for every request
        seed_path: Path or URL of the first page
        item_mapper: Projection applied to each raw result item
        max_pages: Optional cap on the number of requests

    Returns:
        List of mapped items across all pages

    Raises:
        ApiError: If any page request fails (partial results are discarded)
    """
    items: List[T] = []
    consumed = set()
    next_url: Optional[str] = seed_path

    while next_url:
        url = api.resolve_url(next_url)
        if url in consumed:
            logger.warning(f"Pagination cursor repeated, stopping: {url}")
            break
        if max_pages is not None and len(consumed) >= max_pages:
            logger.warning(
                f"Pagination stopped after {max_pages} pages; more results remain"
            )
            break
        consumed.add(url)

        data = api.request(url) or {}
        results = data.get('results') or []
        items.extend(item_mapper(item) for item in results)

        next_url = (data.get('_links') or {}).get('next')

    logger.debug(f"Collected {len(items)} items from {len(consumed)} pages")
    return items
