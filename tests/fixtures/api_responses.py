"""Sample Confluence REST API responses for testing.

Shapes follow the v1 content/space endpoints and the v2 children endpoint.
Builders return fresh dicts so tests can mutate them freely.
"""

from typing import Any, Dict, List, Optional

BASE_URL = "https://test.atlassian.net"


def page_response(
    page_id: str = "12345",
    title: str = "Test Page",
    version: Optional[int] = 5,
    body: Optional[str] = "<p>Hello World</p>",
    space_key: Optional[str] = "TEST",
    ancestors: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build a /wiki/rest/api/content/{id} response."""
    data: Dict[str, Any] = {
        "id": page_id,
        "type": "page",
        "status": "current",
        "title": title,
        "_links": {"webui": f"/spaces/{space_key or 'TEST'}/pages/{page_id}"},
    }
    if version is not None:
        data["version"] = {"number": version}
    if body is not None:
        data["body"] = {"storage": {"value": body, "representation": "storage"}}
    if space_key is not None:
        data["space"] = {"key": space_key}
    if ancestors is not None:
        data["ancestors"] = [{"id": a} for a in ancestors]
    return data


def children_page(
    items: List[Dict[str, Any]], next_link: Optional[str] = None
) -> Dict[str, Any]:
    """Build one page of a /wiki/api/v2/pages/{id}/children response."""
    data: Dict[str, Any] = {"results": items, "_links": {}}
    if next_link:
        data["_links"]["next"] = next_link
    return data


def child_item(page_id: str, title: Optional[str] = None, parent_id: str = "100") -> Dict[str, Any]:
    return {
        "id": page_id,
        "title": title or f"Child {page_id}",
        "status": "current",
        "parentId": parent_id,
        "spaceId": "98304",
    }


def space_response(key: str = "TEST") -> Dict[str, Any]:
    return {
        "key": key,
        "name": "Test Space",
        "type": "global",
        "description": {"plain": {"value": "A space for tests"}},
        "homepage": {"id": "65537"},
        "_links": {"webui": f"/spaces/{key}"},
    }


def labels_response(names: List[str]) -> Dict[str, Any]:
    return {
        "results": [{"prefix": "global", "name": n, "id": str(i)} for i, n in enumerate(names)],
        "size": len(names),
    }
