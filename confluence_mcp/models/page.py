"""Confluence page data models."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..content_converter import html_to_text


def web_url(base_url: str, links: Optional[Dict[str, Any]], key: str = 'webui') -> Optional[str]:
    """Build an absolute site URL from a relative ``_links`` entry."""
    path = (links or {}).get(key)
    if not path:
        return None
    return f"{base_url}/wiki{path}"


@dataclass
class Page:
    """Confluence page as returned by the content endpoint.

    Fields the API only includes when expanded (body, version, space,
    ancestors) are optional and None when absent.

    Attributes:
        page_id: Unique identifier for the page
        title: Page title
        space_key: Key of the owning space
        version: Current version number (required for updates)
        content: Body in storage format (XHTML)
        content_as_text: Plain-text rendering of content
        web_url: Absolute browser URL
        ancestor_ids: Ancestor page IDs, root first
    """
    page_id: str
    title: str
    space_key: Optional[str] = None
    version: Optional[int] = None
    content: Optional[str] = None
    content_as_text: Optional[str] = None
    web_url: Optional[str] = None
    ancestor_ids: List[str] = field(default_factory=list)

    @property
    def parent_id(self) -> Optional[str]:
        return self.ancestor_ids[-1] if self.ancestor_ids else None

    @classmethod
    def from_api(cls, data: Dict[str, Any], base_url: str) -> "Page":
        storage = ((data.get('body') or {}).get('storage') or {}).get('value')
        return cls(
            page_id=data['id'],
            title=data.get('title', ''),
            space_key=(data.get('space') or {}).get('key'),
            version=(data.get('version') or {}).get('number'),
            content=storage,
            content_as_text=html_to_text(storage) if storage else None,
            web_url=web_url(base_url, data.get('_links')),
            ancestor_ids=[a['id'] for a in data.get('ancestors') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['id'] = result.pop('page_id')
        del result['ancestor_ids']
        return result


@dataclass
class PageSummary:
    """Reduced page shape produced by child listings.

    parent_id and space_id are only filled by the extended projection.
    """
    page_id: str
    title: str
    status: Optional[str] = None
    parent_id: Optional[str] = None
    space_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PageSummary":
        return cls(
            page_id=data['id'],
            title=data.get('title', ''),
            status=data.get('status'),
        )

    @classmethod
    def from_api_extended(cls, data: Dict[str, Any]) -> "PageSummary":
        return cls(
            page_id=data['id'],
            title=data.get('title', ''),
            status=data.get('status'),
            parent_id=data.get('parentId'),
            space_id=data.get('spaceId'),
        )

    def to_dict(self, extended: bool = False) -> Dict[str, Any]:
        result = {'id': self.page_id, 'title': self.title, 'status': self.status}
        if extended:
            result['parent_id'] = self.parent_id
            result['space_id'] = self.space_id
        return result


@dataclass
class PageRef:
    """Result of a create, update or move: just enough to find the page again."""
    page_id: str
    title: str
    version: Optional[int] = None
    web_url: Optional[str] = None
    parent_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any], base_url: str) -> "PageRef":
        return cls(
            page_id=data['id'],
            title=data.get('title', ''),
            version=(data.get('version') or {}).get('number'),
            web_url=web_url(base_url, data.get('_links')),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['id'] = result.pop('page_id')
        if self.parent_id is None:
            del result['parent_id']
        return result
