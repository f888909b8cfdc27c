"""Confluence space data models."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .page import web_url


@dataclass
class Space:
    """Confluence space (the namespace pages live in).

    Attributes:
        key: Short stable space key (e.g., "TEAM")
        name: Display name
        type: "global" or "personal"
        description: Plain-text description, if expanded and set
        homepage_id: ID of the space's landing page, if expanded
        web_url: Absolute browser URL
    """
    key: str
    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    homepage_id: Optional[str] = None
    web_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any], base_url: str) -> "Space":
        description = ((data.get('description') or {}).get('plain') or {}).get('value')
        return cls(
            key=data['key'],
            name=data.get('name', ''),
            type=data.get('type'),
            description=description,
            homepage_id=(data.get('homepage') or {}).get('id'),
            web_url=web_url(base_url, data.get('_links')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SpaceContentItem:
    """Page or blog post listed inside a space."""
    id: str
    title: str
    type: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SpaceContentItem":
        return cls(id=data['id'], title=data.get('title', ''), type=data.get('type'))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
