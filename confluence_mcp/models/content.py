"""Data models for labels, comments, attachments and search hits."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..content_converter import html_to_text
from .page import web_url

# The only label prefix this client reads or writes
GLOBAL_PREFIX = 'global'


@dataclass
class Label:
    name: str
    prefix: str = GLOBAL_PREFIX

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Label":
        return cls(name=data['name'], prefix=data.get('prefix', GLOBAL_PREFIX))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Comment:
    """Page comment with its body rendered as plain text."""
    comment_id: str
    content: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Comment":
        storage = ((data.get('body') or {}).get('storage') or {}).get('value')
        return cls(
            comment_id=data['id'],
            content=html_to_text(storage) if storage else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.comment_id, 'content': self.content}


@dataclass
class Attachment:
    """File attached to a page. Read-only in this client.

    Attributes:
        attachment_id: Attachment content ID
        title: File name
        media_type: MIME type, if reported
        file_size: Size in bytes, if reported
        download_url: Absolute download URL
    """
    attachment_id: str
    title: str
    media_type: Optional[str] = None
    file_size: Optional[int] = None
    download_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any], base_url: str) -> "Attachment":
        return cls(
            attachment_id=data['id'],
            title=data.get('title', ''),
            media_type=(data.get('metadata') or {}).get('mediaType'),
            file_size=(data.get('extensions') or {}).get('fileSize'),
            download_url=web_url(base_url, data.get('_links'), key='download'),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['id'] = result.pop('attachment_id')
        return result


@dataclass
class SearchResult:
    id: str
    title: str
    type: Optional[str] = None
    excerpt: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SearchResult":
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            type=data.get('type'),
            excerpt=data.get('excerpt'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
