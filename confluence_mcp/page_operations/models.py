"""Data models for page operation results.

These are the shapes returned by the composite and batch operations,
where a single call reports several per-item outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models import Page, PageSummary


class ContentFormat(Enum):
    """Representation returned by get_page_content."""

    TEXT = "text"
    HTML = "html"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ContentFormat":
        """Parse a format name; unknown or missing values mean TEXT."""
        try:
            return cls(value)
        except ValueError:
            return cls.TEXT


class LabelAction(Enum):
    """Batch label actions accepted by manage_labels."""

    ADD = "add"
    REMOVE = "remove"


@dataclass
class LabelBatchResult:
    """Outcome of a manage_labels call.

    The granularity of ``errors`` depends on the action: "add" is a single
    all-or-nothing request, so a failure is one entry covering every name
    (``{"labels": [...], "error": ...}``); "remove" is one request per name,
    so each failure is its own entry (``{"label": name, "error": ...}``).

    Attributes:
        page_id: Page the labels were applied to
        action: "add" or "remove"
        processed: Label names that were applied
        errors: Failure entries, see above
    """

    page_id: str
    action: str
    processed: List[str] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page_id': self.page_id,
            'action': self.action,
            'processed': list(self.processed),
            'errors': list(self.errors),
        }


@dataclass
class ChildPageResult:
    """One child in a get_page_with_children response.

    Exactly one of ``page`` (full fetch succeeded) or ``summary`` (summary
    only, or full fetch failed) is used for output; ``error`` is set when
    the full fetch failed.
    """

    summary: PageSummary
    page: Optional[Page] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.page is not None:
            return self.page.to_dict()
        result = self.summary.to_dict()
        if self.error is not None:
            result['error'] = self.error
        return result


@dataclass
class PageWithChildren:
    """A parent page together with its direct children."""

    parent: Page
    children: List[ChildPageResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'parent': self.parent.to_dict(),
            'children': [child.to_dict() for child in self.children],
            'child_count': len(self.children),
        }


@dataclass
class DoneSections:
    """Text segments found between DONE and TODO markers on a page."""

    page_id: str
    done_sections: List[str]
    full_content: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page_id': self.page_id,
            'done_sections': list(self.done_sections),
            'full_content': self.full_content,
        }
