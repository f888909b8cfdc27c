"""Page operations module for Confluence content.

Key classes:
    PageOperations: Page CRUD, move, child listings and composite fetch
    LabelOperations: Single and batch label changes
    SpaceOperations: Space listing and lookup
    SearchOperations: CQL search
    CommentOperations: Comments and attachments
"""

from .models import (
    ContentFormat,
    LabelAction,
    LabelBatchResult,
    ChildPageResult,
    PageWithChildren,
    DoneSections,
)
from .page_operations import PageOperations, extract_marked_sections
from .label_operations import LabelOperations
from .space_operations import SpaceOperations
from .search_operations import SearchOperations
from .comment_operations import CommentOperations

__all__ = [
    'ContentFormat',
    'LabelAction',
    'LabelBatchResult',
    'ChildPageResult',
    'PageWithChildren',
    'DoneSections',
    'PageOperations',
    'extract_marked_sections',
    'LabelOperations',
    'SpaceOperations',
    'SearchOperations',
    'CommentOperations',
]
