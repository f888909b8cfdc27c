"""Data models for Confluence pages, spaces and page content."""

from .page import Page, PageRef, PageSummary
from .space import Space, SpaceContentItem
from .content import Attachment, Comment, Label, SearchResult, GLOBAL_PREFIX

__all__ = [
    'Page',
    'PageRef',
    'PageSummary',
    'Space',
    'SpaceContentItem',
    'Attachment',
    'Comment',
    'Label',
    'SearchResult',
    'GLOBAL_PREFIX',
]
