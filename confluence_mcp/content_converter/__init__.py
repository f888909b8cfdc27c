"""Content conversion module for XHTML → plain text.

This module provides html_to_text, used by every read path that exposes a
text form of a page or comment body.
"""

from .text_converter import PlainTextConverter, html_to_text

__all__ = ['PlainTextConverter', 'html_to_text']
