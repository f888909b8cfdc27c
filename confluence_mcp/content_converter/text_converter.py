"""Plain-text rendering of Confluence storage format (XHTML).

Uses a markdownify converter with the markdown decoration turned off, so
block structure (paragraphs, headings, list items, line breaks) survives
as line breaks while inline formatting is dropped. Settings:
- no line wrapping; long lines are kept as-is
- newlines inside text nodes are preserved
- images are omitted entirely
- a link whose target equals its text renders as the text alone,
  otherwise as "text [target]"
"""

from markdownify import MarkdownConverter, chomp


class PlainTextConverter(MarkdownConverter):
    """markdownify converter that emits plain text instead of markdown."""

    def __init__(self, **options):
        options.setdefault('wrap', False)
        options.setdefault('bullets', '*')
        options.setdefault('escape_asterisks', False)
        options.setdefault('escape_underscores', False)
        options.setdefault('escape_misc', False)
        super().__init__(**options)

    def _plain_inline(self, el, text, parent_tags):
        return text

    convert_b = _plain_inline
    convert_strong = _plain_inline
    convert_em = _plain_inline
    convert_i = _plain_inline
    convert_code = _plain_inline
    convert_kbd = _plain_inline
    convert_samp = _plain_inline
    convert_del = _plain_inline
    convert_s = _plain_inline
    convert_sub = _plain_inline
    convert_sup = _plain_inline

    def convert_a(self, el, text, parent_tags):
        """Render a link as its text, appending the target only when it differs."""
        prefix, suffix, text = chomp(text)
        if not text:
            return ''
        href = el.get('href')
        if '_noformat' in parent_tags or not href or href == text:
            return prefix + text + suffix
        return f"{prefix}{text} [{href}]{suffix}"

    def convert_img(self, el, text, parent_tags):
        return ''

    def convert_br(self, el, text, parent_tags):
        if '_inline' in parent_tags:
            return ' '
        return '\n'

    def convert_hN(self, n, el, text, parent_tags):
        """Headings become plain paragraphs."""
        if '_inline' in parent_tags:
            return text
        text = text.strip()
        if not text:
            return ''
        return f"\n\n{text}\n\n"

    def convert_blockquote(self, el, text, parent_tags):
        if '_inline' in parent_tags:
            return text
        text = text.strip()
        return f"\n\n{text}\n\n" if text else ''

    def convert_pre(self, el, text, parent_tags):
        if not text:
            return ''
        return f"\n\n{text}\n\n"


def html_to_text(html: str) -> str:
    """Convert Confluence storage XHTML to plain text.

    Args:
        html: Storage format markup (may be empty or None)

    Returns:
        Plain text with surrounding blank lines removed
    """
    if not html:
        return ""
    return PlainTextConverter().convert(html).strip()
