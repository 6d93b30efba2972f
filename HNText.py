"""
HNText — turn the HTML in item text/title and user about into plain text.

HN markup is a small fixed set: <p> between paragraphs, <a href>, <i>,
<pre><code> blocks, plus HTML entities (&#x27; &quot; &gt; ...).

Usage:
    from HNText import HNText

    HNText.to_text("Hello<p>See <a href=\"https://x.com\">x.com</a>")
    # 'Hello\n\nSee x.com'
    HNText.preview(comment.text, length=80)
"""

import html
import re

_PARAGRAPH = re.compile(r"<p\s*/?>", re.IGNORECASE)
_BREAK     = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG       = re.compile(r"<[^>]+>")
_BLANKS    = re.compile(r"\n{3,}")
_SPACES    = re.compile(r"\s+")


class HNText:
    """Plain-text helpers for HN HTML fields. All methods are static."""

    @staticmethod
    def to_text(markup: str | None) -> str:
        """Strip tags, keep paragraph breaks, decode entities."""
        s = markup or ""
        s = _PARAGRAPH.sub("\n\n", s)
        s = _BREAK.sub("\n", s)
        s = _TAG.sub("", s)
        s = html.unescape(s)
        s = _BLANKS.sub("\n\n", s)
        return s.strip()

    @staticmethod
    def preview(markup: str | None, length: int = 120) -> str:
        """Single-line plain text, truncated to length with an ellipsis."""
        s = _SPACES.sub(" ", HNText.to_text(markup)).strip()
        if len(s) <= length:
            return s
        return s[: max(length - 1, 0)].rstrip() + "…"
