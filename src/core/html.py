"""Best-effort HTML to pseudo-markdown conversion.

The conversion is a fixed, ordered series of regex substitutions rather
than a structural parse. It tolerates malformed markup (unclosed tags,
missing <article> wrapper) and never raises; the output may be imperfect.
"""

from __future__ import annotations

import re
from typing import Optional

_FLAGS = re.IGNORECASE | re.DOTALL

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", _FLAGS)
_ARTICLE_RE = re.compile(r"<article\b[^>]*>(.*?)</article\s*>", _FLAGS)
_TITLE_RE = re.compile(r"<title\b[^>]*>(.*?)</title\s*>", _FLAGS)
_HEADING_RE = re.compile(r"<h([1-6])\b[^>]*>(.*?)</h\1\s*>", _FLAGS)
_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>(.*?)</p\s*>", _FLAGS)
_PRE_RE = re.compile(r"<pre(?:\s[^>]*)?>(.*?)</pre\s*>", _FLAGS)
_BOLD_RE = re.compile(r"<(strong|b)(?:\s[^>]*)?>(.*?)</\1\s*>", _FLAGS)
_ITALIC_RE = re.compile(r"<(em|i)(?:\s[^>]*)?>(.*?)</\1\s*>", _FLAGS)
_CODE_RE = re.compile(r"<code(?:\s[^>]*)?>(.*?)</code\s*>", _FLAGS)
_ANCHOR_RE = re.compile(
    r"""<a\s[^>]*?\bhref\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))[^>]*>(.*?)</a\s*>""",
    _FLAGS,
)
# Only tag-shaped spans; a bare "<" in prose is left alone
_TAG_RE = re.compile(r"<!--.*?-->|<![^>]*>|</?[A-Za-z][^>]*>", re.DOTALL)
_BLANK_LINES_RE = re.compile(r"\n{3,}")

# &amp; goes last so "&amp;lt;" decodes to "&lt;" and not "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)


def _strip_tags(fragment: str) -> str:
    return _TAG_RE.sub("", fragment)


def _pre_block(match: re.Match) -> str:
    body = _strip_tags(match.group(1)).strip("\n")
    return f"\n```\n{body}\n```\n"


def _anchor(match: re.Match) -> str:
    # Double-quoted, single-quoted or bare attribute value
    href = next(g for g in match.group(1, 2, 3) if g is not None)
    return f"[{match.group(4)}]({href})"


def decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def extract_title(html: str) -> Optional[str]:
    """Return the document <title> text, or None when absent or empty."""
    m = _TITLE_RE.search(html or "")
    if not m:
        return None
    title = decode_entities(_strip_tags(m.group(1))).strip()
    return title or None


def html_to_markdown(html: str) -> str:
    """Convert raw HTML into readable lightweight-markup text."""
    text = html or ""

    text = _SCRIPT_STYLE_RE.sub("", text)

    article = _ARTICLE_RE.search(text)
    if article:
        text = article.group(1)

    text = _HEADING_RE.sub(lambda m: f"\n# {m.group(2)}\n", text)
    text = _PARAGRAPH_RE.sub(lambda m: f"\n{m.group(1)}\n\n", text)

    # <pre> before inline code so nested <code> ends up inside the fence
    text = _PRE_RE.sub(_pre_block, text)
    text = _BOLD_RE.sub(lambda m: f"**{m.group(2)}**", text)
    text = _ITALIC_RE.sub(lambda m: f"*{m.group(2)}*", text)
    text = _CODE_RE.sub(lambda m: f"`{m.group(1)}`", text)

    text = _ANCHOR_RE.sub(_anchor, text)

    text = _strip_tags(text)
    text = decode_entities(text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
