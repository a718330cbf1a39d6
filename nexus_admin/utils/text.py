"""
Text helpers for slugs and excerpts.
"""

import html
import re

_TAG_RE = re.compile(r"<[^>]*>")
_NON_SLUG_RE = re.compile(r"[^a-z0-9\s-]")
_DASH_RE = re.compile(r"[\s_-]+")

EXCERPT_LENGTH = 200


def slugify(value: str) -> str:
    """'Hello, World!  Again' -> 'hello-world-again'"""
    slug = _NON_SLUG_RE.sub("", value.lower().strip())
    slug = _DASH_RE.sub("-", slug)
    return slug.strip("-")


def strip_html(value: str) -> str:
    text = _TAG_RE.sub("", value or "")
    return html.unescape(text).strip()


def make_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    text = strip_html(content)
    if len(text) > length:
        return text[:length] + "..."
    return text
