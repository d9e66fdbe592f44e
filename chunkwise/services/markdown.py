"""HTML → Markdown conversion for extracted article content."""

import re
from typing import Tuple

from bs4 import BeautifulSoup
from markdownify import markdownify

# Tags removed together with their contents before conversion
_ALWAYS_REMOVE: Tuple[str, ...] = ("script", "style", "iframe", "noscript")
_NAVIGATION_TAGS: Tuple[str, ...] = ("nav", "header", "footer")

# Two or more consecutive blank (or whitespace-only) lines
_EXCESS_BLANK_LINES_RE = re.compile(r"\n(?:[ \t]*\n){2,}")


class MarkdownConverter:
    """Convert article HTML to Markdown with ATX headings, ``-`` bullets and fenced code.

    Args:
        remove_navigation: also drop ``<nav>``, ``<header>`` and ``<footer>``
            elements (and everything inside them).
    """

    def __init__(self, remove_navigation: bool = True) -> None:
        self.removed_tags = _ALWAYS_REMOVE + (_NAVIGATION_TAGS if remove_navigation else ())

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html, "lxml")
        for tag in soup.find_all(list(self.removed_tags)):
            tag.decompose()

        markdown = markdownify(
            str(soup),
            heading_style="ATX",
            bullets="-",
            code_language="",
        )
        return _EXCESS_BLANK_LINES_RE.sub("\n\n", markdown).strip()
