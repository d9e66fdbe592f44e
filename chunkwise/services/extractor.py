"""Main-article extraction built on readability-lxml."""

import logging
from typing import NamedTuple, Optional

from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

logger = logging.getLogger(__name__)

# Elements that commonly hold the article author, checked in order
_BYLINE_SELECTORS = (
    '[rel="author"]',
    '[itemprop="author"]',
    ".byline",
    ".author",
)

# Longer matches are usually whole author bios rather than a byline
_MAX_BYLINE_LENGTH = 100


class Article(NamedTuple):
    title: str
    byline: Optional[str]
    content: str  # article HTML
    text_content: str


def _extract_byline(soup: BeautifulSoup) -> Optional[str]:
    for selector in _BYLINE_SELECTORS:
        node = soup.select_one(selector)
        if node:
            text = node.get_text(" ", strip=True)
            if text and len(text) < _MAX_BYLINE_LENGTH:
                return text
    return None


def extract_article(html: str) -> Optional[Article]:
    """Isolate the main readable article of *html*.

    Returns:
        An :class:`Article`, or ``None`` when the document cannot be parsed or
        the extracted article holds no text.
    """
    if not html or not html.strip():
        return None

    document = Document(html)
    try:
        content = document.summary(html_partial=True)
    except Unparseable as exc:
        logger.debug("Readability could not parse document: %s", exc)
        return None

    text_content = BeautifulSoup(content, "lxml").get_text(" ")
    if not text_content.strip():
        return None

    raw_soup = BeautifulSoup(html, "lxml")
    return Article(
        title=document.short_title(),
        byline=_extract_byline(raw_soup),
        content=content,
        text_content=text_content,
    )
