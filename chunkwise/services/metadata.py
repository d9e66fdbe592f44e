"""Page-level signals scraped from the raw document: title, author, dates, language."""

from typing import NamedTuple, Optional

from bs4 import BeautifulSoup


class PageSignals(NamedTuple):
    title: str
    author: Optional[str]
    published_date: Optional[str]
    description: Optional[str]
    language: Optional[str]


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    meta = soup.find("meta", attrs=attrs)
    if meta and meta.get("content"):
        return str(meta["content"]).strip() or None
    return None


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag:
        return title_tag.get_text(strip=True)
    return ""


def _extract_published_date(soup: BeautifulSoup) -> Optional[str]:
    published = _meta_content(soup, property="article:published_time")
    if published:
        return published
    time_tag = soup.find("time", attrs={"datetime": True})
    if time_tag:
        return str(time_tag["datetime"]).strip() or None
    return None


def _extract_description(soup: BeautifulSoup) -> Optional[str]:
    return _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )


def _extract_language(soup: BeautifulSoup) -> Optional[str]:
    html_tag = soup.find("html")
    if html_tag and html_tag.get("lang"):
        return str(html_tag["lang"]).strip() or None
    return None


def scrape_signals(html: str) -> PageSignals:
    """Collect the metadata signals of *html* used to fill a page record.

    Any signal missing from the document is returned as ``None`` (or an empty
    title), never as an empty string.
    """
    soup = BeautifulSoup(html, "lxml")
    return PageSignals(
        title=_extract_title(soup),
        author=_meta_content(soup, name="author"),
        published_date=_extract_published_date(soup),
        description=_extract_description(soup),
        language=_extract_language(soup),
    )
