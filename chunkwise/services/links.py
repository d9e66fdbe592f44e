"""Link discovery: which pages a crawl may visit next."""

from fnmatch import fnmatchcase
from typing import List, Sequence
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

_ALLOWED_SCHEMES = ("http", "https")


def normalise_url(url: str) -> str:
    """Strip URL fragment so http://x.com/page#sec and http://x.com/page are the same."""
    return urlparse(url)._replace(fragment="").geturl()


def matches_patterns(url: str, patterns: Sequence[str]) -> bool:
    """Return True when *url* matches at least one glob in *patterns*."""
    return any(fnmatchcase(url, pattern) for pattern in patterns)


def discover_links(html: str, base_url: str, patterns: Sequence[str] = ()) -> List[str]:
    """Return the followable links of *html* in document order.

    Links are resolved against *base_url* (or the document's ``<base href>``),
    stripped of fragments and de-duplicated.  Only http/https links on the same
    hostname as *base_url* are kept, and when *patterns* is non-empty a link
    must also match one of the globs.

    Globs use :func:`fnmatch.fnmatchcase` rules, so ``*`` also matches ``/``:
    ``https://example.com/blog/*`` matches ``https://example.com/blog/2024/post``.
    """
    soup = BeautifulSoup(html, "lxml")
    base_host = urlparse(base_url).hostname

    base_tag = soup.find("base", href=True)
    resolve_from = urljoin(base_url, str(base_tag["href"])) if base_tag else base_url

    seen: set = set()
    links: List[str] = []
    for a in soup.find_all("a", href=True):
        href = str(a["href"]).strip()
        if not href or href.startswith(("#", "javascript:", "mailto:", "tel:")):
            continue
        abs_url = normalise_url(urljoin(resolve_from, href))
        parsed = urlparse(abs_url)
        if parsed.scheme not in _ALLOWED_SCHEMES or parsed.hostname != base_host:
            continue
        if patterns and not matches_patterns(abs_url, patterns):
            continue
        if abs_url not in seen:
            seen.add(abs_url)
            links.append(abs_url)
    return links
