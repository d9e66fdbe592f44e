"""Page record assembly: article + metadata + chunks → :class:`PageRecord`.

:func:`process_page` is the per-page step of a crawl.  It is a plain
synchronous function from a fetched page to zero or one record, so it can be
exercised without driving a crawl.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Optional

from chunkwise.models.crawl_request import CrawlInput
from chunkwise.models.page import PageMetadata, PageRecord
from chunkwise.services.chunker import chunk_text
from chunkwise.services.extractor import Article, extract_article
from chunkwise.services.fetcher import FetchedPage
from chunkwise.services.markdown import MarkdownConverter
from chunkwise.services.metadata import PageSignals, scrape_signals

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    return len(text.split())


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2026-10-19T08:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_record(
    url: str,
    article: Article,
    signals: PageSignals,
    markdown: Optional[str],
    options: CrawlInput,
    crawled_at: str,
) -> PageRecord:
    """Build the record for one page according to *options*.

    ``content`` is only filled for the ``text`` format and ``markdown`` only
    for ``markdown``/``json``.  The chunker reads the Markdown for the
    ``markdown`` format and the whitespace-collapsed plain text otherwise.
    ``chunks`` is left out when chunking is disabled and ``metadata`` when
    metadata is not wanted.
    """
    plain_text = collapse_whitespace(article.text_content)
    output_format = options.output_format
    markdown = markdown or ""

    fields = {
        "url": url,
        "title": article.title or signals.title or "",
        "content": plain_text if output_format == "text" else "",
    }
    if output_format in ("markdown", "json"):
        fields["markdown"] = markdown

    if options.include_metadata:
        fields["metadata"] = PageMetadata(
            author=article.byline or signals.author,
            published_date=signals.published_date,
            description=signals.description,
            language=signals.language,
            word_count=count_words(plain_text),
            crawled_at=crawled_at,
        )

    if options.chunk_size > 0:
        text_to_chunk = markdown if output_format == "markdown" else plain_text
        fields["chunks"] = chunk_text(text_to_chunk, options.chunk_size, options.chunk_overlap)

    return PageRecord(**fields)


def process_page(
    page: FetchedPage,
    options: CrawlInput,
    converter: Optional[MarkdownConverter] = None,
    now: Callable[[], str] = utc_timestamp,
) -> Optional[PageRecord]:
    """Turn one fetched page into a record, or ``None`` when no article was found."""
    article = extract_article(page.html)
    if article is None:
        logger.warning("No content extracted from %s", page.url)
        return None

    markdown = None
    if options.output_format != "text":
        if converter is None:
            converter = MarkdownConverter(remove_navigation=options.remove_navigation)
        markdown = converter.convert(article.content)

    signals = scrape_signals(page.html)
    return assemble_record(page.url, article, signals, markdown, options, now())
