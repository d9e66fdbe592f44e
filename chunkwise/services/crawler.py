"""Crawler: BFS over the start URLs, one page record per extracted article."""

import logging
from collections import deque
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from chunkwise.models.crawl_request import CrawlInput
from chunkwise.models.crawl_response import CrawlStats
from chunkwise.services.assembler import process_page
from chunkwise.services.fetcher import fetch_page, new_client
from chunkwise.services.links import discover_links, normalise_url
from chunkwise.services.markdown import MarkdownConverter
from chunkwise.services.sink import ResultSink

logger = logging.getLogger(__name__)


@asynccontextmanager
async def crawl_runtime(sink: ResultSink) -> AsyncIterator[httpx.AsyncClient]:
    """Open *sink* and a shared HTTP client for one crawl; both are closed on exit."""
    sink.open()
    try:
        async with new_client() as client:
            yield client
    finally:
        sink.close()


async def crawl(
    options: CrawlInput,
    sink: ResultSink,
    *,
    client: Optional[httpx.AsyncClient] = None,
    converter: Optional[MarkdownConverter] = None,
) -> CrawlStats:
    """Crawl from ``options.start_urls`` and push one record per page to *sink*.

    The crawl is bounded by ``max_pages`` (requests made, failed ones included)
    and ``max_depth`` (link depth from the start URLs).  A page that cannot be
    fetched, has no extractable article, or fails during assembly is logged and
    skipped; nothing raised while handling a single page stops the crawl.

    Returns:
        The :class:`CrawlStats` counters for the crawl.
    """
    if converter is None:
        converter = MarkdownConverter(remove_navigation=options.remove_navigation)

    stats = CrawlStats()
    visited: set = set()
    # Queue entries: (url, depth)
    queue: deque = deque((normalise_url(str(start.url)), 0) for start in options.start_urls)

    while queue and stats.requested < options.max_pages:
        url, depth = queue.popleft()
        if url in visited:
            continue
        visited.add(url)
        stats.requested += 1

        logger.info("Processing: %s", url)
        try:
            page = await fetch_page(url, client)
        except (ValueError, httpx.HTTPError, RuntimeError) as exc:
            logger.error("Failed: %s – %s", url, exc)
            stats.failed += 1
            continue

        final_url = normalise_url(page.url)
        if final_url != url and final_url in visited:
            logger.info("Already visited %s (redirected from %s)", final_url, url)
            stats.skipped += 1
            continue
        visited.add(final_url)

        try:
            record = process_page(page, options, converter)
        except Exception:
            logger.exception("Crawler: could not build a record for %s", page.url)
            stats.failed += 1
            continue

        if record is None:
            stats.skipped += 1
            continue

        sink.push(record)
        stats.succeeded += 1

        if options.follow_links and depth < options.max_depth:
            for link in discover_links(page.html, page.url, options.url_patterns):
                if link not in visited:
                    queue.append((link, depth + 1))

    logger.info(
        "Crawl finished",
        extra={
            "requested": stats.requested,
            "succeeded": stats.succeeded,
            "skipped": stats.skipped,
            "failed": stats.failed,
        },
    )
    return stats


async def run_crawl(options: CrawlInput, sink: ResultSink) -> CrawlStats:
    """Run a full crawl inside :func:`crawl_runtime`."""
    async with crawl_runtime(sink) as client:
        return await crawl(options, sink, client=client)
