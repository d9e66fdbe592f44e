import logging

from fastapi import APIRouter, HTTPException, Request

from chunkwise.limiter import limiter
from chunkwise.models.crawl_request import CrawlInput
from chunkwise.models.crawl_response import CrawlResponse
from chunkwise.services.crawler import run_crawl
from chunkwise.services.sink import ListSink

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/crawl",
    response_model=CrawlResponse,
    response_model_exclude_none=True,
    summary="Crawl pages and return chunked article records",
    description=(
        "Starting from `startUrls`, fetches pages (following same-host links up to "
        "`maxDepth` when `followLinks` is set, optionally restricted by `urlPatterns`) "
        "and returns one record per page with an extracted article.  Each record holds "
        "the article as Markdown or plain text, page metadata, and overlapping "
        "sentence-aligned chunks ready for embedding."
    ),
)
@limiter.limit("5/minute")
async def crawl_endpoint(request: Request, body: CrawlInput) -> CrawlResponse:
    """Crawl the requested start URLs and return every assembled page record."""
    if not body.start_urls:
        raise HTTPException(status_code=400, detail="At least one start URL is required.")

    logger.info(
        "Crawl request received",
        extra={
            "start_urls": [str(s.url) for s in body.start_urls],
            "max_pages": body.max_pages,
            "max_depth": body.max_depth,
        },
    )

    sink = ListSink()
    stats = await run_crawl(body, sink)

    return CrawlResponse(
        pages_crawled=len(sink.records),
        pages=sink.records,
        stats=stats,
    )
