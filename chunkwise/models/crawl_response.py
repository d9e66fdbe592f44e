from typing import List

from pydantic import BaseModel, ConfigDict, Field

from chunkwise.models.page import PageRecord


class CrawlStats(BaseModel):
    """Per-crawl counters: every request ends up succeeded, skipped, or failed."""

    requested: int = 0
    succeeded: int = 0
    skipped: int = 0
    failed: int = 0


class CrawlResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pages_crawled: int = Field(alias="pagesCrawled")
    pages: List[PageRecord]
    stats: CrawlStats
