from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

OutputFormat = Literal["markdown", "text", "json"]


class StartUrl(BaseModel):
    url: HttpUrl


class CrawlInput(BaseModel):
    """Crawl configuration.  Every option falls back to a default when omitted."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    start_urls: List[StartUrl] = Field(default_factory=list, alias="startUrls")
    max_pages: int = Field(
        default=100,
        ge=1,
        alias="maxPages",
        description="Maximum number of requests made during the crawl.",
    )
    max_depth: int = Field(
        default=3,
        ge=0,
        alias="maxDepth",
        description="Maximum link depth from the start URLs.",
    )
    output_format: OutputFormat = Field(default="markdown", alias="outputFormat")
    chunk_size: int = Field(
        default=1000,
        alias="chunkSize",
        description="Target chunk length in characters. 0 or less disables chunking.",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        alias="chunkOverlap",
        description="Approximate overlap between consecutive chunks, in characters.",
    )
    include_metadata: bool = Field(default=True, alias="includeMetadata")
    remove_navigation: bool = Field(
        default=True,
        alias="removeNavigation",
        description="Strip <nav>, <header> and <footer> before Markdown conversion.",
    )
    follow_links: bool = Field(default=True, alias="followLinks")
    url_patterns: List[str] = Field(
        default_factory=list,
        alias="urlPatterns",
        description="Glob patterns a discovered link must match to be followed.",
    )
