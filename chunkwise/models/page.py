from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChunkMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    char_count: int = Field(alias="charCount")


class Chunk(BaseModel):
    """One sentence-aligned slice of a page's text, sized for embedding."""

    model_config = ConfigDict(frozen=True)

    text: str
    index: int
    metadata: ChunkMetadata


class PageMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    author: Optional[str] = None
    published_date: Optional[str] = Field(default=None, alias="publishedDate")
    description: Optional[str] = None
    language: Optional[str] = None
    word_count: int = Field(alias="wordCount")
    crawled_at: str = Field(alias="crawledAt")


class PageRecord(BaseModel):
    """The complete output for one processed page.

    Optional fields left as ``None`` are omitted from the wire form, so a
    record built without metadata or chunks carries no such keys at all.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: str
    content: str  # plain text, only filled for the "text" output format
    markdown: Optional[str] = None
    metadata: Optional[PageMetadata] = None
    chunks: Optional[List[Chunk]] = None

    def to_dict(self) -> dict:
        """Return the JSON-ready representation pushed to result sinks."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
