from fastapi import APIRouter, Request

from chunkwise.limiter import limiter
from chunkwise.models.chunk_request import ChunkRequest
from chunkwise.models.chunk_response import ChunkResponse
from chunkwise.services.chunker import chunk_text

router = APIRouter()


@router.post("/chunk", response_model=ChunkResponse, summary="Split text into overlapping chunks")
@limiter.limit("30/minute")
async def chunk(request: Request, body: ChunkRequest) -> ChunkResponse:
    """Chunk *text* exactly as a crawl would chunk a page body."""
    chunks = chunk_text(body.text, body.chunk_size, body.chunk_overlap)
    return ChunkResponse(chunks=chunks, count=len(chunks))
