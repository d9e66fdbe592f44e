from typing import List

from pydantic import BaseModel

from chunkwise.models.page import Chunk


class ChunkResponse(BaseModel):
    chunks: List[Chunk]
    count: int
