from pydantic import BaseModel, ConfigDict, Field


class ChunkRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    chunk_size: int = Field(
        default=1000,
        ge=1,
        alias="chunkSize",
        description="Target chunk length in characters.",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        alias="chunkOverlap",
        description="Approximate overlap between consecutive chunks, in characters.",
    )
