import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from chunkwise.limiter import limiter
from chunkwise.logging_config import configure_logging
from chunkwise.routers.chunk import router as chunk_router
from chunkwise.routers.crawl import router as crawl_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Chunkwise – Crawl & Chunk API",
    description="Crawls pages, extracts the main article, and returns overlapping text chunks for embedding.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(crawl_router)
app.include_router(chunk_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Chunkwise"}
