# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-21
# Description: main.py
# -----------------------------------------------------------------------------
from fastapi import FastAPI

from api.routers import health, index, metadata, pipeline, retrieve
from utility.logging_utils import get_logger

logger = get_logger("api")

app = FastAPI(title="Meeting RAG API")
app.include_router(health.router)
app.include_router(pipeline.router)
app.include_router(index.router)
app.include_router(retrieve.router)
app.include_router(metadata.router)

logger.info("Meeting RAG API routes registered")


def run() -> None:
    import os

    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("MEETING_API_HOST", "127.0.0.1"),
        port=int(os.getenv("MEETING_API_PORT", "8000")),
        log_level="info",
        reload=False,
    )


if __name__ == "__main__":
    run()
