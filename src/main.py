"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.router import api_router
from src.config import settings
from src.output.renderer import ActionItemsRenderer
from src.pipeline.processor import MeetingPipeline
from src.services.action_extractor import ActionItemExtractor
from src.services.llm_client import LLMClient
from src.services.transcription import TranscriptionAdapter
from src.store.meeting_store import MeetingStore

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Create the in-memory meeting store
    - Create transcription and LLM adapters
    - Wire the processing pipeline and export renderer

    Shutdown:
    - Close adapter HTTP clients
    """
    logger.info("Starting Meeting Action Items...")

    store = MeetingStore()
    app.state.meeting_store = store

    transcriber = TranscriptionAdapter()
    llm_client = LLMClient()
    if not transcriber.configured:
        logger.warning("DEEPGRAM_API_KEY not set, transcription will fail")
    if not llm_client.configured:
        logger.warning("ANTHROPIC_API_KEY not set, no action items will be extracted")

    app.state.pipeline = MeetingPipeline(
        store=store,
        transcriber=transcriber,
        extractor=ActionItemExtractor(llm_client),
    )
    app.state.renderer = ActionItemsRenderer()
    logger.info("Meeting pipeline initialized")

    yield

    logger.info("Shutting down Meeting Action Items...")
    await transcriber.aclose()
    await llm_client.aclose()
    logger.info("Adapter clients closed")


app = FastAPI(
    title=settings.app_name,
    description="Turn meeting recordings into reviewed, exportable action items",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
