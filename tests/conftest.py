"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.router import api_router
from src.models.meeting import AudioFile
from src.models.transcript import SpeakerSegment, Transcript
from src.output.renderer import ActionItemsRenderer
from src.pipeline.processor import MeetingPipeline
from src.services.action_extractor import ActionItemExtractor
from src.services.transcription import TranscriptionAdapter
from src.store.meeting_store import MeetingStore

STANDUP_SUMMARY = (
    "Alice will prepare the Q3 report by 2025-07-01. "
    "Bob should schedule the client demo next week."
)


@pytest.fixture
def audio_file() -> AudioFile:
    """Small fake mp3 payload."""
    return AudioFile(filename="standup.mp3", content_type="audio/mpeg", data=b"ID3\x03fake-audio")


@pytest.fixture
def standup_transcript() -> Transcript:
    """Transcript with a summary mentioning two action items."""
    return Transcript(
        summary=STANDUP_SUMMARY,
        text="Alice: I'll prepare the Q3 report. Bob: I'll schedule the demo.",
        speakers=[
            SpeakerSegment(speaker="Speaker 0", text="I'll prepare the Q3 report.", timestamp="0.5"),
            SpeakerSegment(speaker="Speaker 1", text="I'll schedule the demo.", timestamp="4.2"),
        ],
        confidence=0.93,
    )


@pytest.fixture
def store() -> MeetingStore:
    """Empty in-memory meeting store."""
    return MeetingStore()


@pytest.fixture
def mock_transcriber(standup_transcript: Transcript) -> MagicMock:
    """Transcription adapter returning the standup transcript."""
    transcriber = MagicMock(spec=TranscriptionAdapter)
    transcriber.transcribe = AsyncMock(return_value=standup_transcript)
    transcriber.configured = True
    return transcriber


@pytest.fixture
def mock_extractor() -> MagicMock:
    """Extractor returning no action items unless a test overrides it."""
    extractor = MagicMock(spec=ActionItemExtractor)
    extractor.extract = AsyncMock(return_value=[])
    extractor.configured = True
    return extractor


@pytest.fixture
def pipeline(
    store: MeetingStore, mock_transcriber: MagicMock, mock_extractor: MagicMock
) -> MeetingPipeline:
    """Pipeline wired to the mock adapters."""
    return MeetingPipeline(store=store, transcriber=mock_transcriber, extractor=mock_extractor)


@pytest.fixture
def app(store: MeetingStore, pipeline: MeetingPipeline) -> FastAPI:
    """Test FastAPI application with in-memory state and mock adapters."""
    test_app = FastAPI()
    test_app.state.meeting_store = store
    test_app.state.pipeline = pipeline
    test_app.state.renderer = ActionItemsRenderer()
    test_app.include_router(api_router)
    return test_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async test client for the app."""
    transport = ASGITransport(app=app)  # type: ignore[arg-type]
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
