"""FastAPI dependencies resolving services from app state."""

from fastapi import HTTPException, Request

from src.errors import MeetingNotFoundError
from src.models.meeting import Meeting
from src.output.renderer import ActionItemsRenderer
from src.pipeline.processor import MeetingPipeline
from src.store.meeting_store import MeetingStore


def get_store(request: Request) -> MeetingStore:
    """Dependency to get MeetingStore from app state."""
    return request.app.state.meeting_store


def get_pipeline(request: Request) -> MeetingPipeline:
    """Dependency to get MeetingPipeline from app state."""
    return request.app.state.pipeline


def get_renderer(request: Request) -> ActionItemsRenderer:
    """Dependency to get ActionItemsRenderer from app state."""
    return request.app.state.renderer


def load_meeting(store: MeetingStore, meeting_id: str) -> Meeting:
    """Fetch a meeting or raise 404."""
    try:
        return store.get(meeting_id)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
