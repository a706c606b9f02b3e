"""Meetings API endpoints for audio upload, selection and processing."""

from datetime import datetime

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile
from pydantic import BaseModel, Field

from src.api.dependencies import get_pipeline, get_store, load_meeting
from src.config import settings
from src.errors import MeetingBusyError, MeetingNotFoundError, UploadValidationError
from src.models.action_item import ActionItem
from src.models.meeting import AudioFile, Meeting, MeetingStatus
from src.models.participant import Participant
from src.models.transcript import Transcript
from src.pipeline.processor import MeetingPipeline
from src.pipeline.state_machine import STEP_NAMES, progress_step
from src.store.meeting_store import MeetingStore
from src.upload.validation import validate_audio_upload

router = APIRouter(prefix="/meetings", tags=["meetings"])

# Upload rejection reason -> HTTP status
UPLOAD_ERROR_STATUS = {
    "missing_filename": 400,
    "empty": 400,
    "too_large": 413,
    "unsupported_format": 415,
}


class MeetingResponse(BaseModel):
    """Meeting snapshot returned by the API (audio bytes omitted)."""

    id: str
    title: str
    date: datetime
    created_at: datetime
    status: MeetingStatus
    progress_step: int = Field(description="1 upload, 2 transcribe, 3 extract, 4 export")
    progress_label: str = Field(description="Display name of the current progress step")
    processing: bool = Field(description="True while a processing run is in flight")
    error: str | None = None
    audio_filename: str | None = None
    participants: list[Participant] = Field(default_factory=list)
    transcript: Transcript | None = None
    action_items: list[ActionItem] = Field(default_factory=list)

    @classmethod
    def from_meeting(cls, meeting: Meeting, processing: bool = False) -> "MeetingResponse":
        """Build the response from a stored snapshot."""
        return cls(
            id=meeting.id,
            title=meeting.title,
            date=meeting.date,
            created_at=meeting.created_at,
            status=meeting.status,
            progress_step=progress_step(meeting.status),
            progress_label=STEP_NAMES[progress_step(meeting.status) - 1],
            processing=processing,
            error=meeting.error,
            audio_filename=meeting.audio_file.filename if meeting.audio_file else None,
            participants=meeting.participants,
            transcript=meeting.transcript,
            action_items=meeting.action_items,
        )


class SelectMeetingRequest(BaseModel):
    """Request body for changing the current meeting."""

    meeting_id: str | None = Field(
        default=None,
        description="Meeting to select; null clears the selection",
    )


def _respond(meeting: Meeting, pipeline: MeetingPipeline) -> MeetingResponse:
    return MeetingResponse.from_meeting(meeting, pipeline.is_processing(meeting.id))


@router.post("/upload", response_model=MeetingResponse, status_code=201)
async def upload_meeting(
    file: UploadFile,
    title: str = Form(default=""),
    process: bool = Form(default=False),
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> MeetingResponse:
    """Upload a meeting recording.

    Accepts .mp3, .wav, .m4a or .mp4 files up to the configured size,
    creates a meeting in ``uploaded`` state and makes it current. With
    ``process=true`` the pipeline runs before the response is returned.

    Raises:
        HTTPException: For validation failures (400, 413, 415).
    """
    content = await file.read()
    try:
        validate_audio_upload(file.filename, len(content), settings.max_upload_mb)
    except UploadValidationError as e:
        raise HTTPException(
            status_code=UPLOAD_ERROR_STATUS.get(e.reason, 400),
            detail=str(e),
        ) from e

    audio = AudioFile(
        filename=file.filename,
        content_type=file.content_type or settings.default_audio_content_type,
        data=content,
    )
    meeting = store.create_meeting(title, audio)
    if process:
        meeting = await pipeline.process(meeting.id)
    return _respond(meeting, pipeline)


@router.get("", response_model=list[MeetingResponse])
async def list_meetings(
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> list[MeetingResponse]:
    """List all meetings, newest first."""
    return [_respond(m, pipeline) for m in store.meetings]


@router.get("/current", response_model=MeetingResponse | None)
async def get_current_meeting(
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> MeetingResponse | None:
    """Get the currently selected meeting, or null."""
    meeting = store.current_meeting
    return _respond(meeting, pipeline) if meeting else None


@router.put("/current", response_model=MeetingResponse | None)
async def set_current_meeting(
    request_body: SelectMeetingRequest,
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> MeetingResponse | None:
    """Select a meeting, or clear the selection to start a new one."""
    try:
        meeting = store.set_current(request_body.meeting_id)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _respond(meeting, pipeline) if meeting else None


@router.get("/{meeting_id}", response_model=MeetingResponse)
async def get_meeting(
    meeting_id: str,
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> MeetingResponse:
    """Get one meeting."""
    return _respond(load_meeting(store, meeting_id), pipeline)


@router.post("/{meeting_id}/process", response_model=MeetingResponse)
async def process_meeting(
    meeting_id: str,
    store: MeetingStore = Depends(get_store),
    pipeline: MeetingPipeline = Depends(get_pipeline),
) -> MeetingResponse:
    """Run transcription and action item extraction for a meeting.

    A transcription failure is not an HTTP error: the meeting comes back
    in ``uploaded`` with ``error`` set and can be processed again.

    Raises:
        HTTPException: 404 for unknown meetings, 409 if already processing.
    """
    load_meeting(store, meeting_id)
    try:
        meeting = await pipeline.process(meeting_id)
    except MeetingBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return _respond(meeting, pipeline)
