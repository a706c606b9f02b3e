"""Meeting model: the aggregate the processing pipeline advances."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import Field, model_validator

from src.models.action_item import ActionItem
from src.models.base import Record, new_id
from src.models.participant import Participant
from src.models.transcript import Transcript


class MeetingStatus(str, Enum):
    """Processing status of a meeting.

    Failures return a meeting to UPLOADED; there is no failed state.
    """

    UPLOADED = "uploaded"
    TRANSCRIBING = "transcribing"
    PROCESSING = "processing"
    COMPLETED = "completed"


class AudioFile(Record):
    """Raw audio attached to a meeting at upload time."""

    filename: str = Field(min_length=1, description="Original file name")
    content_type: str = Field(
        default="audio/mp3",
        alias="contentType",
        description="Declared MIME type sent to the transcription service",
    )
    data: bytes = Field(default=b"", exclude=True, repr=False)

    @property
    def size(self) -> int:
        """Size of the audio payload in bytes."""
        return len(self.data)


class Meeting(Record):
    """A recorded meeting and everything derived from it.

    Meetings are the primary aggregate in the system. They contain:
    - Metadata (title, date, creation time)
    - Participants (placeholder speakers until identities are resolved)
    - The uploaded audio
    - The transcript, once transcription succeeded
    - Action items, in insertion order
    - The processing status and the last processing error
    """

    id: str = Field(default_factory=new_id, description="Opaque unique identifier")
    title: str = Field(min_length=1)
    date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the meeting took place",
    )
    participants: list[Participant] = Field(default_factory=list)
    audio_file: AudioFile | None = Field(default=None, alias="audioFile")
    transcript: Transcript | None = Field(default=None)
    action_items: list[ActionItem] = Field(default_factory=list, alias="actionItems")
    status: MeetingStatus = Field(default=MeetingStatus.UPLOADED)
    error: str | None = Field(
        default=None,
        description="Human-readable message from the last failed processing run",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        alias="createdAt",
    )

    @model_validator(mode="after")
    def check_status_invariants(self) -> "Meeting":
        """Reject snapshots whose status contradicts their content."""
        if self.status is MeetingStatus.COMPLETED and self.transcript is None:
            raise ValueError("A completed meeting must have a transcript")
        if self.status is MeetingStatus.PROCESSING and self.transcript is None:
            raise ValueError("A meeting in processing must have a transcript")
        if (
            self.status in (MeetingStatus.TRANSCRIBING, MeetingStatus.PROCESSING)
            and self.audio_file is None
        ):
            raise ValueError(f"A meeting in {self.status.value} must have audio")
        return self

    @property
    def has_audio(self) -> bool:
        """Check if audio is attached."""
        return self.audio_file is not None

    @property
    def is_completed(self) -> bool:
        """Check if processing finished."""
        return self.status is MeetingStatus.COMPLETED

    def find_action_item(self, item_id: str) -> ActionItem | None:
        """Return the action item with ``item_id``, if present."""
        for item in self.action_items:
            if item.id == item_id:
                return item
        return None
