"""MeetingPipeline: drives a meeting from uploaded audio to action items.

The pipeline is the only component that changes a meeting's status and
the only writer of ``Meeting.error``. Every intermediate snapshot is
published to the MeetingStore before the next external call starts.
"""

import asyncio

import structlog

from src.errors import MeetingBusyError, TranscriptionError
from src.models.action_item import ActionItem
from src.models.meeting import Meeting, MeetingStatus
from src.models.transcript import Transcript
from src.pipeline.state_machine import transition
from src.services.action_extractor import ActionItemExtractor
from src.services.transcription import TranscriptionAdapter
from src.store.meeting_store import MeetingStore

logger = structlog.get_logger()


class MeetingPipeline:
    """Orchestrates transcription and extraction for stored meetings.

    Meetings are processed one stage at a time. Different meetings can
    be processed concurrently; a second run for a meeting that is already
    in flight is rejected with MeetingBusyError. While the meeting is
    transcribing or processing the store refuses action item edits, so the
    snapshot each stage publishes is never stale.
    """

    def __init__(
        self,
        store: MeetingStore,
        transcriber: TranscriptionAdapter,
        extractor: ActionItemExtractor,
    ):
        """Initialize the pipeline.

        Args:
            store: Store that owns the meetings being processed
            transcriber: Adapter producing transcripts from audio
            extractor: Adapter producing action items from transcripts
        """
        self._store = store
        self._transcriber = transcriber
        self._extractor = extractor
        self._in_flight: set[str] = set()

    @property
    def transcriber(self) -> TranscriptionAdapter:
        return self._transcriber

    @property
    def extractor(self) -> ActionItemExtractor:
        return self._extractor

    @property
    def processing(self) -> bool:
        """True while any meeting is being processed."""
        return bool(self._in_flight)

    def is_processing(self, meeting_id: str) -> bool:
        """True while ``meeting_id`` has a run in flight."""
        return meeting_id in self._in_flight

    async def process(self, meeting: Meeting | str) -> Meeting:
        """Run transcription and extraction for a meeting.

        The stored snapshot is the source of truth; a Meeting argument is
        only used for its id.

        - No audio attached: no-op, returns the stored snapshot.
        - Already completed: no-op, returns the stored snapshot.
        - Transcription failure: meeting returns to uploaded with an error.
        - Extraction failure: meeting completes with no action items.

        Args:
            meeting: Meeting or meeting id

        Returns:
            The final published snapshot

        Raises:
            MeetingNotFoundError: If the meeting is not in the store
            MeetingBusyError: If the meeting is already being processed
        """
        meeting_id = meeting.id if isinstance(meeting, Meeting) else meeting
        current = self._store.get(meeting_id)

        if not current.has_audio:
            logger.info("skipping meeting without audio", meeting_id=meeting_id)
            return current
        if meeting_id in self._in_flight:
            raise MeetingBusyError(meeting_id)
        if current.is_completed:
            logger.info("meeting already completed", meeting_id=meeting_id)
            return current

        self._in_flight.add(meeting_id)
        try:
            return await self._run(current)
        finally:
            self._in_flight.discard(meeting_id)

    async def _run(self, meeting: Meeting) -> Meeting:
        transcribing = self._publish(
            transition(meeting, MeetingStatus.TRANSCRIBING, error=None)
        )

        try:
            transcript = await self._transcribe(transcribing)
        except TranscriptionError as e:
            return self._fail(transcribing, str(e))
        except asyncio.CancelledError:
            self._fail(transcribing, "Processing was cancelled")
            raise

        processing = self._publish(
            transition(transcribing, MeetingStatus.PROCESSING, transcript=transcript)
        )

        try:
            action_items = await self._extract(transcript)
        except asyncio.CancelledError:
            self._fail(processing, "Processing was cancelled")
            raise

        completed = self._publish(
            transition(processing, MeetingStatus.COMPLETED, action_items=action_items)
        )
        logger.info(
            "meeting processing completed",
            meeting_id=completed.id,
            action_items=len(completed.action_items),
        )
        return completed

    async def _transcribe(self, meeting: Meeting) -> Transcript:
        """Call the transcriber, folding unexpected errors into TranscriptionError."""
        try:
            return await self._transcriber.transcribe(meeting.audio_file)
        except (TranscriptionError, asyncio.CancelledError):
            raise
        except Exception as e:
            logger.exception("unexpected transcription failure", meeting_id=meeting.id)
            raise TranscriptionError(f"Processing failed: {e}") from e

    async def _extract(self, transcript: Transcript) -> list[ActionItem]:
        """Call the extractor; extraction can never fail the meeting."""
        try:
            return await self._extractor.extract(transcript)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("extraction failed, completing without action items", error=str(e))
            return []

    def _fail(self, meeting: Meeting, message: str) -> Meeting:
        """Return a meeting to uploaded with a user-facing error message."""
        logger.warning("meeting processing failed", meeting_id=meeting.id, error=message)
        return self._publish(
            transition(
                meeting,
                MeetingStatus.UPLOADED,
                error=message or "Processing failed",
                transcript=None,
                action_items=[],
            )
        )

    def _publish(self, meeting: Meeting) -> Meeting:
        self._store.publish(meeting)
        logger.debug("meeting published", meeting_id=meeting.id, status=meeting.status.value)
        return meeting
