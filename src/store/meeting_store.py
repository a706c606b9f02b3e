"""In-memory store owning all meetings and the current-meeting selection.

The current meeting is kept as an id and resolved against the collection
on every read, so the collection view and the current view always show
the same snapshot. Every mutation replaces a whole Meeting snapshot
synchronously; no reader can observe a partial update.
"""

from datetime import UTC, datetime

import structlog

from src.errors import MeetingBusyError, MeetingNotFoundError
from src.models.action_item import ActionItem, NewActionItem
from src.models.base import new_id
from src.models.meeting import AudioFile, Meeting, MeetingStatus
from src.models.participant import placeholder_participants

logger = structlog.get_logger()

# Statuses during which the pipeline owns the meeting snapshot
IN_FLIGHT_STATUSES = frozenset({MeetingStatus.TRANSCRIBING, MeetingStatus.PROCESSING})


class MeetingStore:
    """Process-wide collection of meetings.

    Constructed once per application (see the FastAPI lifespan) and passed
    to the pipeline and API handlers by reference. Meetings are never
    deleted during the process lifetime.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        # Insertion order is creation order; listing reverses it
        self._meetings: dict[str, Meeting] = {}
        self._current_id: str | None = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def meetings(self) -> list[Meeting]:
        """All meetings, newest first."""
        return list(reversed(self._meetings.values()))

    @property
    def current_meeting(self) -> Meeting | None:
        """The selected meeting, resolved from the collection."""
        if self._current_id is None:
            return None
        return self._meetings.get(self._current_id)

    def get(self, meeting_id: str) -> Meeting:
        """Get a meeting by id.

        Raises:
            MeetingNotFoundError: If no meeting has this id
        """
        try:
            return self._meetings[meeting_id]
        except KeyError:
            raise MeetingNotFoundError(meeting_id) from None

    def __contains__(self, meeting_id: object) -> bool:
        return meeting_id in self._meetings

    def __len__(self) -> int:
        return len(self._meetings)

    # ------------------------------------------------------------------
    # Meeting lifecycle
    # ------------------------------------------------------------------

    def create_meeting(self, title: str, audio: AudioFile | None) -> Meeting:
        """Register a new meeting for an uploaded recording.

        The meeting starts in ``uploaded`` with three placeholder
        participants and becomes the current meeting.

        Args:
            title: Meeting title; blank titles get a dated default
            audio: The uploaded recording

        Returns:
            The created Meeting
        """
        now = datetime.now(UTC)
        meeting = Meeting(
            id=self._unique_meeting_id(),
            title=title.strip() or f"Meeting - {now.date().isoformat()}",
            date=now,
            participants=placeholder_participants(),
            audio_file=audio,
            created_at=now,
        )
        self._meetings[meeting.id] = meeting
        self._current_id = meeting.id
        logger.info("meeting created", meeting_id=meeting.id, title=meeting.title)
        return meeting

    def set_current(self, meeting: Meeting | str | None) -> Meeting | None:
        """Select the current meeting, or clear the selection with None.

        Raises:
            MeetingNotFoundError: If the meeting is not in the store
        """
        if meeting is None:
            self._current_id = None
            return None
        meeting_id = meeting.id if isinstance(meeting, Meeting) else meeting
        selected = self.get(meeting_id)
        self._current_id = meeting_id
        return selected

    def publish(self, meeting: Meeting) -> Meeting:
        """Replace the stored snapshot of a meeting.

        Raises:
            MeetingNotFoundError: If the meeting was never created here
        """
        if meeting.id not in self._meetings:
            raise MeetingNotFoundError(meeting.id)
        self._meetings[meeting.id] = meeting
        return meeting

    # ------------------------------------------------------------------
    # Action item edits
    # ------------------------------------------------------------------

    def update_action_item(self, meeting_id: str, item: ActionItem) -> Meeting:
        """Replace the action item with the same id; no-op if absent.

        Raises:
            MeetingNotFoundError: If the meeting is not in the store
            MeetingBusyError: If the meeting is being processed
        """
        meeting = self.get(meeting_id)
        self._check_editable(meeting)
        if meeting.find_action_item(item.id) is None:
            logger.debug("action item not found for update", meeting_id=meeting_id, item_id=item.id)
            return meeting
        items = [item if existing.id == item.id else existing for existing in meeting.action_items]
        return self.publish(meeting.evolve(action_items=items))

    def delete_action_item(self, meeting_id: str, item_id: str) -> Meeting:
        """Remove an action item; no-op if absent.

        Raises:
            MeetingNotFoundError: If the meeting is not in the store
            MeetingBusyError: If the meeting is being processed
        """
        meeting = self.get(meeting_id)
        self._check_editable(meeting)
        if meeting.find_action_item(item_id) is None:
            return meeting
        items = [existing for existing in meeting.action_items if existing.id != item_id]
        return self.publish(meeting.evolve(action_items=items))

    def add_action_item(self, meeting_id: str, item: NewActionItem) -> ActionItem:
        """Append a user-created action item under a fresh id.

        Raises:
            MeetingNotFoundError: If the meeting is not in the store
            MeetingBusyError: If the meeting is being processed
        """
        meeting = self.get(meeting_id)
        self._check_editable(meeting)
        existing_ids = {existing.id for existing in meeting.action_items}
        item_id = new_id()
        while item_id in existing_ids:
            item_id = new_id()
        action_item = ActionItem.from_new(item, item_id)
        self.publish(meeting.evolve(action_items=[*meeting.action_items, action_item]))
        logger.info("action item added", meeting_id=meeting_id, item_id=item_id)
        return action_item

    @staticmethod
    def _check_editable(meeting: Meeting) -> None:
        """Reject edits while a processing run will publish over them."""
        if meeting.status in IN_FLIGHT_STATUSES:
            raise MeetingBusyError(meeting.id)

    def _unique_meeting_id(self) -> str:
        meeting_id = new_id()
        while meeting_id in self._meetings:
            meeting_id = new_id()
        return meeting_id
